import pytest

from chromatic.lexer import CompiledRule, LexerError, LexerState, RegexLexer, Rule
from chromatic.mutators import (
    CombinedMutator,
    IncludeMutator,
    MultiMutator,
    MutatorFunc,
    PopMutator,
    PushMutator,
    combined,
    default,
    include,
    mutators,
    pop,
    push,
    stringify,
)
from chromatic.types import Token, TokenType

T = TokenType


def _state(*stack):
    state = LexerState(lexer=None, text="", rules={}, stack=list(stack))
    state.state = stack[-1] if stack else ""
    return state


def test_include():
    inc = include("other")
    actual = {
        "root": [CompiledRule(mutator=inc.mutator)],
        "other": [
            CompiledRule("//.+", T.COMMENT),
            CompiledRule('"[^"]*"', T.STRING),
        ],
    }
    inc.mutator.mutate_lexer(actual, "root", 0)
    expected = {
        "root": [CompiledRule("//.+", T.COMMENT), CompiledRule('"[^"]*"', T.STRING)],
        "other": [CompiledRule("//.+", T.COMMENT), CompiledRule('"[^"]*"', T.STRING)],
    }
    assert actual == expected


def test_combine():
    rules = {
        "root": [Rule("hello", T.STRING, combined("world", "bye", "space"))],
        "world": [Rule("world", T.NAME)],
        "bye": [Rule("bye", T.NAME)],
        "space": [Rule(r"\s+", T.WHITESPACE)],
    }
    lexer = RegexLexer(None, lambda: rules)
    state = lexer.tokenise(None, "hello world")
    assert state.tokens() == [
        Token(T.STRING, "hello"),
        Token(T.WHITESPACE, " "),
        Token(T.NAME, "world"),
    ]
    assert "__combined_world__bye__space" in state.rules


def test_include_in_lexer():
    rules = {
        "root": [include("kw"), Rule(r"\s+", T.WHITESPACE)],
        "kw": [Rule("if", T.KEYWORD)],
    }
    lexer = RegexLexer(None, lambda: rules)
    assert lexer.tokenise(None, "if if").tokens() == [
        Token(T.KEYWORD, "if"),
        Token(T.WHITESPACE, " "),
        Token(T.KEYWORD, "if"),
    ]


def test_include_invalid_state():
    rules = {"root": [CompiledRule(mutator=IncludeMutator("missing"))]}
    with pytest.raises(LexerError, match="invalid include state"):
        rules["root"][0].mutator.mutate_lexer(rules, "root", 0)


def test_combined_invalid_state():
    mutator = combined("missing")
    rules = {"root": [CompiledRule(mutator=mutator)]}
    with pytest.raises(LexerError, match="invalid combine state"):
        mutator.mutate_lexer(rules, "root", 0)


def test_combined_replaces_mutator_with_push():
    mutator = combined("a", "b")
    rules = {
        "root": [CompiledRule("x", mutator=mutator)],
        "a": [CompiledRule("1")],
        "b": [CompiledRule("2")],
    }
    mutator.mutate_lexer(rules, "root", 0)
    assert rules["root"][0].mutator == PushMutator(("__combined_a__b",))
    assert rules["__combined_a__b"] == [CompiledRule("1"), CompiledRule("2")]


def test_include_and_combined_cannot_mutate_at_runtime():
    with pytest.raises(LexerError, match="should never reach here"):
        IncludeMutator("x").mutate(_state("root"))
    with pytest.raises(LexerError, match="should never reach here"):
        CombinedMutator(("a",)).mutate(_state("root"))


def test_push_states():
    state = _state("root")
    push("a", "b").mutate(state)
    assert state.stack == ["root", "a", "b"]


def test_push_without_states_pushes_current():
    state = _state("root", "inner")
    push().mutate(state)
    assert state.stack == ["root", "inner", "inner"]


def test_push_pop_marker():
    state = _state("root", "a")
    push("#pop", "b").mutate(state)
    assert state.stack == ["root", "b"]


def test_pop():
    state = _state("root", "a", "b")
    pop(2).mutate(state)
    assert state.stack == ["root"]


def test_pop_empty_stack():
    with pytest.raises(LexerError, match="nothing to pop"):
        pop(1).mutate(_state())


def test_mutators_apply_in_order():
    state = _state("root")
    mutators(push("a"), push("b"), pop(1)).mutate(state)
    assert state.stack == ["root", "a"]


def test_mutators_propagate_errors():
    state = _state("root")
    with pytest.raises(LexerError):
        mutators(pop(1), pop(1)).mutate(state)
    assert state.stack == []


def test_mutator_func():
    state = _state("root")
    MutatorFunc(lambda s: s.set("seen", True)).mutate(state)
    assert state.get("seen") is True


def test_default_rule():
    assert default(push("x")) == Rule(mutator=MultiMutator((PushMutator(("x",)),)))


def test_mutator_kinds():
    kinds = [
        mutators().mutator_kind(),
        IncludeMutator("a").mutator_kind(),
        combined("a").mutator_kind(),
        push("a").mutator_kind(),
        pop(1).mutator_kind(),
    ]
    assert kinds == ["multiple", "include", "combined", "push", "pop"]


def test_pop_constructor():
    assert pop(3) == PopMutator(3)


def test_stringify():
    assert stringify(Token(T.NAME, "a"), Token(T.TEXT, " "), Token(T.NAME, "b")) == "a b"