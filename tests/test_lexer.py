import pytest

from chromatic.lexer import (
    CompiledRule,
    Config,
    LexerError,
    LexerState,
    RegexLexer,
    Rule,
    Rules,
    TokeniseOptions,
    ensure_lf,
    tokenise,
    words,
)
from chromatic.mutators import default, pop, push
from chromatic.types import Token, TokenType

T = TokenType


class _ByGroups:
    def __init__(self, *emitters):
        self.emitters = emitters

    def emit(self, groups, state):
        for emitter, group in zip(self.emitters, groups[1:]):
            yield from emitter.emit([group], state)


class _ByGroupNames:
    def __init__(self, emitters):
        self.emitters = emitters

    def emit(self, groups, state):
        pattern = state.rules[state.state][state.rule].regexp
        names = {index: name for name, index in pattern.groupindex.items()}
        for index in range(1, len(groups)):
            name = names.get(index, str(index))
            emitter = self.emitters.get(name, T.ERROR)
            yield from emitter.emit([state.named_groups[name]], state)


def _coalesce(tokens):
    out = []
    for token in tokens:
        if not token.value:
            continue
        if out and out[-1].type == token.type:
            out[-1] = Token(token.type, out[-1].value + token.value)
        else:
            out.append(token)
    return out


def _lexer(rules, config=None):
    return RegexLexer(config, lambda: rules)


def test_newline_at_end_of_file():
    rules = {"root": [Rule(r"(\w+)(\n)", _ByGroups(T.KEYWORD, T.WHITESPACE))]}
    lexer = _lexer(rules, Config(ensure_nl=True))
    assert _coalesce(lexer.tokenise(None, "hello")) == [
        Token(T.KEYWORD, "hello"),
        Token(T.WHITESPACE, "\n"),
    ]
    lexer = _lexer(rules)
    assert _coalesce(lexer.tokenise(None, "hello")) == [Token(T.ERROR, "hello")]


def test_matching_at_start():
    lexer = _lexer(
        {
            "root": [
                Rule(r"\s+", T.WHITESPACE),
                Rule(r"^-", T.PUNCTUATION, push("directive")),
                Rule(r"->", T.OPERATOR),
            ],
            "directive": [Rule("module", T.NAME_ENTITY, pop(1))],
        },
        Config(),
    )
    assert _coalesce(lexer.tokenise(None, "-module ->")) == [
        Token(T.PUNCTUATION, "-"),
        Token(T.NAME_ENTITY, "module"),
        Token(T.WHITESPACE, " "),
        Token(T.OPERATOR, "->"),
    ]


def test_ensure_lf_option():
    rules = {"root": [Rule(r"(\w+)(\r?\n|\r)", _ByGroups(T.KEYWORD, T.WHITESPACE))]}
    lexer = _lexer(rules, Config())
    tokens = lexer.tokenise(TokeniseOptions(state="root", ensure_lf=True), "hello\r\nworld\r")
    assert _coalesce(tokens) == [
        Token(T.KEYWORD, "hello"),
        Token(T.WHITESPACE, "\n"),
        Token(T.KEYWORD, "world"),
        Token(T.WHITESPACE, "\n"),
    ]
    lexer = _lexer(rules)
    tokens = lexer.tokenise(TokeniseOptions(state="root", ensure_lf=False), "hello\r\nworld\r")
    assert _coalesce(tokens) == [
        Token(T.KEYWORD, "hello"),
        Token(T.WHITESPACE, "\r\n"),
        Token(T.KEYWORD, "world"),
        Token(T.WHITESPACE, "\r"),
    ]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("abc", "abc"),
        ("\r", "\n"),
        ("a\r", "a\n"),
        ("\rb", "\nb"),
        ("a\rb", "a\nb"),
        ("\r\n", "\n"),
        ("a\r\n", "a\n"),
        ("\r\nb", "\nb"),
        ("a\r\nb", "a\nb"),
        ("\r\r\r\n\r", "\n\n\n\n"),
    ],
)
def test_ensure_lf_func(text, expected):
    assert ensure_lf(text) == expected


@pytest.mark.parametrize(
    "pattern, emitters, expected",
    [
        (
            r"(?<key>\w+)(?<operator>=)(?<value>\w+)",
            {"key": T.STRING, "operator": T.OPERATOR, "value": T.STRING},
            [Token(T.STRING, "abc"), Token(T.OPERATOR, "="), Token(T.STRING, "123")],
        ),
        (
            r"(?<key>\w+)(?<operator>=)(?<value>\w+)",
            {"key": T.STRING, "value": T.STRING},
            [Token(T.STRING, "abc"), Token(T.ERROR, "="), Token(T.STRING, "123")],
        ),
        (
            r"(?<key>\w+)=(?<value>\w+)",
            {"key": T.STRING, "value": T.STRING},
            [Token(T.STRING, "abc123")],
        ),
        (
            r"(?<key>\w+)(?<op>=)(?<value>\w+)",
            {"key": T.STRING, "operator": T.OPERATOR, "value": T.STRING},
            [Token(T.STRING, "abc"), Token(T.ERROR, "="), Token(T.STRING, "123")],
        ),
    ],
)
def test_by_group_names(pattern, emitters, expected):
    lexer = _lexer({"root": [Rule(pattern, _ByGroupNames(emitters))]})
    assert _coalesce(lexer.tokenise(None, "abc=123")) == expected


def test_named_groups_exposed_on_state():
    seen = {}

    class _Capture:
        def emit(self, groups, state):
            seen.update(state.named_groups)
            return iter([Token(T.TEXT, groups[0])])

    lexer = _lexer({"root": [Rule(r"(?<word>\w+)(=)", _Capture())]})
    assert lexer.tokenise(None, "ab=").tokens() == [Token(T.TEXT, "ab=")]
    assert seen["word"] == "ab"
    assert seen["0"] == "ab="
    assert seen["2"] == "="


def test_words_orders_longest_first():
    assert words(r"\b", r"\b", "a", "abc", "ab") == r"\b(abc|ab|a)\b"


def test_words_escapes_metacharacters():
    assert words("", "", "a.b", "c+") == r"(a\.b|c\+)"


def test_rules_clone_is_independent():
    original = Rules({"root": [Rule("a", T.TEXT)]})
    clone = original.clone()
    clone["root"].append(Rule("b", T.TEXT))
    assert original == {"root": [Rule("a", T.TEXT)]}
    assert len(clone["root"]) == 2


def test_rules_rename():
    original = Rules({"root": [Rule("x")], "a": [Rule("y")]})
    renamed = original.rename("a", "b")
    assert renamed == {"root": [Rule("x")], "b": [Rule("y")]}
    assert "a" in original


def test_rules_merge():
    base = Rules({"root": [Rule("x")], "a": [Rule("y")]})
    merged = base.merge({"a": [Rule("z")], "b": [Rule("w")]})
    assert merged == {"root": [Rule("x")], "a": [Rule("z")], "b": [Rule("w")]}
    assert base["a"] == [Rule("y")]


def test_missing_root_state():
    lexer = _lexer({"other": [Rule("a", T.TEXT)]})
    with pytest.raises(LexerError, match='no "root" state'):
        lexer.tokenise(None, "a")


def test_invalid_pattern():
    lexer = _lexer({"root": [Rule("(", T.TEXT)]})
    with pytest.raises(LexerError, match=r"failed to compile rule root\.0"):
        lexer.tokenise(None, "a")


def test_invalid_glob():
    with pytest.raises(LexerError, match="not a valid glob"):
        RegexLexer(Config(name="Broken", filenames=["[abc"]), lambda: {"root": []})


def test_unknown_state():
    lexer = _lexer({"root": [Rule("a", T.NAME, push("missing"))]})
    with pytest.raises(LexerError, match="unknown state missing"):
        lexer.tokenise(None, "ab").tokens()


def test_remaining_text_is_error_when_stack_empties():
    lexer = _lexer({"root": [Rule("a", T.NAME, pop(1))]})
    assert lexer.tokenise(None, "abc").tokens() == [Token(T.NAME, "a"), Token(T.ERROR, "bc")]


def test_newline_error_resets_to_initial_state():
    lexer = _lexer(
        {
            "root": [Rule('"', T.STRING, push("str")), Rule(r"\n", T.WHITESPACE)],
            "str": [Rule(r'[^"\n]+', T.STRING), Rule('"', T.STRING, pop(1))],
        }
    )
    assert lexer.tokenise(None, '"ab\nx').tokens() == [
        Token(T.STRING, '"'),
        Token(T.STRING, "ab"),
        Token(T.WHITESPACE, "\n"),
        Token(T.ERROR, "x"),
    ]


def test_default_rule_transitions_state():
    lexer = _lexer(
        {
            "root": [Rule("a", T.NAME), default(push("other"))],
            "other": [Rule("b", T.KEYWORD, pop(1))],
        }
    )
    assert lexer.tokenise(None, "ab").tokens() == [Token(T.NAME, "a"), Token(T.KEYWORD, "b")]


def test_case_insensitive_config():
    lexer = _lexer({"root": [Rule("hello", T.KEYWORD)]}, Config(case_insensitive=True))
    assert tokenise(lexer, None, "HeLLo") == [Token(T.KEYWORD, "HeLLo")]


def test_module_tokenise_returns_list():
    lexer = _lexer({"root": [Rule(r"\w+", T.NAME), Rule(r"\s+", T.WHITESPACE)]})
    assert tokenise(lexer, None, "a b") == [
        Token(T.NAME, "a"),
        Token(T.WHITESPACE, " "),
        Token(T.NAME, "b"),
    ]


def test_rules_returns_raw_rules():
    rules = {"root": [Rule("a", T.TEXT)]}
    assert _lexer(rules).rules() == rules


def test_analyser_and_config():
    lexer = _lexer({"root": []}, Config(name="Thing"))
    assert lexer.analyse_text("x") == 0.0
    assert lexer.set_analyser(lambda text: 0.5) is lexer
    assert lexer.analyse_text("x") == 0.5
    assert str(lexer) == "Thing"
    lexer.set_config(Config(name="Other"))
    assert lexer.config().name == "Other"


def test_trace_writes_to_stderr(capsys):
    lexer = _lexer({"root": [Rule("a", T.TEXT)]}).trace(True)
    assert lexer.tokenise(None, "a").tokens() == [Token(T.TEXT, "a")]
    assert "root: pos=0" in capsys.readouterr().err


def test_lexer_state_context():
    state = LexerState(lexer=None, text="", rules={}, stack=["root"])
    state.set("key", 42)
    assert state.get("key") == 42
    assert state.get("missing") is None


def test_compiled_rule_equality_ignores_regexp():
    assert CompiledRule("a", T.TEXT) == CompiledRule("a", T.TEXT, regexp=object())