from chromatic.lexer import Config, RegexLexer, Rule
from chromatic.remap import RemappingLexer, TypeMap, type_remapping_lexer
from chromatic.types import Token, TokenType

T = TokenType


def base_lexer():
    return RegexLexer(None, lambda: {
        "root": [
            Rule(r"\s+", T.WHITESPACE),
            Rule(r"\w+", T.NAME),
        ],
    })


def test_remapping_lexer():
    lexer = type_remapping_lexer(base_lexer(), [TypeMap(T.NAME, T.KEYWORD, ("if", "else"))])
    actual = list(lexer.tokenise(None, "if true then print else end"))
    expected = [
        Token(T.KEYWORD, "if"), Token(T.TEXT_WHITESPACE, " "), Token(T.NAME, "true"),
        Token(T.TEXT_WHITESPACE, " "), Token(T.NAME, "then"),
        Token(T.TEXT_WHITESPACE, " "), Token(T.NAME, "print"), Token(T.TEXT_WHITESPACE, " "),
        Token(T.KEYWORD, "else"),
        Token(T.TEXT_WHITESPACE, " "), Token(T.NAME, "end"),
    ]
    assert actual == expected


def test_mapping_without_words_remaps_all():
    lexer = type_remapping_lexer(base_lexer(), [TypeMap(T.NAME, T.NAME_FUNCTION)])
    actual = list(lexer.tokenise(None, "a b"))
    assert actual == [
        Token(T.NAME_FUNCTION, "a"),
        Token(T.WHITESPACE, " "),
        Token(T.NAME_FUNCTION, "b"),
    ]


def test_mapper_may_drop_and_expand_tokens():
    def mapper(token):
        if token.type == T.WHITESPACE:
            return []
        return [token, token]

    lexer = RemappingLexer(base_lexer(), mapper)
    actual = list(lexer.tokenise(None, "x y"))
    assert actual == [Token(T.NAME, "x")] * 2 + [Token(T.NAME, "y")] * 2


def test_delegates_config_and_analyser():
    inner = RegexLexer(Config(name="Inner"), lambda: {"root": [Rule(".", T.TEXT)]})
    lexer = RemappingLexer(inner, lambda token: [token])
    assert lexer.config().name == "Inner"
    assert lexer.set_analyser(lambda text: 0.75) is lexer
    assert lexer.analyse_text("anything") == 0.75
    assert inner.analyse_text("anything") == 0.75