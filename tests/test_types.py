import pytest

from chromatic.types import EOF, STANDARD_TYPES, Token, TokenType


def test_category_and_sub_category_of_string_type():
    tt = TokenType.LITERAL_STRING_DOUBLE
    assert tt.category() is TokenType.LITERAL
    assert tt.sub_category() is TokenType.LITERAL_STRING


def test_parent_walks_up_the_hierarchy():
    tt = TokenType.LITERAL_STRING_DOUBLE
    assert tt.parent() is TokenType.LITERAL_STRING
    assert tt.parent().parent() is TokenType.LITERAL
    assert tt.parent().parent().parent() is TokenType.EOF_TYPE


def test_parent_of_name_member_is_name():
    assert TokenType.NAME_VARIABLE.parent() is TokenType.NAME


def test_meta_types_have_no_category():
    assert TokenType.BACKGROUND.category() is TokenType.EOF_TYPE
    assert TokenType.ERROR.sub_category() is TokenType.EOF_TYPE
    assert TokenType.LINE_HIGHLIGHT.parent() is TokenType.EOF_TYPE


def test_in_category():
    assert TokenType.KEYWORD_TYPE.in_category(TokenType.KEYWORD)
    assert not TokenType.NAME.in_category(TokenType.KEYWORD)
    assert TokenType.LITERAL_NUMBER_HEX.in_category(TokenType.LITERAL_STRING)


def test_in_sub_category():
    assert TokenType.LITERAL_NUMBER_HEX.in_sub_category(TokenType.LITERAL_NUMBER)
    assert not TokenType.LITERAL_NUMBER_HEX.in_sub_category(TokenType.LITERAL_STRING)


def test_aliases_share_identity():
    assert TokenType.from_name("TextWhitespace") is TokenType.WHITESPACE
    assert TokenType.from_name("LiteralString") is TokenType.STRING
    assert TokenType.from_name("LiteralNumberOct") is TokenType.NUMBER_OCT
    assert TokenType.WHITESPACE.sub_category() is TokenType.TEXT


def test_text_names_round_trip_for_every_type():
    for tt in TokenType:
        assert TokenType.from_name(str(tt)) is tt


def test_text_names_use_source_spelling():
    assert TokenType.from_name("NameVariable") is TokenType.NAME_VARIABLE
    assert TokenType.from_name("LineTableTD") is TokenType.LINE_TABLE_TD
    assert str(TokenType.from_name("TextWhitespace")) == "TextWhitespace"
    assert str(TokenType.WHITESPACE) == "TextWhitespace"


def test_from_name_unknown_raises():
    with pytest.raises(ValueError, match="unknown TokenType"):
        TokenType.from_name("NotAType")


def test_emit_yields_single_token_for_whole_match():
    tokens = list(TokenType.KEYWORD.emit(["if", "i"], None))
    assert tokens == [Token(TokenType.KEYWORD, "if")]


def test_emitter_kind():
    assert TokenType.NAME.emitter_kind() == "token"


def test_token_string_is_value():
    assert str(Token(TokenType.NAME, "abc")) == "abc"
    assert EOF.type is TokenType.EOF_TYPE


def test_standard_type_classes():
    assert STANDARD_TYPES[TokenType.KEYWORD_CONSTANT] == "kc"
    assert STANDARD_TYPES[TokenType.BACKGROUND] == "bg"
    assert STANDARD_TYPES[TokenType.TEXT] == ""
    assert len(set(STANDARD_TYPES.values())) == len(STANDARD_TYPES)