"""Token types and tokens produced by lexers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterator, Sequence


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


class TokenType(IntEnum):
    """The type of a token to highlight.

    Categories are grouped in ranges of 1000 and sub-categories in ranges
    of 100. A token type also acts as an emitter of a single token.
    """

    # Meta token types.
    BACKGROUND = -1
    PRE_WRAPPER = -2
    LINE = -3
    LINE_NUMBERS = -4
    LINE_NUMBERS_TABLE = -5
    LINE_HIGHLIGHT = -6
    LINE_TABLE = -7
    LINE_TABLE_TD = -8
    CODE_LINE = -9
    ERROR = -10
    OTHER = -11
    NONE = -12
    EOF_TYPE = 0

    # Keywords.
    KEYWORD = 1000
    KEYWORD_CONSTANT = 1001
    KEYWORD_DECLARATION = 1002
    KEYWORD_NAMESPACE = 1003
    KEYWORD_PSEUDO = 1004
    KEYWORD_RESERVED = 1005
    KEYWORD_TYPE = 1006

    # Names.
    NAME = 2000
    NAME_ATTRIBUTE = 2001
    NAME_BUILTIN = 2002
    NAME_BUILTIN_PSEUDO = 2003
    NAME_CLASS = 2004
    NAME_CONSTANT = 2005
    NAME_DECORATOR = 2006
    NAME_ENTITY = 2007
    NAME_EXCEPTION = 2008
    NAME_FUNCTION = 2009
    NAME_FUNCTION_MAGIC = 2010
    NAME_KEYWORD = 2011
    NAME_LABEL = 2012
    NAME_NAMESPACE = 2013
    NAME_OPERATOR = 2014
    NAME_OTHER = 2015
    NAME_PSEUDO = 2016
    NAME_PROPERTY = 2017
    NAME_TAG = 2018
    NAME_VARIABLE = 2019
    NAME_VARIABLE_ANONYMOUS = 2020
    NAME_VARIABLE_CLASS = 2021
    NAME_VARIABLE_GLOBAL = 2022
    NAME_VARIABLE_INSTANCE = 2023
    NAME_VARIABLE_MAGIC = 2024

    # Literals.
    LITERAL = 3000
    LITERAL_DATE = 3001
    LITERAL_OTHER = 3002

    # Strings.
    LITERAL_STRING = 3100
    LITERAL_STRING_AFFIX = 3101
    LITERAL_STRING_ATOM = 3102
    LITERAL_STRING_BACKTICK = 3103
    LITERAL_STRING_BOOLEAN = 3104
    LITERAL_STRING_CHAR = 3105
    LITERAL_STRING_DELIMITER = 3106
    LITERAL_STRING_DOC = 3107
    LITERAL_STRING_DOUBLE = 3108
    LITERAL_STRING_ESCAPE = 3109
    LITERAL_STRING_HEREDOC = 3110
    LITERAL_STRING_INTERPOL = 3111
    LITERAL_STRING_NAME = 3112
    LITERAL_STRING_OTHER = 3113
    LITERAL_STRING_REGEX = 3114
    LITERAL_STRING_SINGLE = 3115
    LITERAL_STRING_SYMBOL = 3116

    # Numbers.
    LITERAL_NUMBER = 3200
    LITERAL_NUMBER_BIN = 3201
    LITERAL_NUMBER_FLOAT = 3202
    LITERAL_NUMBER_HEX = 3203
    LITERAL_NUMBER_INTEGER = 3204
    LITERAL_NUMBER_INTEGER_LONG = 3205
    LITERAL_NUMBER_OCT = 3206

    # Operators.
    OPERATOR = 4000
    OPERATOR_WORD = 4001

    # Punctuation.
    PUNCTUATION = 5000

    # Comments.
    COMMENT = 6000
    COMMENT_HASHBANG = 6001
    COMMENT_MULTILINE = 6002
    COMMENT_SINGLE = 6003
    COMMENT_SPECIAL = 6004

    # Preprocessor "comments".
    COMMENT_PREPROC = 6100
    COMMENT_PREPROC_FILE = 6101

    # Generic tokens.
    GENERIC = 7000
    GENERIC_DELETED = 7001
    GENERIC_EMPH = 7002
    GENERIC_ERROR = 7003
    GENERIC_HEADING = 7004
    GENERIC_INSERTED = 7005
    GENERIC_OUTPUT = 7006
    GENERIC_PROMPT = 7007
    GENERIC_STRONG = 7008
    GENERIC_SUBHEADING = 7009
    GENERIC_TRACEBACK = 7010
    GENERIC_UNDERLINE = 7011

    # Text.
    TEXT = 8000
    TEXT_WHITESPACE = 8001
    TEXT_SYMBOL = 8002
    TEXT_PUNCTUATION = 8003

    # Aliases.
    WHITESPACE = 8001
    DATE = 3001
    STRING = 3100
    STRING_AFFIX = 3101
    STRING_BACKTICK = 3103
    STRING_CHAR = 3105
    STRING_DELIMITER = 3106
    STRING_DOC = 3107
    STRING_DOUBLE = 3108
    STRING_ESCAPE = 3109
    STRING_HEREDOC = 3110
    STRING_INTERPOL = 3111
    STRING_OTHER = 3113
    STRING_REGEX = 3114
    STRING_SINGLE = 3115
    STRING_SYMBOL = 3116
    NUMBER = 3200
    NUMBER_BIN = 3201
    NUMBER_FLOAT = 3202
    NUMBER_HEX = 3203
    NUMBER_INTEGER = 3204
    NUMBER_INTEGER_LONG = 3205
    NUMBER_OCT = 3206

    def __str__(self) -> str:
        return _TEXT_BY_TYPE[self]

    def parent(self) -> TokenType:
        """The sub-category or category containing this type, else EOF_TYPE."""
        value = int(self)
        if value - _trunc_div(value, 100) * 100 != 0:
            return TokenType(_trunc_div(value, 100) * 100)
        if value - _trunc_div(value, 1000) * 1000 != 0:
            return TokenType(_trunc_div(value, 1000) * 1000)
        return TokenType.EOF_TYPE

    def category(self) -> TokenType:
        """The top-level category of this type."""
        return TokenType(_trunc_div(int(self), 1000) * 1000)

    def sub_category(self) -> TokenType:
        """The sub-category of this type."""
        return TokenType(_trunc_div(int(self), 100) * 100)

    def in_category(self, other: TokenType) -> bool:
        return _trunc_div(int(self), 1000) == _trunc_div(int(other), 1000)

    def in_sub_category(self, other: TokenType) -> bool:
        return _trunc_div(int(self), 100) == _trunc_div(int(other), 100)

    def emit(self, groups: Sequence[str], state: Any) -> Iterator[Token]:
        """Emit a single token of this type holding the whole match."""
        return iter([Token(self, groups[0])])

    def emitter_kind(self) -> str:
        return "token"

    @classmethod
    def from_name(cls, name: str) -> TokenType:
        """Look a token type up by its textual name, e.g. "NameVariable"."""
        try:
            return _TYPE_BY_TEXT[name]
        except KeyError:
            raise ValueError(f"unknown TokenType {name!r}") from None


_SPECIAL_TEXT = {
    TokenType.EOF_TYPE: "EOFType",
    TokenType.LINE_TABLE_TD: "LineTableTD",
}

_TEXT_BY_TYPE: dict[TokenType, str] = {
    member: _SPECIAL_TEXT.get(
        member, "".join(part.capitalize() for part in member.name.split("_"))
    )
    for member in TokenType
}

_TYPE_BY_TEXT: dict[str, TokenType] = {text: tt for tt, text in _TEXT_BY_TYPE.items()}


@dataclass(frozen=True)
class Token:
    """A single token: a type and the text it covers."""

    type: TokenType
    value: str

    def __str__(self) -> str:
        return self.value


EOF = Token(TokenType.EOF_TYPE, "")

STANDARD_TYPES: dict[TokenType, str] = {
    TokenType.BACKGROUND: "bg",
    TokenType.PRE_WRAPPER: "chroma",
    TokenType.LINE: "line",
    TokenType.LINE_NUMBERS: "ln",
    TokenType.LINE_NUMBERS_TABLE: "lnt",
    TokenType.LINE_HIGHLIGHT: "hl",
    TokenType.LINE_TABLE: "lntable",
    TokenType.LINE_TABLE_TD: "lntd",
    TokenType.CODE_LINE: "cl",
    TokenType.TEXT: "",
    TokenType.WHITESPACE: "w",
    TokenType.ERROR: "err",
    TokenType.OTHER: "x",
    TokenType.KEYWORD: "k",
    TokenType.KEYWORD_CONSTANT: "kc",
    TokenType.KEYWORD_DECLARATION: "kd",
    TokenType.KEYWORD_NAMESPACE: "kn",
    TokenType.KEYWORD_PSEUDO: "kp",
    TokenType.KEYWORD_RESERVED: "kr",
    TokenType.KEYWORD_TYPE: "kt",
    TokenType.NAME: "n",
    TokenType.NAME_ATTRIBUTE: "na",
    TokenType.NAME_BUILTIN: "nb",
    TokenType.NAME_BUILTIN_PSEUDO: "bp",
    TokenType.NAME_CLASS: "nc",
    TokenType.NAME_CONSTANT: "no",
    TokenType.NAME_DECORATOR: "nd",
    TokenType.NAME_ENTITY: "ni",
    TokenType.NAME_EXCEPTION: "ne",
    TokenType.NAME_FUNCTION: "nf",
    TokenType.NAME_FUNCTION_MAGIC: "fm",
    TokenType.NAME_PROPERTY: "py",
    TokenType.NAME_LABEL: "nl",
    TokenType.NAME_NAMESPACE: "nn",
    TokenType.NAME_OTHER: "nx",
    TokenType.NAME_TAG: "nt",
    TokenType.NAME_VARIABLE: "nv",
    TokenType.NAME_VARIABLE_CLASS: "vc",
    TokenType.NAME_VARIABLE_GLOBAL: "vg",
    TokenType.NAME_VARIABLE_INSTANCE: "vi",
    TokenType.NAME_VARIABLE_MAGIC: "vm",
    TokenType.LITERAL: "l",
    TokenType.LITERAL_DATE: "ld",
    TokenType.STRING: "s",
    TokenType.STRING_AFFIX: "sa",
    TokenType.STRING_BACKTICK: "sb",
    TokenType.STRING_CHAR: "sc",
    TokenType.STRING_DELIMITER: "dl",
    TokenType.STRING_DOC: "sd",
    TokenType.STRING_DOUBLE: "s2",
    TokenType.STRING_ESCAPE: "se",
    TokenType.STRING_HEREDOC: "sh",
    TokenType.STRING_INTERPOL: "si",
    TokenType.STRING_OTHER: "sx",
    TokenType.STRING_REGEX: "sr",
    TokenType.STRING_SINGLE: "s1",
    TokenType.STRING_SYMBOL: "ss",
    TokenType.NUMBER: "m",
    TokenType.NUMBER_BIN: "mb",
    TokenType.NUMBER_FLOAT: "mf",
    TokenType.NUMBER_HEX: "mh",
    TokenType.NUMBER_INTEGER: "mi",
    TokenType.NUMBER_INTEGER_LONG: "il",
    TokenType.NUMBER_OCT: "mo",
    TokenType.OPERATOR: "o",
    TokenType.OPERATOR_WORD: "ow",
    TokenType.PUNCTUATION: "p",
    TokenType.COMMENT: "c",
    TokenType.COMMENT_HASHBANG: "ch",
    TokenType.COMMENT_MULTILINE: "cm",
    TokenType.COMMENT_PREPROC: "cp",
    TokenType.COMMENT_PREPROC_FILE: "cpf",
    TokenType.COMMENT_SINGLE: "c1",
    TokenType.COMMENT_SPECIAL: "cs",
    TokenType.GENERIC: "g",
    TokenType.GENERIC_DELETED: "gd",
    TokenType.GENERIC_EMPH: "ge",
    TokenType.GENERIC_ERROR: "gr",
    TokenType.GENERIC_HEADING: "gh",
    TokenType.GENERIC_INSERTED: "gi",
    TokenType.GENERIC_OUTPUT: "go",
    TokenType.GENERIC_PROMPT: "gp",
    TokenType.GENERIC_STRONG: "gs",
    TokenType.GENERIC_SUBHEADING: "gu",
    TokenType.GENERIC_TRACEBACK: "gt",
    TokenType.GENERIC_UNDERLINE: "gl",
}