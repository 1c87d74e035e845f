"""Built-in styles: colorful, doom-one, doom-one2, emacs, friendly, fruity,
github-dark, github, gruvbox-light and gruvbox."""

from __future__ import annotations

from ..style import Style, new_style
from ..types import TokenType as T

COLORFUL = new_style("colorful", {
    T.TEXT_WHITESPACE: "#bbbbbb",
    T.COMMENT: "#888",
    T.COMMENT_PREPROC: "#579",
    T.COMMENT_SPECIAL: "bold #cc0000",
    T.KEYWORD: "bold #080",
    T.KEYWORD_PSEUDO: "#038",
    T.KEYWORD_TYPE: "#339",
    T.OPERATOR: "#333",
    T.OPERATOR_WORD: "bold #000",
    T.NAME_BUILTIN: "#007020",
    T.NAME_FUNCTION: "bold #06B",
    T.NAME_CLASS: "bold #B06",
    T.NAME_NAMESPACE: "bold #0e84b5",
    T.NAME_EXCEPTION: "bold #F00",
    T.NAME_VARIABLE: "#963",
    T.NAME_VARIABLE_INSTANCE: "#33B",
    T.NAME_VARIABLE_CLASS: "#369",
    T.NAME_VARIABLE_GLOBAL: "bold #d70",
    T.NAME_CONSTANT: "bold #036",
    T.NAME_LABEL: "bold #970",
    T.NAME_ENTITY: "bold #800",
    T.NAME_ATTRIBUTE: "#00C",
    T.NAME_TAG: "#070",
    T.NAME_DECORATOR: "bold #555",
    T.LITERAL_STRING: "bg:#fff0f0",
    T.LITERAL_STRING_CHAR: "#04D bg:",
    T.LITERAL_STRING_DOC: "#D42 bg:",
    T.LITERAL_STRING_INTERPOL: "bg:#eee",
    T.LITERAL_STRING_ESCAPE: "bold #666",
    T.LITERAL_STRING_REGEX: "bg:#fff0ff #000",
    T.LITERAL_STRING_SYMBOL: "#A60 bg:",
    T.LITERAL_STRING_OTHER: "#D20",
    T.LITERAL_NUMBER: "bold #60E",
    T.LITERAL_NUMBER_INTEGER: "bold #00D",
    T.LITERAL_NUMBER_FLOAT: "bold #60E",
    T.LITERAL_NUMBER_HEX: "bold #058",
    T.LITERAL_NUMBER_OCT: "bold #40E",
    T.GENERIC_HEADING: "bold #000080",
    T.GENERIC_SUBHEADING: "bold #800080",
    T.GENERIC_DELETED: "#A00000",
    T.GENERIC_INSERTED: "#00A000",
    T.GENERIC_ERROR: "#FF0000",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_PROMPT: "bold #c65d09",
    T.GENERIC_OUTPUT: "#888",
    T.GENERIC_TRACEBACK: "#04D",
    T.GENERIC_UNDERLINE: "underline",
    T.ERROR: "#F00 bg:#FAA",
    T.BACKGROUND: " bg:#ffffff",
})

# Inspired by Atom One and the Doom Emacs One theme.
DOOM_ONE = new_style("doom-one", {
    T.TEXT: "#b0c4de",
    T.ERROR: "#b0c4de",
    T.COMMENT: "italic #8a93a5",
    T.COMMENT_HASHBANG: "bold",
    T.KEYWORD: "#c678dd",
    T.KEYWORD_TYPE: "#ef8383",
    T.KEYWORD_CONSTANT: "bold #b756ff",
    T.OPERATOR: "#c7bf54",
    T.OPERATOR_WORD: "bold #b756ff",
    T.PUNCTUATION: "#b0c4de",
    T.NAME: "#c1abea",
    T.NAME_ATTRIBUTE: "#b3d23c",
    T.NAME_BUILTIN: "#ef8383",
    T.NAME_CLASS: "#76a9f9",
    T.NAME_CONSTANT: "bold #b756ff",
    T.NAME_DECORATOR: "#e5c07b",
    T.NAME_ENTITY: "#bda26f",
    T.NAME_EXCEPTION: "bold #fd7474",
    T.NAME_FUNCTION: "#00b1f7",
    T.NAME_PROPERTY: "#cebc3a",
    T.NAME_LABEL: "#f5a40d",
    T.NAME_NAMESPACE: "#76a9f9",
    T.NAME_TAG: "#e06c75",
    T.NAME_VARIABLE: "#DCAEEA",
    T.NAME_VARIABLE_GLOBAL: "bold #DCAEEA",
    T.NAME_VARIABLE_INSTANCE: "#e06c75",
    T.LITERAL: "#98c379",
    T.NUMBER: "#d19a66",
    T.STRING: "#98c379",
    T.STRING_DOC: "#7e97c3",
    T.STRING_DOUBLE: "#63c381",
    T.STRING_ESCAPE: "bold #d26464",
    T.STRING_HEREDOC: "#98c379",
    T.STRING_INTERPOL: "#98c379",
    T.STRING_OTHER: "#70b33f",
    T.STRING_REGEX: "#56b6c2",
    T.STRING_SINGLE: "#98c379",
    T.STRING_SYMBOL: "#56b6c2",
    T.GENERIC: "#b0c4de",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_HEADING: "bold #a2cbff",
    T.GENERIC_INSERTED: "#a6e22e",
    T.GENERIC_OUTPUT: "#a6e22e",
    T.GENERIC_UNDERLINE: "underline",
    T.GENERIC_PROMPT: "#a6e22e",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_SUBHEADING: "#a2cbff",
    T.GENERIC_TRACEBACK: "#a2cbff",
    T.BACKGROUND: "#b0c4de bg:#282c34",
})

DOOM_ONE2 = new_style("doom-one2", {
    T.TEXT: "#b0c4de",
    T.ERROR: "#b0c4de",
    T.COMMENT: "italic #8a93a5",
    T.COMMENT_HASHBANG: "bold",
    T.KEYWORD: "#76a9f9",
    T.KEYWORD_CONSTANT: "#e5c07b",
    T.KEYWORD_TYPE: "#e5c07b",
    T.OPERATOR: "#54b1c7",
    T.OPERATOR_WORD: "bold #b756ff",
    T.PUNCTUATION: "#abb2bf",
    T.NAME: "#aa89ea",
    T.NAME_ATTRIBUTE: "#cebc3a",
    T.NAME_BUILTIN: "#e5c07b",
    T.NAME_CLASS: "#ca72ff",
    T.NAME_CONSTANT: "bold",
    T.NAME_DECORATOR: "#e5c07b",
    T.NAME_ENTITY: "#bda26f",
    T.NAME_EXCEPTION: "bold #fd7474",
    T.NAME_FUNCTION: "#00b1f7",
    T.NAME_PROPERTY: "#cebc3a",
    T.NAME_LABEL: "#f5a40d",
    T.NAME_NAMESPACE: "#ca72ff",
    T.NAME_TAG: "#76a9f9",
    T.NAME_VARIABLE: "#DCAEEA",
    T.NAME_VARIABLE_CLASS: "#DCAEEA",
    T.NAME_VARIABLE_GLOBAL: "bold #DCAEEA",
    T.NAME_VARIABLE_INSTANCE: "#e06c75",
    T.NAME_VARIABLE_MAGIC: "#DCAEEA",
    T.LITERAL: "#98c379",
    T.LITERAL_DATE: "#98c379",
    T.NUMBER: "#d19a66",
    T.NUMBER_BIN: "#d19a66",
    T.NUMBER_FLOAT: "#d19a66",
    T.NUMBER_HEX: "#d19a66",
    T.NUMBER_INTEGER: "#d19a66",
    T.NUMBER_INTEGER_LONG: "#d19a66",
    T.NUMBER_OCT: "#d19a66",
    T.STRING: "#98c379",
    T.STRING_AFFIX: "#98c379",
    T.STRING_BACKTICK: "#98c379",
    T.STRING_DELIMITER: "#98c379",
    T.STRING_DOC: "#7e97c3",
    T.STRING_DOUBLE: "#63c381",
    T.STRING_ESCAPE: "bold #d26464",
    T.STRING_HEREDOC: "#98c379",
    T.STRING_INTERPOL: "#98c379",
    T.STRING_OTHER: "#70b33f",
    T.STRING_REGEX: "#56b6c2",
    T.STRING_SINGLE: "#98c379",
    T.STRING_SYMBOL: "#56b6c2",
    T.GENERIC: "#b0c4de",
    T.GENERIC_DELETED: "#b0c4de",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_HEADING: "bold #a2cbff",
    T.GENERIC_INSERTED: "#a6e22e",
    T.GENERIC_OUTPUT: "#a6e22e",
    T.GENERIC_UNDERLINE: "underline",
    T.GENERIC_PROMPT: "#a6e22e",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_SUBHEADING: "#a2cbff",
    T.GENERIC_TRACEBACK: "#a2cbff",
    T.BACKGROUND: "#b0c4de bg:#282c34",
})

EMACS = new_style("emacs", {
    T.TEXT_WHITESPACE: "#bbbbbb",
    T.COMMENT: "italic #008800",
    T.COMMENT_PREPROC: "noitalic",
    T.COMMENT_SPECIAL: "noitalic bold",
    T.KEYWORD: "bold #AA22FF",
    T.KEYWORD_PSEUDO: "nobold",
    T.KEYWORD_TYPE: "bold #00BB00",
    T.OPERATOR: "#666666",
    T.OPERATOR_WORD: "bold #AA22FF",
    T.NAME_BUILTIN: "#AA22FF",
    T.NAME_FUNCTION: "#00A000",
    T.NAME_CLASS: "#0000FF",
    T.NAME_NAMESPACE: "bold #0000FF",
    T.NAME_EXCEPTION: "bold #D2413A",
    T.NAME_VARIABLE: "#B8860B",
    T.NAME_CONSTANT: "#880000",
    T.NAME_LABEL: "#A0A000",
    T.NAME_ENTITY: "bold #999999",
    T.NAME_ATTRIBUTE: "#BB4444",
    T.NAME_TAG: "bold #008000",
    T.NAME_DECORATOR: "#AA22FF",
    T.LITERAL_STRING: "#BB4444",
    T.LITERAL_STRING_DOC: "italic",
    T.LITERAL_STRING_INTERPOL: "bold #BB6688",
    T.LITERAL_STRING_ESCAPE: "bold #BB6622",
    T.LITERAL_STRING_REGEX: "#BB6688",
    T.LITERAL_STRING_SYMBOL: "#B8860B",
    T.LITERAL_STRING_OTHER: "#008000",
    T.LITERAL_NUMBER: "#666666",
    T.GENERIC_HEADING: "bold #000080",
    T.GENERIC_SUBHEADING: "bold #800080",
    T.GENERIC_DELETED: "#A00000",
    T.GENERIC_INSERTED: "#00A000",
    T.GENERIC_ERROR: "#FF0000",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_PROMPT: "bold #000080",
    T.GENERIC_OUTPUT: "#888",
    T.GENERIC_TRACEBACK: "#04D",
    T.GENERIC_UNDERLINE: "underline",
    T.ERROR: "border:#FF0000",
    T.BACKGROUND: " bg:#f8f8f8",
})

FRIENDLY = new_style("friendly", {
    T.TEXT_WHITESPACE: "#bbbbbb",
    T.COMMENT: "italic #60a0b0",
    T.COMMENT_PREPROC: "noitalic #007020",
    T.COMMENT_SPECIAL: "noitalic bg:#fff0f0",
    T.KEYWORD: "bold #007020",
    T.KEYWORD_PSEUDO: "nobold",
    T.KEYWORD_TYPE: "nobold #902000",
    T.OPERATOR: "#666666",
    T.OPERATOR_WORD: "bold #007020",
    T.NAME_BUILTIN: "#007020",
    T.NAME_FUNCTION: "#06287e",
    T.NAME_CLASS: "bold #0e84b5",
    T.NAME_NAMESPACE: "bold #0e84b5",
    T.NAME_EXCEPTION: "#007020",
    T.NAME_VARIABLE: "#bb60d5",
    T.NAME_CONSTANT: "#60add5",
    T.NAME_LABEL: "bold #002070",
    T.NAME_ENTITY: "bold #d55537",
    T.NAME_ATTRIBUTE: "#4070a0",
    T.NAME_TAG: "bold #062873",
    T.NAME_DECORATOR: "bold #555555",
    T.LITERAL_STRING: "#4070a0",
    T.LITERAL_STRING_DOC: "italic",
    T.LITERAL_STRING_INTERPOL: "#70a0d0",
    T.LITERAL_STRING_ESCAPE: "bold #4070a0",
    T.LITERAL_STRING_REGEX: "#235388",
    T.LITERAL_STRING_SYMBOL: "#517918",
    T.LITERAL_STRING_OTHER: "#c65d09",
    T.LITERAL_NUMBER: "#40a070",
    T.GENERIC_HEADING: "bold #000080",
    T.GENERIC_SUBHEADING: "bold #800080",
    T.GENERIC_DELETED: "#A00000",
    T.GENERIC_INSERTED: "#00A000",
    T.GENERIC_ERROR: "#FF0000",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_PROMPT: "bold #c65d09",
    T.GENERIC_OUTPUT: "#888",
    T.GENERIC_TRACEBACK: "#04D",
    T.GENERIC_UNDERLINE: "underline",
    T.ERROR: "border:#FF0000",
    T.BACKGROUND: " bg:#f0f0f0",
})

FRUITY = new_style("fruity", {
    T.TEXT_WHITESPACE: "#888888",
    T.BACKGROUND: "#ffffff bg:#111111",
    T.GENERIC_OUTPUT: "#444444 bg:#222222",
    T.KEYWORD: "#fb660a bold",
    T.KEYWORD_PSEUDO: "nobold",
    T.LITERAL_NUMBER: "#0086f7 bold",
    T.NAME_TAG: "#fb660a bold",
    T.NAME_VARIABLE: "#fb660a",
    T.COMMENT: "#008800 bg:#0f140f italic",
    T.NAME_ATTRIBUTE: "#ff0086 bold",
    T.LITERAL_STRING: "#0086d2",
    T.NAME_FUNCTION: "#ff0086 bold",
    T.GENERIC_HEADING: "#ffffff bold",
    T.KEYWORD_TYPE: "#cdcaa9 bold",
    T.GENERIC_SUBHEADING: "#ffffff bold",
    T.NAME_CONSTANT: "#0086d2",
    T.COMMENT_PREPROC: "#ff0007 bold",
})

# Palette for the dark GitHub theme.
_GH_RED2 = "#ffa198"
_GH_RED3 = "#ff7b72"
_GH_RED9 = "#490202"
_GH_ORANGE2 = "#ffa657"
_GH_ORANGE3 = "#f0883e"
_GH_GREEN1 = "#7ee787"
_GH_GREEN2 = "#56d364"
_GH_GREEN7 = "#0f5323"
_GH_BLUE1 = "#a5d6ff"
_GH_BLUE2 = "#79c0ff"
_GH_PURPLE2 = "#d2a8ff"
_GH_GRAY3 = "#8b949e"
_GH_GRAY4 = "#6e7681"
_GH_FG_SUBTLE = "#6e7681"
_GH_FG_DEFAULT = "#c9d1d9"
_GH_BG_DEFAULT = "#0d1117"
_GH_DANGER_FG = "#f85149"

GITHUB_DARK = new_style("github-dark", {
    T.BACKGROUND: f"bg:{_GH_BG_DEFAULT} {_GH_FG_DEFAULT}",
    T.LINE_NUMBERS: _GH_GRAY4,
    T.LINE_HIGHLIGHT: _GH_GRAY4,
    T.ERROR: _GH_DANGER_FG,
    T.KEYWORD: _GH_RED3,
    T.KEYWORD_CONSTANT: _GH_BLUE2,
    T.KEYWORD_PSEUDO: _GH_BLUE2,
    T.NAME: _GH_FG_DEFAULT,
    T.NAME_CLASS: "bold " + _GH_ORANGE3,
    T.NAME_CONSTANT: "bold " + _GH_BLUE2,
    T.NAME_DECORATOR: "bold " + _GH_PURPLE2,
    T.NAME_ENTITY: _GH_ORANGE2,
    T.NAME_EXCEPTION: "bold " + _GH_ORANGE3,
    T.NAME_FUNCTION: "bold " + _GH_PURPLE2,
    T.NAME_LABEL: "bold " + _GH_BLUE2,
    T.NAME_NAMESPACE: _GH_RED3,
    T.NAME_PROPERTY: _GH_BLUE2,
    T.NAME_TAG: _GH_GREEN1,
    T.NAME_VARIABLE: _GH_BLUE2,
    T.LITERAL: _GH_BLUE1,
    T.LITERAL_DATE: _GH_BLUE2,
    T.LITERAL_STRING_AFFIX: _GH_BLUE2,
    T.LITERAL_STRING_DELIMITER: _GH_BLUE2,
    T.LITERAL_STRING_ESCAPE: _GH_BLUE2,
    T.LITERAL_STRING_HEREDOC: _GH_BLUE2,
    T.LITERAL_STRING_REGEX: _GH_BLUE2,
    T.OPERATOR: "bold " + _GH_RED3,
    T.COMMENT: "italic " + _GH_GRAY3,
    T.COMMENT_PREPROC: "bold " + _GH_GRAY3,
    T.COMMENT_SPECIAL: "bold italic " + _GH_GRAY3,
    T.GENERIC: _GH_FG_DEFAULT,
    T.GENERIC_DELETED: f"bg:{_GH_RED9} {_GH_RED2}",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_ERROR: _GH_RED2,
    T.GENERIC_HEADING: "bold " + _GH_BLUE2,
    T.GENERIC_INSERTED: f"bg:{_GH_GREEN7} {_GH_GREEN2}",
    T.GENERIC_OUTPUT: _GH_GRAY3,
    T.GENERIC_PROMPT: _GH_GRAY3,
    T.GENERIC_STRONG: "bold",
    T.GENERIC_SUBHEADING: _GH_BLUE2,
    T.GENERIC_TRACEBACK: _GH_RED3,
    T.GENERIC_UNDERLINE: "underline",
    T.TEXT_WHITESPACE: _GH_FG_SUBTLE,
})

GITHUB = new_style("github", {
    T.COMMENT_MULTILINE: "italic #999988",
    T.COMMENT_PREPROC: "bold #999999",
    T.COMMENT_SINGLE: "italic #999988",
    T.COMMENT_SPECIAL: "bold italic #999999",
    T.COMMENT: "italic #999988",
    T.ERROR: "bg:#e3d2d2 #a61717",
    T.GENERIC_DELETED: "bg:#ffdddd #000000",
    T.GENERIC_EMPH: "italic #000000",
    T.GENERIC_ERROR: "#aa0000",
    T.GENERIC_HEADING: "#999999",
    T.GENERIC_INSERTED: "bg:#ddffdd #000000",
    T.GENERIC_OUTPUT: "#888888",
    T.GENERIC_PROMPT: "#555555",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_SUBHEADING: "#aaaaaa",
    T.GENERIC_TRACEBACK: "#aa0000",
    T.GENERIC_UNDERLINE: "underline",
    T.KEYWORD_TYPE: "bold #445588",
    T.KEYWORD: "bold #000000",
    T.LITERAL_NUMBER: "#009999",
    T.LITERAL_STRING_REGEX: "#009926",
    T.LITERAL_STRING_SYMBOL: "#990073",
    T.LITERAL_STRING: "#d14",
    T.NAME_ATTRIBUTE: "#008080",
    T.NAME_BUILTIN_PSEUDO: "#999999",
    T.NAME_BUILTIN: "#0086B3",
    T.NAME_CLASS: "bold #445588",
    T.NAME_CONSTANT: "#008080",
    T.NAME_DECORATOR: "bold #3c5d5d",
    T.NAME_ENTITY: "#800080",
    T.NAME_EXCEPTION: "bold #990000",
    T.NAME_FUNCTION: "bold #990000",
    T.NAME_LABEL: "bold #990000",
    T.NAME_NAMESPACE: "#555555",
    T.NAME_TAG: "#000080",
    T.NAME_VARIABLE_CLASS: "#008080",
    T.NAME_VARIABLE_GLOBAL: "#008080",
    T.NAME_VARIABLE_INSTANCE: "#008080",
    T.NAME_VARIABLE: "#008080",
    T.OPERATOR: "bold #000000",
    T.TEXT_WHITESPACE: "#bbbbbb",
    T.BACKGROUND: " bg:#ffffff",
})

GRUVBOX_LIGHT = new_style("gruvbox-light", {
    T.COMMENT_PREPROC: "noinherit #427B58",
    T.COMMENT: "#928374 italic",
    T.GENERIC_DELETED: "noinherit #282828 bg:#9D0006",
    T.GENERIC_EMPH: "#076678 underline",
    T.GENERIC_ERROR: "bg:#9D0006 bold",
    T.GENERIC_HEADING: "#79740E bold",
    T.GENERIC_INSERTED: "noinherit #282828 bg:#79740E",
    T.GENERIC_OUTPUT: "noinherit #504945",
    T.GENERIC_PROMPT: "#3C3836",
    T.GENERIC_STRONG: "#3C3836",
    T.GENERIC_SUBHEADING: "#79740E bold",
    T.GENERIC_TRACEBACK: "bg:#3C3836 bold",
    T.GENERIC: "#3C3836",
    T.KEYWORD_TYPE: "noinherit #B57614",
    T.KEYWORD: "noinherit #AF3A03",
    T.NAME_ATTRIBUTE: "#79740E bold",
    T.NAME_BUILTIN: "#B57614",
    T.NAME_CONSTANT: "noinherit #d3869b",
    T.NAME_ENTITY: "noinherit #B57614",
    T.NAME_EXCEPTION: "noinherit #fb4934",
    T.NAME_FUNCTION: "#B57614",
    T.NAME_LABEL: "noinherit #9D0006",
    T.NAME_TAG: "noinherit #9D0006",
    T.NAME_VARIABLE: "noinherit #3C3836",
    T.NAME: "#3C3836",
    T.LITERAL_NUMBER_FLOAT: "noinherit #8F3F71",
    T.LITERAL_NUMBER: "noinherit #8F3F71",
    T.OPERATOR: "#AF3A03",
    T.LITERAL_STRING_SYMBOL: "#076678",
    T.LITERAL_STRING: "noinherit #79740E",
    T.BACKGROUND: "noinherit #3C3836 bg:#FBF1C7 bg:#FBF1C7",
})

GRUVBOX = new_style("gruvbox", {
    T.COMMENT_PREPROC: "noinherit #8ec07c",
    T.COMMENT: "#928374 italic",
    T.GENERIC_DELETED: "noinherit #282828 bg:#fb4934",
    T.GENERIC_EMPH: "#83a598 underline",
    T.GENERIC_ERROR: "bg:#fb4934 bold",
    T.GENERIC_HEADING: "#b8bb26 bold",
    T.GENERIC_INSERTED: "noinherit #282828 bg:#b8bb26",
    T.GENERIC_OUTPUT: "noinherit #504945",
    T.GENERIC_PROMPT: "#ebdbb2",
    T.GENERIC_STRONG: "#ebdbb2",
    T.GENERIC_SUBHEADING: "#b8bb26 bold",
    T.GENERIC_TRACEBACK: "bg:#fb4934 bold",
    T.GENERIC: "#ebdbb2",
    T.KEYWORD_TYPE: "noinherit #fabd2f",
    T.KEYWORD: "noinherit #fe8019",
    T.NAME_ATTRIBUTE: "#b8bb26 bold",
    T.NAME_BUILTIN: "#fabd2f",
    T.NAME_CONSTANT: "noinherit #d3869b",
    T.NAME_ENTITY: "noinherit #fabd2f",
    T.NAME_EXCEPTION: "noinherit #fb4934",
    T.NAME_FUNCTION: "#fabd2f",
    T.NAME_LABEL: "noinherit #fb4934",
    T.NAME_TAG: "noinherit #fb4934",
    T.NAME_VARIABLE: "noinherit #ebdbb2",
    T.NAME: "#ebdbb2",
    T.LITERAL_NUMBER_FLOAT: "noinherit #d3869b",
    T.LITERAL_NUMBER: "noinherit #d3869b",
    T.OPERATOR: "#fe8019",
    T.LITERAL_STRING_SYMBOL: "#83a598",
    T.LITERAL_STRING: "noinherit #b8bb26",
    T.BACKGROUND: "noinherit #ebdbb2 bg:#282828 bg:#282828",
})


def all_styles() -> list[Style]:
    """Every style defined in this module."""
    return [
        COLORFUL,
        DOOM_ONE,
        DOOM_ONE2,
        EMACS,
        FRIENDLY,
        FRUITY,
        GITHUB_DARK,
        GITHUB,
        GRUVBOX_LIGHT,
        GRUVBOX,
    ]