"""Built-in styles: abap, algol, algol_nu, arduino, autumn, borland, bw,
igor, hrdark, hr_high_contrast and swapoff."""

from __future__ import annotations

from ..style import Style, new_style
from ..types import TokenType as T

ABAP = new_style("abap", {
    T.COMMENT: "italic #888",
    T.COMMENT_SPECIAL: "#888",
    T.KEYWORD: "#00f",
    T.OPERATOR_WORD: "#00f",
    T.NAME: "#000",
    T.LITERAL_NUMBER: "#3af",
    T.LITERAL_STRING: "#5a2",
    T.ERROR: "#F00",
    T.BACKGROUND: " bg:#ffffff",
})

ALGOL = new_style("algol", {
    T.COMMENT: "italic #888",
    T.COMMENT_PREPROC: "bold noitalic #888",
    T.COMMENT_SPECIAL: "bold noitalic #888",
    T.KEYWORD: "underline bold",
    T.KEYWORD_DECLARATION: "italic",
    T.NAME_BUILTIN: "bold italic",
    T.NAME_BUILTIN_PSEUDO: "bold italic",
    T.NAME_NAMESPACE: "bold italic #666",
    T.NAME_CLASS: "bold italic #666",
    T.NAME_FUNCTION: "bold italic #666",
    T.NAME_VARIABLE: "bold italic #666",
    T.NAME_CONSTANT: "bold italic #666",
    T.OPERATOR_WORD: "bold",
    T.LITERAL_STRING: "italic #666",
    T.ERROR: "border:#FF0000",
    T.BACKGROUND: " bg:#ffffff",
})

ALGOL_NU = new_style("algol_nu", {
    T.COMMENT: "italic #888",
    T.COMMENT_PREPROC: "bold noitalic #888",
    T.COMMENT_SPECIAL: "bold noitalic #888",
    T.KEYWORD: "bold",
    T.KEYWORD_DECLARATION: "italic",
    T.NAME_BUILTIN: "bold italic",
    T.NAME_BUILTIN_PSEUDO: "bold italic",
    T.NAME_NAMESPACE: "bold italic #666",
    T.NAME_CLASS: "bold italic #666",
    T.NAME_FUNCTION: "bold italic #666",
    T.NAME_VARIABLE: "bold italic #666",
    T.NAME_CONSTANT: "bold italic #666",
    T.OPERATOR_WORD: "bold",
    T.LITERAL_STRING: "italic #666",
    T.ERROR: "border:#FF0000",
    T.BACKGROUND: " bg:#ffffff",
})

ARDUINO = new_style("arduino", {
    T.ERROR: "#a61717",
    T.COMMENT: "#95a5a6",
    T.COMMENT_PREPROC: "#728E00",
    T.KEYWORD: "#728E00",
    T.KEYWORD_CONSTANT: "#00979D",
    T.KEYWORD_PSEUDO: "#00979D",
    T.KEYWORD_RESERVED: "#00979D",
    T.KEYWORD_TYPE: "#00979D",
    T.OPERATOR: "#728E00",
    T.NAME: "#434f54",
    T.NAME_BUILTIN: "#728E00",
    T.NAME_FUNCTION: "#D35400",
    T.NAME_OTHER: "#728E00",
    T.LITERAL_NUMBER: "#8A7B52",
    T.LITERAL_STRING: "#7F8C8D",
    T.BACKGROUND: " bg:#ffffff",
})

AUTUMN = new_style("autumn", {
    T.TEXT_WHITESPACE: "#bbbbbb",
    T.COMMENT: "italic #aaaaaa",
    T.COMMENT_PREPROC: "noitalic #4c8317",
    T.COMMENT_SPECIAL: "italic #0000aa",
    T.KEYWORD: "#0000aa",
    T.KEYWORD_TYPE: "#00aaaa",
    T.OPERATOR_WORD: "#0000aa",
    T.NAME_BUILTIN: "#00aaaa",
    T.NAME_FUNCTION: "#00aa00",
    T.NAME_CLASS: "underline #00aa00",
    T.NAME_NAMESPACE: "underline #00aaaa",
    T.NAME_VARIABLE: "#aa0000",
    T.NAME_CONSTANT: "#aa0000",
    T.NAME_ENTITY: "bold #800",
    T.NAME_ATTRIBUTE: "#1e90ff",
    T.NAME_TAG: "bold #1e90ff",
    T.NAME_DECORATOR: "#888888",
    T.LITERAL_STRING: "#aa5500",
    T.LITERAL_STRING_SYMBOL: "#0000aa",
    T.LITERAL_STRING_REGEX: "#009999",
    T.LITERAL_NUMBER: "#009999",
    T.GENERIC_HEADING: "bold #000080",
    T.GENERIC_SUBHEADING: "bold #800080",
    T.GENERIC_DELETED: "#aa0000",
    T.GENERIC_INSERTED: "#00aa00",
    T.GENERIC_ERROR: "#aa0000",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_PROMPT: "#555555",
    T.GENERIC_OUTPUT: "#888888",
    T.GENERIC_TRACEBACK: "#aa0000",
    T.GENERIC_UNDERLINE: "underline",
    T.ERROR: "#F00 bg:#FAA",
    T.BACKGROUND: " bg:#ffffff",
})

BORLAND = new_style("borland", {
    T.TEXT_WHITESPACE: "#bbbbbb",
    T.COMMENT: "italic #008800",
    T.COMMENT_PREPROC: "noitalic #008080",
    T.COMMENT_SPECIAL: "noitalic bold",
    T.LITERAL_STRING: "#0000FF",
    T.LITERAL_STRING_CHAR: "#800080",
    T.LITERAL_NUMBER: "#0000FF",
    T.KEYWORD: "bold #000080",
    T.OPERATOR_WORD: "bold",
    T.NAME_TAG: "bold #000080",
    T.NAME_ATTRIBUTE: "#FF0000",
    T.GENERIC_HEADING: "#999999",
    T.GENERIC_SUBHEADING: "#aaaaaa",
    T.GENERIC_DELETED: "bg:#ffdddd #000000",
    T.GENERIC_INSERTED: "bg:#ddffdd #000000",
    T.GENERIC_ERROR: "#aa0000",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_PROMPT: "#555555",
    T.GENERIC_OUTPUT: "#888888",
    T.GENERIC_TRACEBACK: "#aa0000",
    T.GENERIC_UNDERLINE: "underline",
    T.ERROR: "bg:#e3d2d2 #a61717",
    T.BACKGROUND: " bg:#ffffff",
})

BLACK_WHITE = new_style("bw", {
    T.COMMENT: "italic",
    T.COMMENT_PREPROC: "noitalic",
    T.KEYWORD: "bold",
    T.KEYWORD_PSEUDO: "nobold",
    T.KEYWORD_TYPE: "nobold",
    T.OPERATOR_WORD: "bold",
    T.NAME_CLASS: "bold",
    T.NAME_NAMESPACE: "bold",
    T.NAME_EXCEPTION: "bold",
    T.NAME_ENTITY: "bold",
    T.NAME_TAG: "bold",
    T.LITERAL_STRING: "italic",
    T.LITERAL_STRING_INTERPOL: "bold",
    T.LITERAL_STRING_ESCAPE: "bold",
    T.GENERIC_HEADING: "bold",
    T.GENERIC_SUBHEADING: "bold",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_PROMPT: "bold",
    T.ERROR: "border:#FF0000",
    T.BACKGROUND: " bg:#ffffff",
})

IGOR = new_style("igor", {
    T.COMMENT: "italic #FF0000",
    T.KEYWORD: "#0000FF",
    T.NAME_FUNCTION: "#C34E00",
    T.NAME_DECORATOR: "#CC00A3",
    T.NAME_CLASS: "#007575",
    T.LITERAL_STRING: "#009C00",
    T.BACKGROUND: " bg:#ffffff",
})

HR_DARK = new_style("hrdark", {
    T.COMMENT: "italic #828b96",
    T.KEYWORD: "#ff636f",
    T.OPERATOR_WORD: "#ff636f",
    T.NAME: "#58a1dd",
    T.LITERAL: "#a6be9d",
    T.OPERATOR: "#ff636f",
    T.BACKGROUND: "#1d2432",
    T.OTHER: "#fff",
})

HR_HIGH_CONTRAST = new_style("hr_high_contrast", {
    T.COMMENT: "#5a8349",
    T.KEYWORD: "#467faf",
    T.OPERATOR_WORD: "#467faf",
    T.NAME: "#ffffff",
    T.LITERAL_STRING: "#a87662",
    T.LITERAL_NUMBER: "#fff",
    T.LITERAL_STRING_BOOLEAN: "#467faf",
    T.OPERATOR: "#e4e400",
    T.BACKGROUND: "#000",
    T.OTHER: "#d5d500",
})

SWAP_OFF = new_style("swapoff", {
    T.BACKGROUND: "#lightgray bg:#black",
    T.NUMBER: "bold #ansiyellow",
    T.COMMENT: "#ansiteal",
    T.COMMENT_PREPROC: "bold #ansigreen",
    T.STRING: "bold #ansiturquoise",
    T.KEYWORD: "bold #ansiwhite",
    T.NAME_KEYWORD: "bold #ansiwhite",
    T.NAME_BUILTIN: "bold #ansiwhite",
    T.GENERIC_HEADING: "bold",
    T.GENERIC_SUBHEADING: "bold",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_UNDERLINE: "underline",
    T.NAME_TAG: "bold",
    T.NAME_ATTRIBUTE: "#ansiteal",
    T.ERROR: "#ansired",
    T.LITERAL_DATE: "bold #ansiyellow",
})


def all_styles() -> list[Style]:
    """Every style defined in this module."""
    return [
        ABAP,
        ALGOL,
        ALGOL_NU,
        ARDUINO,
        AUTUMN,
        BORLAND,
        BLACK_WHITE,
        IGOR,
        HR_DARK,
        HR_HIGH_CONTRAST,
        SWAP_OFF,
    ]