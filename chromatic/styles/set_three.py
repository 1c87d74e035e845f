"""Built-in styles: lovelace, manni, monokai, monokailight, murphy, native,
nord, onesenterprise, paraiso-dark, paraiso-light and pastie."""

from __future__ import annotations

from ..style import Style, new_style
from ..types import TokenType as T

LOVELACE = new_style("lovelace", {
    T.TEXT_WHITESPACE: "#a89028",
    T.COMMENT: "italic #888888",
    T.COMMENT_HASHBANG: "#287088",
    T.COMMENT_MULTILINE: "#888888",
    T.COMMENT_PREPROC: "noitalic #289870",
    T.KEYWORD: "#2838b0",
    T.KEYWORD_CONSTANT: "italic #444444",
    T.KEYWORD_DECLARATION: "italic",
    T.KEYWORD_TYPE: "italic",
    T.OPERATOR: "#666666",
    T.OPERATOR_WORD: "#a848a8",
    T.PUNCTUATION: "#888888",
    T.NAME_ATTRIBUTE: "#388038",
    T.NAME_BUILTIN: "#388038",
    T.NAME_BUILTIN_PSEUDO: "italic",
    T.NAME_CLASS: "#287088",
    T.NAME_CONSTANT: "#b85820",
    T.NAME_DECORATOR: "#287088",
    T.NAME_ENTITY: "#709030",
    T.NAME_EXCEPTION: "#908828",
    T.NAME_FUNCTION: "#785840",
    T.NAME_FUNCTION_MAGIC: "#b85820",
    T.NAME_LABEL: "#289870",
    T.NAME_NAMESPACE: "#289870",
    T.NAME_TAG: "#2838b0",
    T.NAME_VARIABLE: "#b04040",
    T.NAME_VARIABLE_GLOBAL: "#908828",
    T.NAME_VARIABLE_MAGIC: "#b85820",
    T.LITERAL_STRING: "#b83838",
    T.LITERAL_STRING_AFFIX: "#444444",
    T.LITERAL_STRING_CHAR: "#a848a8",
    T.LITERAL_STRING_DELIMITER: "#b85820",
    T.LITERAL_STRING_DOC: "italic #b85820",
    T.LITERAL_STRING_ESCAPE: "#709030",
    T.LITERAL_STRING_INTERPOL: "underline",
    T.LITERAL_STRING_OTHER: "#a848a8",
    T.LITERAL_STRING_REGEX: "#a848a8",
    T.LITERAL_NUMBER: "#444444",
    T.GENERIC_DELETED: "#c02828",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_ERROR: "#c02828",
    T.GENERIC_HEADING: "#666666",
    T.GENERIC_SUBHEADING: "#444444",
    T.GENERIC_INSERTED: "#388038",
    T.GENERIC_OUTPUT: "#666666",
    T.GENERIC_PROMPT: "#444444",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_TRACEBACK: "#2838b0",
    T.GENERIC_UNDERLINE: "underline",
    T.ERROR: "bg:#a848a8",
    T.BACKGROUND: " bg:#ffffff",
})

MANNI = new_style("manni", {
    T.TEXT_WHITESPACE: "#bbbbbb",
    T.COMMENT: "italic #0099FF",
    T.COMMENT_PREPROC: "noitalic #009999",
    T.COMMENT_SPECIAL: "bold",
    T.KEYWORD: "bold #006699",
    T.KEYWORD_PSEUDO: "nobold",
    T.KEYWORD_TYPE: "#007788",
    T.OPERATOR: "#555555",
    T.OPERATOR_WORD: "bold #000000",
    T.NAME_BUILTIN: "#336666",
    T.NAME_FUNCTION: "#CC00FF",
    T.NAME_CLASS: "bold #00AA88",
    T.NAME_NAMESPACE: "bold #00CCFF",
    T.NAME_EXCEPTION: "bold #CC0000",
    T.NAME_VARIABLE: "#003333",
    T.NAME_CONSTANT: "#336600",
    T.NAME_LABEL: "#9999FF",
    T.NAME_ENTITY: "bold #999999",
    T.NAME_ATTRIBUTE: "#330099",
    T.NAME_TAG: "bold #330099",
    T.NAME_DECORATOR: "#9999FF",
    T.LITERAL_STRING: "#CC3300",
    T.LITERAL_STRING_DOC: "italic",
    T.LITERAL_STRING_INTERPOL: "#AA0000",
    T.LITERAL_STRING_ESCAPE: "bold #CC3300",
    T.LITERAL_STRING_REGEX: "#33AAAA",
    T.LITERAL_STRING_SYMBOL: "#FFCC33",
    T.LITERAL_STRING_OTHER: "#CC3300",
    T.LITERAL_NUMBER: "#FF6600",
    T.GENERIC_HEADING: "bold #003300",
    T.GENERIC_SUBHEADING: "bold #003300",
    T.GENERIC_DELETED: "border:#CC0000 bg:#FFCCCC",
    T.GENERIC_INSERTED: "border:#00CC00 bg:#CCFFCC",
    T.GENERIC_ERROR: "#FF0000",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_PROMPT: "bold #000099",
    T.GENERIC_OUTPUT: "#AAAAAA",
    T.GENERIC_TRACEBACK: "#99CC66",
    T.GENERIC_UNDERLINE: "underline",
    T.ERROR: "bg:#FFAAAA #AA0000",
    T.BACKGROUND: " bg:#f0f3f3",
})

MONOKAI = new_style("monokai", {
    T.TEXT: "#f8f8f2",
    T.ERROR: "#960050 bg:#1e0010",
    T.COMMENT: "#75715e",
    T.KEYWORD: "#66d9ef",
    T.KEYWORD_NAMESPACE: "#f92672",
    T.OPERATOR: "#f92672",
    T.PUNCTUATION: "#f8f8f2",
    T.NAME: "#f8f8f2",
    T.NAME_ATTRIBUTE: "#a6e22e",
    T.NAME_CLASS: "#a6e22e",
    T.NAME_CONSTANT: "#66d9ef",
    T.NAME_DECORATOR: "#a6e22e",
    T.NAME_EXCEPTION: "#a6e22e",
    T.NAME_FUNCTION: "#a6e22e",
    T.NAME_OTHER: "#a6e22e",
    T.NAME_TAG: "#f92672",
    T.LITERAL_NUMBER: "#ae81ff",
    T.LITERAL: "#ae81ff",
    T.LITERAL_DATE: "#e6db74",
    T.LITERAL_STRING: "#e6db74",
    T.LITERAL_STRING_ESCAPE: "#ae81ff",
    T.GENERIC_DELETED: "#f92672",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_INSERTED: "#a6e22e",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_SUBHEADING: "#75715e",
    T.BACKGROUND: "bg:#272822",
})

MONOKAI_LIGHT = new_style("monokailight", {
    T.TEXT: "#272822",
    T.ERROR: "#960050 bg:#1e0010",
    T.COMMENT: "#75715e",
    T.KEYWORD: "#00a8c8",
    T.KEYWORD_NAMESPACE: "#f92672",
    T.OPERATOR: "#f92672",
    T.PUNCTUATION: "#111111",
    T.NAME: "#111111",
    T.NAME_ATTRIBUTE: "#75af00",
    T.NAME_CLASS: "#75af00",
    T.NAME_CONSTANT: "#00a8c8",
    T.NAME_DECORATOR: "#75af00",
    T.NAME_EXCEPTION: "#75af00",
    T.NAME_FUNCTION: "#75af00",
    T.NAME_OTHER: "#75af00",
    T.NAME_TAG: "#f92672",
    T.LITERAL_NUMBER: "#ae81ff",
    T.LITERAL: "#ae81ff",
    T.LITERAL_DATE: "#d88200",
    T.LITERAL_STRING: "#d88200",
    T.LITERAL_STRING_ESCAPE: "#8045FF",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_STRONG: "bold",
    T.BACKGROUND: " bg:#fafafa",
})

MURPHY = new_style("murphy", {
    T.TEXT_WHITESPACE: "#bbbbbb",
    T.COMMENT: "#666 italic",
    T.COMMENT_PREPROC: "#579 noitalic",
    T.COMMENT_SPECIAL: "#c00 bold",
    T.KEYWORD: "bold #289",
    T.KEYWORD_PSEUDO: "#08f",
    T.KEYWORD_TYPE: "#66f",
    T.OPERATOR: "#333",
    T.OPERATOR_WORD: "bold #000",
    T.NAME_BUILTIN: "#072",
    T.NAME_FUNCTION: "bold #5ed",
    T.NAME_CLASS: "bold #e9e",
    T.NAME_NAMESPACE: "bold #0e84b5",
    T.NAME_EXCEPTION: "bold #F00",
    T.NAME_VARIABLE: "#036",
    T.NAME_VARIABLE_INSTANCE: "#aaf",
    T.NAME_VARIABLE_CLASS: "#ccf",
    T.NAME_VARIABLE_GLOBAL: "#f84",
    T.NAME_CONSTANT: "bold #5ed",
    T.NAME_LABEL: "bold #970",
    T.NAME_ENTITY: "#800",
    T.NAME_ATTRIBUTE: "#007",
    T.NAME_TAG: "#070",
    T.NAME_DECORATOR: "bold #555",
    T.LITERAL_STRING: "bg:#e0e0ff",
    T.LITERAL_STRING_CHAR: "#88F bg:",
    T.LITERAL_STRING_DOC: "#D42 bg:",
    T.LITERAL_STRING_INTERPOL: "bg:#eee",
    T.LITERAL_STRING_ESCAPE: "bold #666",
    T.LITERAL_STRING_REGEX: "bg:#e0e0ff #000",
    T.LITERAL_STRING_SYMBOL: "#fc8 bg:",
    T.LITERAL_STRING_OTHER: "#f88",
    T.LITERAL_NUMBER: "bold #60E",
    T.LITERAL_NUMBER_INTEGER: "bold #66f",
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

NATIVE = new_style("native", {
    T.BACKGROUND: "#d0d0d0 bg:#202020",
    T.TEXT_WHITESPACE: "#666666",
    T.COMMENT: "italic #999999",
    T.COMMENT_PREPROC: "noitalic bold #cd2828",
    T.COMMENT_SPECIAL: "noitalic bold #e50808 bg:#520000",
    T.KEYWORD: "bold #6ab825",
    T.KEYWORD_PSEUDO: "nobold",
    T.OPERATOR_WORD: "bold #6ab825",
    T.LITERAL_STRING: "#ed9d13",
    T.LITERAL_STRING_OTHER: "#ffa500",
    T.LITERAL_NUMBER: "#3677a9",
    T.NAME_BUILTIN: "#24909d",
    T.NAME_VARIABLE: "#40ffff",
    T.NAME_CONSTANT: "#40ffff",
    T.NAME_CLASS: "underline #447fcf",
    T.NAME_FUNCTION: "#447fcf",
    T.NAME_NAMESPACE: "underline #447fcf",
    T.NAME_EXCEPTION: "#bbbbbb",
    T.NAME_TAG: "bold #6ab825",
    T.NAME_ATTRIBUTE: "#bbbbbb",
    T.NAME_DECORATOR: "#ffa500",
    T.GENERIC_HEADING: "bold #ffffff",
    T.GENERIC_SUBHEADING: "underline #ffffff",
    T.GENERIC_DELETED: "#d22323",
    T.GENERIC_INSERTED: "#589819",
    T.GENERIC_ERROR: "#d22323",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_PROMPT: "#aaaaaa",
    T.GENERIC_OUTPUT: "#cccccc",
    T.GENERIC_TRACEBACK: "#d22323",
    T.GENERIC_UNDERLINE: "underline",
    T.ERROR: "bg:#e3d2d2 #a61717",
})

# The Nord palette: an arctic, north-bluish set of colours.
_NORD0 = "#2e3440"
_NORD3 = "#4c566a"
_NORD3B = "#616e87"
_NORD4 = "#d8dee9"
_NORD6 = "#eceff4"
_NORD7 = "#8fbcbb"
_NORD8 = "#88c0d0"
_NORD9 = "#81a1c1"
_NORD10 = "#5e81ac"
_NORD11 = "#bf616a"
_NORD12 = "#d08770"
_NORD13 = "#ebcb8b"
_NORD14 = "#a3be8c"
_NORD15 = "#b48ead"

NORD = new_style("nord", {
    T.TEXT_WHITESPACE: _NORD4,
    T.COMMENT: "italic " + _NORD3B,
    T.COMMENT_PREPROC: _NORD10,
    T.KEYWORD: "bold " + _NORD9,
    T.KEYWORD_PSEUDO: "nobold " + _NORD9,
    T.KEYWORD_TYPE: "nobold " + _NORD9,
    T.OPERATOR: _NORD9,
    T.OPERATOR_WORD: "bold " + _NORD9,
    T.NAME: _NORD4,
    T.NAME_BUILTIN: _NORD9,
    T.NAME_FUNCTION: _NORD8,
    T.NAME_CLASS: _NORD7,
    T.NAME_NAMESPACE: _NORD7,
    T.NAME_EXCEPTION: _NORD11,
    T.NAME_VARIABLE: _NORD4,
    T.NAME_CONSTANT: _NORD7,
    T.NAME_LABEL: _NORD7,
    T.NAME_ENTITY: _NORD12,
    T.NAME_ATTRIBUTE: _NORD7,
    T.NAME_TAG: _NORD9,
    T.NAME_DECORATOR: _NORD12,
    T.PUNCTUATION: _NORD6,
    T.LITERAL_STRING: _NORD14,
    T.LITERAL_STRING_DOC: _NORD3B,
    T.LITERAL_STRING_INTERPOL: _NORD14,
    T.LITERAL_STRING_ESCAPE: _NORD13,
    T.LITERAL_STRING_REGEX: _NORD13,
    T.LITERAL_STRING_SYMBOL: _NORD14,
    T.LITERAL_STRING_OTHER: _NORD14,
    T.LITERAL_NUMBER: _NORD15,
    T.GENERIC_HEADING: "bold " + _NORD8,
    T.GENERIC_SUBHEADING: "bold " + _NORD8,
    T.GENERIC_DELETED: _NORD11,
    T.GENERIC_INSERTED: _NORD14,
    T.GENERIC_ERROR: _NORD11,
    T.GENERIC_EMPH: "italic",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_PROMPT: "bold " + _NORD3,
    T.GENERIC_OUTPUT: _NORD4,
    T.GENERIC_TRACEBACK: _NORD11,
    T.ERROR: _NORD11,
    T.BACKGROUND: _NORD4 + " bg:" + _NORD0,
})

# The 1S:Designer colour palette.
ONES_ENTERPRISE = new_style("onesenterprise", {
    T.TEXT: "#000000",
    T.COMMENT: "#008000",
    T.COMMENT_PREPROC: "#963200",
    T.OPERATOR: "#FF0000",
    T.KEYWORD: "#FF0000",
    T.PUNCTUATION: "#FF0000",
    T.LITERAL_STRING: "#000000",
    T.NAME: "#0000FF",
})

PARAISO_DARK = new_style("paraiso-dark", {
    T.TEXT: "#e7e9db",
    T.ERROR: "#ef6155",
    T.COMMENT: "#776e71",
    T.KEYWORD: "#815ba4",
    T.KEYWORD_NAMESPACE: "#5bc4bf",
    T.KEYWORD_TYPE: "#fec418",
    T.OPERATOR: "#5bc4bf",
    T.PUNCTUATION: "#e7e9db",
    T.NAME: "#e7e9db",
    T.NAME_ATTRIBUTE: "#06b6ef",
    T.NAME_CLASS: "#fec418",
    T.NAME_CONSTANT: "#ef6155",
    T.NAME_DECORATOR: "#5bc4bf",
    T.NAME_EXCEPTION: "#ef6155",
    T.NAME_FUNCTION: "#06b6ef",
    T.NAME_NAMESPACE: "#fec418",
    T.NAME_OTHER: "#06b6ef",
    T.NAME_TAG: "#5bc4bf",
    T.NAME_VARIABLE: "#ef6155",
    T.LITERAL_NUMBER: "#f99b15",
    T.LITERAL: "#f99b15",
    T.LITERAL_DATE: "#48b685",
    T.LITERAL_STRING: "#48b685",
    T.LITERAL_STRING_CHAR: "#e7e9db",
    T.LITERAL_STRING_DOC: "#776e71",
    T.LITERAL_STRING_ESCAPE: "#f99b15",
    T.LITERAL_STRING_INTERPOL: "#f99b15",
    T.GENERIC_DELETED: "#ef6155",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_HEADING: "bold #e7e9db",
    T.GENERIC_INSERTED: "#48b685",
    T.GENERIC_PROMPT: "bold #776e71",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_SUBHEADING: "bold #5bc4bf",
    T.BACKGROUND: "bg:#2f1e2e",
})

PARAISO_LIGHT = new_style("paraiso-light", {
    T.TEXT: "#2f1e2e",
    T.ERROR: "#ef6155",
    T.COMMENT: "#8d8687",
    T.KEYWORD: "#815ba4",
    T.KEYWORD_NAMESPACE: "#5bc4bf",
    T.KEYWORD_TYPE: "#fec418",
    T.OPERATOR: "#5bc4bf",
    T.PUNCTUATION: "#2f1e2e",
    T.NAME: "#2f1e2e",
    T.NAME_ATTRIBUTE: "#06b6ef",
    T.NAME_CLASS: "#fec418",
    T.NAME_CONSTANT: "#ef6155",
    T.NAME_DECORATOR: "#5bc4bf",
    T.NAME_EXCEPTION: "#ef6155",
    T.NAME_FUNCTION: "#06b6ef",
    T.NAME_NAMESPACE: "#fec418",
    T.NAME_OTHER: "#06b6ef",
    T.NAME_TAG: "#5bc4bf",
    T.NAME_VARIABLE: "#ef6155",
    T.LITERAL_NUMBER: "#f99b15",
    T.LITERAL: "#f99b15",
    T.LITERAL_DATE: "#48b685",
    T.LITERAL_STRING: "#48b685",
    T.LITERAL_STRING_CHAR: "#2f1e2e",
    T.LITERAL_STRING_DOC: "#8d8687",
    T.LITERAL_STRING_ESCAPE: "#f99b15",
    T.LITERAL_STRING_INTERPOL: "#f99b15",
    T.GENERIC_DELETED: "#ef6155",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_HEADING: "bold #2f1e2e",
    T.GENERIC_INSERTED: "#48b685",
    T.GENERIC_PROMPT: "bold #8d8687",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_SUBHEADING: "bold #5bc4bf",
    T.BACKGROUND: "bg:#e7e9db",
})

PASTIE = new_style("pastie", {
    T.TEXT_WHITESPACE: "#bbbbbb",
    T.COMMENT: "#888888",
    T.COMMENT_PREPROC: "bold #cc0000",
    T.COMMENT_SPECIAL: "bg:#fff0f0 bold #cc0000",
    T.LITERAL_STRING: "bg:#fff0f0 #dd2200",
    T.LITERAL_STRING_REGEX: "bg:#fff0ff #008800",
    T.LITERAL_STRING_OTHER: "bg:#f0fff0 #22bb22",
    T.LITERAL_STRING_SYMBOL: "#aa6600",
    T.LITERAL_STRING_INTERPOL: "#3333bb",
    T.LITERAL_STRING_ESCAPE: "#0044dd",
    T.OPERATOR_WORD: "#008800",
    T.KEYWORD: "bold #008800",
    T.KEYWORD_PSEUDO: "nobold",
    T.KEYWORD_TYPE: "#888888",
    T.NAME_CLASS: "bold #bb0066",
    T.NAME_EXCEPTION: "bold #bb0066",
    T.NAME_FUNCTION: "bold #0066bb",
    T.NAME_PROPERTY: "bold #336699",
    T.NAME_NAMESPACE: "bold #bb0066",
    T.NAME_BUILTIN: "#003388",
    T.NAME_VARIABLE: "#336699",
    T.NAME_VARIABLE_CLASS: "#336699",
    T.NAME_VARIABLE_INSTANCE: "#3333bb",
    T.NAME_VARIABLE_GLOBAL: "#dd7700",
    T.NAME_CONSTANT: "bold #003366",
    T.NAME_TAG: "bold #bb0066",
    T.NAME_ATTRIBUTE: "#336699",
    T.NAME_DECORATOR: "#555555",
    T.NAME_LABEL: "italic #336699",
    T.LITERAL_NUMBER: "bold #0000DD",
    T.GENERIC_HEADING: "#333",
    T.GENERIC_SUBHEADING: "#666",
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


def all_styles() -> list[Style]:
    """Every style defined in this module."""
    return [
        LOVELACE,
        MANNI,
        MONOKAI,
        MONOKAI_LIGHT,
        MURPHY,
        NATIVE,
        NORD,
        ONES_ENTERPRISE,
        PARAISO_DARK,
        PARAISO_LIGHT,
        PASTIE,
    ]