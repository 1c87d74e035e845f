"""Built-in styles: perldoc, pygments, rainbow_dash, rrt, solarized-dark,
solarized-dark256, solarized-light, trac, vim, vs, witchhazel, xcode-dark
and xcode."""

from __future__ import annotations

from ..style import Style, new_style
from ..types import TokenType as T

PERLDOC = new_style("perldoc", {
    T.TEXT_WHITESPACE: "#bbbbbb",
    T.COMMENT: "#228B22",
    T.COMMENT_PREPROC: "#1e889b",
    T.COMMENT_SPECIAL: "#8B008B bold",
    T.LITERAL_STRING: "#CD5555",
    T.LITERAL_STRING_HEREDOC: "#1c7e71 italic",
    T.LITERAL_STRING_REGEX: "#1c7e71",
    T.LITERAL_STRING_OTHER: "#cb6c20",
    T.LITERAL_NUMBER: "#B452CD",
    T.OPERATOR_WORD: "#8B008B",
    T.KEYWORD: "#8B008B bold",
    T.KEYWORD_TYPE: "#00688B",
    T.NAME_CLASS: "#008b45 bold",
    T.NAME_EXCEPTION: "#008b45 bold",
    T.NAME_FUNCTION: "#008b45",
    T.NAME_NAMESPACE: "#008b45 underline",
    T.NAME_VARIABLE: "#00688B",
    T.NAME_CONSTANT: "#00688B",
    T.NAME_DECORATOR: "#707a7c",
    T.NAME_TAG: "#8B008B bold",
    T.NAME_ATTRIBUTE: "#658b00",
    T.NAME_BUILTIN: "#658b00",
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
    T.ERROR: "bg:#e3d2d2 #a61717",
    T.BACKGROUND: " bg:#eeeedd",
})

PYGMENTS = new_style("pygments", {
    T.TEXT_WHITESPACE: "#bbbbbb",
    T.COMMENT: "italic #408080",
    T.COMMENT_PREPROC: "noitalic #BC7A00",

    T.KEYWORD: "bold #008000",
    T.KEYWORD_PSEUDO: "nobold",
    T.KEYWORD_TYPE: "nobold #B00040",

    T.OPERATOR: "#666666",
    T.OPERATOR_WORD: "bold #AA22FF",

    T.NAME_BUILTIN: "#008000",
    T.NAME_FUNCTION: "#0000FF",
    T.NAME_CLASS: "bold #0000FF",
    T.NAME_NAMESPACE: "bold #0000FF",
    T.NAME_EXCEPTION: "bold #D2413A",
    T.NAME_VARIABLE: "#19177C",
    T.NAME_CONSTANT: "#880000",
    T.NAME_LABEL: "#A0A000",
    T.NAME_ENTITY: "bold #999999",
    T.NAME_ATTRIBUTE: "#7D9029",
    T.NAME_TAG: "bold #008000",
    T.NAME_DECORATOR: "#AA22FF",

    T.STRING: "#BA2121",
    T.STRING_DOC: "italic",
    T.STRING_INTERPOL: "bold #BB6688",
    T.STRING_ESCAPE: "bold #BB6622",
    T.STRING_REGEX: "#BB6688",
    T.STRING_SYMBOL: "#19177C",
    T.STRING_OTHER: "#008000",
    T.NUMBER: "#666666",

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
})

RAINBOW_DASH = new_style("rainbow_dash", {
    T.COMMENT: "italic #0080ff",
    T.COMMENT_PREPROC: "noitalic",
    T.COMMENT_SPECIAL: "bold",
    T.ERROR: "bg:#cc0000 #ffffff",
    T.GENERIC_DELETED: "border:#c5060b bg:#ffcccc",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_ERROR: "#ff0000",
    T.GENERIC_HEADING: "bold #2c5dcd",
    T.GENERIC_INSERTED: "border:#00cc00 bg:#ccffcc",
    T.GENERIC_OUTPUT: "#aaaaaa",
    T.GENERIC_PROMPT: "bold #2c5dcd",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_SUBHEADING: "bold #2c5dcd",
    T.GENERIC_TRACEBACK: "#c5060b",
    T.GENERIC_UNDERLINE: "underline",
    T.KEYWORD: "bold #2c5dcd",
    T.KEYWORD_PSEUDO: "nobold",
    T.KEYWORD_TYPE: "#5918bb",
    T.NAME_ATTRIBUTE: "italic #2c5dcd",
    T.NAME_BUILTIN: "bold #5918bb",
    T.NAME_CLASS: "underline",
    T.NAME_CONSTANT: "#318495",
    T.NAME_DECORATOR: "bold #ff8000",
    T.NAME_ENTITY: "bold #5918bb",
    T.NAME_EXCEPTION: "bold #5918bb",
    T.NAME_FUNCTION: "bold #ff8000",
    T.NAME_TAG: "bold #2c5dcd",
    T.LITERAL_NUMBER: "bold #5918bb",
    T.OPERATOR: "#2c5dcd",
    T.OPERATOR_WORD: "bold",
    T.LITERAL_STRING: "#00cc66",
    T.LITERAL_STRING_DOC: "italic",
    T.LITERAL_STRING_ESCAPE: "bold #c5060b",
    T.LITERAL_STRING_OTHER: "#318495",
    T.LITERAL_STRING_SYMBOL: "bold #c5060b",
    T.TEXT: "#4d4d4d",
    T.TEXT_WHITESPACE: "#cbcbcb",
    T.BACKGROUND: " bg:#ffffff",
})

RRT = new_style("rrt", {
    T.COMMENT_PREPROC: "#e5e5e5",
    T.COMMENT: "#00ff00",
    T.KEYWORD_TYPE: "#ee82ee",
    T.KEYWORD: "#ff0000",
    T.LITERAL_NUMBER: "#ff6600",
    T.LITERAL_STRING_SYMBOL: "#ff6600",
    T.LITERAL_STRING: "#87ceeb",
    T.NAME_FUNCTION: "#ffff00",
    T.NAME_CONSTANT: "#7fffd4",
    T.NAME_VARIABLE: "#eedd82",
    T.BACKGROUND: "#f8f8f2 bg:#000000",
})

SOLARIZED_DARK = new_style("solarized-dark", {
    T.KEYWORD: "#719e07",
    T.KEYWORD_CONSTANT: "#CB4B16",
    T.KEYWORD_DECLARATION: "#268BD2",
    T.KEYWORD_RESERVED: "#268BD2",
    T.KEYWORD_TYPE: "#DC322F",
    T.NAME_ATTRIBUTE: "#93A1A1",
    T.NAME_BUILTIN: "#B58900",
    T.NAME_BUILTIN_PSEUDO: "#268BD2",
    T.NAME_CLASS: "#268BD2",
    T.NAME_CONSTANT: "#CB4B16",
    T.NAME_DECORATOR: "#268BD2",
    T.NAME_ENTITY: "#CB4B16",
    T.NAME_EXCEPTION: "#CB4B16",
    T.NAME_FUNCTION: "#268BD2",
    T.NAME_TAG: "#268BD2",
    T.NAME_VARIABLE: "#268BD2",
    T.LITERAL_STRING: "#2AA198",
    T.LITERAL_STRING_BACKTICK: "#586E75",
    T.LITERAL_STRING_CHAR: "#2AA198",
    T.LITERAL_STRING_DOC: "#93A1A1",
    T.LITERAL_STRING_ESCAPE: "#CB4B16",
    T.LITERAL_STRING_HEREDOC: "#93A1A1",
    T.LITERAL_STRING_REGEX: "#DC322F",
    T.LITERAL_NUMBER: "#2AA198",
    T.OPERATOR: "#719e07",
    T.COMMENT: "#586E75",
    T.COMMENT_PREPROC: "#719e07",
    T.COMMENT_SPECIAL: "#719e07",
    T.GENERIC_DELETED: "#DC322F",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_ERROR: "#DC322F bold",
    T.GENERIC_HEADING: "#CB4B16",
    T.GENERIC_INSERTED: "#719e07",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_SUBHEADING: "#268BD2",
    T.BACKGROUND: "#93A1A1 bg:#002B36",
    T.OTHER: "#CB4B16",
})

SOLARIZED_DARK256 = new_style("solarized-dark256", {
    T.KEYWORD: "#5f8700",
    T.KEYWORD_CONSTANT: "#d75f00",
    T.KEYWORD_DECLARATION: "#0087ff",
    T.KEYWORD_NAMESPACE: "#d75f00",
    T.KEYWORD_RESERVED: "#0087ff",
    T.KEYWORD_TYPE: "#af0000",
    T.NAME_ATTRIBUTE: "#8a8a8a",
    T.NAME_BUILTIN: "#0087ff",
    T.NAME_BUILTIN_PSEUDO: "#0087ff",
    T.NAME_CLASS: "#0087ff",
    T.NAME_CONSTANT: "#d75f00",
    T.NAME_DECORATOR: "#0087ff",
    T.NAME_ENTITY: "#d75f00",
    T.NAME_EXCEPTION: "#af8700",
    T.NAME_FUNCTION: "#0087ff",
    T.NAME_TAG: "#0087ff",
    T.NAME_VARIABLE: "#0087ff",
    T.LITERAL_STRING: "#00afaf",
    T.LITERAL_STRING_BACKTICK: "#4e4e4e",
    T.LITERAL_STRING_CHAR: "#00afaf",
    T.LITERAL_STRING_DOC: "#00afaf",
    T.LITERAL_STRING_ESCAPE: "#af0000",
    T.LITERAL_STRING_HEREDOC: "#00afaf",
    T.LITERAL_STRING_REGEX: "#af0000",
    T.LITERAL_NUMBER: "#00afaf",
    T.OPERATOR: "#8a8a8a",
    T.OPERATOR_WORD: "#5f8700",
    T.COMMENT: "#4e4e4e",
    T.COMMENT_PREPROC: "#5f8700",
    T.COMMENT_SPECIAL: "#5f8700",
    T.GENERIC_DELETED: "#af0000",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_ERROR: "#af0000 bold",
    T.GENERIC_HEADING: "#d75f00",
    T.GENERIC_INSERTED: "#5f8700",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_SUBHEADING: "#0087ff",
    T.BACKGROUND: "#8a8a8a bg:#1c1c1c",
    T.OTHER: "#d75f00",
})

SOLARIZED_LIGHT = new_style("solarized-light", {
    T.TEXT: "bg: #eee8d5 #586e75",
    T.KEYWORD: "#859900",
    T.KEYWORD_CONSTANT: "bold",
    T.KEYWORD_NAMESPACE: "#dc322f bold",
    T.KEYWORD_TYPE: "bold",
    T.NAME: "#268bd2",
    T.NAME_BUILTIN: "#cb4b16",
    T.NAME_CLASS: "#cb4b16",
    T.NAME_TAG: "bold",
    T.LITERAL: "#2aa198",
    T.LITERAL_NUMBER: "bold",
    T.OPERATOR_WORD: "#859900",
    T.COMMENT: "#93a1a1 italic",
    T.GENERIC: "#d33682",
    T.BACKGROUND: " bg:#eee8d5",
})

TRAC = new_style("trac", {
    T.TEXT_WHITESPACE: "#bbbbbb",
    T.COMMENT: "italic #999988",
    T.COMMENT_PREPROC: "bold noitalic #999999",
    T.COMMENT_SPECIAL: "bold #999999",
    T.OPERATOR: "bold",
    T.LITERAL_STRING: "#bb8844",
    T.LITERAL_STRING_REGEX: "#808000",
    T.LITERAL_NUMBER: "#009999",
    T.KEYWORD: "bold",
    T.KEYWORD_TYPE: "#445588",
    T.NAME_BUILTIN: "#999999",
    T.NAME_FUNCTION: "bold #990000",
    T.NAME_CLASS: "bold #445588",
    T.NAME_EXCEPTION: "bold #990000",
    T.NAME_NAMESPACE: "#555555",
    T.NAME_VARIABLE: "#008080",
    T.NAME_CONSTANT: "#008080",
    T.NAME_TAG: "#000080",
    T.NAME_ATTRIBUTE: "#008080",
    T.NAME_ENTITY: "#800080",
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

VIM = new_style("vim", {
    T.BACKGROUND: "#cccccc bg:#000000",
    T.COMMENT: "#000080",
    T.COMMENT_SPECIAL: "bold #cd0000",
    T.KEYWORD: "#cdcd00",
    T.KEYWORD_DECLARATION: "#00cd00",
    T.KEYWORD_NAMESPACE: "#cd00cd",
    T.KEYWORD_TYPE: "#00cd00",
    T.OPERATOR: "#3399cc",
    T.OPERATOR_WORD: "#cdcd00",
    T.NAME_CLASS: "#00cdcd",
    T.NAME_BUILTIN: "#cd00cd",
    T.NAME_EXCEPTION: "bold #666699",
    T.NAME_VARIABLE: "#00cdcd",
    T.LITERAL_STRING: "#cd0000",
    T.LITERAL_NUMBER: "#cd00cd",
    T.GENERIC_HEADING: "bold #000080",
    T.GENERIC_SUBHEADING: "bold #800080",
    T.GENERIC_DELETED: "#cd0000",
    T.GENERIC_INSERTED: "#00cd00",
    T.GENERIC_ERROR: "#FF0000",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_PROMPT: "bold #000080",
    T.GENERIC_OUTPUT: "#888",
    T.GENERIC_TRACEBACK: "#04D",
    T.GENERIC_UNDERLINE: "underline",
    T.ERROR: "border:#FF0000",
})

VISUAL_STUDIO = new_style("vs", {
    T.COMMENT: "#008000",
    T.COMMENT_PREPROC: "#0000ff",
    T.KEYWORD: "#0000ff",
    T.OPERATOR_WORD: "#0000ff",
    T.KEYWORD_TYPE: "#2b91af",
    T.NAME_CLASS: "#2b91af",
    T.LITERAL_STRING: "#a31515",
    T.GENERIC_HEADING: "bold",
    T.GENERIC_SUBHEADING: "bold",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_PROMPT: "bold",
    T.ERROR: "border:#FF0000",
    T.BACKGROUND: " bg:#ffffff",
})

WITCH_HAZEL = new_style("witchhazel", {
    T.TEXT: "#F8F8F2",
    T.TEXT_WHITESPACE: "#A8757B",
    T.ERROR: "#960050 bg:#1e0010",
    T.COMMENT: "#b0bec5",
    T.KEYWORD: "#C2FFDF",
    T.KEYWORD_NAMESPACE: "#FFB8D1",
    T.OPERATOR: "#FFB8D1",
    T.PUNCTUATION: "#F8F8F2",
    T.NAME: "#F8F8F2",
    T.NAME_ATTRIBUTE: "#ceb1ff",
    T.NAME_BUILTIN_PSEUDO: "#80cbc4",
    T.NAME_CLASS: "#ceb1ff",
    T.NAME_CONSTANT: "#C5A3FF",
    T.NAME_DECORATOR: "#ceb1ff",
    T.NAME_EXCEPTION: "#ceb1ff",
    T.NAME_FUNCTION: "#ceb1ff",
    T.NAME_PROPERTY: "#F8F8F2",
    T.NAME_TAG: "#FFB8D1",
    T.NAME_VARIABLE: "#F8F8F2",
    T.NUMBER: "#C5A3FF",
    T.LITERAL: "#ae81ff",
    T.LITERAL_DATE: "#e6db74",
    T.STRING: "#1bc5e0",
    T.GENERIC_DELETED: "#f92672",
    T.GENERIC_EMPH: "italic",
    T.GENERIC_INSERTED: "#a6e22e",
    T.GENERIC_STRONG: "bold",
    T.GENERIC_SUBHEADING: "#75715e",
    T.BACKGROUND: " bg:#433e56",
})

# Palette modelled on the default dark theme of the Xcode editor.
_XC_BACKGROUND = "#1F1F24"
_XC_PLAIN_TEXT = "#FFFFFF"
_XC_COMMENTS = "#6C7986"
_XC_STRINGS = "#FC6A5D"
_XC_NUMBERS = "#D0BF69"
_XC_KEYWORDS = "#FC5FA3"
_XC_PREPROCESSOR = "#FD8F3F"
_XC_TYPE_DECLARATIONS = "#5DD8FF"
_XC_OTHER_DECLARATIONS = "#41A1C0"
_XC_OTHER_FUNCTION_NAMES = "#A167E6"
_XC_OTHER_TYPE_NAMES = "#D0A8FF"

XCODE_DARK = new_style("xcode-dark", {
    T.BACKGROUND: _XC_PLAIN_TEXT + " bg:" + _XC_BACKGROUND,

    T.COMMENT: _XC_COMMENTS,
    T.COMMENT_MULTILINE: _XC_COMMENTS,
    T.COMMENT_PREPROC: _XC_PREPROCESSOR,
    T.COMMENT_SINGLE: _XC_COMMENTS,
    T.COMMENT_SPECIAL: _XC_COMMENTS + " italic",

    T.ERROR: "#960050",

    T.KEYWORD: _XC_KEYWORDS,
    T.KEYWORD_CONSTANT: _XC_KEYWORDS,
    T.KEYWORD_DECLARATION: _XC_KEYWORDS,
    T.KEYWORD_RESERVED: _XC_KEYWORDS,

    T.LITERAL_NUMBER: _XC_NUMBERS,
    T.LITERAL_NUMBER_BIN: _XC_NUMBERS,
    T.LITERAL_NUMBER_FLOAT: _XC_NUMBERS,
    T.LITERAL_NUMBER_HEX: _XC_NUMBERS,
    T.LITERAL_NUMBER_INTEGER: _XC_NUMBERS,
    T.LITERAL_NUMBER_OCT: _XC_NUMBERS,

    T.LITERAL_STRING: _XC_STRINGS,
    T.LITERAL_STRING_ESCAPE: _XC_STRINGS,
    T.LITERAL_STRING_INTERPOL: _XC_PLAIN_TEXT,

    T.NAME: _XC_PLAIN_TEXT,
    T.NAME_BUILTIN: _XC_OTHER_TYPE_NAMES,
    T.NAME_BUILTIN_PSEUDO: _XC_OTHER_FUNCTION_NAMES,
    T.NAME_CLASS: _XC_TYPE_DECLARATIONS,
    T.NAME_FUNCTION: _XC_OTHER_DECLARATIONS,
    T.NAME_VARIABLE: _XC_OTHER_DECLARATIONS,

    T.OPERATOR: _XC_PLAIN_TEXT,

    T.PUNCTUATION: _XC_PLAIN_TEXT,

    T.TEXT: _XC_PLAIN_TEXT,
})

XCODE = new_style("xcode", {
    T.COMMENT: "#177500",
    T.COMMENT_PREPROC: "#633820",
    T.LITERAL_STRING: "#C41A16",
    T.LITERAL_STRING_CHAR: "#2300CE",
    T.OPERATOR: "#000000",
    T.KEYWORD: "#A90D91",
    T.NAME: "#000000",
    T.NAME_ATTRIBUTE: "#836C28",
    T.NAME_CLASS: "#3F6E75",
    T.NAME_FUNCTION: "#000000",
    T.NAME_BUILTIN: "#A90D91",
    T.NAME_BUILTIN_PSEUDO: "#5B269A",
    T.NAME_VARIABLE: "#000000",
    T.NAME_TAG: "#000000",
    T.NAME_DECORATOR: "#000000",
    T.NAME_LABEL: "#000000",
    T.LITERAL: "#1C01CE",
    T.LITERAL_NUMBER: "#1C01CE",
    T.ERROR: "#000000",
    T.BACKGROUND: " bg:#ffffff",
})


def all_styles() -> list[Style]:
    """Every style defined in this module."""
    return [
        PERLDOC,
        PYGMENTS,
        RAINBOW_DASH,
        RRT,
        SOLARIZED_DARK,
        SOLARIZED_DARK256,
        SOLARIZED_LIGHT,
        TRAC,
        VIM,
        VISUAL_STUDIO,
        WITCH_HAZEL,
        XCODE_DARK,
        XCODE,
    ]