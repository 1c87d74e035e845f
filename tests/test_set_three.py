import pytest

from chromatic.style import parse_colour, parse_style_entry
from chromatic.styles.set_three import (
    LOVELACE,
    MANNI,
    MONOKAI,
    MONOKAI_LIGHT,
    NATIVE,
    NORD,
    ONES_ENTERPRISE,
    PARAISO_DARK,
    PARAISO_LIGHT,
    PASTIE,
    all_styles,
)
from chromatic.types import TokenType as T

STYLE_NAMES = [
    "lovelace",
    "manni",
    "monokai",
    "monokailight",
    "murphy",
    "native",
    "nord",
    "onesenterprise",
    "paraiso-dark",
    "paraiso-light",
    "pastie",
]


def test_all_styles_names_in_order():
    assert [style.name for style in all_styles()] == STYLE_NAMES


def test_monokai_direct_colours():
    assert MONOKAI.get(T.KEYWORD).colour == parse_colour("#66d9ef")
    assert MONOKAI.get(T.NAME_TAG).colour == parse_colour("#f92672")
    assert MONOKAI.get(T.BACKGROUND).background == parse_colour("#272822")


def test_monokai_light_text_colour():
    assert MONOKAI_LIGHT.get(T.TEXT).colour == parse_colour("#272822")
    assert MONOKAI_LIGHT.get(T.BACKGROUND).background == parse_colour("#fafafa")


def test_nord_background_uses_palette():
    entry = NORD.get(T.BACKGROUND)
    assert entry.colour == parse_colour("#d8dee9")
    assert entry.background == parse_colour("#2e3440")


def test_nord_keyword_pseudo_is_not_bold():
    entry = NORD.get(T.KEYWORD_PSEUDO)
    assert entry.bold == parse_style_entry("nobold").bold
    assert entry.colour == parse_colour("#81a1c1")


def test_pastie_keyword_pseudo_inherits_colour_from_keyword():
    entry = PASTIE.get(T.KEYWORD_PSEUDO)
    assert entry.colour == parse_colour("#008800")
    assert entry.bold == parse_style_entry("nobold").bold


def test_manni_generic_deleted_border_and_background():
    entry = MANNI.get(T.GENERIC_DELETED)
    assert entry.border == parse_colour("#CC0000")
    assert entry.background == parse_colour("#FFCCCC")


def test_lovelace_builtin_pseudo_italic_without_colour():
    entry = LOVELACE.get(T.NAME_BUILTIN_PSEUDO)
    assert entry.italic == parse_style_entry("italic").italic
    assert not entry.colour.is_set()
    assert entry.background == parse_colour("#ffffff")


def test_native_comment_special_overrides_italic():
    entry = NATIVE.get(T.COMMENT_SPECIAL)
    assert entry.italic == parse_style_entry("noitalic").italic
    assert entry.background == parse_colour("#520000")


def test_onesenterprise_without_background_entry():
    assert ONES_ENTERPRISE.get(T.COMMENT).colour == parse_colour("#008000")
    assert ONES_ENTERPRISE.get(T.NAME_FUNCTION).colour == parse_colour("#0000FF")


def test_paraiso_variants_swap_background():
    assert PARAISO_DARK.get(T.BACKGROUND).background == parse_colour("#2f1e2e")
    assert PARAISO_LIGHT.get(T.BACKGROUND).background == parse_colour("#e7e9db")
    assert PARAISO_DARK.get(T.KEYWORD) == PARAISO_LIGHT.get(T.KEYWORD)


@pytest.mark.parametrize("name", STYLE_NAMES)
def test_builder_round_trip_preserves_entries(name):
    style = {s.name: s for s in all_styles()}[name]
    clone = style.builder().build()
    assert clone.name == style.name
    for ttype in style.types():
        assert clone.get(ttype) == style.get(ttype)


@pytest.mark.parametrize("name", STYLE_NAMES)
def test_styles_synthesise_line_entries(name):
    style = {s.name: s for s in all_styles()}[name]
    assert style.has(T.LINE_HIGHLIGHT)
    assert style.has(T.LINE_NUMBERS)
    assert T.KEYWORD in style.types()