import pytest

from chromatic.style import Trilean, parse_colour, parse_style_entry
from chromatic.styles import set_two
from chromatic.types import TokenType as T

STYLE_NAMES = [
    "colorful",
    "doom-one",
    "doom-one2",
    "emacs",
    "friendly",
    "fruity",
    "github-dark",
    "github",
    "gruvbox-light",
    "gruvbox",
]


def _by_name(name):
    return {style.name: style for style in set_two.all_styles()}[name]


def test_style_names():
    assert [style.name for style in set_two.all_styles()] == STYLE_NAMES


@pytest.mark.parametrize("name", STYLE_NAMES)
def test_every_defined_type_has_entry(name):
    style = {s.name: s for s in set_two.all_styles()}[name]
    types = style.types()
    assert types
    assert all(style.has(ttype) for ttype in types)


@pytest.mark.parametrize("name", STYLE_NAMES)
def test_builder_round_trip_preserves_entries(name):
    style = {s.name: s for s in set_two.all_styles()}[name]
    rebuilt = style.builder().build()
    assert rebuilt.name == style.name
    for ttype in style.types():
        assert rebuilt.get(ttype) == style.get(ttype)


@pytest.mark.parametrize("name", STYLE_NAMES)
def test_entry_strings_reparse(name):
    style = {s.name: s for s in set_two.all_styles()}[name]
    for ttype in style.types():
        entry = style.get(ttype)
        assert parse_style_entry(str(entry)) == entry


@pytest.mark.parametrize("name", STYLE_NAMES)
def test_line_highlight_synthesisable(name):
    style = {s.name: s for s in set_two.all_styles()}[name]
    assert style.has(T.LINE_HIGHLIGHT)
    assert style.has(T.LINE_NUMBERS)


def test_colorful_keyword():
    entry = _by_name("colorful").get(T.KEYWORD)
    assert entry.colour == parse_colour("#080")
    assert entry.bold is Trilean.YES
    assert entry.background == parse_colour("#ffffff")


def test_doom_one_hashbang_inherits_comment():
    entry = _by_name("doom-one").get(T.COMMENT_HASHBANG)
    assert entry.bold is Trilean.YES
    assert entry.italic is Trilean.YES
    assert entry.colour == parse_colour("#8a93a5")


def test_emacs_string_doc_inherits_string_colour():
    entry = _by_name("emacs").get(T.LITERAL_STRING_DOC)
    assert entry.italic is Trilean.YES
    assert entry.colour == parse_colour("#BB4444")


def test_fruity_background_inherited():
    entry = _by_name("fruity").get(T.KEYWORD)
    assert entry.colour == parse_colour("#fb660a")
    assert entry.background == parse_colour("#111111")


def test_github_dark_background_and_class():
    style = _by_name("github-dark")
    background = style.get(T.BACKGROUND)
    assert background.background == parse_colour("#0d1117")
    assert background.colour == parse_colour("#c9d1d9")
    name_class = style.get(T.NAME_CLASS)
    assert name_class.bold is Trilean.YES
    assert name_class.colour == parse_colour("#f0883e")


def test_github_dark_explicit_line_highlight():
    entry = _by_name("github-dark").get(T.LINE_HIGHLIGHT)
    assert entry.colour == parse_colour("#6e7681")


def test_github_string_colour():
    entry = _by_name("github").get(T.LITERAL_STRING)
    assert entry.colour == parse_colour("#d14")


def test_gruvbox_keyword_no_inherit():
    entry = _by_name("gruvbox").get(T.KEYWORD)
    assert entry.no_inherit is True
    assert entry.colour == parse_colour("#fe8019")
    assert not entry.background.is_set()


def test_gruvbox_light_string_subtype_takes_string_colour():
    entry = _by_name("gruvbox-light").get(T.STRING_DOUBLE)
    assert entry.colour == parse_colour("#79740E")
    assert entry.background == parse_colour("#FBF1C7")