from chromatic.style import Trilean, parse_colour
from chromatic.styles.set_one import all_styles
from chromatic.types import TokenType as T


def by_name():
    return {style.name: style for style in all_styles()}


def test_style_names():
    assert set(by_name()) == {
        "abap", "algol", "algol_nu", "arduino", "autumn", "borland",
        "bw", "igor", "hrdark", "hr_high_contrast", "swapoff",
    }
    assert len(all_styles()) == 11


def test_abap_comment():
    entry = by_name()["abap"].get(T.COMMENT)
    assert entry.italic is Trilean.YES
    assert entry.colour == parse_colour("#888")
    assert entry.background == parse_colour("#ffffff")


def test_algol_keyword_and_error_border():
    algol = by_name()["algol"]
    keyword = algol.get(T.KEYWORD)
    assert keyword.underline is Trilean.YES
    assert keyword.bold is Trilean.YES
    assert algol.get(T.ERROR).border == parse_colour("#FF0000")


def test_bw_keyword_pseudo_overrides_bold():
    bw = by_name()["bw"]
    assert bw.get(T.KEYWORD).bold is Trilean.YES
    assert bw.get(T.KEYWORD_PSEUDO).bold is Trilean.NO


def test_swapoff_ansi_colours():
    swapoff = by_name()["swapoff"]
    assert swapoff.get(T.ERROR).colour == parse_colour("#ansired")
    assert swapoff.get(T.BACKGROUND).background == parse_colour("#black")
    assert swapoff.get(T.COMMENT).colour == parse_colour("#ansiteal")


def test_sub_category_inherits_from_category():
    autumn = by_name()["autumn"]
    assert autumn.get(T.LITERAL_STRING_DOUBLE).colour == autumn.get(T.LITERAL_STRING).colour


def test_every_style_has_synthesised_line_entries():
    for style in all_styles():
        assert style.has(T.LINE_HIGHLIGHT)
        assert style.has(T.LINE_NUMBERS)
        assert set(style.types()) >= {T.COMMENT}


def test_every_style_round_trips_through_builder():
    for style in all_styles():
        clone = style.builder().build()
        assert clone.name == style.name
        for ttype in style.types():
            assert clone.get(ttype) == style.get(ttype)