"""Colours, style entries and styles mapping token types to them."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Callable, Mapping

from .types import TokenType

_ANSI_TO_RGB = {
    "#ansiblack": "000000",
    "#ansidarkred": "7f0000",
    "#ansidarkgreen": "007f00",
    "#ansibrown": "7f7fe0",
    "#ansidarkblue": "00007f",
    "#ansipurple": "7f007f",
    "#ansiteal": "007f7f",
    "#ansilightgray": "e5e5e5",
    "#ansidarkgray": "555555",
    "#ansired": "ff0000",
    "#ansigreen": "00ff00",
    "#ansiyellow": "ffff00",
    "#ansiblue": "0000ff",
    "#ansifuchsia": "ff00ff",
    "#ansiturquoise": "00ffff",
    "#ansiwhite": "ffffff",
    "#black": "000000",
    "#darkred": "7f0000",
    "#darkgreen": "007f00",
    "#brown": "7f7fe0",
    "#darkblue": "00007f",
    "#purple": "7f007f",
    "#teal": "007f7f",
    "#lightgray": "e5e5e5",
    "#darkgray": "555555",
    "#red": "ff0000",
    "#green": "00ff00",
    "#yellow": "ffff00",
    "#blue": "0000ff",
    "#fuchsia": "ff00ff",
    "#turquoise": "00ffff",
    "#white": "ffffff",
}

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


class Colour(int):
    """An RGB colour stored as value + 1, so that 0 means "not set"."""

    def __new__(cls, value: int = 0) -> Colour:
        return super().__new__(cls, value)

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Colour:
        return cls((((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)) + 1)

    @property
    def red(self) -> int:
        return ((int(self) - 1) >> 16) & 0xFF

    @property
    def green(self) -> int:
        return ((int(self) - 1) >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return (int(self) - 1) & 0xFF

    def is_set(self) -> bool:
        return int(self) != 0

    def brighten(self, factor: float) -> Colour:
        """Brighten (positive factor) or darken (negative factor) the colour."""
        r, g, b = float(self.red), float(self.green), float(self.blue)
        if factor < 0:
            scale = factor + 1
            r, g, b = r * scale, g * scale, b * scale
        else:
            r = (255 - r) * factor + r
            g = (255 - g) * factor + g
            b = (255 - b) * factor + b
        return Colour.from_rgb(int(r), int(g), int(b))

    def brighten_or_darken(self, factor: float) -> Colour:
        """Brighten a dark colour or darken a light one by factor."""
        if self.brightness() < 0.5:
            return self.brighten(factor)
        return self.brighten(-factor)

    def brightness(self) -> float:
        """Rough brightness in the range 0.0 to 1.0."""
        return (self.red + self.green + self.blue) / 255.0 / 3.0

    def clamp_brightness(self, minimum: float, maximum: float) -> Colour:
        """A copy whose brightness falls within [minimum, maximum]."""
        if not self.is_set():
            return self
        minimum = max(minimum, 0.0)
        maximum = min(maximum, 1.0)
        current = self.brightness()
        target = min(max(current, minimum), maximum)
        if current == target:
            return self
        rgb = float(self.red + self.green + self.blue)
        if target > current:
            return self.brighten((target * 255 * 3 - rgb) / (255 * 3 - rgb))
        return self.brighten((target * 255 * 3) / rgb - 1)

    def __str__(self) -> str:
        value = int(self) - 1
        return f"#{value:06x}" if value >= 0 else f"-{-value:06x}"

    def __repr__(self) -> str:
        return f"Colour(0x{int(self):x})"


def _normalise_colour(colour: str) -> str:
    if colour in _ANSI_TO_RGB:
        return _ANSI_TO_RGB[colour]
    if colour.startswith("#"):
        colour = colour[1:]
        if len(colour) == 3:
            return "".join(ch * 2 for ch in colour)
    return colour


def parse_colour(colour: str) -> Colour:
    """Parse "#rgb", "#rrggbb" or an ANSI colour name; unset if invalid."""
    text = _normalise_colour(colour)
    if not _HEX_RE.fullmatch(text):
        return Colour(0)
    value = int(text, 16)
    if value > 0xFFFFFFFF:
        return Colour(0)
    return Colour(value + 1)


class Trilean(IntEnum):
    """Three-way value used for inheritable style flags."""

    PASS = 0
    YES = 1
    NO = 2

    def __str__(self) -> str:
        return self.name.capitalize()

    def prefix(self, s: str) -> str:
        """s when YES, "no" + s when NO, else the empty string."""
        if self is Trilean.YES:
            return s
        if self is Trilean.NO:
            return "no" + s
        return ""


@dataclass(frozen=True)
class StyleEntry:
    """The styling for one token type."""

    colour: Colour = Colour(0)
    background: Colour = Colour(0)
    border: Colour = Colour(0)
    bold: Trilean = Trilean.PASS
    italic: Trilean = Trilean.PASS
    underline: Trilean = Trilean.PASS
    no_inherit: bool = False

    def __str__(self) -> str:
        out = []
        if self.bold is not Trilean.PASS:
            out.append(self.bold.prefix("bold"))
        if self.italic is not Trilean.PASS:
            out.append(self.italic.prefix("italic"))
        if self.underline is not Trilean.PASS:
            out.append(self.underline.prefix("underline"))
        if self.no_inherit:
            out.append("noinherit")
        if self.colour.is_set():
            out.append(str(self.colour))
        if self.background.is_set():
            out.append("bg:" + str(self.background))
        if self.border.is_set():
            out.append("border:" + str(self.border))
        return " ".join(out)

    def sub(self, other: StyleEntry) -> StyleEntry:
        """Keep only the attributes of self that differ from other."""
        return StyleEntry(
            colour=self.colour if other.colour != self.colour else Colour(0),
            background=self.background if other.background != self.background else Colour(0),
            border=self.border if other.border != self.border else Colour(0),
            bold=self.bold if other.bold != self.bold else Trilean.PASS,
            italic=self.italic if other.italic != self.italic else Trilean.PASS,
            underline=self.underline if other.underline != self.underline else Trilean.PASS,
        )

    def inherit(self, *args: StyleEntry) -> StyleEntry:
        """Fill unset attributes from ancestors, given oldest to newest."""
        out = self
        for ancestor in reversed(args):
            if out.no_inherit:
                return out
            out = replace(
                out,
                colour=out.colour if out.colour.is_set() else ancestor.colour,
                background=out.background if out.background.is_set() else ancestor.background,
                border=out.border if out.border.is_set() else ancestor.border,
                bold=out.bold if out.bold is not Trilean.PASS else ancestor.bold,
                italic=out.italic if out.italic is not Trilean.PASS else ancestor.italic,
                underline=out.underline if out.underline is not Trilean.PASS else ancestor.underline,
            )
        return out

    def is_zero(self) -> bool:
        return self == _ZERO_ENTRY


_ZERO_ENTRY = StyleEntry()


def parse_style_entry(entry: str) -> StyleEntry:
    """Parse a Pygments-style entry such as "bold #f00 bg:#fff"."""
    fields: dict = {}
    for part in entry.split():
        if part == "italic":
            fields["italic"] = Trilean.YES
        elif part == "noitalic":
            fields["italic"] = Trilean.NO
        elif part == "bold":
            fields["bold"] = Trilean.YES
        elif part == "nobold":
            fields["bold"] = Trilean.NO
        elif part == "underline":
            fields["underline"] = Trilean.YES
        elif part == "nounderline":
            fields["underline"] = Trilean.NO
        elif part == "inherit":
            fields["no_inherit"] = False
        elif part == "noinherit":
            fields["no_inherit"] = True
        elif part == "bg:":
            fields["background"] = Colour(0)
        elif part.startswith("bg:#"):
            colour = parse_colour(part[3:])
            if not colour.is_set():
                raise ValueError(f"invalid background colour {part!r}")
            fields["background"] = colour
        elif part.startswith("border:#"):
            colour = parse_colour(part[7:])
            if not colour.is_set():
                raise ValueError(f"invalid border colour {part!r}")
            fields["border"] = colour
        elif part.startswith("#"):
            colour = parse_colour(part)
            if not colour.is_set():
                raise ValueError(f"invalid colour {part!r}")
            fields["colour"] = colour
        else:
            raise ValueError(f"unknown style element {part!r}")
    return StyleEntry(**fields)


class Style:
    """An immutable mapping of token types to style entries."""

    def __init__(
        self,
        name: str,
        entries: Mapping[TokenType, StyleEntry] | None = None,
        parent: Style | None = None,
    ) -> None:
        self.name = name
        self._entries: dict[TokenType, StyleEntry] = dict(entries or {})
        self._parent = parent

    def __repr__(self) -> str:
        return f"Style({self.name!r})"

    def types(self) -> list[TokenType]:
        """Token types styled here or in an ancestor."""
        found = set(self._entries)
        if self._parent is not None:
            found.update(self._parent.types())
        return list(found)

    def builder(self) -> StyleBuilder:
        """A mutable builder deriving from this style."""
        return StyleBuilder(self.name, parent=self)

    def has(self, ttype: TokenType) -> bool:
        """Whether an exact entry exists, or can be synthesised, for ttype."""
        return not self._get(ttype).is_zero() or self._synthesisable(ttype)

    def get(self, ttype: TokenType) -> StyleEntry:
        """The entry for ttype, inheriting from its categories and the background."""
        return self._get(ttype).inherit(
            self._get(TokenType.BACKGROUND),
            self._get(TokenType.TEXT),
            self._get(ttype.category()),
            self._get(ttype.sub_category()),
        )

    def _get(self, ttype: TokenType) -> StyleEntry:
        out = self._entries.get(ttype, _ZERO_ENTRY)
        if out.is_zero() and self._parent is not None:
            return self._parent._get(ttype)
        if out.is_zero() and self._synthesisable(ttype):
            out = self._synthesise(ttype)
        return out

    def _synthesise(self, ttype: TokenType) -> StyleEntry:
        bg = self._get(TokenType.BACKGROUND)
        if ttype is TokenType.LINE_HIGHLIGHT:
            return StyleEntry(background=bg.background.brighten_or_darken(0.1))
        if ttype in (TokenType.LINE_NUMBERS, TokenType.LINE_NUMBERS_TABLE):
            return StyleEntry(colour=bg.colour.brighten_or_darken(0.5))
        return StyleEntry()

    @staticmethod
    def _synthesisable(ttype: TokenType) -> bool:
        return ttype in (
            TokenType.LINE_HIGHLIGHT,
            TokenType.LINE_NUMBERS,
            TokenType.LINE_NUMBERS_TABLE,
        )


class StyleBuilder:
    """A mutable structure for building a Style."""

    def __init__(self, name: str, parent: Style | None = None) -> None:
        self.name = name
        self._entries: dict[TokenType, str] = {}
        self._parent = parent

    def add_all(self, entries: Mapping[TokenType, str]) -> StyleBuilder:
        self._entries.update(entries)
        return self

    def get(self, ttype: TokenType) -> StyleEntry:
        """The current entry for ttype, merged with the parent's."""
        try:
            entry = parse_style_entry(self._entries.get(ttype, ""))
        except ValueError:
            entry = StyleEntry()
        if self._parent is not None:
            entry = entry.inherit(self._parent.get(ttype))
        return entry

    def add(self, ttype: TokenType, entry: str) -> StyleBuilder:
        self._entries[ttype] = entry
        return self

    def add_entry(self, ttype: TokenType, entry: StyleEntry) -> StyleBuilder:
        self._entries[ttype] = str(entry)
        return self

    def transform(self, transform: Callable[[StyleEntry], StyleEntry]) -> StyleBuilder:
        """Replace every defined entry with transform(entry)."""
        types = set(self._entries)
        if self._parent is not None:
            types.update(self._parent.types())
        for ttype in types:
            self.add_entry(ttype, transform(self.get(ttype)))
        return self

    def build(self) -> Style:
        entries = {}
        for ttype, descriptor in self._entries.items():
            try:
                entries[ttype] = parse_style_entry(descriptor)
            except ValueError as exc:
                raise ValueError(f"invalid entry for {ttype}: {exc}") from exc
        return Style(self.name, entries, self._parent)


def new_style(name: str, entries: Mapping[TokenType, str]) -> Style:
    """Build a style from a mapping of token types to entry strings."""
    return StyleBuilder(name).add_all(entries).build()