"""The registry of built-in styles."""

from __future__ import annotations

from ..style import Style
from . import set_four, set_one, set_three, set_two

REGISTRY: dict[str, Style] = {}


def register(style: Style) -> Style:
    """Add a style to the registry under its name and return it."""
    REGISTRY[style.name] = style
    return style


def names() -> list[str]:
    """Sorted names of all registered styles."""
    return sorted(REGISTRY)


def get(name: str) -> Style:
    """The named style, or FALLBACK when there is none."""
    return REGISTRY.get(name, FALLBACK)


for _module in (set_one, set_two, set_three, set_four):
    for _style in _module.all_styles():
        register(_style)

# Reassign to change the style returned for unknown names.
FALLBACK: Style = set_one.SWAP_OFF