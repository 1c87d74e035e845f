"""A registry of lexers, searchable by name, alias, filename and MIME type."""

from __future__ import annotations

import functools
import os
import re
from typing import Any, Iterable

_IGNORED_SUFFIXES = (
    # Editor backups
    "~", ".bak", ".old", ".orig",
    # Debian and derivatives apt/dpkg/ucf backups
    ".dpkg-dist", ".dpkg-old", ".ucf-dist", ".ucf-new", ".ucf-old",
    # Red Hat and derivatives rpm backups
    ".rpmnew", ".rpmorig", ".rpmsave",
    # Build system input/template files
    ".in",
)


def _class_char(glob: str, index: int) -> tuple[str, int]:
    if index >= len(glob) or glob[index] in "-]":
        raise ValueError(f"syntax error in pattern {glob!r}")
    if glob[index] == "\\":
        index += 1
        if index >= len(glob):
            raise ValueError(f"syntax error in pattern {glob!r}")
    return glob[index], index + 1


@functools.lru_cache(maxsize=1024)
def _compile_glob(glob: str) -> re.Pattern:
    """Translate a shell glob into a compiled regular expression."""
    out = []
    index, length = 0, len(glob)
    while index < length:
        ch = glob[index]
        if ch == "*":
            out.append("[^/]*")
            index += 1
        elif ch == "?":
            out.append("[^/]")
            index += 1
        elif ch == "\\":
            if index + 1 >= length:
                raise ValueError(f"syntax error in pattern {glob!r}")
            out.append(re.escape(glob[index + 1]))
            index += 2
        elif ch == "[":
            index += 1
            negated = False
            if index < length and glob[index] == "^":
                negated = True
                index += 1
            ranges = []
            first = True
            while True:
                if index < length and glob[index] == "]" and not first:
                    index += 1
                    break
                first = False
                low, index = _class_char(glob, index)
                high = low
                if index < length and glob[index] == "-":
                    high, index = _class_char(glob, index + 1)
                ranges.append((low, high))
            body = "".join(
                re.escape(low) if low == high else f"{re.escape(low)}-{re.escape(high)}"
                for low, high in ranges
                if low <= high
            )
            if negated:
                out.append(f"[^{body}]" if body else "(?s:.)")
            else:
                out.append(f"[{body}]" if body else "(?!)")
        else:
            out.append(re.escape(ch))
            index += 1
    return re.compile("".join(out) + r"\Z", re.DOTALL)


def _glob_match(glob: str, name: str) -> bool:
    return _compile_glob(glob).match(name) is not None


def _base_name(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip("/" + os.sep)
    if not stripped:
        return os.sep
    return os.path.basename(stripped)


def _best(candidates: list[Any]) -> Any:
    """The candidate with the highest priority, earliest first on ties."""
    if not candidates:
        return None
    return sorted(candidates, key=lambda lexer: -lexer.config().priority)[0]


def _matches_any(globs: Iterable[str], filename: str) -> list[None]:
    hits = []
    for glob in globs:
        if _glob_match(glob, filename) or any(
            _glob_match(glob + suffix, filename) for suffix in _IGNORED_SUFFIXES
        ):
            hits.append(None)
    return hits


class LexerRegistry:
    """A registry of lexers."""

    def __init__(self) -> None:
        self.lexers: list[Any] = []
        self._by_name: dict[str, Any] = {}
        self._by_alias: dict[str, Any] = {}

    def names(self, with_aliases: bool) -> list[str]:
        """Sorted names of all lexers, optionally including aliases."""
        out = []
        for lexer in self.lexers:
            config = lexer.config()
            out.append(config.name)
            if with_aliases:
                out.extend(config.aliases)
        return sorted(out)

    def get(self, name: str) -> Any:
        """A lexer by name, alias or file extension, or None."""
        for key in (name, name.lower()):
            lexer = self._by_name.get(key) or self._by_alias.get(key)
            if lexer is not None:
                return lexer
        candidates = []
        by_extension = self.match("filename." + name)
        if by_extension is not None:
            candidates.append(by_extension)
        by_filename = self.match(name)
        if by_filename is not None:
            candidates.append(by_filename)
        return _best(candidates)

    def match_mime_type(self, mime_type: str) -> Any:
        """The best lexer for a MIME type, or None."""
        matched = [
            lexer
            for lexer in self.lexers
            for known in lexer.config().mime_types
            if known == mime_type
        ]
        return _best(matched)

    def match(self, filename: str) -> Any:
        """The best lexer whose filename globs match filename, or None."""
        filename = _base_name(filename)
        matched = [
            lexer
            for lexer in self.lexers
            for _ in _matches_any(lexer.config().filenames, filename)
        ]
        if matched:
            return _best(matched)
        matched = [
            lexer
            for lexer in self.lexers
            for _ in _matches_any(lexer.config().alias_filenames, filename)
        ]
        return _best(matched)

    def analyse(self, text: str) -> Any:
        """The lexer whose analyser scores text highest, or None."""
        picked = None
        highest = 0.0
        for lexer in self.lexers:
            analyse_text = getattr(lexer, "analyse_text", None)
            if analyse_text is None:
                continue
            weight = analyse_text(text)
            if weight > highest:
                picked = lexer
                highest = weight
        return picked

    def register(self, lexer: Any) -> Any:
        """Add a lexer to the registry and return it."""
        lexer.set_registry(self)
        config = lexer.config()
        self._by_name[config.name] = lexer
        self._by_name[config.name.lower()] = lexer
        for alias in config.aliases:
            self._by_alias[alias] = lexer
            self._by_alias[alias.lower()] = lexer
        self.lexers.append(lexer)
        return lexer