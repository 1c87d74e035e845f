"""Lexers that rewrite the tokens produced by another lexer."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator

from .lexer import TokeniseOptions
from .types import Token, TokenType


class RemappingLexer:
    """Wraps a lexer, mapping each token to a possibly empty list of tokens."""

    def __init__(self, lexer: Any, mapper: Callable[[Token], Iterable[Token]]) -> None:
        self.lexer = lexer
        self.mapper = mapper

    def analyse_text(self, text: str) -> float:
        return self.lexer.analyse_text(text)

    def set_analyser(self, analyser: Callable[[str], float]) -> RemappingLexer:
        self.lexer.set_analyser(analyser)
        return self

    def set_registry(self, registry: Any) -> RemappingLexer:
        self.lexer.set_registry(registry)
        return self

    def config(self) -> Any:
        return self.lexer.config()

    def tokenise(self, options: TokeniseOptions | None, text: str) -> Iterator[Token]:
        """Tokenise text with the wrapped lexer and remap each token."""
        tokens = self.lexer.tokenise(options, text)
        return (mapped for token in tokens for mapped in self.mapper(token))


@dataclass(frozen=True)
class TypeMap:
    """Maps tokens of type from_ to type to, for the given words or for all."""

    from_: TokenType
    to: TokenType
    words: tuple[str, ...] = field(default=())


def type_remapping_lexer(lexer: Any, mapping: Iterable[TypeMap]) -> RemappingLexer:
    """Wrap lexer so that token types are remapped according to mapping."""
    lut: dict[TokenType, dict[str, TokenType]] = {}
    for entry in mapping:
        by_word = lut.setdefault(entry.from_, {})
        if not entry.words:
            by_word[""] = entry.to
        else:
            for word in entry.words:
                by_word[word] = entry.to

    def mapper(token: Token) -> list[Token]:
        by_word = lut.get(token.type)
        if by_word is not None:
            if token.value in by_word:
                token = dataclasses.replace(token, type=by_word[token.value])
            elif "" in by_word:
                token = dataclasses.replace(token, type=by_word[""])
        return [token]

    return RemappingLexer(lexer, mapper)