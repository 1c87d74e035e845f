"""A regular-expression driven lexer state machine."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping, Sequence

import regex

from .types import Token, TokenType

_MATCH_TIMEOUT = 0.25
_META_CHARS = frozenset("\\.+*?()|[]{}^$")
_FLAG_BITS = {"m": regex.MULTILINE, "i": regex.IGNORECASE, "s": regex.DOTALL}


class LexerError(Exception):
    """Raised when a lexer is misconfigured or fails while lexing."""


@dataclass
class Config:
    """Configuration describing a lexer and how it should behave."""

    name: str = ""
    aliases: list[str] = field(default_factory=list)
    filenames: list[str] = field(default_factory=list)
    alias_filenames: list[str] = field(default_factory=list)
    mime_types: list[str] = field(default_factory=list)
    case_insensitive: bool = False
    dot_all: bool = False
    not_multiline: bool = False
    ensure_nl: bool = False
    priority: float = 0.0


@dataclass(frozen=True)
class TokeniseOptions:
    """Options controlling a single tokenisation run."""

    state: str = "root"
    ensure_lf: bool = True
    nested: bool = False


_DEFAULT_OPTIONS = TokeniseOptions()


@dataclass(frozen=True)
class Rule:
    """The fundamental matching unit of the lexer state machine."""

    pattern: str = ""
    type: Any = None
    mutator: Any = None


@dataclass
class CompiledRule:
    """A rule together with its lazily compiled regular expression."""

    pattern: str = ""
    type: Any = None
    mutator: Any = None
    flags: str = ""
    regexp: Any = field(default=None, compare=False, repr=False)


class Rules(dict):
    """A mapping from state name to its sequence of rules."""

    def clone(self) -> Rules:
        """A copy whose rule lists can be changed independently."""
        return Rules({state: list(rules) for state, rules in self.items()})

    def rename(self, old_rule: str, new_rule: str) -> Rules:
        """A clone with the state old_rule renamed to new_rule."""
        out = self.clone()
        out[new_rule] = out.get(old_rule, [])
        out.pop(old_rule, None)
        return out

    def merge(self, rules: Mapping[str, Sequence[Rule]]) -> Rules:
        """A clone of these rules with the states of rules merged over them."""
        out = self.clone()
        out.update(Rules(rules).clone())
        return out


def _quote_meta(word: str) -> str:
    return "".join("\\" + ch if ch in _META_CHARS else ch for ch in word)


def words(prefix: str, suffix: str, *args: str) -> str:
    """A pattern matching any of the literal words, longest first."""
    ordered = sorted(args, key=len, reverse=True)
    return prefix + "(" + "|".join(_quote_meta(word) for word in ordered) + ")" + suffix


def ensure_lf(text: str) -> str:
    """Replace \\r\\n and lone \\r with \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def tokenise(lexer: Any, options: TokeniseOptions | None, text: str) -> list[Token]:
    """Tokenise text with lexer, returning all tokens as a list."""
    return list(lexer.tokenise(options, text))


def _read_class_char(glob: str, index: int) -> int:
    if index >= len(glob) or glob[index] in "-]":
        return -1
    if glob[index] == "\\":
        index += 1
        if index >= len(glob):
            return -1
    return index + 1


def _is_valid_glob(glob: str) -> bool:
    index, length = 0, len(glob)
    while index < length:
        ch = glob[index]
        if ch == "\\":
            if index + 1 >= length:
                return False
            index += 2
            continue
        if ch != "[":
            index += 1
            continue
        index += 1
        if glob[index:index + 1] == "^":
            index += 1
        first = True
        while True:
            if index < length and glob[index] == "]" and not first:
                index += 1
                break
            first = False
            index = _read_class_char(glob, index)
            if index < 0:
                return False
            if index < length and glob[index] == "-":
                index = _read_class_char(glob, index + 1)
                if index < 0:
                    return False
    return True


def _match_rules(
    text: str, pos: int, rules: Sequence[CompiledRule]
) -> tuple[int, CompiledRule, list[str], dict[str, str]] | None:
    for index, rule in enumerate(rules):
        try:
            match = rule.regexp.match(text, pos, timeout=_MATCH_TIMEOUT)
        except TimeoutError:
            continue
        if match is None or match.start() != pos:
            continue
        groups = [match.group(0)] + [group or "" for group in match.groups()]
        named = {str(number): group for number, group in enumerate(groups)}
        named.update({name: value or "" for name, value in match.groupdict().items()})
        return index, rule, groups, named
    return None


class LexerState:
    """The state of a single lexing run; iterating it yields tokens."""

    def __init__(
        self,
        lexer: RegexLexer | None,
        text: str,
        rules: dict[str, list[CompiledRule]],
        stack: Sequence[str],
        options: TokeniseOptions | None = None,
        registry: Any = None,
        newline_added: bool = False,
    ) -> None:
        self.lexer = lexer
        self.registry = registry
        self.text = text
        self.pos = 0
        self.rules = rules
        self.stack = list(stack)
        self.state = ""
        self.rule = 0
        self.groups: list[str] = []
        self.named_groups: dict[str, str] = {}
        self.mutator_context: dict[Any, Any] = {}
        self._options = options or _DEFAULT_OPTIONS
        self._newline_added = newline_added
        self._tokens = self._run()

    def set(self, key: Any, value: Any) -> None:
        """Store a value in the mutator context."""
        self.mutator_context[key] = value

    def get(self, key: Any) -> Any:
        """A value from the mutator context, or None."""
        return self.mutator_context.get(key)

    def tokens(self) -> list[Token]:
        """All remaining tokens."""
        return list(self)

    def __iter__(self) -> LexerState:
        return self

    def __next__(self) -> Token:
        return next(self._tokens)

    def _run(self) -> Iterator[Token]:
        end = len(self.text) - (1 if self._newline_added else 0)
        while self.pos < end and self.stack:
            self.state = self.stack[-1]
            if self.lexer is not None and self.lexer._trace:
                print(
                    f"{self.state}: pos={self.pos}, text={self.text[self.pos:]!r}",
                    file=sys.stderr,
                )
            try:
                selected = self.rules[self.state]
            except KeyError:
                raise LexerError(f"unknown state {self.state}") from None
            found = _match_rules(self.text, self.pos, selected)
            if found is None:
                # A newline flagged as an error resets to the initial state,
                # which keeps highlighting of broken input tolerable.
                if self.text[self.pos] == "\n" and self.state != self._options.state:
                    self.stack = [self._options.state]
                    continue
                self.pos += 1
                yield Token(TokenType.ERROR, self.text[self.pos - 1])
                continue
            self.rule, rule, self.groups, self.named_groups = found
            self.pos += len(self.groups[0])
            if rule.mutator is not None:
                rule.mutator.mutate(self)
            if rule.type is not None:
                yield from rule.type.emit(self.groups, self)
        if self.pos != len(self.text) and not self.stack:
            value = self.text[self.pos:]
            self.pos = len(self.text)
            yield Token(TokenType.ERROR, value)


class RegexLexer:
    """A lexer driven by a state machine of regular-expression rules."""

    def __init__(self, config: Config | None, rules_func: Callable[[], Mapping]) -> None:
        config = config if config is not None else Config()
        for glob in [*config.filenames, *config.alias_filenames]:
            if not _is_valid_glob(glob):
                raise LexerError(
                    f"{config.name}: {glob!r} is not a valid glob: syntax error in pattern"
                )
        self._config = config
        self._rules_func = rules_func
        self._registry: Any = None
        self._analyser: Callable[[str], float] | None = None
        self._trace = False
        self._lock = threading.Lock()
        self._raw_rules: Rules | None = None
        self._compiled_rules: dict[str, list[CompiledRule]] = {}
        self._compiled = False

    def __str__(self) -> str:
        return self._config.name

    def trace(self, enabled: bool) -> RegexLexer:
        """Enable or disable debug tracing to stderr."""
        self._trace = enabled
        return self

    def rules(self) -> Rules:
        """The raw rules of the lexer."""
        self._need_rules()
        return self._raw_rules

    def set_registry(self, registry: Any) -> RegexLexer:
        self._registry = registry
        return self

    def set_analyser(self, analyser: Callable[[str], float]) -> RegexLexer:
        self._analyser = analyser
        return self

    def analyse_text(self, text: str) -> float:
        """A score of how likely text is written in this lexer's language."""
        if self._analyser is not None:
            return self._analyser(text)
        return 0.0

    def set_config(self, config: Config) -> RegexLexer:
        self._config = config
        return self

    def config(self) -> Config:
        return self._config

    def tokenise(self, options: TokeniseOptions | None, text: str) -> LexerState:
        """Start lexing text; the returned state yields tokens."""
        self._need_rules()
        options = options if options is not None else _DEFAULT_OPTIONS
        if options.ensure_lf:
            text = ensure_lf(text)
        newline_added = False
        if not options.nested and self._config.ensure_nl and not text.endswith("\n"):
            text += "\n"
            newline_added = True
        return LexerState(
            lexer=self,
            text=text,
            rules=self._compiled_rules,
            stack=[options.state],
            options=options,
            registry=self._registry,
            newline_added=newline_added,
        )

    def _need_rules(self) -> None:
        with self._lock:
            if self._raw_rules is None:
                self._fetch_rules()
            if not self._compiled:
                self._compile()

    def _fetch_rules(self) -> None:
        rules = Rules(self._rules_func())
        if "root" not in rules:
            raise LexerError('no "root" state')
        flags = ""
        if not self._config.not_multiline:
            flags += "m"
        if self._config.case_insensitive:
            flags += "i"
        if self._config.dot_all:
            flags += "s"
        self._compiled_rules = {
            state: [CompiledRule(rule.pattern, rule.type, rule.mutator, flags) for rule in state_rules]
            for state, state_rules in rules.items()
        }
        self._raw_rules = rules

    def _compile(self) -> None:
        for state, state_rules in self._compiled_rules.items():
            for index, rule in enumerate(state_rules):
                if rule.regexp is not None:
                    continue
                bits = 0
                for flag in rule.flags:
                    bits |= _FLAG_BITS[flag]
                try:
                    rule.regexp = regex.compile(f"(?:{rule.pattern})", bits)
                except regex.error as exc:
                    raise LexerError(f"failed to compile rule {state}.{index}: {exc}") from exc
        seen: dict[int, Any] = {}
        while self._expand_once(seen):
            pass
        self._compiled = True

    def _expand_once(self, seen: dict[int, Any]) -> bool:
        """Apply the first pending lexer mutator; False when none remain."""
        for state in list(self._compiled_rules):
            for index, rule in enumerate(self._compiled_rules[state]):
                mutate_lexer = getattr(rule.mutator, "mutate_lexer", None)
                if mutate_lexer is None:
                    continue
                if id(rule.mutator) in seen:
                    raise LexerError(
                        f"saw mutator {type(rule.mutator).__name__} twice; this should not happen"
                    )
                seen[id(rule.mutator)] = rule.mutator
                mutate_lexer(self._compiled_rules, state, index)
                return True
        return False