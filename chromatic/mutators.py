"""Mutators that change the lexer's state stack or its rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .lexer import CompiledRule, LexerError, LexerState, Rule
from .types import Token


@dataclass(frozen=True)
class MutatorFunc:
    """A mutator backed by a plain function of the lexer state."""

    func: Callable[[LexerState], None]

    def mutate(self, state: LexerState) -> None:
        self.func(state)


@dataclass(frozen=True)
class MultiMutator:
    """Applies several mutators in order."""

    mutators: tuple[Any, ...] = ()

    def mutator_kind(self) -> str:
        return "multiple"

    def mutate(self, state: LexerState) -> None:
        for mutator in self.mutators:
            mutator.mutate(state)


@dataclass(frozen=True)
class IncludeMutator:
    """Replaces its rule with the rules of another state."""

    state: str

    def mutator_kind(self) -> str:
        return "include"

    def mutate(self, state: LexerState) -> None:
        raise LexerError(f'should never reach here Include("{self.state}")')

    def mutate_lexer(self, rules: dict[str, list[CompiledRule]], state: str, rule: int) -> None:
        if self.state not in rules:
            raise LexerError(f'invalid include state "{self.state}"')
        current = rules[state]
        rules[state] = current[:rule] + list(rules[self.state]) + current[rule + 1:]


@dataclass(frozen=True)
class CombinedMutator:
    """Creates an anonymous state from several states and pushes it."""

    states: tuple[str, ...] = ()

    def mutator_kind(self) -> str:
        return "combined"

    def mutate(self, state: LexerState) -> None:
        raise LexerError(f"should never reach here Combined({list(self.states)})")

    def mutate_lexer(self, rules: dict[str, list[CompiledRule]], state: str, rule: int) -> None:
        name = "__combined_" + "__".join(self.states)
        if name not in rules:
            combined_rules: list[CompiledRule] = []
            for other in self.states:
                if other not in rules:
                    raise LexerError(f'invalid combine state "{other}"')
                combined_rules.extend(rules[other])
            rules[name] = combined_rules
        rules[state][rule].mutator = push(name)


@dataclass(frozen=True)
class PushMutator:
    """Pushes states onto the stack; "#pop" pops one instead."""

    states: tuple[str, ...] = ()

    def mutator_kind(self) -> str:
        return "push"

    def mutate(self, state: LexerState) -> None:
        if not self.states:
            state.stack.append(state.state)
            return
        for name in self.states:
            if name == "#pop":
                if not state.stack:
                    raise LexerError("nothing to pop")
                state.stack.pop()
            else:
                state.stack.append(name)


@dataclass(frozen=True)
class PopMutator:
    """Pops a number of states from the stack."""

    depth: int = 1

    def mutator_kind(self) -> str:
        return "pop"

    def mutate(self, state: LexerState) -> None:
        if not state.stack:
            raise LexerError("nothing to pop")
        if self.depth > len(state.stack):
            raise LexerError(f"cannot pop {self.depth} states from a stack of {len(state.stack)}")
        del state.stack[len(state.stack) - self.depth:]


def mutators(*args: Any) -> MultiMutator:
    """A mutator applying each of args in order."""
    return MultiMutator(tuple(args))


def include(state: str) -> Rule:
    """A rule that includes the rules of another state."""
    return Rule(mutator=IncludeMutator(state))


def combined(*args: str) -> CombinedMutator:
    """A mutator pushing a new anonymous state combining the given states."""
    return CombinedMutator(tuple(args))


def push(*args: str) -> PushMutator:
    """A mutator pushing states; with none, pushes the current state."""
    return PushMutator(tuple(args))


def pop(n: int) -> PopMutator:
    """A mutator popping n states."""
    return PopMutator(n)


def default(*args: Any) -> Rule:
    """A rule that always matches and applies the given mutators."""
    return Rule(mutator=mutators(*args))


def stringify(*args: Token) -> str:
    """The raw text covered by tokens."""
    return "".join(token.value for token in args)