"""Logical composition of static rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .base import A, ReadAPI, StaticRule, traced
from .exceptions import RuleConstructionError


def _check_rule(rule: object) -> None:
    if not isinstance(rule, StaticRule):
        raise RuleConstructionError(
            f"Expected a StaticRule, got {type(rule).__name__}"
        )


@dataclass(frozen=True, eq=False, slots=True, init=False)
class CompoundRule(StaticRule[A]):
    """Shared behaviour of AND and OR rules over a non-empty rule tuple.

    Static queries ignore the connective: a key or key/value pair is relevant
    to the compound rule when it is relevant to any nested rule.
    """

    nested_rules: tuple[StaticRule[A], ...]

    def __init__(self, nested_rules: Iterable[StaticRule[A]]) -> None:
        rules = tuple(nested_rules)
        if not rules:
            raise RuleConstructionError(
                f"{type(self).__name__} needs at least one nested rule"
            )
        for rule in rules:
            _check_rule(rule)
        object.__setattr__(self, "nested_rules", rules)

    def get_attributes(self) -> A:
        # Payload of the first nested rule, no merging.
        return self.nested_rules[0].get_attributes()

    def key_match(self, key: str) -> bool:
        return any(rule.key_match(key) for rule in self.nested_rules)

    def satisfiable(self, key: str, value: str | None) -> bool:
        return any(rule.satisfiable(key, value) for rule in self.nested_rules)


@dataclass(frozen=True, eq=False, slots=True, init=False)
class AndRule(CompoundRule[A]):
    """Holds when every nested rule holds; stops at the first false one."""

    def satisfied(self, api: ReadAPI) -> bool:
        for rule in self.nested_rules:
            if not rule.satisfied(api):
                return traced(self, False)
        return traced(self, True)


@dataclass(frozen=True, eq=False, slots=True, init=False)
class OrRule(CompoundRule[A]):
    """Holds when any nested rule holds; stops at the first true one."""

    def satisfied(self, api: ReadAPI) -> bool:
        for rule in self.nested_rules:
            if rule.satisfied(api):
                return traced(self, True)
        return traced(self, False)


@dataclass(frozen=True, eq=False, slots=True)
class NotRule(StaticRule[A]):
    """Negation of exactly one nested rule."""

    nested: StaticRule[A]

    def __post_init__(self) -> None:
        _check_rule(self.nested)

    def get_attributes(self) -> A:
        return self.nested.get_attributes()

    def key_match(self, key: str) -> bool:
        return self.nested.key_match(key)

    def satisfiable(self, key: str, value: str | None) -> bool:
        # Relevance of key only; value is ignored and nothing is negated.
        return self.nested.key_match(key)

    def satisfied(self, api: ReadAPI) -> bool:
        return traced(self, not self.nested.satisfied(api))


def all_of(*rules: StaticRule[A]) -> AndRule[A]:
    """Shorthand for ``AndRule(rules)``."""

    return AndRule(rules)


def any_of(*rules: StaticRule[A]) -> OrRule[A]:
    """Shorthand for ``OrRule(rules)``."""

    return OrRule(rules)


def negate(rule: StaticRule[A]) -> NotRule[A]:
    return NotRule(rule)


__all__ = [
    "AndRule",
    "CompoundRule",
    "NotRule",
    "OrRule",
    "all_of",
    "any_of",
    "negate",
]
