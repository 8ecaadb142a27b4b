"""Rule comparing a single key against a fixed literal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .base import A, BaseRule, ReadAPI, RuleFactory, lookup, traced
from .exceptions import RuleConstructionError


@dataclass(frozen=True, eq=False, slots=True)
class EqualsLiteralRule(BaseRule[A]):
    """Holds when *key* is bound to *value*, or both are absent."""

    key: str
    value: str | None

    def key_match(self, key: str) -> bool:
        return key == self.key

    def satisfiable(self, key: str, value: str | None) -> bool:
        if key != self.key:
            return False
        if value is None or self.value is None:
            return value is None and self.value is None
        return value == self.value

    def satisfied(self, api: ReadAPI) -> bool:
        current = lookup(api, self.key)
        return traced(self, self.satisfiable(self.key, current))


class EqualsLiteralRuleFactory(RuleFactory[A]):
    """Builds :class:`EqualsLiteralRule` instances sharing one literal."""

    def __init__(self, value: str | None) -> None:
        self.value = value

    def new_rule(self, keys: Sequence[str], attributes: A) -> EqualsLiteralRule[A]:
        """Use the first derived key as the rule key."""

        if not keys:
            raise RuleConstructionError(
                "A literal equality rule needs at least one key"
            )
        return EqualsLiteralRule(attributes=attributes, key=keys[0], value=self.value)


__all__ = ["EqualsLiteralRule", "EqualsLiteralRuleFactory"]
