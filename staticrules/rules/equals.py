"""Rule requiring several keys to resolve to the same value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .base import A, BaseRule, ReadAPI, RuleFactory, lookup, traced


@dataclass(frozen=True, eq=False, slots=True)
class EqualsRule(BaseRule[A]):
    """Holds when every key in *keys* resolves to the same value.

    Two absent values are equal. An empty key tuple makes the rule universal:
    it matches every key and is always satisfied.
    """

    keys: tuple[str, ...]

    def key_match(self, key: str) -> bool:
        if not self.keys:
            return True
        return key in self.keys

    def satisfiable(self, key: str, value: str | None) -> bool:
        # Value independent: only tells whether the rule depends on key.
        return self.key_match(key)

    def satisfied(self, api: ReadAPI) -> bool:
        if not self.keys:
            return traced(self, True)
        reference = lookup(api, self.keys[0])
        for key in self.keys[1:]:
            current = lookup(api, key)
            if current is None or reference is None:
                if current is not reference:
                    return traced(self, False)
            elif current != reference:
                return traced(self, False)
        return traced(self, True)


class EqualsRuleFactory(RuleFactory[A]):
    """Builds :class:`EqualsRule` instances, including the universal one."""

    def new_rule(self, keys: Sequence[str], attributes: A) -> EqualsRule[A]:
        return EqualsRule(attributes=attributes, keys=tuple(keys))


__all__ = ["EqualsRule", "EqualsRuleFactory"]
