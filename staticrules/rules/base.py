"""Contracts shared by every static rule."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Protocol, Sequence, TypeVar

import structlog

from staticrules.config import settings

A = TypeVar("A")

logger = structlog.get_logger(__name__)


class ReadAPI(Protocol):
    """Read capability consulted by rules during full evaluation."""

    def get(self, key: str) -> str | None:  # pragma: no cover - protocol
        """Return the value bound to *key*, ``None`` when absent.

        Implementations raise when the lookup itself cannot be completed.
        """


class StaticRule(ABC, Generic[A]):
    """Boolean predicate over a key-value context."""

    __slots__ = ()

    @abstractmethod
    def key_match(self, key: str) -> bool:
        """Return True when the rule depends on *key*."""

    @abstractmethod
    def satisfiable(self, key: str, value: str | None) -> bool:
        """Return True when the rule could hold if *key* were bound to *value*.

        Never touches a read capability. A True result is a hint for
        pre-filtering, not a proof that the rule holds.
        """

    @abstractmethod
    def satisfied(self, api: ReadAPI) -> bool:
        """Evaluate the rule against the values exposed by *api*."""

    @abstractmethod
    def get_attributes(self) -> A:
        """Return the opaque payload carried by the rule."""


@dataclass(frozen=True, eq=False, slots=True)
class BaseRule(StaticRule[A]):
    """Leaf rule carrying its own attribute payload."""

    attributes: A

    def get_attributes(self) -> A:
        return self.attributes


class RuleFactory(ABC, Generic[A]):
    """Builds leaf rules from the keys derived for a rule definition."""

    @abstractmethod
    def new_rule(self, keys: Sequence[str], attributes: A) -> StaticRule[A]:
        """Return a new immutable rule for *keys* carrying *attributes*."""


def lookup(api: ReadAPI, key: str) -> str | None:
    """Read *key* from *api*, logging and re-raising any failure unchanged."""

    try:
        return api.get(key)
    except Exception as exc:
        logger.debug("rule.lookup_failed", key=key, error=type(exc).__name__)
        raise


def traced(rule: StaticRule, result: bool) -> bool:
    """Emit a ``rule.evaluated`` event when evaluation tracing is enabled."""

    if settings.trace_evaluation:
        logger.debug("rule.evaluated", rule=type(rule).__name__, result=result)
    return result


__all__ = ["BaseRule", "ReadAPI", "RuleFactory", "StaticRule", "lookup", "traced"]
