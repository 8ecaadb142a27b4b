"""Static rule evaluation engine."""

from .rules import (
    AndRule,
    EqualsLiteralRuleFactory,
    EqualsRuleFactory,
    LookupFailure,
    MappingReadAPI,
    NotRule,
    OrRule,
    ReadAPI,
    RuleConstructionError,
    StaticRule,
)

__version__ = "0.1.0"

__all__ = [
    "AndRule",
    "EqualsLiteralRuleFactory",
    "EqualsRuleFactory",
    "LookupFailure",
    "MappingReadAPI",
    "NotRule",
    "OrRule",
    "ReadAPI",
    "RuleConstructionError",
    "StaticRule",
]
