"""Static rules: leaf predicates, their factories and logical composition."""

from .base import BaseRule, ReadAPI, RuleFactory, StaticRule
from .compound import AndRule, CompoundRule, NotRule, OrRule, all_of, any_of, negate
from .equals import EqualsRule, EqualsRuleFactory
from .exceptions import LookupFailure, RuleConstructionError
from .literal import EqualsLiteralRule, EqualsLiteralRuleFactory
from .sources import MappingReadAPI

__all__ = [
    "AndRule",
    "BaseRule",
    "CompoundRule",
    "EqualsLiteralRule",
    "EqualsLiteralRuleFactory",
    "EqualsRule",
    "EqualsRuleFactory",
    "LookupFailure",
    "MappingReadAPI",
    "NotRule",
    "OrRule",
    "ReadAPI",
    "RuleConstructionError",
    "RuleFactory",
    "StaticRule",
    "all_of",
    "any_of",
    "negate",
]
