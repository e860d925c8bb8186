"""Convenience imports and factories for the built-in punctuation rules."""

from .apostrophes import ApostrophesRule
from .base import Computed, Replacer, Rule, RuleResult, SubstitutionRule, Template
from .dashes import (
    DateHyphensRule,
    FigureDashesRule,
    RangeDashRule,
    SeparatorDashRule,
)
from .ellipsis import EllipsisRule
from .hyphens import HyphensRule
from .orchestrator import RuleOrchestrator, RuleWarning, apply_rules
from .primes import DoublePrimesRule, SinglePrimesRule
from .quotes import DoubleQuotesRule, NIdiomRule, SingleQuotesRule


def build_base_rules() -> tuple[SubstitutionRule, ...]:
    """Return the language-independent rules in their mandatory order.

    Quotes have to be resolved before the remaining apostrophes, and dates and
    digit groups before the remaining hyphens.
    """

    return (
        DoubleQuotesRule(),
        NIdiomRule(),
        SingleQuotesRule(),
        DoublePrimesRule(),
        SinglePrimesRule(),
        ApostrophesRule(),
        EllipsisRule(),
        SeparatorDashRule(),
        DateHyphensRule(),
        FigureDashesRule(),
        RangeDashRule(),
        HyphensRule(),
    )


BASE_RULES = build_base_rules()

__all__ = [
    "BASE_RULES",
    "Computed",
    "Replacer",
    "Rule",
    "RuleOrchestrator",
    "RuleResult",
    "RuleWarning",
    "SubstitutionRule",
    "Template",
    "apply_rules",
    "build_base_rules",
]
