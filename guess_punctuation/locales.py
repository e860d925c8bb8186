"""Language-specific customization of the punctuation rules.

A :class:`LocaleProfile` can swap the replacement of a few designated base
rules (the :class:`Slot` members) and append rules of its own. Patterns of the
base rules are never changed by a locale.

Typical usage:
    >>> from guess_punctuation.locales import resolve_rules
    >>> from guess_punctuation.rules import apply_rules
    >>> apply_rules('"Bonjour"', resolve_rules("fr"))
    '« Bonjour »'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
import logging
from types import MappingProxyType
from typing import List, Mapping, Tuple

from .constants import EN_DASH, GERESH, GERSHAYIM, HYPHEN, MAQAF, NON_ALNUM
from .rules import BASE_RULES, SubstitutionRule


log = logging.getLogger("guess_punctuation")


class Slot(str, Enum):
    """Base rules whose replacement may be overridden, by rule name."""

    DOUBLE_QUOTE = "double_quotes"
    SINGLE_QUOTE = "single_quotes"
    APOSTROPHE = "apostrophes"
    HYPHEN = "hyphens"


@dataclass(frozen=True)
class LocaleProfile:
    """Overrides and additional rules of one language.

    Attributes:
        overrides: Replacement template per overridable slot.
        extra_rules: Rules appended after the base rules, in order.
    """

    overrides: Mapping[Slot, str] = field(default_factory=dict)
    extra_rules: Tuple[SubstitutionRule, ...] = ()


# fmt: off
LOCALE_PROFILES: Mapping[str, LocaleProfile] = MappingProxyType({
    "en": LocaleProfile(
        overrides=MappingProxyType({
            Slot.DOUBLE_QUOTE: r"“\1”",
            Slot.SINGLE_QUOTE: r"‘\1’",
        }),
    ),
    "fr": LocaleProfile(
        overrides=MappingProxyType({
            Slot.DOUBLE_QUOTE: r"« \1 »",
            Slot.SINGLE_QUOTE: r"‹ \1 ›",
        }),
    ),
    "de": LocaleProfile(
        overrides=MappingProxyType({
            Slot.DOUBLE_QUOTE: r"„\1“",
            Slot.SINGLE_QUOTE: r"‚\1‘",
        }),
        extra_rules=(
            # hyphens of abbreviated compound words, e.g. "Ein- und Ausgang"
            SubstitutionRule(
                "de_compound_hyphens",
                r"(\w+)-(\s)|(\s)-(\w+)",
                r"\1\3" + HYPHEN + r"\2\4",
                description="Hyphen of an abbreviated compound word",
            ),
        ),
    ),
    "he": LocaleProfile(
        overrides=MappingProxyType({
            Slot.DOUBLE_QUOTE: r"”\1”",
            Slot.SINGLE_QUOTE: r"’\1’",
            Slot.APOSTROPHE: GERESH,
            Slot.HYPHEN: MAQAF,
        }),
        extra_rules=(
            # acronyms (rashei teivot)
            SubstitutionRule(
                "he_gershayim",
                r'(?<=\S)"(?=\S)',
                GERSHAYIM,
                description="Gershayim in an acronym",
            ),
        ),
    ),
    "ja": LocaleProfile(
        extra_rules=(
            # dashes used as brackets, e.g. "-Remix-"
            SubstitutionRule(
                "ja_bracket_dashes",
                rf"(?<={NON_ALNUM}|^)-(.+?)-(?={NON_ALNUM}|$)",
                EN_DASH + r"\1" + EN_DASH,
                description="Hyphens used as brackets",
            ),
        ),
    ),
})
# fmt: on


def normalize_locale(locale: str | None) -> str | None:
    """Return the lookup key for ``locale`` or ``None`` when nothing is usable."""
    if not isinstance(locale, str):
        return None
    return locale.strip().lower() or None


@lru_cache(maxsize=None)
def _profile_rules(locale: str) -> Tuple[SubstitutionRule, ...]:
    profile = LOCALE_PROFILES[locale]
    positions = {rule.name: index for index, rule in enumerate(BASE_RULES)}
    rules = list(BASE_RULES)
    for slot, replacement in profile.overrides.items():
        index = positions[slot.value]
        rules[index] = rules[index].with_replacer(replacement)
    rules.extend(profile.extra_rules)
    return tuple(rules)


def resolve_rules(locale: str | None = None) -> List[SubstitutionRule]:
    """Return the ordered punctuation rules for a language.

    Only the rule sets of known profiles are cached, so arbitrary locale
    strings never grow the cache.

    Args:
        locale: ISO 639-1 code of the language. Unknown or malformed values
            fall back to the base rules.

    Returns:
        A new list on every call, which the caller is free to modify. The rule
        objects are shared between calls and raise :class:`AttributeError`
        when assigned to.
    """
    key = normalize_locale(locale)
    if key not in LOCALE_PROFILES:
        if key:
            log.debug("No punctuation profile for %r, using the base rules", key)
        return list(BASE_RULES)
    return list(_profile_rules(key))
