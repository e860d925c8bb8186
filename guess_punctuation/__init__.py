"""Public package exports for ``guess_punctuation``."""

from __future__ import annotations

from .cli import main
from .guesser import PunctuationGuesser, guess_punctuation
from .locales import LOCALE_PROFILES, LocaleProfile, Slot, resolve_rules
from .markup import ProtectedSpan, guarded_transform, protect, restore
from .rules import SubstitutionRule, apply_rules


__all__ = [
    "LOCALE_PROFILES",
    "LocaleProfile",
    "ProtectedSpan",
    "PunctuationGuesser",
    "Slot",
    "SubstitutionRule",
    "apply_rules",
    "guarded_transform",
    "guess_punctuation",
    "main",
    "protect",
    "resolve_rules",
    "restore",
]
