"""Rule converting every remaining straight apostrophe."""

from __future__ import annotations

import regex

from ..constants import RIGHT_SINGLE_QUOTE
from .base import SubstitutionRule


RE_APOSTROPHE = regex.compile(r"'")


class ApostrophesRule(SubstitutionRule):
    """Catch-all for possessives, elisions and decades once quotes are resolved.

    Must run after the quote and prime rules, which consume every apostrophe
    whose role can be told from its context.
    """

    def __init__(self) -> None:
        super().__init__(
            name="apostrophes",
            pattern=RE_APOSTROPHE,
            replacer=RIGHT_SINGLE_QUOTE,
            description="Straight apostrophe",
        )
