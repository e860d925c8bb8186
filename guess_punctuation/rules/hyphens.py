"""Rule converting every remaining hyphen between two non-space characters."""

from __future__ import annotations

import regex

from ..constants import HYPHEN
from .base import SubstitutionRule


RE_HYPHEN = regex.compile(r"(?<=\S)-(?=\S)")


class HyphensRule(SubstitutionRule):
    """Catch-all for compound words once the dash rules have run."""

    def __init__(self) -> None:
        super().__init__(
            name="hyphens",
            pattern=RE_HYPHEN,
            replacer=HYPHEN,
            description="Hyphen-minus between words",
        )
