"""Rule collapsing three periods into a horizontal ellipsis."""

from __future__ import annotations

import regex

from ..constants import ELLIPSIS
from .base import SubstitutionRule


# exactly three, longer runs of periods are left alone
RE_ELLIPSIS = regex.compile(r"(?<!\.)\.{3}(?!\.)")


class EllipsisRule(SubstitutionRule):
    def __init__(self) -> None:
        super().__init__(
            name="ellipsis",
            pattern=RE_ELLIPSIS,
            replacer=ELLIPSIS,
            description="Three periods",
        )
