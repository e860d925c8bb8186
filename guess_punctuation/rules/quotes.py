"""Rules that turn straight quotation marks into curly ones."""

from __future__ import annotations

import regex

from ..constants import (
    LEFT_DOUBLE_QUOTE,
    LEFT_SINGLE_QUOTE,
    NON_ALNUM,
    RIGHT_DOUBLE_QUOTE,
    RIGHT_SINGLE_QUOTE,
)
from .base import SubstitutionRule


# quoted text enclosed by non-alphanumeric characters or the edges of the text
RE_DOUBLE_QUOTED = regex.compile(rf'(?<={NON_ALNUM}|^)"(.+?)"(?={NON_ALNUM}|$)')
RE_SINGLE_QUOTED = regex.compile(rf"(?<={NON_ALNUM}|^)'(.+?)'(?={NON_ALNUM}|$)")

# as in "rock 'n' roll", both marks are apostrophes for the elided letters;
# ASCII word boundaries, so "café'n'" counts as the idiom too
RE_N_IDIOM = regex.compile(
    r"(?<=\W|^)'(n)'(?=\W|$)", regex.IGNORECASE | regex.ASCII
)


class DoubleQuotesRule(SubstitutionRule):
    """Replace a "quoted" span with “curly” double quotes."""

    def __init__(self) -> None:
        super().__init__(
            name="double_quotes",
            pattern=RE_DOUBLE_QUOTED,
            replacer=LEFT_DOUBLE_QUOTE + r"\1" + RIGHT_DOUBLE_QUOTE,
            description="Straight double quotes",
        )


class NIdiomRule(SubstitutionRule):
    """Treat the ``'n'`` contraction as a pair of apostrophes."""

    def __init__(self) -> None:
        super().__init__(
            name="n_idiom",
            pattern=RE_N_IDIOM,
            replacer=RIGHT_SINGLE_QUOTE + r"\1" + RIGHT_SINGLE_QUOTE,
            description="Apostrophes around 'n'",
        )


class SingleQuotesRule(SubstitutionRule):
    """Replace a 'quoted' span with ‘curly’ single quotes."""

    def __init__(self) -> None:
        super().__init__(
            name="single_quotes",
            pattern=RE_SINGLE_QUOTED,
            replacer=LEFT_SINGLE_QUOTE + r"\1" + RIGHT_SINGLE_QUOTE,
            description="Straight single quotes",
        )
