"""Rules choosing between hyphens, figure dashes and en dashes around numbers.

Em dashes and minus signs are never guessed, their use can not be told
reliably from the context.
"""

from __future__ import annotations

from datetime import datetime

import regex

from ..constants import EN_DASH, FIGURE_DASH, HYPHEN
from .base import Computed, SubstitutionRule


RE_SEPARATOR_DASH = regex.compile(r" - ")
# (partial) ISO 8601 dates such as 1987-07-30 or 2016-04; digit rules only
# match ASCII digits
RE_ISO_DATE = regex.compile(r"\d{4}-\d{2}(?:-\d{2})?(?=\W|$)", regex.ASCII)
# three or more groups of digits, two groups could still be a range
RE_GROUPED_DIGITS = regex.compile(r"\d+(?:-\d+){2,}", regex.ASCII)
RE_NUMBER_RANGE = regex.compile(r"(\d+)-(\d+)", regex.ASCII)

DATE_FORMATS = ("%Y-%m-%d", "%Y-%m")


def is_valid_date(value: str) -> bool:
    """Return whether ``value`` is an existing ``YYYY-MM`` or ``YYYY-MM-DD`` date.

    Examples:
        >>> is_valid_date("1987-07-30")
        True
        >>> is_valid_date("1989-90")
        False
    """
    for date_format in DATE_FORMATS:
        try:
            datetime.strptime(value, date_format)
        except ValueError:
            continue
        return True
    return False


def _hyphenate_date(match: regex.Match) -> str:
    potential_date = match.group(0)
    if not is_valid_date(potential_date):
        # e.g. the abbreviated year range 1989-90, left for the range rule
        return potential_date
    return potential_date.replace("-", HYPHEN)


def _figure_dashes(match: regex.Match) -> str:
    return match.group(0).replace("-", FIGURE_DASH)


class SeparatorDashRule(SubstitutionRule):
    """Use an en dash for a hyphen surrounded by spaces."""

    def __init__(self) -> None:
        super().__init__(
            name="separator_dash",
            pattern=RE_SEPARATOR_DASH,
            replacer=f" {EN_DASH} ",
            description="Spaced hyphen used as separator",
        )


class DateHyphensRule(SubstitutionRule):
    """Use true hyphens inside valid ISO 8601 dates."""

    def __init__(self) -> None:
        super().__init__(
            name="date_hyphens",
            pattern=RE_ISO_DATE,
            replacer=Computed(_hyphenate_date),
            description="Hyphens in a date",
        )


class FigureDashesRule(SubstitutionRule):
    """Use figure dashes between three or more groups of digits."""

    def __init__(self) -> None:
        super().__init__(
            name="figure_dashes",
            pattern=RE_GROUPED_DIGITS,
            replacer=Computed(_figure_dashes),
            description="Hyphens between groups of digits",
        )


class RangeDashRule(SubstitutionRule):
    """Use an en dash for number ranges where the hyphen means "to"."""

    def __init__(self) -> None:
        super().__init__(
            name="range_dash",
            pattern=RE_NUMBER_RANGE,
            replacer=r"\1" + EN_DASH + r"\2",
            description="Hyphen in a number range",
        )
