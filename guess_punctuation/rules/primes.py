"""Rules for feet/inches and minutes/seconds notation."""

from __future__ import annotations

import regex

from ..constants import DOUBLE_PRIME, PRIME
from .base import SubstitutionRule


RE_DOUBLE_PRIME = regex.compile(r'(\d+)"', regex.ASCII)
# a digit has to follow, so 70's keeps its apostrophe
RE_SINGLE_PRIME = regex.compile(r"(\d+)'(\d+)", regex.ASCII)


class DoublePrimesRule(SubstitutionRule):
    """Turn ``12"`` into ``12″``."""

    def __init__(self) -> None:
        super().__init__(
            name="double_primes",
            pattern=RE_DOUBLE_PRIME,
            replacer=r"\1" + DOUBLE_PRIME,
            description="Double prime after a number",
        )


class SinglePrimesRule(SubstitutionRule):
    """Turn ``3'42`` into ``3′42``."""

    def __init__(self) -> None:
        super().__init__(
            name="single_primes",
            pattern=RE_SINGLE_PRIME,
            replacer=r"\1" + PRIME + r"\2",
            description="Prime between numbers",
        )
