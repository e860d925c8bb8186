r"""Shared abstractions and helpers for punctuation rules.

This module defines the :class:`Rule` base class, the concrete
:class:`SubstitutionRule` used by every built-in rule and the two replacer
flavours (:class:`Template` and :class:`Computed`). Rule objects are
read-only once built, locale variants are derived with
:meth:`SubstitutionRule.with_replacer`.

Typical usage:
    >>> from guess_punctuation.rules.base import SubstitutionRule
    >>> rule = SubstitutionRule("ellipsis", r"\.{3}", "…")
    >>> rule.fix("Wait...")
    'Wait…'
    >>> rule.detect("Wait...")
    [(4, 7, 'ellipsis: «...»', '…')]
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

import regex


RuleResult = Tuple[int, int, str, Optional[str]]


@dataclass(frozen=True)
class Template:
    """Replacement string which may reference captured groups (``\\1``)."""

    value: str

    def expand(self, match: regex.Match) -> str:
        return match.expand(self.value)


@dataclass(frozen=True)
class Computed:
    """Replacement computed from the match, e.g. after validating it."""

    func: Callable[[regex.Match], str]

    def expand(self, match: regex.Match) -> str:
        return self.func(match)


Replacer = Union[Template, Computed]


class Rule(ABC):
    """Abstract base class for every punctuation rule."""

    name: str

    def __init__(self, name: str) -> None:
        """Initialize a rule.

        Args:
            name: Stable identifier of the rule, used for locale overrides and
                level configuration.
        """
        self.name = name

    @abstractmethod
    def detect(self, text: str) -> List[RuleResult]:
        """Return the pending changes for the provided text.

        Args:
            text: Text to inspect.

        Returns:
            One ``(start, end, message, preview)`` tuple per change the rule
            would make.
        """
        raise NotImplementedError

    @abstractmethod
    def fix(self, text: str) -> str:
        """Return the text with the rule applied to every match.

        Args:
            text: Text to transform.

        Returns:
            The amended text.
        """
        raise NotImplementedError


class SubstitutionRule(Rule):
    """Global search and replace driven by a compiled ``regex`` pattern."""

    def __init__(
        self,
        name: str,
        pattern: str | regex.Pattern,
        replacer: str | Replacer,
        description: str = "",
        flags: int = 0,
    ) -> None:
        """Compile the pattern and normalize the replacer.

        Args:
            name: Stable identifier of the rule.
            pattern: Regular expression, compiled with :mod:`regex` when given
                as a string. Compilation errors propagate to the caller.
            replacer: Template string, :class:`Template` or :class:`Computed`.
            description: Short human-readable explanation used in findings.
            flags: Extra ``regex`` flags for string patterns.
        """
        super().__init__(name=name)
        if isinstance(pattern, str):
            pattern = regex.compile(pattern, flags)
        self.pattern = pattern
        self.replacer: Replacer = (
            Template(replacer) if isinstance(replacer, str) else replacer
        )
        self.description = description or name
        self._frozen = True

    def with_replacer(self, replacer: str | Replacer) -> SubstitutionRule:
        """Return a copy of the rule using another replacer and the same pattern."""
        return SubstitutionRule(self.name, self.pattern, replacer, self.description)

    def __setattr__(self, name: str, value: object) -> None:
        # rules are shared between every resolved rule set
        if getattr(self, "_frozen", False):
            raise AttributeError(
                f"{type(self).__name__} is read-only, use with_replacer() instead"
            )
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def detect(self, text: str) -> List[RuleResult]:
        """Return one finding per match which the rule would actually change.

        Matches whose replacement equals the matched text, such as a date
        rejected by its validating callback, are not reported.
        """
        findings: List[RuleResult] = []
        for match in self.pattern.finditer(text):
            replacement = self.replacer.expand(match)
            if replacement == match.group(0):
                continue
            findings.append(
                (
                    match.start(),
                    match.end(),
                    f"{self.description}: «{match.group(0)}»",
                    replacement,
                )
            )
        return findings

    def fix(self, text: str) -> str:
        if isinstance(self.replacer, Template):
            return self.pattern.sub(self.replacer.value, text)
        return self.pattern.sub(self.replacer.func, text)

    def __repr__(self) -> str:
        return f"SubstitutionRule({self.name!r}, {self.pattern.pattern!r}, {self.replacer!r})"

