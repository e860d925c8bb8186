"""Run a rule pipeline, fixing or only reporting each rule."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Sequence, Tuple

from .base import Rule

LevelLookup = Callable[[Rule], object]


@dataclass(frozen=True)
class RuleWarning:
    """Change a rule in ``warn`` mode would have made.

    Offsets and line refer to the text as the rule saw it, that is after every
    preceding rule in ``fix`` mode ran. The rules never add or remove line
    breaks, so ``line`` is also the line in the input text.
    """

    rule: Rule
    start: int
    end: int
    line: int
    message: str
    preview: str | None


def apply_rules(
    text: str,
    rules: Iterable[Rule],
    level_lookup: LevelLookup | None = None,
    warnings: List[RuleWarning] | None = None,
) -> str:
    """Feed ``text`` through ``rules``, each rule getting the previous output.

    Args:
        text: Input string, returned unchanged when empty.
        rules: Rules in application order.
        level_lookup: Maps a rule to ``ignore``, ``warn`` or ``fix`` (a
            :class:`~guess_punctuation.config.Level` or its value). Every rule
            is fixed when omitted.
        warnings: Receives one :class:`RuleWarning` per pending change of the
            rules in ``warn`` mode. Those rules leave the text as it is.

    Returns:
        The transformed text.

    Examples:
        >>> from guess_punctuation.rules import BASE_RULES
        >>> apply_rules("rock 'n' roll", BASE_RULES)
        'rock ’n’ roll'
    """
    if not text:
        return text
    for rule in rules:
        level = level_lookup(rule) if level_lookup else "fix"
        level = getattr(level, "value", level)
        if level == "ignore":
            continue
        if level != "warn":
            text = rule.fix(text)
        elif warnings is not None:
            for start, end, message, preview in rule.detect(text):
                line = text.count("\n", 0, start) + 1
                warnings.append(RuleWarning(rule, start, end, line, message, preview))
    return text


class RuleOrchestrator:
    """Fixed rule pipeline with per-rule levels."""

    def __init__(self, rules: Sequence[Rule]) -> None:
        self._rules: Tuple[Rule, ...] = tuple(rules)

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    def process(
        self, text: str, level_lookup: LevelLookup | None = None
    ) -> Tuple[str, List[RuleWarning]]:
        """Return the transformed text and the warnings of ``warn`` rules.

        Examples:
            >>> from guess_punctuation.rules import BASE_RULES
            >>> orchestrator = RuleOrchestrator(BASE_RULES)
            >>> def level(rule):
            ...     return "warn" if rule.name == "ellipsis" else "fix"
            >>> text, warnings = orchestrator.process("It's over\\nor not...", level)
            >>> text
            'It’s over\\nor not...'
            >>> [(warning.rule.name, warning.line) for warning in warnings]
            [('ellipsis', 2)]
        """
        warnings: List[RuleWarning] = []
        return apply_rules(text, self._rules, level_lookup, warnings), warnings
