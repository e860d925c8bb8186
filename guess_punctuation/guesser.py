"""Entry points guessing Unicode punctuation for ASCII text."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
import logging
from types import SimpleNamespace
from typing import List

from .config import DEFAULT_LEVEL, Level, make_config
from .languages import language_from_locale, supported_language
from .locales import resolve_rules
from .markup import guarded_transform, protect, restore
from .rules import Rule, RuleOrchestrator, RuleWarning, apply_rules


log = logging.getLogger("guess_punctuation")


def guess_punctuation(
    text: str, *, locale: str | None = None, preserve_markup: bool = False
) -> str:
    """Replace ambiguous ASCII punctuation by its likely Unicode counterpart.

    Args:
        text: Text to transform.
        locale: ISO 639-1 code of the text's language. Unknown codes use the
            base rules.
        preserve_markup: Leave links, URLs and ``'''bold'''``/``''italic''``
            markers untouched, for long-form text such as annotations.

    Returns:
        The transformed text. Compare it with ``text`` to find out whether
        anything changed.

    Examples:
        >>> guess_punctuation('He said "hello" to me.')
        'He said “hello” to me.'
        >>> guess_punctuation('"Bonjour"', locale="de")
        '„Bonjour“'
    """
    rules = resolve_rules(locale)
    if preserve_markup:
        return guarded_transform(text, rules)
    return apply_rules(text, rules)


class PunctuationGuesser:
    """Configured guesser reporting the findings of ``warn`` level rules."""

    def __init__(self, config: SimpleNamespace | None = None) -> None:
        """Resolve the rules for the configured language once.

        Args:
            config: Namespace created by :func:`make_config`.
        """
        self.config = config if config is not None else make_config()
        self.language = supported_language(
            language_from_locale(self.config.locale), self.config.script
        )
        self._orchestrator = RuleOrchestrator(resolve_rules(self.language))
        log.debug(
            "Guessing punctuation with %d rules (language: %s)",
            len(self._orchestrator.rules),
            self.language or "none",
        )

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._orchestrator.rules

    def _level_for_rule(self, rule: Rule) -> Level | str:
        """Return the configured level for the given rule."""
        return self.config.levels.get(rule.name, DEFAULT_LEVEL)

    def process(
        self, text: str, source: str = "<text>"
    ) -> tuple[str, List[RuleWarning]]:
        """Apply the rules and log the findings of rules in ``warn`` mode.

        Args:
            text: Text to transform.
            source: Name of the text's origin used in log messages.

        Returns:
            The transformed text and the warnings. Warning offsets refer to the
            text as seen by the rule and warning lines to the input text.
            Messages and previews never contain placeholders.
        """
        if not text:
            return text, []

        spans: tuple = ()
        guarded = text
        if self.config.preserve_markup:
            guarded, spans = protect(text)

        processed, warnings = self._orchestrator.process(guarded, self._level_for_rule)
        if spans:
            processed = restore(processed, spans)
            warnings = [
                replace(
                    warning,
                    message=restore(warning.message, spans),
                    preview=(
                        restore(warning.preview, spans)
                        if warning.preview is not None
                        else None
                    ),
                )
                for warning in warnings
            ]

        self._emit_warnings(warnings, source)
        return processed, warnings

    def guess(self, text: str) -> str:
        """Return the transformed text only."""
        processed, _ = self.process(text)
        return processed

    def guess_values(self, values: Mapping[str, str]) -> dict[str, str]:
        """Transform several named values, e.g. the fields of a form.

        Empty values are skipped.

        Returns:
            The new values of the entries which actually changed.
        """
        changed: dict[str, str] = {}
        for key, value in values.items():
            if not value:
                continue
            guessed, _ = self.process(value, source=key)
            if guessed != value:
                changed[key] = guessed
        return changed

    def _emit_warnings(
        self, warnings: List[RuleWarning], source: str
    ) -> None:
        for warning in warnings:
            prev_txt = f" → «{warning.preview}»" if warning.preview else ""
            log.warning(
                "[punctuation:%s] %s:%d: %s%s",
                warning.rule.name,
                source,
                warning.line,
                warning.message,
                prev_txt,
            )
