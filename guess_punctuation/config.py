"""Configuration of the punctuation guesser."""

from __future__ import annotations

from enum import Enum
from types import SimpleNamespace
from typing import Any


class Level(str, Enum):  # pylint: disable=invalid-name
    """Levels controlling how a rule behaves."""

    ignore = "ignore"
    warn = "warn"
    fix = "fix"


DEFAULT_LEVEL = Level.fix


def make_config(**overrides: Any) -> SimpleNamespace:
    """Create a configuration namespace with defaults for every option.

    Options:
        locale: Language code or locale of the text, ``None`` for base rules.
        script: ISO 15924 script code of the text, if known.
        preserve_markup: Protect links, URLs and bold/italic markup.
        levels: Mapping of rule name to :class:`Level`, rules default to fix.
        summary: Print a summary table of the findings (command line only).
    """

    defaults: dict[str, Any] = {
        "locale": None,
        "script": None,
        "preserve_markup": False,
        "levels": {},
        "summary": False,
    }
    defaults.update(overrides)
    return SimpleNamespace(**defaults)
