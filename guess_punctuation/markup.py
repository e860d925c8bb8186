r"""Keep URLs and wiki-style markup intact while punctuation is guessed.

Annotations and edit notes support ``'''bold'''``, ``''italic''``, links of
the form ``[target|label]`` and plain URLs. These are swapped for placeholders
which no punctuation rule can match before the rules run, and restored
afterwards. A placeholder is the base64 encoding of the protected text between
two private use characters, so its alphabet never contains quotes,
apostrophes, hyphens, periods or whitespace.

Typical usage:
    >>> from guess_punctuation.markup import protect, restore
    >>> guarded, spans = protect("''Note'' on [http://example.com/a-b|it's]")
    >>> [span.kind for span in spans]
    ['italic', 'italic', 'link']
    >>> restore(guarded, spans) == "''Note'' on [http://example.com/a-b|it's]"
    True
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Iterable, Tuple

import regex

from .constants import PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from .rules.base import Rule
from .rules.orchestrator import apply_rules


# alternatives are tried in order at each position, so bold wins over italic
RE_PROTECTED = regex.compile(
    r"(?P<link>(?<=\[)[^|\]\n]+(?=(?:\|[^\]\n]+)?\]))"
    r"|(?P<url>(?<=//)\S+)"
    r"|(?P<bold>''')"
    r"|(?P<italic>'')"
    rf"|(?P<delimiter>[{PLACEHOLDER_OPEN}{PLACEHOLDER_CLOSE}])"
)
RE_PLACEHOLDER = regex.compile(
    rf"{PLACEHOLDER_OPEN}[A-Za-z0-9+/=]*{PLACEHOLDER_CLOSE}"
)


@dataclass(frozen=True)
class ProtectedSpan:
    """Text hidden from the punctuation rules.

    Attributes:
        kind: ``link``, ``url``, ``bold``, ``italic`` or ``delimiter``.
        original: The protected text.
        placeholder: The text standing in for it while the rules run.
    """

    kind: str
    original: str
    placeholder: str


def encode_placeholder(value: str) -> str:
    """Return the placeholder standing in for ``value``."""
    encoded = base64.b64encode(value.encode("utf-8")).decode("ascii")
    return f"{PLACEHOLDER_OPEN}{encoded}{PLACEHOLDER_CLOSE}"


def decode_placeholder(placeholder: str) -> str:
    """Return the text encoded by :func:`encode_placeholder`."""
    encoded = placeholder[len(PLACEHOLDER_OPEN) : -len(PLACEHOLDER_CLOSE)]
    return base64.b64decode(encoded.encode("ascii")).decode("utf-8")


def protect(text: str) -> Tuple[str, Tuple[ProtectedSpan, ...]]:
    """Replace links, URLs and bold/italic markers by placeholders.

    Only the target of a ``[target|label]`` link is protected, the label still
    gets its punctuation guessed. Unbalanced brackets and stray apostrophes
    are left as they are.

    Args:
        text: Text which may contain markup.

    Returns:
        The guarded text and the protected spans in order of appearance.
    """
    spans: list[ProtectedSpan] = []

    def repl(match: regex.Match) -> str:
        original = match.group(0)
        placeholder = encode_placeholder(original)
        spans.append(ProtectedSpan(match.lastgroup, original, placeholder))
        return placeholder

    guarded = RE_PROTECTED.sub(repl, text)
    return guarded, tuple(spans)


def restore(text: str, spans: Iterable[ProtectedSpan]) -> str:
    """Put the protected text back in place of its placeholders.

    The text is scanned once, so restored content is never mistaken for a
    placeholder. Placeholders unknown to ``spans`` are decoded from their own
    content, or kept when they do not decode.

    Args:
        text: Guarded text, possibly transformed in the meantime.
        spans: Spans returned by :func:`protect` for the same text.

    Returns:
        The text with every placeholder replaced by its original content.
    """
    originals = {span.placeholder: span.original for span in spans}

    def repl(match: regex.Match) -> str:
        placeholder = match.group(0)
        if placeholder in originals:
            return originals[placeholder]
        try:
            return decode_placeholder(placeholder)
        except ValueError:
            return placeholder

    return RE_PLACEHOLDER.sub(repl, text)


def guarded_transform(text: str, rules: Iterable[Rule]) -> str:
    """Apply ``rules`` to ``text`` without touching markup and URLs.

    Examples:
        >>> from guess_punctuation.rules import BASE_RULES
        >>> guarded_transform("'''Live''' at http://example.org/a-b", BASE_RULES)
        "'''Live''' at http://example.org/a-b"
    """
    guarded, spans = protect(text)
    return restore(apply_rules(guarded, rules), spans)
