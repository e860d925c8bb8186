from __future__ import annotations

import logging

import pytest

from guess_punctuation.config import Level
from guess_punctuation.constants import PLACEHOLDER_OPEN
from guess_punctuation.guesser import guess_punctuation


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('He said "hello" to me.', "He said “hello” to me."),
        ('can"t', 'can"t'),
        ("3'42\"", "3′42″"),
        ("70's", "70’s"),
        ("", ""),
    ],
)
def test_guess_punctuation(text, expected):
    assert guess_punctuation(text) == expected


def test_guess_punctuation_with_locale():
    assert guess_punctuation('"Bonjour"', locale="fr") == "« Bonjour »"
    assert guess_punctuation('"Bonjour"', locale="de") == "„Bonjour“"
    assert guess_punctuation('"Bonjour"') == "“Bonjour”"


def test_guesser_matches_function(guesser_factory):
    guesser = guesser_factory()
    text = "Don't stop - 1989-90..."
    assert guesser.guess(text) == guess_punctuation(text)


def test_guesser_uses_language_of_locale(guesser_factory):
    guesser = guesser_factory(locale="fr_CA")
    assert guesser.language == "fr"
    assert guesser.guess('"Bonjour"') == "« Bonjour »"


def test_guesser_skips_hebrew_rules_for_other_scripts(guesser_factory):
    assert guesser_factory(locale="he", script="Latn").guess('"Shalom"') == "“Shalom”"
    assert guesser_factory(locale="he", script="Hebr").guess('"Shalom"') == "”Shalom”"


def test_guesser_ignored_rule(guesser_factory):
    guesser = guesser_factory(levels={"apostrophes": Level.ignore})
    assert guesser.guess("It's") == "It's"


def test_guesser_logs_warn_level_findings(guesser_factory, caplog):
    guesser = guesser_factory(levels={"ellipsis": Level.warn})

    with caplog.at_level(logging.WARNING, logger="guess_punctuation"):
        text, warnings = guesser.process("Line one\nWait...", source="notes")

    assert text == "Line one\nWait..."
    assert len(warnings) == 1
    assert "[punctuation:ellipsis] notes:2: Three periods: «...» → «…»" in caplog.text


def test_guesser_warning_lines_follow_input_lines(guesser_factory, caplog):
    guesser = guesser_factory(levels={"hyphens": Level.warn})

    with caplog.at_level(logging.WARNING, logger="guess_punctuation"):
        text, warnings = guesser.process("a... b... c...\nd-e", source="f")

    assert text == "a… b… c…\nd-e"
    assert [(warning.start, warning.line) for warning in warnings] == [(10, 2)]
    assert "[punctuation:hyphens] f:2: " in caplog.text


def test_guesser_warning_lines_with_preserved_markup(guesser_factory):
    guesser = guesser_factory(
        preserve_markup=True, levels={"hyphens": Level.warn}
    )

    _, warnings = guesser.process("'''Bold''' [http://a.org/x|y]\n\nwell-known")

    assert [warning.line for warning in warnings] == [3]


def test_guesser_warnings_never_expose_placeholders(guesser_factory):
    guesser = guesser_factory(
        preserve_markup=True, levels={"hyphens": Level.warn}
    )

    text, warnings = guesser.process("[http://a.org/x-y|well-known]")

    assert text == "[http://a.org/x-y|well-known]"
    assert [warning.message for warning in warnings] == [
        "Hyphen-minus between words: «-»"
    ]
    assert all(PLACEHOLDER_OPEN not in warning.message for warning in warnings)


def test_guesser_preserves_markup(guesser_factory):
    guesser = guesser_factory(preserve_markup=True)
    assert guesser.guess("'''It's''' here") == "'''It’s''' here"


def test_guess_values_returns_changed_entries_only(guesser_factory):
    guesser = guesser_factory()
    values = {"title": "It's", "comment": "", "name": "Plain"}
    assert guesser.guess_values(values) == {"title": "It’s"}
