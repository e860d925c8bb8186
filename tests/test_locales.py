from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from guess_punctuation.constants import (
    EN_DASH,
    GERESH,
    GERSHAYIM,
    HYPHEN,
    MAQAF,
)
from guess_punctuation.guesser import guess_punctuation
from guess_punctuation.locales import (
    LOCALE_PROFILES,
    Slot,
    _profile_rules,
    resolve_rules,
)
from guess_punctuation.rules import BASE_RULES, Template, apply_rules


@pytest.mark.parametrize(
    ("locale", "expected"),
    [
        (None, "“Bonjour”"),
        ("en", "“Bonjour”"),
        ("fr", "« Bonjour »"),
        ("FR", "« Bonjour »"),
        ("de", "„Bonjour“"),
        ("he", "”Bonjour”"),
        ("xx", "“Bonjour”"),
        ("", "“Bonjour”"),
        ("en_US", "“Bonjour”"),
    ],
)
def test_double_quotes_per_locale(locale, expected):
    assert apply_rules('"Bonjour"', resolve_rules(locale)) == expected


@pytest.mark.parametrize(
    ("locale", "expected"),
    [
        (None, "‘Salut’"),
        ("fr", "‹ Salut ›"),
        ("de", "‚Salut‘"),
    ],
)
def test_single_quotes_per_locale(locale, expected):
    assert apply_rules("'Salut'", resolve_rules(locale)) == expected


def test_unknown_locale_uses_base_rules():
    assert resolve_rules("zz") == list(BASE_RULES)
    assert resolve_rules(None) == list(BASE_RULES)


def test_resolve_rules_returns_independent_lists():
    first = resolve_rules("de")
    second = resolve_rules("de")
    assert first is not second

    first.clear()
    assert len(resolve_rules("de")) == len(BASE_RULES) + 1


def test_resolved_rules_are_read_only():
    rules = resolve_rules("fr")
    with pytest.raises(AttributeError):
        rules[5].replacer = Template("X")
    with pytest.raises(AttributeError):
        rules[0].pattern = None
    with pytest.raises(AttributeError):
        del rules[5].name

    rules[5] = rules[5].with_replacer("X")
    assert guess_punctuation("it's") == "it’s"
    assert apply_rules("it's", resolve_rules("fr")) == "it’s"


def test_unknown_locales_are_not_cached():
    _profile_rules.cache_clear()
    for index in range(500):
        assert resolve_rules(f"zz{index}") == list(BASE_RULES)
    assert _profile_rules.cache_info().currsize == 0

    resolve_rules("fr")
    resolve_rules(" FR ")
    assert _profile_rules.cache_info().currsize == 1


def test_resolve_rules_does_not_touch_base_rules():
    resolve_rules("fr")
    resolve_rules("he")
    assert BASE_RULES[0].replacer == Template(r"“\1”")
    assert BASE_RULES[5].replacer == Template("’")


def test_overrides_keep_the_base_pattern():
    base = {rule.name: rule for rule in BASE_RULES}
    for rule in resolve_rules("he")[: len(BASE_RULES)]:
        assert rule.pattern is base[rule.name].pattern


def test_slots_name_base_rules():
    assert {slot.value for slot in Slot} <= {rule.name for rule in BASE_RULES}


def test_profiles_only_override_known_slots():
    for profile in LOCALE_PROFILES.values():
        assert set(profile.overrides) <= set(Slot)


def test_extra_rules_are_appended():
    rules = resolve_rules("ja")
    assert [rule.name for rule in rules[: len(BASE_RULES)]] == [
        rule.name for rule in BASE_RULES
    ]
    assert rules[-1].name == "ja_bracket_dashes"


def test_german_abbreviated_compound_hyphen():
    result = apply_rules("Ein- und Ausgang", resolve_rules("de"))
    assert result == f"Ein{HYPHEN} und Ausgang"


def test_japanese_bracket_dashes():
    result = apply_rules("Song -Remix-", resolve_rules("ja"))
    assert result == f"Song {EN_DASH}Remix{EN_DASH}"


def test_hebrew_marks():
    rules = resolve_rules("he")
    assert apply_rules('צה"ל', rules) == f"צה{GERSHAYIM}ל"
    assert apply_rules("ג'ירפה", rules) == f"ג{GERESH}ירפה"
    assert apply_rules("תל-אביב", rules) == f"תל{MAQAF}אביב"


def test_concurrent_resolution_matches_sequential():
    cases = [(locale, '"Quote" - it\'s') for locale in ("fr", "de", "he", None)] * 10
    expected = [apply_rules(text, resolve_rules(locale)) for locale, text in cases]

    with ThreadPoolExecutor(max_workers=4) as executor:
        results = list(
            executor.map(
                lambda case: apply_rules(case[1], resolve_rules(case[0])), cases
            )
        )

    assert results == expected
