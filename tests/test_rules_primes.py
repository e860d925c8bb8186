from __future__ import annotations

from guess_punctuation.rules.apostrophes import ApostrophesRule
from guess_punctuation.rules.primes import DoublePrimesRule, SinglePrimesRule


double_primes = DoublePrimesRule()
single_primes = SinglePrimesRule()
apostrophes = ApostrophesRule()


def test_fix_double_primes_after_numbers():
    assert double_primes.fix('12" vinyl') == "12″ vinyl"


def test_fix_single_primes_between_numbers():
    assert single_primes.fix("3'42") == "3′42"


def test_fix_single_primes_ignores_decades():
    assert single_primes.fix("70's") == "70's"


def test_fix_primes_only_after_ascii_digits():
    assert double_primes.fix('١٢" vinyl') == '١٢" vinyl'
    assert single_primes.fix("٣'٤٢") == "٣'٤٢"


def test_fix_apostrophes_replaces_every_remaining_mark():
    assert apostrophes.fix("It's the 70's") == "It’s the 70’s"


def test_detect_apostrophes_reports_each_occurrence():
    findings = apostrophes.detect("Tom's mom's")
    assert [(start, end) for start, end, *_ in findings] == [(3, 4), (9, 10)]
    assert {preview for *_rest, preview in findings} == {"’"}
