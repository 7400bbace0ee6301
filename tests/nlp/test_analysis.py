# tests/nlp/test_analysis.py
from dataclasses import FrozenInstanceError

import pytest

from syllables_pro import analyze
from syllables_pro.models import AnalysisResult


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", AnalysisResult(0, 0, "")),
        ("cat", AnalysisResult(1, 1, "cat")),
        ("international", AnalysisResult(1, 5, "i11l")),
        ("The cat sat.", AnalysisResult(3, 3, "the cat sat")),
        ("!!! ??? ...", AnalysisResult(0, 0, "")),
    ],
)
def test_concrete_cases(text, expected):
    assert analyze(text) == expected


def test_mixed_sentence():
    res = analyze("Accessibility and localization, please!")
    assert res.word_count == 4
    # a-e-i-i-i-y (6), a (1), o-a-i-a-io (5), ea (ea-e -> silent e: 1)
    assert res.total_syllables == 6 + 1 + 5 + 1
    assert res.neumernym_string == "a11y and l10n p4e"


def test_number_tokens_count_as_words_without_syllables():
    res = analyze("route 66")
    assert res.word_count == 2
    assert res.total_syllables == 1
    assert res.neumernym_string == "r3e 66"


@pytest.mark.parametrize(
    "text",
    ["", "one", "The quick brown fox jumps over the lazy dog.", "a1b2c 12345 ...!!"],
)
def test_word_count_matches_neumernym_fields(text):
    res = analyze(text)
    if res.word_count == 0:
        assert res.neumernym_string == ""
    else:
        assert len(res.neumernym_string.split(" ")) == res.word_count


def test_is_idempotent():
    text = "For writers, for poets."
    assert analyze(text) == analyze(text)


def test_average_syllables_per_word():
    assert analyze("").avg_syllables_per_word == 0.0
    assert analyze("international cat").avg_syllables_per_word == 3.0


def test_result_is_immutable():
    res = analyze("cat")
    with pytest.raises(FrozenInstanceError):
        res.word_count = 2
