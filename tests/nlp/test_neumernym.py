# tests/nlp/test_neumernym.py
import pytest

from syllables_pro.nlp.neumernym import generate_neumernym


@pytest.mark.parametrize(
    "word, expected",
    [
        ("international", "i11l"),
        ("internationalization", "i18n"),
        ("localization", "l10n"),
        ("accessibility", "a11y"),
        ("hello", "h3o"),
    ],
)
def test_compresses_long_words(word, expected):
    assert generate_neumernym(word) == expected


@pytest.mark.parametrize("word", ["", "a", "cat", "word", "1234"])
def test_short_words_unchanged(word):
    assert generate_neumernym(word) == word


def test_too_few_letters_returns_word_unchanged():
    assert generate_neumernym("a1b2c") == "a1b2c"
    assert generate_neumernym("12345") == "12345"


def test_digits_are_not_counted():
    # letters: w o r d s -> w3s
    assert generate_neumernym("wo2rds") == "w3s"


def test_case_of_edge_letters_is_kept():
    assert generate_neumernym("Kubernetes") == "K8s"
