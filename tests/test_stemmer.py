import pytest

from narrowmind.stemmer import stem


@pytest.mark.parametrize(
    "word, expected",
    [
        ("cities", "city"),
        ("boxes", "box"),
        ("cats", "cat"),
        ("running", "runn"),
        ("runs", "run"),
        ("jumped", "jump"),
        ("faster", "fast"),
        ("biggest", "bigg"),
        ("quickly", "quick"),
        ("creation", "crea"),
        ("payment", "pay"),
        ("darkness", "darknes"),  # "s" fires before "ness"
    ],
)
def test_suffix_rules(word, expected):
    assert stem(word) == expected


@pytest.mark.parametrize(
    "word, expected",
    [
        ("dies", "die"),  # too short for "ies" and "es", caught by "s"
        ("was", "was"),
        ("sing", "sing"),
        ("bed", "bed"),
        ("nation", "nation"),
        ("lily", "lily"),
    ],
)
def test_length_guards(word, expected):
    assert stem(word) == expected


def test_lowercases_words_of_three_or_more():
    assert stem("THE") == "the"
    assert stem("Running") == "runn"


def test_short_words_returned_untouched():
    assert stem("Am") == "Am"
    assert stem("I") == "I"


def test_empty_and_none():
    assert stem("") == ""
    assert stem(None) is None


@pytest.mark.parametrize(
    "word",
    ["cities", "buses", "running", "cats", "quickly", "happiness", "statement", "abcdefg"],
)
def test_restemming_never_drops_below_three_chars(word):
    once = stem(word)
    twice = stem(once)
    assert len(once) >= 3
    assert len(twice) >= 3


def test_restemming_a_guarded_stem_is_stable():
    assert stem("buses") == "bus"
    assert stem(stem("buses")) == "bus"


@pytest.mark.parametrize("value", [123, 4.5, ["cats"], ("x",), b"cats"])
def test_non_strings_returned_unchanged(value):
    assert stem(value) is value
