# tests/test_magnitudes.py
"""
Magnitude decomposer: thousand groups, magnitude words, plural suffixes and
the connecting "og".
"""

import pytest

from talord.core.domain.exceptions import NumberOutOfRangeError
from talord.core.numerals.magnitudes import name_magnitudes, split_groups


def test_split_groups_is_least_significant_first():
    assert split_groups(7_023_461) == [461, 23, 7]
    assert split_groups(1_000_001) == [1, 0, 1]
    assert split_groups(0) == []


@pytest.mark.parametrize(
    "number, expected",
    [
        (1000, "et tusind"),
        (1001, "et tusind og én"),
        (1010, "et tusind og ti"),
        (1100, "et tusind et hundrede"),
        (1234, "et tusind to hundrede og fireogtredive"),
        (2000, "to tusind"),
        (21_000, "enogtyve tusind"),
        (100_000, "et hundrede tusind"),
    ],
)
def test_thousands(lexicon, number, expected):
    assert name_magnitudes(number, lexicon) == expected


def test_thousand_is_never_pluralized(lexicon):
    assert name_magnitudes(5000, lexicon) == "fem tusind"
    assert "tusinder" not in name_magnitudes(999_000, lexicon)


def test_single_million_takes_common_gender_and_no_plural(lexicon):
    assert name_magnitudes(1_000_000, lexicon) == "en million"


def test_several_millions_are_pluralized(lexicon):
    assert name_magnitudes(2_000_000, lexicon) == "to millioner"


def test_group_gap_keeps_exactly_one_conjunction(lexicon):
    text = name_magnitudes(1_000_001, lexicon)
    assert text == "en million og én"
    assert text.split().count("og") == 1
    assert "  " not in text


@pytest.mark.parametrize(
    "number, expected",
    [
        (1_000_100, "en million og et hundrede"),
        (1_001_000, "en million et tusind"),
        (2_500_000, "to millioner fem hundrede tusind"),
        (
            7_023_461,
            "syv millioner treogtyve tusind fire hundrede og enogtres",
        ),
        (1_000_000_000, "en milliard"),
        (3_000_000_000, "tre milliarder"),
        (1_000_000_000_001, "en billion og én"),
        (10**36, "en sekstillion"),
    ],
)
def test_higher_magnitudes(lexicon, number, expected):
    assert name_magnitudes(number, lexicon) == expected


def test_largest_nameable_number(lexicon):
    text = name_magnitudes(10**39 - 1, lexicon)
    assert text.startswith("ni hundrede og nioghalvfems sekstillioner ")
    assert text.endswith(" tusind ni hundrede og nioghalvfems")


def test_past_the_ladder_raises(lexicon):
    with pytest.raises(NumberOutOfRangeError):
        name_magnitudes(10**39, lexicon)


def test_below_one_thousand_is_not_a_magnitude(lexicon):
    with pytest.raises(ValueError):
        name_magnitudes(999, lexicon)
