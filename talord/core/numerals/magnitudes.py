"""
talord/core/numerals/magnitudes.py

Magnitude decomposer: names non-negative integers of 1000 and above.

The number is split into base-1000 digit groups. Take 7_023_461:

    split_groups(7_023_461) == [461, 23, 7]
                                ones  thousands  millions

Each group is named by the digit group renderer and tagged with its
magnitude word, then the fragments are joined most-significant first:

    "syv millioner treogtyve tusind fire hundrede og enogtres"
"""

from typing import List

from talord.core.domain.exceptions import NumberOutOfRangeError
from talord.core.domain.lexicon import NumeralLexicon
from talord.core.numerals.groups import name_group


def split_groups(number: int) -> List[int]:
    """Digit groups of `number`, least-significant group first."""
    groups = []
    while number > 0:
        groups.append(number % 1000)
        number //= 1000
    return groups


def name_magnitudes(number: int, lexicon: NumeralLexicon) -> str:
    """
    Name an integer >= 1000.

    Raises NumberOutOfRangeError when the number needs a magnitude word past
    the end of the lexicon ladder.
    """
    if number < 1000:
        raise ValueError(f"Magnitude naming starts at 1000, got {number}")
    if number >= lexicon.max_value:
        raise NumberOutOfRangeError(number, lexicon.max_value)

    groups = split_groups(number)
    # A missing thousands group counts as present
    thousands = groups[1] if len(groups) > 1 else 1

    fragments = []
    for i, value in enumerate(groups):
        if value == 0:
            continue

        fragment = name_group(value, lexicon)

        # Keep the "og" that links the ones group to the rest, also across a
        # zero thousands group: "en million og én", "et tusind og ti"
        if i == 0 and (value < 100 or thousands == 0):
            if value == 1:
                fragment = lexicon.emphasized_one
            fragment = f"{lexicon.conjunction} {fragment}"

        # Only "tusind" is neuter; million and up take "en"
        if i > 1 and value == 1:
            fragment = lexicon.plain_one

        if i > 0:
            suffix = lexicon.plural_suffix if i > 1 and value != 1 else ""
            fragment = f"{fragment} {lexicon.magnitudes[i - 1]}{suffix}"

        fragments.append(fragment)

    fragments.reverse()
    return " ".join(fragments)
