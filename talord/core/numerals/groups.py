"""
talord/core/numerals/groups.py

Digit group renderer: names any integer in [0, 999].

A group is read as three digits (hundreds, tens, ones). Danish places the
ones before the tens inside a compound ("femogtyve" = five-and-twenty) and
joins the hundreds to the rest with a spaced conjunction
("to hundrede og femogtyve").

This module is stateless; every word comes from the `NumeralLexicon`.
"""

from talord.core.domain.lexicon import NumeralLexicon


def nth_digit(number: int, n: int) -> int:
    """Return the n'th digit of `number`, counting from 1 at the ones place."""
    return number // 10 ** (n - 1) % 10


def unit_or_neuter(digit: int, lexicon: NumeralLexicon) -> str:
    """
    Name of a single digit standing as a bare quantity.

    "one" takes the neuter form here ("et", "et hundrede"); every other digit
    uses the plain unit list.
    """
    if digit == 1:
        return lexicon.neuter_one
    return lexicon.units[digit]


def _tens_and_ones(tens: int, ones: int, lexicon: NumeralLexicon) -> str:
    if tens == 0:
        if ones == 0:
            return ""
        if ones == 1:
            return lexicon.emphasized_one
        return lexicon.units[ones]

    if tens == 1:
        return lexicon.teens[ones]

    decade = lexicon.tens[tens - 2]
    if ones == 0:
        return decade

    # Compound of ones and tens, no spaces: "enogtyve"
    return f"{lexicon.units[ones]}{lexicon.conjunction}{decade}"


def name_group(group: int, lexicon: NumeralLexicon) -> str:
    """
    Name an integer in [0, 999].

        7   -> "syv"
        101 -> "et hundrede og én"
        999 -> "ni hundrede og nioghalvfems"
    """
    if not 0 <= group <= 999:
        raise ValueError(f"Digit group must be in [0, 999], got {group}")

    if group < 10:
        return unit_or_neuter(group, lexicon)

    hundreds = nth_digit(group, 3)
    tens = nth_digit(group, 2)
    ones = nth_digit(group, 1)

    hundreds_part = ""
    if hundreds > 0:
        hundreds_part = f"{unit_or_neuter(hundreds, lexicon)} {lexicon.hundred}"

    joint = ""
    if hundreds > 0 and tens + ones > 0:
        joint = f" {lexicon.conjunction} "

    return hundreds_part + joint + _tens_and_ones(tens, ones, lexicon)
