"""
talord/core/numerals/namer.py

Numeral namer: the public `name(number)` entry point.

Handles the sign and, for floats, the fractional part. Integers go to the
digit group renderer (below 1000) or the magnitude decomposer.

Floats are split once, on their decimal text:

- the integer part is `math.floor(value)` (so -3.5 has integer part -4),
- the fractional part is the digit string after the radix point, each digit
  read with the raw unit names ("nul", "en", "to", ...).

The decimal text is the shortest round-trip rendering of the float (what
`repr` prints) expanded to positional notation, so 1e-05 reads as 0.00001
and 1e+20 as an integer. No float arithmetic happens after the split.
"""

import math
from decimal import Decimal
from typing import Optional, Union

from talord.core.domain.exceptions import InvalidNumberError
from talord.core.domain.lexicon import NumeralLexicon, load_lexicon
from talord.core.numerals.groups import name_group
from talord.core.numerals.magnitudes import name_magnitudes

Number = Union[int, float]


def name_integer(number: int, lexicon: NumeralLexicon) -> str:
    if number < 0:
        return f"{lexicon.minus} {name_integer(-number, lexicon)}"
    if number < 1000:
        return name_group(number, lexicon)
    return name_magnitudes(number, lexicon)


def decimal_text(value: float) -> str:
    """Positional decimal text of a float, e.g. 1e-05 -> '0.00001'."""
    return format(Decimal(repr(value)), "f")


def name_float(value: float, lexicon: NumeralLexicon) -> str:
    if not math.isfinite(value):
        raise InvalidNumberError(f"Cannot name a non-finite number: {value!r}")

    whole = name_integer(math.floor(value), lexicon)
    if value.is_integer():
        return whole

    _, _, decimals = decimal_text(value).partition(".")
    digits = ", ".join(lexicon.units[int(d)] for d in decimals)
    return f"{whole} {lexicon.decimal_separator} {digits}"


def name(number: Number, lexicon: Optional[NumeralLexicon] = None) -> str:
    """
    Return the Danish compound numeral name of `number`.

    Args:
        number: An int of any sign, or a finite float.
        lexicon: Word tables to use; defaults to the process-wide lexicon.

    Raises:
        InvalidNumberError: for nan / inf.
        TypeError: for bool or any non-numeric type.
        NumberOutOfRangeError: past the largest magnitude in the ladder.
    """
    if lexicon is None:
        lexicon = load_lexicon()

    # bool is an int subclass; True must not read as "et".
    if isinstance(number, bool):
        raise TypeError("Expected int or float, got bool")
    if isinstance(number, float):
        return name_float(number, lexicon)
    if isinstance(number, int):
        return name_integer(number, lexicon)
    raise TypeError(f"Expected int or float, got {type(number).__name__}")
