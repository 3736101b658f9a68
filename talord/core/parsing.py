# talord/core/parsing.py
"""
Input parsing for the surfaces (CLI, HTTP API).

Text is turned into an int when it is an integer literal, so long integers
keep every digit; anything else is read as a float. Text that is neither, and
non-finite floats, are rejected here so the namer never sees them.
"""

import math
import re
from typing import Union

from talord.core.domain.exceptions import InvalidNumberError

_INTEGER_LITERAL = re.compile(r"^[+-]?[0-9]+(?:_[0-9]+)*$")


def parse_number(text: str) -> Union[int, float]:
    raw = (text or "").strip()
    if not raw:
        raise InvalidNumberError("Empty input, expected a number.")

    if _INTEGER_LITERAL.match(raw):
        try:
            return int(raw)
        except ValueError as e:
            # int() refuses literals past sys.get_int_max_str_digits()
            raise InvalidNumberError(f"Integer literal too long: {len(raw)} characters.") from e

    try:
        value = float(raw)
    except ValueError as e:
        raise InvalidNumberError(f"Not a number: {raw!r}") from e

    if not math.isfinite(value):
        raise InvalidNumberError(f"Not a finite number: {raw!r}")

    return value
