# talord/core/domain/exceptions.py


class DomainError(Exception):
    """Base class for every error raised by the numeral domain."""


class InvalidNumberError(DomainError, ValueError):
    """Input text is not a number, or the number is not finite (nan, inf)."""


class NumberOutOfRangeError(DomainError, ValueError):
    """
    The number is larger than the biggest magnitude in the lexicon ladder
    can name.
    """

    def __init__(self, number: int, limit: int):
        self.number = number
        self.limit = limit
        exponent = len(str(limit)) - 1
        super().__init__(
            f"Numbers of {exponent + 1} or more digits cannot be named; "
            f"the magnitude ladder stops below 10^{exponent}."
        )


class BatchTooLargeError(DomainError, ValueError):
    """A batch request carries more numbers than the configured maximum."""


class LexiconError(DomainError):
    """A lexicon card is missing, unreadable or fails validation."""
