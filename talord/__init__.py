"""
Talord: Danish compound numeral names.

    >>> from talord import name
    >>> name(7_023_461)
    'syv millioner treogtyve tusind fire hundrede og enogtres'
    >>> name(3.14)
    'tre komma en, fire'
"""

from talord.core.numerals.namer import name

__version__ = "1.0.0"

__all__ = ["name", "__version__"]
