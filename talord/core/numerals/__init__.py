from talord.core.numerals.groups import name_group
from talord.core.numerals.magnitudes import name_magnitudes, split_groups
from talord.core.numerals.namer import name, name_float, name_integer

__all__ = [
    "name",
    "name_float",
    "name_group",
    "name_integer",
    "name_magnitudes",
    "split_groups",
]
