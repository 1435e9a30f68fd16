"""
Sentinel for optional arguments where None is a meaningful value.

NumberStyle.merge() and the style setters take UNSET for "keep the current
option" because None already means "option cleared" (no grouping, no
fraction bounds, no rounding rule).

Example:
    >>> style = DEFAULT_STYLE.merge(grouping_separator=",")
    >>> style.merge(grouping_separator=None).grouping_separator is None
    True
    >>> style.merge().grouping_separator
    ','
"""

from typing import Any, Final

__all__ = [
    'UNSET',
    'UnsetType',
    'ifunset',
]


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Singleton type of UNSET.

    Compares by identity, is falsy, and survives pickling and copying as
    the same object so frozen styles holding it stay equal after a round trip.
    """
    __slots__ = ()

    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __reduce__(self) -> tuple:
        return (self.__class__, ())


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNSET: Final[UnsetType] = UnsetType()
"""
Unprovided optional argument. Check with identity: `if arg is UNSET:`
"""


# Helper Functions -----------------------------------------------------------------------------------------------------

def ifunset(value: Any, *, default: Any) -> Any:
    """Return default if value is UNSET, otherwise value (None included)."""
    return default if value is UNSET else value
