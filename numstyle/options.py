"""
Option types for NumberStyle: notation, grouping, separators, signs, rounding and precision.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Literal, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Notation(StrEnum):
    """
    Notation for formatted numbers.

    Any notation other than AUTOMATIC replaces the regular precision logic.

    Attributes:
        AUTOMATIC: Plain positional digits, e.g. "1234.5"
        COMPACT_NAME: Short-scale suffix, e.g. "1.2K", "3M", "4.5B"
        SCIENTIFIC: Mantissa and power of ten, e.g. "1.234E3"
    """
    AUTOMATIC = "automatic"
    COMPACT_NAME = "compact_name"
    SCIENTIFIC = "scientific"


@unique
class Grouping(StrEnum):
    """
    Grouping policy for thousands separators.

    AUTOMATIC behaves like ALWAYS; there is no locale to decide otherwise.
    """
    AUTOMATIC = "automatic"
    ALWAYS = "always"
    NEVER = "never"


@unique
class DecimalSeparatorDisplay(StrEnum):
    """
    Whether the decimal separator is shown for values without fraction digits.

    Example:
        42 → "42" with AUTOMATIC, "42." with ALWAYS
    """
    AUTOMATIC = "automatic"
    ALWAYS = "always"


@unique
class RoundingRule(StrEnum):
    """
    Rounding rules applied to the scaled value before formatting.

    Attributes:
        TOWARD_ZERO: Truncate, 2.7 → 2, -2.7 → -2
        AWAY_FROM_ZERO: 2.1 → 3, -2.1 → -3
        UP: Toward +inf, 2.1 → 3, -2.7 → -2
        DOWN: Toward -inf, 2.7 → 2, -2.1 → -3
        TO_NEAREST_OR_EVEN: Ties to even, 2.5 → 2, 3.5 → 4
        TO_NEAREST_OR_AWAY_FROM_ZERO: Ties away from zero, 2.5 → 3, -2.5 → -3
    """
    TOWARD_ZERO = "toward_zero"
    AWAY_FROM_ZERO = "away_from_zero"
    UP = "up"
    DOWN = "down"
    TO_NEAREST_OR_EVEN = "to_nearest_or_even"
    TO_NEAREST_OR_AWAY_FROM_ZERO = "to_nearest_or_away_from_zero"


@dataclass(frozen=True)
class SignDisplay:
    """
    Sign display strategy.

    Attributes:
        strategy: One of
            - "automatic": "-" for negative values only
            - "never": no sign at all
            - "always": "-" for negative values, "+" for positive ones
        include_zero: With "always", also prefix exact zero with "+".

    Examples:
        >>> SignDisplay.always()                  # 42 → "+42", 0 → "0"
        >>> SignDisplay.always(include_zero=True) # 0 → "+0"
        >>> SignDisplay.never()                   # -42 → "42"
    """
    strategy: Literal["automatic", "never", "always"] = "automatic"
    include_zero: bool = False

    def __post_init__(self):
        if self.strategy not in ("automatic", "never", "always"):
            raise ValueError(f"sign strategy expected one of 'automatic', 'never', 'always' "
                             f"but found {fmt_value(self.strategy)}")
        if not isinstance(self.include_zero, bool):
            raise TypeError(f"include_zero must be bool, but got {fmt_type(self.include_zero)}")

    @classmethod
    def automatic(cls) -> Self:
        return cls(strategy="automatic")

    @classmethod
    def never(cls) -> Self:
        return cls(strategy="never")

    @classmethod
    def always(cls, include_zero: bool = False) -> Self:
        return cls(strategy="always", include_zero=include_zero)


@dataclass(frozen=True)
class Precision:
    """
    Precision settings applied by NumberStyle.with_precision().

    Each bound is a (min, max) pair where either side may be None. A Precision
    built by one factory carries only its own kind of bounds; the other kinds
    stay None and leave the matching style options untouched, so precisions
    layer when applied one after another.

    Attributes:
        fraction_bounds: Number of digits after the decimal separator.
        significant_bounds: Number of significant digits. Overrides fraction bounds when formatting.
        integer_bounds: Number of integer digits. The minimum zero-pads; the maximum is not enforced.

    Examples:
        >>> Precision.fraction_length(2)                  # 3.14159 → "3.14"
        >>> Precision.fraction_length(min_length=2)       # 42.0 → "42.00"
        >>> Precision.fraction_length(min_length=2, max_length=4)   # 3.14159 → "3.1416"
        >>> Precision.significant_digits(3)               # 1234 → "1230"
        >>> Precision.integer_length(4)                   # 42 → "0042"

    Raises:
        TypeError: If a bound is not int or None.
        ValueError: If a bound is negative (or < 1 for significant digits), or min > max.
    """
    fraction_bounds: tuple[int | None, int | None] | None = None
    significant_bounds: tuple[int | None, int | None] | None = None
    integer_bounds: tuple[int | None, int | None] | None = None

    def __post_init__(self):
        object.__setattr__(self, "fraction_bounds",
                           validate_bounds(self.fraction_bounds, name="fraction length", lowest=0))
        object.__setattr__(self, "significant_bounds",
                           validate_bounds(self.significant_bounds, name="significant digits", lowest=1))
        object.__setattr__(self, "integer_bounds",
                           validate_bounds(self.integer_bounds, name="integer length", lowest=0))

    @classmethod
    def fraction_length(cls, length: int | None = None, *,
                        min_length: int | None = None,
                        max_length: int | None = None) -> Self:
        """
        Fixed or ranged number of fraction digits.

        A fixed length sets both bounds. Without a maximum, up to 15 fraction
        digits are kept and trailing zeros are trimmed down to the minimum.
        """
        return cls(fraction_bounds=_fixed_or_range(length, min_length, max_length))

    @classmethod
    def significant_digits(cls, count: int | None = None, *,
                           min_digits: int | None = None,
                           max_digits: int | None = None) -> Self:
        """Fixed or ranged number of significant digits."""
        return cls(significant_bounds=_fixed_or_range(count, min_digits, max_digits))

    @classmethod
    def integer_length(cls, length: int | None = None, *,
                       min_length: int | None = None,
                       max_length: int | None = None) -> Self:
        """Fixed or ranged number of integer digits; values are zero-padded to the minimum."""
        return cls(integer_bounds=_fixed_or_range(length, min_length, max_length))


# Methods --------------------------------------------------------------------------------------------------------------

def validate_bounds(bounds, *, name: str, lowest: int) -> tuple[int | None, int | None] | None:
    """
    Validate an optional (min, max) pair of digit counts.

    Accepts any 2-item sequence and returns a tuple, so styles stay hashable.
    """
    if bounds is None:
        return None
    if isinstance(bounds, (str, bytes)) or not hasattr(bounds, "__len__") or len(bounds) != 2:
        raise TypeError(f"{name} bounds must be a (min, max) pair, but got {fmt_value(bounds)}")

    lower, upper = bounds
    for bound in (lower, upper):
        if bound is None:
            continue
        if isinstance(bound, bool) or not isinstance(bound, int):
            raise TypeError(f"{name} must be int or None, but got {fmt_type(bound)}")
        if bound < lowest:
            raise ValueError(f"{name} must be >= {lowest}, but got {fmt_value(bound)}")

    if lower is not None and upper is not None and lower > upper:
        raise ValueError(f"{name} minimum must not exceed maximum, but got {fmt_value((lower, upper))}")
    return (lower, upper)


def _fixed_or_range(fixed: int | None, lower: int | None, upper: int | None) -> tuple[int | None, int | None]:
    if fixed is not None:
        if lower is not None or upper is not None:
            raise ValueError("specify either a fixed count or min/max bounds, not both")
        return (fixed, fixed)
    return (lower, upper)
