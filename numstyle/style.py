"""
Immutable numeric format style with a chainable builder API.

Every setter returns a new NumberStyle; the original is never modified, so a
style can be built once and shared as a template between threads.

Example:
    >>> style = DEFAULT_STYLE.with_grouping(Grouping.ALWAYS).with_precision(Precision.fraction_length(2))
    >>> style.format(1234567.891)
    '1,234,567.89'
    >>> DEFAULT_STYLE.format(1234567.891)
    '1234567.891'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import inspect
import math
import warnings
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Literal, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .options import DecimalSeparatorDisplay, Grouping, Notation, Precision, RoundingRule, SignDisplay
from .options import validate_bounds
from .sentinels import UNSET, UnsetType, ifunset
from .tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class NumberStyle:
    """
    Formatting options for converting a number to text.

    Build styles from DEFAULT_STYLE with the with_* setters, or adjust any
    field directly with merge(). Options are validated on construction;
    formatting itself never raises for numeric input.

    Attributes:
        max_fraction_digits: Upper bound on fraction digits; None keeps up to 15 (or the shortest repr).
        min_fraction_digits: Lower bound on fraction digits, zero-padded.
        grouping_separator: Inserted every 3 integer digits; None disables grouping.
        decimal_separator: Text joining the integer and fraction parts.
        notation: AUTOMATIC, COMPACT_NAME or SCIENTIFIC.
        sign_display: Sign strategy, see SignDisplay.
        rounding_rule: Rule used to round the scaled value; None disables rounding.
        rounding_increment: Step the value snaps to when a rounding rule is set.
        decimal_separator_display: Whether to show the separator for values without fraction digits.
        scale: Multiplier applied before anything else (100 for percent values).
        significant_digits: (min, max) significant digits; takes precedence over fraction digits.
        integer_length: (min, max) integer digits; the minimum zero-pads, the maximum is not enforced.

    Examples:
        >>> DEFAULT_STYLE.format(42)
        '42'
        >>> DEFAULT_STYLE.with_precision(Precision.fraction_length(min_length=2)).format(42.0)
        '42.00'
        >>> DEFAULT_STYLE.with_notation(Notation.COMPACT_NAME).format(1000)
        '1K'
        >>> DEFAULT_STYLE.with_notation("scientific").format(1234)
        '1.234E3'
        >>> DEFAULT_STYLE.with_sign(SignDisplay.always(include_zero=True)).format(0)
        '+0'

    Raises:
        TypeError: Invalid option types (e.g., str for scale, float for digit counts).
        ValueError: Invalid option values (e.g., negative digit counts, min > max,
            non-positive rounding increment, unknown notation name).
    """
    max_fraction_digits: int | None = None
    min_fraction_digits: int | None = None
    grouping_separator: str | None = None
    decimal_separator: str = "."
    notation: Notation = Notation.AUTOMATIC
    sign_display: SignDisplay = field(default_factory=SignDisplay.automatic)
    rounding_rule: RoundingRule | None = None
    rounding_increment: float | None = None
    decimal_separator_display: DecimalSeparatorDisplay = DecimalSeparatorDisplay.AUTOMATIC
    scale: float = 1.0
    significant_digits: tuple[int | None, int | None] | None = None
    integer_length: tuple[int | None, int | None] | None = None

    def __post_init__(self):
        """
        Validate and normalize fields
        """
        # fraction digits
        fraction_bounds = validate_bounds((self.min_fraction_digits, self.max_fraction_digits),
                                          name="fraction digits", lowest=0)
        object.__setattr__(self, "min_fraction_digits", fraction_bounds[0])
        object.__setattr__(self, "max_fraction_digits", fraction_bounds[1])

        # separators
        if not isinstance(self.grouping_separator, (str, type(None))):
            raise TypeError(f"grouping_separator must be str or None, but got {fmt_type(self.grouping_separator)}")
        if not isinstance(self.decimal_separator, str):
            raise TypeError(f"decimal_separator must be str, but got {fmt_type(self.decimal_separator)}")

        # enum options, accepting their string values
        object.__setattr__(self, "notation", _enum_option(Notation, self.notation, name="notation"))
        object.__setattr__(self, "decimal_separator_display",
                           _enum_option(DecimalSeparatorDisplay, self.decimal_separator_display,
                                        name="decimal_separator_display"))
        if self.rounding_rule is not None:
            object.__setattr__(self, "rounding_rule",
                               _enum_option(RoundingRule, self.rounding_rule, name="rounding_rule"))

        # sign
        if isinstance(self.sign_display, str):
            object.__setattr__(self, "sign_display", SignDisplay(strategy=self.sign_display))
        if not isinstance(self.sign_display, SignDisplay):
            raise TypeError(f"sign_display must be SignDisplay, but got {fmt_type(self.sign_display)}")

        # scale
        if isinstance(self.scale, bool) or not isinstance(self.scale, (int, float)):
            raise TypeError(f"scale must be int | float, but got {fmt_type(self.scale)}")
        object.__setattr__(self, "scale", float(self.scale))

        # rounding increment
        self._validate_rounding_increment()

        # significant digits, integer length
        object.__setattr__(self, "significant_digits",
                           validate_bounds(self.significant_digits, name="significant digits", lowest=1))
        object.__setattr__(self, "integer_length",
                           validate_bounds(self.integer_length, name="integer length", lowest=0))

    def merge(self,
              max_fraction_digits: int | None | UnsetType = UNSET,
              min_fraction_digits: int | None | UnsetType = UNSET,
              grouping_separator: str | None | UnsetType = UNSET,
              decimal_separator: str | UnsetType = UNSET,
              notation: Notation | str | UnsetType = UNSET,
              sign_display: SignDisplay | str | UnsetType = UNSET,
              rounding_rule: RoundingRule | str | None | UnsetType = UNSET,
              rounding_increment: float | None | UnsetType = UNSET,
              decimal_separator_display: DecimalSeparatorDisplay | str | UnsetType = UNSET,
              scale: float | UnsetType = UNSET,
              significant_digits: tuple[int | None, int | None] | None | UnsetType = UNSET,
              integer_length: tuple[int | None, int | None] | None | UnsetType = UNSET,
              ) -> Self:
        """
        Create a new NumberStyle with merged options.

        Parameters not provided (UNSET) are inherited from the current instance;
        None clears an optional setting.

        Returns:
            New NumberStyle instance with merged configuration.
        """
        return type(self)(
            max_fraction_digits=ifunset(max_fraction_digits, default=self.max_fraction_digits),
            min_fraction_digits=ifunset(min_fraction_digits, default=self.min_fraction_digits),
            grouping_separator=ifunset(grouping_separator, default=self.grouping_separator),
            decimal_separator=ifunset(decimal_separator, default=self.decimal_separator),
            notation=ifunset(notation, default=self.notation),
            sign_display=ifunset(sign_display, default=self.sign_display),
            rounding_rule=ifunset(rounding_rule, default=self.rounding_rule),
            rounding_increment=ifunset(rounding_increment, default=self.rounding_increment),
            decimal_separator_display=ifunset(decimal_separator_display, default=self.decimal_separator_display),
            scale=ifunset(scale, default=self.scale),
            significant_digits=ifunset(significant_digits, default=self.significant_digits),
            integer_length=ifunset(integer_length, default=self.integer_length),
        )

    def with_precision(self, precision: Precision) -> Self:
        """
        Configure precision.

        Only the bounds carried by precision are replaced, so fraction length,
        significant digits and integer length can be layered by chaining.

        Examples:
            >>> fmt = DEFAULT_STYLE.with_precision
            >>> fmt(Precision.fraction_length(2)).format(3.14159)
            '3.14'
            >>> fmt(Precision.fraction_length(min_length=2, max_length=4)).format(3.14159)
            '3.1416'
            >>> fmt(Precision.significant_digits(3)).format(1234)
            '1230'
            >>> fmt(Precision.integer_length(4)).format(42)
            '0042'
        """
        if not isinstance(precision, Precision):
            raise TypeError(f"precision must be Precision, but got {fmt_type(precision)}")

        min_fraction_digits = max_fraction_digits = significant_digits = integer_length = UNSET
        if precision.fraction_bounds is not None:
            min_fraction_digits, max_fraction_digits = precision.fraction_bounds
        if precision.significant_bounds is not None:
            significant_digits = precision.significant_bounds
        if precision.integer_bounds is not None:
            integer_length = precision.integer_bounds

        return self.merge(min_fraction_digits=min_fraction_digits,
                          max_fraction_digits=max_fraction_digits,
                          significant_digits=significant_digits,
                          integer_length=integer_length)

    def with_grouping(self, policy: Grouping | str, separator: str = ",") -> Self:
        """
        Configure the grouping separator.

        Examples:
            >>> DEFAULT_STYLE.with_grouping(Grouping.ALWAYS).format(1234567)
            '1,234,567'
            >>> DEFAULT_STYLE.with_grouping("always", separator=".").format(1234567)
            '1.234.567'
        """
        policy = _enum_option(Grouping, policy, name="grouping policy")
        if policy == Grouping.NEVER:
            return self.merge(grouping_separator=None)
        return self.merge(grouping_separator=separator)

    def with_decimal_separator(self, separator: str) -> Self:
        """Configure the decimal separator text, e.g. "," for 3.14 → "3,14"."""
        return self.merge(decimal_separator=separator)

    def with_decimal_separator_display(self, strategy: DecimalSeparatorDisplay | str) -> Self:
        """Configure whether the decimal separator shows for values without fraction digits (42 → "42.")."""
        return self.merge(decimal_separator_display=strategy)

    def with_notation(self, notation: Notation | str) -> Self:
        """Configure notation: 1000 → "1K" with COMPACT_NAME, 1234 → "1.234E3" with SCIENTIFIC."""
        return self.merge(notation=notation)

    def with_sign(self, strategy: SignDisplay | Literal["automatic", "never", "always"]) -> Self:
        """Configure sign display: 42 → "+42" with SignDisplay.always()."""
        return self.merge(sign_display=strategy)

    def with_scale(self, scale: float) -> Self:
        """Configure the multiplier applied before formatting: 0.25 → "25" with scale 100."""
        return self.merge(scale=scale)

    def with_rounding(self, rule: RoundingRule | str | None, increment: float | None = None) -> Self:
        """
        Configure rounding of the scaled value.

        Without an increment the value is rounded to a whole number. With an
        increment the value snaps to the nearest multiple of it, and the
        increment's decimal places become the minimum fraction digits.
        Pass rule=None to disable rounding.

        Examples:
            >>> DEFAULT_STYLE.with_rounding(RoundingRule.DOWN).format(2.7)
            '2'
            >>> DEFAULT_STYLE.with_rounding(RoundingRule.TO_NEAREST_OR_AWAY_FROM_ZERO, increment=0.05).format(1.23)
            '1.25'
        """
        if rule is None:
            return self.merge(rounding_rule=None, rounding_increment=None)
        return self.merge(rounding_rule=rule, rounding_increment=increment)

    def format(self, value) -> str:
        """Format value with this style. See format_number()."""
        from .engine import format_number
        return format_number(value, self)

    def _validate_rounding_increment(self):
        increment = self.rounding_increment
        if increment is None:
            return
        if isinstance(increment, bool) or not isinstance(increment, (int, float)):
            raise TypeError(f"rounding_increment must be int | float | None, but got {fmt_type(increment)}")
        if not math.isfinite(increment) or increment <= 0:
            raise ValueError(f"rounding_increment must be a finite number > 0, but got {fmt_value(increment)}")
        object.__setattr__(self, "rounding_increment", float(increment))

        if self.rounding_rule is None:
            warnings.warn(
                f"rounding_increment {increment!r} has no effect without a rounding_rule",
                UserWarning,
                stacklevel=_caller_stacklevel()
            )


# Methods --------------------------------------------------------------------------------------------------------------

def _caller_stacklevel() -> int:
    """
    Stack level of the first frame outside this module, for warnings raised while building a style.

    NumberStyle(...), merge() and the with_* setters reach __post_init__ through
    different depths; the warning must point at user code for all of them.
    The dataclass-generated __init__ runs with this module's globals and is skipped too.
    """
    frame = inspect.currentframe()
    level = 0
    try:
        while frame is not None and frame.f_globals.get("__name__") == __name__:
            frame = frame.f_back
            level += 1
    finally:
        del frame
    return level


def _enum_option(enum_cls: type[StrEnum], value, *, name: str):
    """Coerce an enum member or its string value, raising ValueError with the valid choices."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise TypeError(f"{name} must be {enum_cls.__name__} or str, but got {fmt_type(value)}")
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(repr(member.value) for member in enum_cls)
        raise ValueError(f"{name} expected one of {choices} but found {fmt_value(value)}") from None


# Defaults -------------------------------------------------------------------------------------------------------------

DEFAULT_STYLE = NumberStyle()
"""
Default style: scale 1.0, automatic notation, sign and separator display,
"." as decimal separator, no grouping, no precision bounds.
"""
