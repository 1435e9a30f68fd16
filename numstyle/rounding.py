"""
Rounding and power-of-ten helpers shared by the formatting branches.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from fractions import Fraction

# Local ----------------------------------------------------------------------------------------------------------------
from .options import RoundingRule

# Largest power of ten a double holds without overflowing to inf
_MAX_POW10 = 308

# Fractional residue treated as zero when counting increment digits
_INCREMENT_EPSILON = 1e-10

# Digits examined in an increment before giving up (double precision)
_INCREMENT_MAX_DIGITS = 15


# Methods --------------------------------------------------------------------------------------------------------------

def round_with_rule(value: float, rule: RoundingRule) -> float:
    """
    Round a float to an integral float using the given rule.

    Non-finite values are returned unchanged.

    Examples:
        >>> round_with_rule(2.5, RoundingRule.TO_NEAREST_OR_EVEN)
        2.0
        >>> round_with_rule(2.5, RoundingRule.TO_NEAREST_OR_AWAY_FROM_ZERO)
        3.0
        >>> round_with_rule(-2.1, RoundingRule.AWAY_FROM_ZERO)
        -3.0
        >>> round_with_rule(-2.7, RoundingRule.UP)
        -2.0
    """
    if not math.isfinite(value):
        return value

    rule = RoundingRule(rule)
    if rule == RoundingRule.TOWARD_ZERO:
        rounded = math.trunc(value)
    elif rule == RoundingRule.AWAY_FROM_ZERO:
        rounded = math.ceil(value) if value > 0 else math.floor(value)
    elif rule == RoundingRule.UP:
        rounded = math.ceil(value)
    elif rule == RoundingRule.DOWN:
        rounded = math.floor(value)
    elif rule == RoundingRule.TO_NEAREST_OR_EVEN:
        rounded = round(value)
    elif rule == RoundingRule.TO_NEAREST_OR_AWAY_FROM_ZERO:
        rounded = round_half_away(value)
    else:
        raise NotImplementedError(f"rounding rule {rule} not supported")

    # copysign keeps -0.0 for values like -0.4
    return math.copysign(float(rounded), value)


def round_half_away(value: float | Fraction) -> int:
    """
    Round a finite float or an exact Fraction to the nearest int, ties away from zero.

    Python's round() ties to even; formatting expects 0.5 → 1 and 2.5 → 3.
    The residue value - trunc(value) is exact for doubles and fractions, so
    there is no drift at the tie point (0.49999999999999994 stays 0).

    Examples:
        >>> round_half_away(2.5)
        3
        >>> round_half_away(Fraction(-5, 2))
        -3
    """
    truncated = math.trunc(value)
    if abs(value - truncated) >= 0.5:
        truncated += 1 if value > 0 else -1
    return truncated


def scale10(value: float, exponent: int) -> float:
    """
    Multiply value by 10**exponent without overflowing the power itself.

    10.0 ** 330 raises OverflowError while 5e-324 * 10**324 is a perfectly
    ordinary double, so the power is applied in steps that each fit a double.
    Negative exponents divide by the exact power of ten instead of
    multiplying by its inexact reciprocal: 314 / 100 is 3.14, 314 * 0.01 may not be.

    Examples:
        >>> scale10(1.5, 2)
        150.0
        >>> scale10(1234.0, -3)
        1.234
        >>> 4.9 < scale10(5e-324, 324) < 5.0
        True
    """
    if exponent >= 0:
        while exponent > _MAX_POW10:
            value *= 10.0 ** _MAX_POW10
            exponent -= _MAX_POW10
        return value * 10.0 ** exponent

    while exponent < -_MAX_POW10:
        value /= 10.0 ** _MAX_POW10
        exponent += _MAX_POW10
    return value / 10.0 ** -exponent


def increment_fraction_digits(increment: float) -> int | None:
    """
    Count the decimal places an increment needs to be shown exactly.

    Returns None for whole increments (5, 10.0), which impose no fraction
    digits, and at most 15 for increments that never settle.

    Examples:
        >>> increment_fraction_digits(0.05)
        2
        >>> increment_fraction_digits(0.5)
        1
        >>> increment_fraction_digits(25)
        None
    """
    if abs(increment - math.trunc(increment)) <= _INCREMENT_EPSILON:
        return None

    places = 0
    scaled = increment
    while abs(scaled - math.trunc(scaled)) > _INCREMENT_EPSILON and places < _INCREMENT_MAX_DIGITS:
        scaled *= 10
        places += 1
    return places
