"""
Numeric formatting engine: turn an int or float into text under a NumberStyle.

format_number() is total for numeric input. Every finite, infinite or NaN
value produces a string, and no style accepted by NumberStyle can make it raise.

Branches, in the order they are tried:

- Integer fast path: exact digits for ints when no option needs float arithmetic
- Special values: "NaN", "Infinity", "-Infinity"
- Notation: compact names ("1.2K") and scientific ("1.234E3")
- Significant digits
- Shortest round-trip digits: no fraction bounds configured
- Fixed fraction digits
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from fractions import Fraction
from typing import Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import std_numeric, to_float
from .options import DecimalSeparatorDisplay, Notation
from .rounding import increment_fraction_digits, round_half_away, round_with_rule, scale10
from .style import DEFAULT_STYLE, NumberStyle
from .tools import fmt_type

# Fraction digits extracted when repr() is exponential (|v| < 1e-4 or >= 1e16)
_DEFAULT_FRACTION_DIGITS = 15

# Fractions below this count as zero in the fixed path
_FRACTION_EPSILON = 1e-10

# Nudges scaled fractions that land just below a whole digit back up to it
_DIGIT_EPSILON = 1e-7

# Largest number of fraction digits extracted arithmetically; further places are zero-filled
_MAX_FRACTION_SCALE = 300

_DEFAULT_SIGNIFICANT_DIGITS = 3
_SCIENTIFIC_FRACTION_DIGITS = 6

_COMPACT_SUFFIXES = ((1e9, "B"), (1e6, "M"), (1e3, "K"))


# Methods --------------------------------------------------------------------------------------------------------------

def format_number(value, style: NumberStyle = DEFAULT_STYLE, *,
                  on_error: Literal["raise", "nan"] = "raise") -> str:
    """
    Format a numeric value as text according to a NumberStyle.

    Args:
        value: int, float or anything std_numeric() accepts (Decimal, Fraction,
            NumPy scalars, ...).
        style: Formatting configuration; the default renders shortest round-trip digits.
        on_error: "raise" raises TypeError for non-numeric input, "nan" formats it as "NaN".

    Returns:
        The formatted text.

    Raises:
        TypeError: If style is not a NumberStyle, or value is not numeric and on_error="raise".

    Examples:
        >>> format_number(3.14)
        '3.14'
        >>> format_number(1234567, NumberStyle(grouping_separator=","))
        '1,234,567'
        >>> format_number(2.5, NumberStyle(max_fraction_digits=0))
        '3'
        >>> format_number(float("-inf"))
        '-Infinity'
    """
    if not isinstance(style, NumberStyle):
        raise TypeError(f"style must be NumberStyle, but got {fmt_type(style)}")

    number = std_numeric(value, on_error=on_error)
    if isinstance(number, int):
        return _format_int(number, style)
    return _format_float(number, style)


def _format_int(value: int, style: NumberStyle) -> str:
    needs_float = (
            style.scale != 1.0
            or style.notation != Notation.AUTOMATIC
            or style.rounding_rule is not None
            or style.significant_digits is not None
            or style.min_fraction_digits is not None
            or style.decimal_separator_display == DecimalSeparatorDisplay.ALWAYS
    )
    if needs_float:
        return _format_float(to_float(value), style)
    return _apply_sign(_format_integer_part(abs(value), style), value < 0, value, style)


def _format_float(value: float, style: NumberStyle) -> str:
    value = value * style.scale

    increment_digits = None
    if style.rounding_rule is not None:
        increment = style.rounding_increment
        if increment is not None:
            value = round_with_rule(value / increment, style.rounding_rule) * increment
            increment_digits = increment_fraction_digits(increment)
        else:
            value = round_with_rule(value, style.rounding_rule)

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if style.notation != Notation.AUTOMATIC:
        return _format_notation(value, style)
    if style.significant_digits is not None:
        return _format_significant(value, style)

    is_negative = value < 0
    magnitude = abs(value)

    min_fraction = style.min_fraction_digits
    if increment_digits is not None:
        min_fraction = max(min_fraction or 0, increment_digits)

    if style.max_fraction_digits is None and min_fraction is None:
        text = _format_shortest(magnitude, style)
        if text is not None:
            return _apply_sign(text, is_negative, value, style)

    return _apply_sign(_format_fixed(magnitude, min_fraction, style), is_negative, value, style)


def _format_shortest(magnitude: float, style: NumberStyle) -> str | None:
    """
    Shortest digits that read back as the same double, or None if repr() is exponential.
    """
    digits = _shortest_digits(magnitude)
    if digits is None:
        return None

    integer_digits, fraction_digits = digits
    if not fraction_digits.strip("0"):
        fraction_digits = ""
    return _join_parts(_format_integer_part(int(integer_digits), style), fraction_digits, style)


def _shortest_digits(magnitude: float) -> tuple[str, str] | None:
    """
    Integer and fraction digits of repr(magnitude), or None where repr() is exponential.

    Examples:
        3.14159 → ("3", "14159"), 42.0 → ("42", "0"), 1e-05 → None
    """
    shortest = repr(magnitude)
    if "e" in shortest or "E" in shortest:
        return None
    integer_digits, _, fraction_digits = shortest.partition(".")
    return integer_digits, fraction_digits


def _format_fixed(magnitude: float, min_fraction: int | None, style: NumberStyle) -> str:
    """
    Fraction digits within the configured bounds.

    With a maximum, the exact binary value is rounded half away from zero at
    that place, so 0.1 to 25 places shows the double's true expansion. Without
    one, the shortest repr() digits are padded to the minimum; only values
    whose repr() is exponential fall back to 15 extracted digits.
    """
    max_fraction = style.max_fraction_digits
    keep = min_fraction or 0

    if max_fraction is not None:
        scaled = round_half_away(Fraction(magnitude) * 10 ** max_fraction)
        integer_part, fraction_part = divmod(scaled, 10 ** max_fraction)
        fraction_text = str(fraction_part).rjust(max_fraction, "0") if max_fraction else ""
        fraction_text = fraction_text.ljust(keep, "0")
    elif (digits := _shortest_digits(magnitude)) is not None:
        integer_digits, fraction_text = digits
        integer_part = int(integer_digits)
        fraction_text = fraction_text.ljust(keep, "0")
    else:
        places = max(_DEFAULT_FRACTION_DIGITS, keep)
        integer_part = int(magnitude)
        fraction = magnitude - integer_part
        if abs(fraction) < _FRACTION_EPSILON and min_fraction is None:
            fraction_text = ""
        else:
            fraction_text = _fraction_digits(fraction, places)

    fraction_text = _trim_zeros(fraction_text, keep=keep)
    return _join_parts(_format_integer_part(integer_part, style), fraction_text, style)


def _fraction_digits(fraction: float, places: int) -> str:
    """Exactly `places` decimal digits of a fraction in [0, 1), truncated."""
    extracted = min(places, _MAX_FRACTION_SCALE)
    scaled = int(scale10(fraction, extracted) + _DIGIT_EPSILON)
    digits = []
    for _ in range(extracted):
        scaled, digit = divmod(scaled, 10)
        digits.append(str(digit))
    return "".join(reversed(digits)) + "0" * (places - extracted)


def _format_significant(value: float, style: NumberStyle) -> str:
    min_digits, max_digits = style.significant_digits
    is_negative = value < 0
    magnitude = abs(value)
    zero_text = _format_integer_part(0, style)

    if magnitude == 0:
        fraction_text = "0" * (min_digits - 1) if min_digits is not None and min_digits > 1 else ""
        return _apply_sign(_join_parts(zero_text, fraction_text, style), is_negative, value, style)

    target = _target_significant_digits(magnitude, min_digits, max_digits)
    if magnitude >= 1:
        exponent = math.floor(math.log10(magnitude))
    else:
        exponent = math.ceil(math.log10(magnitude)) - 1
    exponent = _normalize_exponent(magnitude, exponent)

    places = target - (exponent + 1)
    if places >= 0:
        scaled = round_half_away(scale10(magnitude, places))
        integer_part, fraction_part = divmod(scaled, 10 ** places)
        fraction_text = str(fraction_part).rjust(places, "0") if places else ""
    else:
        integer_part = round_half_away(scale10(magnitude, places)) * 10 ** -places
        fraction_text = ""

    if min_digits is None or min_digits == max_digits:
        fraction_text = fraction_text.rstrip("0")

    if min_digits is not None:
        if integer_part:
            shown = len(str(integer_part)) + len(fraction_text)
        else:
            shown = len(fraction_text.lstrip("0"))
        if shown < min_digits:
            fraction_text += "0" * (min_digits - shown)

    text = _join_parts(_format_integer_part(integer_part, style), fraction_text, style)
    return _apply_sign(text, is_negative, value, style)


def _target_significant_digits(magnitude: float, min_digits: int | None, max_digits: int | None) -> int:
    """
    Number of significant digits to render.

    With both bounds, the nonzero digits of the shortest repr are clamped into
    the range; this is a heuristic and ignores zeros inside the number (1.05 counts 2).
    """
    if min_digits is not None and max_digits is not None:
        natural = sum(1 for ch in repr(magnitude) if ch.isdigit() and ch != "0")
        return min(max(natural, min_digits), max_digits)
    if max_digits is not None:
        return max_digits
    if min_digits is not None:
        return min_digits
    return _DEFAULT_SIGNIFICANT_DIGITS


def _normalize_exponent(magnitude: float, exponent: int) -> int:
    """Correct a log10 estimate so that 10**exponent <= magnitude < 10**(exponent + 1)."""
    if scale10(magnitude, -exponent) >= 10:
        return exponent + 1
    if scale10(magnitude, -exponent) < 1:
        return exponent - 1
    return exponent


def _format_notation(value: float, style: NumberStyle) -> str:
    is_negative = value < 0
    magnitude = abs(value)

    if style.notation == Notation.COMPACT_NAME:
        text = _format_compact(magnitude, style)
    elif style.notation == Notation.SCIENTIFIC:
        text = _format_scientific(magnitude, style)
    else:
        raise NotImplementedError(f"notation {style.notation} not supported")
    return _apply_sign(text, is_negative, value, style)


def _format_compact(magnitude: float, style: NumberStyle) -> str:
    """
    Short-scale suffixes K, M, B; values below one thousand are truncated to an integer.

    Examples:
        1500 → "1.5K", 2_000_000 → "2M", 999 → "999", 999.9 → "999"
    """
    for threshold, suffix in _COMPACT_SUFFIXES:
        if magnitude >= threshold:
            return _format_compact_mantissa(magnitude / threshold, style) + suffix
    return str(int(magnitude))


def _format_compact_mantissa(mantissa: float, style: NumberStyle) -> str:
    max_fraction = style.max_fraction_digits
    if max_fraction is None:
        integer_part, fraction_part = divmod(round_half_away(mantissa * 10), 10)
        fraction_text = str(fraction_part) if fraction_part else ""
    else:
        scaled = round_half_away(scale10(mantissa, max_fraction))
        integer_part, fraction_part = divmod(scaled, 10 ** max_fraction)
        fraction_text = str(fraction_part).rjust(max_fraction, "0") if max_fraction else ""
        fraction_text = _trim_zeros(fraction_text, keep=style.min_fraction_digits or 0)

    if fraction_text:
        return f"{integer_part}{style.decimal_separator}{fraction_text}"
    return str(integer_part)


def _format_scientific(magnitude: float, style: NumberStyle) -> str:
    """
    Mantissa in [1, 10) followed by "E" and the decimal exponent.

    Examples:
        1234 → "1.234E3", 0.00012 → "1.2E-4", 1000 → "1E3"
    """
    if magnitude == 0:
        return "0E0"

    exponent = _normalize_exponent(magnitude, math.floor(math.log10(magnitude)))
    mantissa = scale10(magnitude, -exponent)

    if style.significant_digits is not None:
        min_digits, max_digits = style.significant_digits
        digits = max_digits if max_digits is not None else min_digits
        places = max((digits or _DEFAULT_SIGNIFICANT_DIGITS) - 1, 0)
    elif mantissa.is_integer():
        places = 0
    else:
        places = _SCIENTIFIC_FRACTION_DIGITS

    scaled = round_half_away(scale10(mantissa, places))
    # 9.9999999 rounds up to 10.000000
    if scaled >= 10 ** (places + 1):
        scaled //= 10
        exponent += 1

    integer_part, fraction_part = divmod(scaled, 10 ** places)
    fraction_text = str(fraction_part).rjust(places, "0").rstrip("0") if places else ""
    if fraction_text:
        return f"{integer_part}{style.decimal_separator}{fraction_text}E{exponent}"
    return f"{integer_part}E{exponent}"


def _format_integer_part(value: int, style: NumberStyle) -> str:
    """
    Digits of a non-negative int, zero-padded to the minimum integer length and grouped by thousands.

    The maximum integer length is not enforced; digits are never dropped.
    """
    digits = str(value)
    if style.integer_length is not None:
        min_length = style.integer_length[0]
        if min_length is not None and len(digits) < min_length:
            digits = digits.rjust(min_length, "0")

    if style.grouping_separator is not None and len(digits) > 3:
        digits = _group_digits(digits, style.grouping_separator)
    return digits


def _group_digits(digits: str, separator: str) -> str:
    parts = []
    for index, digit in enumerate(digits):
        if index > 0 and (len(digits) - index) % 3 == 0:
            parts.append(separator)
        parts.append(digit)
    return "".join(parts)


def _join_parts(integer_text: str, fraction_text: str, style: NumberStyle) -> str:
    if fraction_text:
        return f"{integer_text}{style.decimal_separator}{fraction_text}"
    if style.decimal_separator_display == DecimalSeparatorDisplay.ALWAYS:
        return f"{integer_text}{style.decimal_separator}"
    return integer_text


def _trim_zeros(fraction_text: str, *, keep: int) -> str:
    """Strip trailing zeros but never below `keep` digits."""
    while len(fraction_text) > keep and fraction_text.endswith("0"):
        fraction_text = fraction_text[:-1]
    return fraction_text


def _apply_sign(text: str, is_negative: bool, value: int | float, style: NumberStyle) -> str:
    sign = style.sign_display
    if sign.strategy == "never":
        return text
    if is_negative:
        return f"-{text}"
    if sign.strategy == "always" and (value != 0 or sign.include_zero):
        return f"+{text}"
    return text
