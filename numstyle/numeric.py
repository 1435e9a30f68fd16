"""
Normalize numeric inputs from Python stdlib and third-party libraries.

The formatting engine works on exactly two kinds of numbers: Python int
(exact digits, arbitrary size) and Python float (IEEE 754 double). Everything
a caller may hand to format_number() is reduced to one of those here.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from typing import Literal, Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


def std_numeric(
        value,
        *,
        on_error: Literal["raise", "nan"] = "raise",
        allow_bool: bool = False
) -> int | float:
    """
    Convert a numeric value to a standard Python int or float.

    Parameters
    ----------
    value : various
        Numeric value to convert. Supports Python int/float, Decimal,
        Fraction, and third-party scalars via __index__, .item(), .value,
        __int__ or __float__.

    on_error : {"raise", "nan"}, default "raise"
        How to handle unsupported types (str, list, None, ...):

        - "raise": Raise TypeError
        - "nan": Return float('nan'), which formats as "NaN"

        Non-finite floats are valid numbers and always pass through unchanged.

    allow_bool : bool, default False
        If True, convert bool to int (True→1, False→0). Otherwise bool is
        treated as an unsupported type.

    Returns
    -------
    int
        For Python int, types implementing __index__ (NumPy integers),
        integer-valued Decimal/Fraction (Decimal('42.0') → 42), and types
        implementing only __int__.

    float
        For float values and float-like types, including inf, -inf, nan and
        signed zero. Fractional Decimal/Fraction beyond double range become
        ±inf or ±0.0.

    Raises
    ------
    TypeError
        When on_error="raise" and the value is not numeric.

    Detection Priority
    ------------------
    1. int/float fast path
    2. pandas.NA, numpy.ma.masked → nan
    3. __index__() → int (NumPy integers)
    4. .item() → int or float (NumPy, PyTorch, JAX scalars)
    5. .value with .unit (Astropy Quantity)
    6. integer-valued Decimal/Fraction → int
    7. __int__() → int (when __float__ not available)
    8. __float__() → float

    Examples
    --------
    >>> std_numeric(42)
    42
    >>> std_numeric(Decimal('42.0'))
    42
    >>> std_numeric(Fraction(1, 4))
    0.25
    >>> std_numeric("42")
    Traceback (most recent call last):
        ...
    TypeError: unsupported numeric type: <type: str>...
    >>> std_numeric("42", on_error="nan")
    nan
    """
    if on_error not in ("raise", "nan"):
        raise ValueError(f"on_error must be 'raise' or 'nan', but got {on_error!r}")

    if isinstance(value, bool):
        if allow_bool:
            return int(value)
        return _unsupported(value, on_error, reason="boolean values not supported")

    # Subclasses (numpy.float64, IntEnum) are narrowed so repr() stays plain
    if isinstance(value, int):
        return value if type(value) is int else int(value)
    if isinstance(value, float):
        return value if type(value) is float else float(value)

    if value is None:
        return _unsupported(value, on_error)

    # pandas.NA and numpy.ma.masked, detected without importing either library
    cls = type(value)
    cls_name = getattr(cls, "__name__", "")
    cls_module = getattr(cls, "__module__", "") or ""
    if cls_name == "NAType" and "pandas" in cls_module:
        return math.nan
    if cls_name == "MaskedConstant" and cls_module.startswith("numpy.ma"):
        return math.nan

    if hasattr(value, '__index__'):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            if on_error == "raise":
                raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e
            return math.nan

    if hasattr(value, 'item') and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, bool):
            if allow_bool:
                return int(result)
            return _unsupported(value, on_error, reason="boolean values not supported (from .item())")
        if isinstance(result, (int, float)):
            return result

    if hasattr(value, 'value') and hasattr(value, 'unit'):
        try:
            magnitude = value.value
        except (TypeError, ValueError, AttributeError):
            magnitude = None
        if magnitude is not None and magnitude is not value:
            return std_numeric(magnitude, on_error=on_error, allow_bool=allow_bool)

    if type(value).__name__ in ('Decimal', 'Fraction') and hasattr(value, '__int__'):
        try:
            if not _is_finite_decimal(value):
                return float(value)
            as_int = int(value)
            if value == type(value)(as_int):
                return as_int
        except (TypeError, ValueError, OverflowError):
            pass

    if hasattr(value, '__int__') and not hasattr(value, '__float__'):
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError) as e:
            if on_error == "raise":
                raise TypeError(f"cannot convert {fmt_type(value)} to int via __int__: {e}") from e
            return math.nan

    if isinstance(value, SupportsFloat):
        try:
            return float(value)
        except OverflowError:
            # Fraction(10**400, 3) and similar: saturate like Decimal does
            return math.inf if value > 0 else -math.inf
        except (TypeError, ValueError) as e:
            if on_error == "raise":
                raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e
            return math.nan

    return _unsupported(value, on_error)


def to_float(value: int | float) -> float:
    """
    Convert an int or float to float, saturating to ±inf instead of raising.

    Python ints are unbounded; float(10**400) raises OverflowError.
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _is_finite_decimal(value) -> bool:
    is_finite = getattr(value, "is_finite", None)
    return is_finite() if callable(is_finite) else True


def _unsupported(value, on_error: str, *, reason: str | None = None) -> float:
    if on_error == "nan":
        return math.nan
    if reason is not None:
        raise TypeError(f"{reason}, got {value!r}. Set allow_bool=True to convert booleans to int")
    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, or types implementing __index__, __int__, "
        f"__float__, .item(), or having .value attribute (e.g., numpy scalars, "
        f"Decimal, Fraction, Quantity.value)"
    )
