"""
Utility functions for data entities.

The decimal boundary and the fixed-point helpers shared by every entity.
All arithmetic runs in DECIMAL_CONTEXT so results never depend on the
caller's thread-local decimal context.
"""

from datetime import datetime, timezone
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Context,
    Decimal,
    DivisionByZero as DecimalDivisionByZero,
    InvalidOperation,
    Overflow,
    ROUND_HALF_UP,
)
from typing import Any, Dict, Optional, Union

from .exceptions import InvalidNumericValue, InvalidTimestamp, NonFiniteValue

NumericInput = Union[str, int, float, Decimal]

# Unbounded precision: add, subtract, multiply, scaleb and quantize are exact.
# Only operations with a finite exact result may run in this context.
DECIMAL_CONTEXT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    rounding=ROUND_HALF_UP,
    traps=[InvalidOperation, DecimalDivisionByZero, Overflow],
)


def is_numeric_input(value: Any) -> bool:
    """Check that value is one of the accepted numeric input types."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float, Decimal))


def to_decimal(value: NumericInput) -> Decimal:
    """
    Convert a value to a Decimal.

    Decimal input is returned as-is. Strings, ints and floats are parsed
    through their string form, so 0.1 becomes Decimal("0.1"). Digit
    separators ("1_000") are not numeric notation and are rejected.

    Args:
        value: A string, int, float or Decimal

    Returns:
        The finite Decimal value

    Raises:
        InvalidNumericValue: If the value cannot be parsed or is NaN
        NonFiniteValue: If the value is positive or negative infinity
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, str) and "_" in value:
        raise InvalidNumericValue(
            f"Invalid numeric value: {value!r} - cannot convert to Decimal"
        )
    elif isinstance(value, int) and not isinstance(value, bool):
        result = DECIMAL_CONTEXT.create_decimal(value)
    elif is_numeric_input(value):
        try:
            result = DECIMAL_CONTEXT.create_decimal(str(value))
        except InvalidOperation:
            raise InvalidNumericValue(
                f"Invalid numeric value: {value!r} - cannot convert to Decimal"
            ) from None
    else:
        raise InvalidNumericValue(
            f"Invalid numeric value: {value!r} - cannot convert to Decimal"
        )

    if result.is_nan():
        raise InvalidNumericValue(
            f"Invalid numeric value: {value!r} - cannot convert to Decimal"
        )
    if result.is_infinite():
        raise NonFiniteValue(
            f"Non-finite numeric value: {value!r} - Infinity is not allowed"
        )
    return result


def pow10(exponent: int) -> Decimal:
    """Exact 10 ** exponent; negative exponents give 0.1, 0.01, ..."""
    return Decimal(1).scaleb(exponent, context=DECIMAL_CONTEXT)


def shift(value: Decimal, exponent: int) -> Decimal:
    """Exact value * 10 ** exponent."""
    return value.scaleb(exponent, context=DECIMAL_CONTEXT)


def round_to_integer(value: Decimal, rounding: str) -> Decimal:
    """Round value to an integral Decimal with the given rounding mode."""
    return value.to_integral_value(rounding=rounding, context=DECIMAL_CONTEXT)


def _quantize(value: Decimal, places: Optional[int]) -> Decimal:
    if places is None:
        value = value.normalize(DECIMAL_CONTEXT)
    else:
        value = value.quantize(
            pow10(-places), rounding=ROUND_HALF_UP, context=DECIMAL_CONTEXT
        )
    if value.is_zero():
        # never render "-0"
        value = value.copy_abs()
    return value


def to_fixed(value: Decimal, places: Optional[int] = None) -> str:
    """
    Render value as a plain fixed-point string.

    Args:
        value: Decimal to render
        places: Decimal places to round to (half-up); None keeps the
            significant digits and drops trailing zeros

    Returns:
        String without exponent notation, e.g. "1.50000000"
    """
    return format(_quantize(value, places), "f")


def to_format(value: Decimal, places: Optional[int] = None) -> str:
    """Render value like to_fixed() with "," thousands grouping."""
    return format(_quantize(value, places), ",f")


def safe_get(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the value of the first key present in data and not None."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default


def convert_timestamp(timestamp: Union[int, float, str, datetime, None]) -> Optional[datetime]:
    """
    Convert a unix timestamp (seconds or milliseconds) or ISO string to a datetime.

    Raises:
        InvalidTimestamp: If a string is not ISO 8601
    """
    if timestamp is None or isinstance(timestamp, datetime):
        return timestamp
    if isinstance(timestamp, str):
        try:
            return datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        except ValueError:
            raise InvalidTimestamp(f"Invalid timestamp: {timestamp!r}") from None
    if timestamp > 1e10:  # Milliseconds
        return datetime.fromtimestamp(timestamp / 1000, tz=timezone.utc)
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)
