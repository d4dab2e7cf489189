"""Number parsing, rounding and simple statistics helpers."""

import builtins
import itertools
import math
import re
from collections.abc import Sequence
from decimal import ROUND_FLOOR, Decimal
from typing import Any

from lfp_logging import logs

from reggie_utils import objects
from reggie_utils.errors import IllegalArgumentError

LOG = logs.logger(__name__)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)
_MAX_DIGITS = 20


def to_int(value: Any, default: int = 0, radix: int = 10) -> int:
    """
    Parse the leading integer of a string, returning ``default`` on failure.

    Leading whitespace and a single sign are allowed and parsing stops at the
    first character that is not a digit in ``radix``, so ``"12px"`` is 12.
    With radix 16 an ``0x`` prefix is skipped.

    Args:
        value: String (or any value, converted with ``str``) to parse.
        default: Returned when ``value`` is null or has no leading digits.
        radix: Base between 2 and 36.

    Raises:
        IllegalArgumentError: If ``radix`` is out of range.

    Examples:
        >>> to_int("1", 0)
        1
        >>> to_int("", 1)
        1
        >>> to_int("ff", radix=16)
        255
    """
    if objects.is_null(value):
        return default
    if not 2 <= radix <= 36:
        raise IllegalArgumentError(f"radix must be between 2 and 36 - radix:{radix}")
    text = str(value).strip()
    sign = 1
    if text and text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if radix == 16 and text[:2].lower() == "0x":
        text = text[2:]
    valid = _DIGITS[:radix]
    digits = "".join(itertools.takewhile(lambda c: c.lower() in valid, text))
    if not digits:
        LOG.debug("int parse failed - value:%r default:%s", value, default)
        return default
    return sign * int(digits, radix)


def to_float(value: Any, default: float = 0.0) -> float:
    """
    Parse the leading decimal number of a string, returning ``default`` on failure.

    Examples:
        >>> to_float("1.5", 0.0)
        1.5
        >>> to_float("", 1.1)
        1.1
    """
    if objects.is_null(value):
        return default
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    match = _FLOAT_PREFIX.match(str(value).strip())
    if not match:
        LOG.debug("float parse failed - value:%r default:%s", value, default)
        return default
    return float(match.group(0))


def sum(*values: float) -> float:
    objects.require_non_empty(values, "values cannot be empty")
    return builtins.sum(values)


def average(*values: float) -> float:
    return sum(*values) / len(values)


def mode(values: Sequence[float]) -> float:
    """
    Return the majority vote candidate of ``values``, -1 when empty.

    Uses a single counting pass, so the result is only the true mode when one
    value occurs in more than half of the positions.
    """
    if not values:
        return -1
    count = 0
    candidate = None
    for value in values:
        if count == 0:
            candidate = value
            count = 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    return candidate


def median(*values: float) -> float:
    """Return the median, sorting a copy of the values first."""
    objects.require_non_empty(values, "values cannot be empty")
    ordered = sorted(values)
    size = len(ordered)
    if size % 2:
        return ordered[(size - 1) // 2]
    right = size // 2
    return (ordered[right - 1] + ordered[right]) / 2


def round(value: float, digits: float = 0) -> float:
    """
    Round half up (towards positive infinity) to ``digits`` decimals.

    Fractional ``digits`` are floored.

    Raises:
        IllegalArgumentError: If ``digits`` is not within 0 and 20.

    Examples:
        >>> round(1.005, 2)
        1.01
        >>> round(-2.5)
        -2.0
    """
    digits = _fraction_digits(digits)
    scaled = _decimal(value).scaleb(digits)
    return float(
        (scaled + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR).scaleb(-digits)
    )


def to_fixed(value: float, digits: float = 0) -> float:
    """
    Truncate towards negative infinity to ``digits`` decimals.

    Raises:
        IllegalArgumentError: If ``digits`` is not within 0 and 20.
    """
    digits = _fraction_digits(digits)
    scaled = _decimal(value).scaleb(digits)
    return float(scaled.to_integral_value(rounding=ROUND_FLOOR).scaleb(-digits))


def _fraction_digits(digits: float) -> int:
    if not 0 <= digits <= _MAX_DIGITS:
        raise IllegalArgumentError(
            f"digits must be between 0 and {_MAX_DIGITS} - digits:{digits}"
        )
    return math.floor(digits)


def _decimal(value: float) -> Decimal:
    # str keeps the shortest repr, so 1.005 stays 1.005 rather than 1.00499...
    return Decimal(str(value)) if isinstance(value, float) else Decimal(value)
