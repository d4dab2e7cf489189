"""Boolean combinators, parsing and formatting helpers."""

import math
from typing import Any

from lfp_logging import logs

from reggie_utils import objects
from reggie_utils.errors import IllegalArgumentError

LOG = logs.logger(__name__)

FALSE = "false"
NO = "no"
OFF = "off"
ON = "on"
TRUE = "true"
YES = "yes"

# keyed by lower case token, so each entry only matches strings of its own length
_STRING_TOKENS = {
    "y": True,
    "t": True,
    "1": True,
    "n": False,
    "f": False,
    "0": False,
    ON: True,
    NO: False,
    YES: True,
    OFF: False,
    TRUE: True,
    FALSE: False,
}


def and_(*values: bool) -> bool:
    """
    Return the logical conjunction of the given values.

    Raises:
        AbsenceError: If no values are given.
    """
    objects.require_non_empty(values, "values cannot be empty")
    return all(values)


def or_(*values: bool) -> bool:
    """
    Return the logical disjunction of the given values.

    Raises:
        AbsenceError: If no values are given.
    """
    objects.require_non_empty(values, "values cannot be empty")
    return any(values)


def not_(value: bool | None) -> bool | None:
    """Negate a boolean, passing ``None`` through unchanged."""
    if objects.is_null(value):
        return None
    return not value


def compare(x: bool, y: bool) -> int:
    """Return 0 when equal, 1 when only ``x`` is true and -1 when only ``y`` is."""
    if bool(x) == bool(y):
        return 0
    return 1 if x else -1


def to_boolean(value: Any, true_value: Any = None, false_value: Any = None) -> bool:
    """
    Convert a number or string into a boolean.

    Without ``true_value``/``false_value`` the built in conventions apply:
    - numbers: 0 is False, positive numbers are True
    - strings: y, t, 1, on, yes, true are True and n, f, 0, no, off, false are
      False (case insensitive, exact match only)
    - null: True

    With explicit tokens the value must equal one of them. A null value with
    only ``true_value`` supplied is False.

    Args:
        value: Number, string or None to convert.
        true_value: Token that maps to True.
        false_value: Token that maps to False.

    Returns:
        The converted boolean.

    Raises:
        IllegalArgumentError: If the value matches no accepted representation.

    Examples:
        >>> to_boolean("TRUE")
        True
        >>> to_boolean(0)
        False
        >>> to_boolean("1", "1", "0")
        True
    """
    if objects.is_null(value):
        if objects.is_null(true_value):
            return True
        elif objects.is_null(false_value):
            return False
    elif and_(objects.is_null(true_value), objects.is_null(false_value)):
        if isinstance(value, (int, float)):
            if value == 0:
                return False
            elif value > 0:
                return True
        elif isinstance(value, str):
            result = _from_string(value)
            if result is not None:
                return result
    else:
        if value == true_value:
            return True
        elif value == false_value:
            return False
    LOG.debug(
        "boolean value unmatched - value:%r true_value:%r false_value:%r",
        value,
        true_value,
        false_value,
    )
    raise IllegalArgumentError(
        f"value did not match any accepted representation - value:{value!r}"
    )


def number_to_boolean(
    value: int | float | None,
    true_value: int | float | None = None,
    false_value: int | float | None = None,
) -> bool:
    """Numeric form of :func:`to_boolean`."""
    if not objects.is_null(value) and (
        isinstance(value, bool) or not isinstance(value, (int, float))
    ):
        raise TypeError(f"value must be a number - value:{value!r}")
    return to_boolean(value, true_value, false_value)


def string_to_boolean(
    value: str | None, true_value: str | None = None, false_value: str | None = None
) -> bool:
    """String form of :func:`to_boolean`. Explicit tokens are case sensitive."""
    if not objects.is_null(value) and not isinstance(value, str):
        raise TypeError(f"value must be a str - value:{value!r}")
    return to_boolean(value, true_value, false_value)


def to_integer(
    value: bool | None,
    true_value: int = 1,
    false_value: int = 0,
    null_value: float = math.nan,
) -> int | float:
    """Map a boolean onto one of three numbers, ``null_value`` for None."""
    if objects.is_null(value):
        return null_value
    return true_value if value else false_value


def to_string(
    value: bool | None, true_string: str, false_string: str, null_string: str = ""
) -> str:
    """
    Map a boolean onto one of three strings.

    Examples:
        >>> to_string(True, "true", "false")
        'true'
        >>> to_string(None, "true", "false")
        ''
    """
    if objects.is_null(value):
        return null_string
    return true_string if value else false_string


def to_string_on_off(value: bool | None, null_string: str = "") -> str:
    return to_string(value, ON, OFF, null_string)


def to_string_true_false(value: bool | None, null_string: str = "") -> str:
    return to_string(value, TRUE, FALSE, null_string)


def to_string_yes_no(value: bool | None, null_string: str = "") -> str:
    return to_string(value, YES, NO, null_string)


def _from_string(value: str) -> bool | None:
    """Resolve a string against the token table, None when nothing matches."""
    if value == TRUE:
        return True
    if not 0 < len(value) <= len(FALSE):
        return None
    return _STRING_TOKENS.get(value.lower(), None)
