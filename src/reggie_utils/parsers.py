"""Forgiving boolean reads for environment variables and loose config values."""

import os

from reggie_utils import booleans
from reggie_utils.errors import IllegalArgumentError


def to_bool(value, default=False):
    """Read ``value`` with the boolean token conventions, ``default`` when blank or unrecognized."""
    if isinstance(value, bool):
        return value
    elif value is None:
        return default
    elif not isinstance(value, (int, float, str)):
        value = str(value)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        return booleans.to_boolean(value)
    except IllegalArgumentError:
        return default


def env_bool(name: str, default=False):
    """Read an environment variable as a boolean, ``default`` when unset or unmatched."""
    return to_bool(os.getenv(name), default)
