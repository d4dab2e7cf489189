"""Error types raised by the utility helpers."""


class AbsenceError(ValueError):
    """Raised when a required argument or collection is missing or empty."""


class IllegalArgumentError(ValueError):
    """Raised when a value does not match any accepted representation or range."""
