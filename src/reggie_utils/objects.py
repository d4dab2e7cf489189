"""Null checks, safe property access, default merging and cloning helpers."""

from collections.abc import Mapping, Sequence
from types import ModuleType
from typing import Any, Callable, Iterable, TypeVar

from reggie_utils import booleans
from reggie_utils.errors import AbsenceError

T = TypeVar("T")
# stands in for a value that does not exist at all, as opposed to None
MISSING = object()
_BASIC_TYPES = (str, bytes, bool, int, float, complex)
_COLLECTION_TYPES = (list, tuple, set, frozenset)


def is_exist(value: Any) -> bool:
    return value is not MISSING


def is_not_exist(value: Any) -> bool:
    return value is MISSING


def is_null(value: Any) -> bool:
    """Return ``True`` for ``None`` and for :data:`MISSING`."""
    return booleans.or_(value is MISSING, value is None)


def is_not_null(value: Any) -> bool:
    return booleans.and_(value is not MISSING, value is not None)


def is_basic_type(value: Any) -> bool:
    """Return ``True`` for null and immutable scalar values that are safe to alias."""
    return is_null(value) or isinstance(value, _BASIC_TYPES)


def is_type(value: Any, type_: type) -> bool:
    return isinstance(value, type_)


def is_any_type(value: Any, types: Iterable[type]) -> bool:
    return any(is_type(value, t) for t in types)


def require_non_empty(value: T, message: str | None = None) -> T:
    """
    Return ``value`` if it is neither null nor empty.

    Raises:
        AbsenceError: If ``value`` is None, missing or has a length of zero.
    """
    # checked directly, is_null relies on this function via booleans.or_
    if value is None or value is MISSING or len(value) == 0:
        raise AbsenceError(message or f"value cannot be empty - value:{value!r}")
    return value


def get_safe_value(
    value: T, default: T, condition: Callable[[Any], bool] = is_not_null
) -> T:
    """Return ``value`` when ``condition(value)`` holds, otherwise ``default``."""
    return value if condition(value) else default


def has_property(obj: Any, path: str = "") -> bool:
    """
    Return ``True`` if every segment of a dotted path exists on ``obj``.

    A segment holding None still exists. The empty path refers to ``obj`` itself.

    Args:
        obj: Mapping, sequence or object to inspect.
        path: Dot separated property names, e.g. ``"a.b.c"``.

    Raises:
        TypeError: If ``path`` is not a string.
    """
    _check_path(path)
    if is_not_exist(obj):
        return False
    value = obj
    for name in _path_names(path):
        value = _property(value, name)
        if is_not_exist(value):
            return False
    return True


def has_no_property(obj: Any, path: str = "") -> bool:
    return not has_property(obj, path)


def has_non_null_property(obj: Any, path: str = "") -> bool:
    """
    Return ``True`` if every segment of a dotted path exists and is not None.

    Raises:
        TypeError: If ``path`` is not a string.
    """
    _check_path(path)
    if is_null(obj):
        return False
    value = obj
    for name in _path_names(path):
        value = _property(value, name)
        if is_null(value):
            return False
    return True


def has_null_property(obj: Any, path: str = "") -> bool:
    return not has_non_null_property(obj, path)


def get_property(obj: Any, path: str = "", default: Any = None) -> Any:
    """
    Resolve a dotted path against ``obj`` or return ``default``.

    Missing segments short circuit instead of raising, so
    ``get_property({}, "a.b.c", 1)`` is ``1``.

    Examples:
        >>> get_property({"a": {"b": 1}}, "a.b", 99)
        1
        >>> get_property({"a": {"b": None}}, "a.b", 99)
        99
    """
    if has_null_property(obj, path):
        return default
    value = obj
    for name in _path_names(path):
        value = _property(value, name)
    return get_safe_value(value, default)


def merge_defaults(obj: Mapping | None, default_obj: Mapping | None = None) -> dict:
    """
    Return a copy of ``obj`` with null values filled in from ``default_obj``.

    For every key of ``default_obj``:
    - a null or missing value in ``obj`` takes the default value
    - a mapping value in ``obj`` is merged recursively with the default
    - any other value is kept

    Keys only present in ``obj`` pass through. Neither input is mutated.

    Examples:
        >>> merge_defaults({"x": 1}, {"x": 2, "y": 3})
        {'x': 1, 'y': 3}
    """
    merged = dict(obj) if is_not_null(obj) else {}
    if is_null(default_obj):
        return merged
    for name, default in default_obj.items():
        value = merged.get(name, MISSING)
        if is_null(value):
            merged[name] = default
        elif isinstance(value, Mapping):
            merged[name] = merge_defaults(
                value, default if isinstance(default, Mapping) else None
            )
    return merged


def deep_clone(value: T) -> T:
    """
    Recursively copy mappings, collections and plain objects.

    Basic values are returned as is. Lists, tuples and sets keep their type.
    Objects are cloned from their ``__dict__`` into a dict. Modules, callables
    and anything else are returned as is. Cyclic graphs are not detected and end
    in ``RecursionError``.
    """
    if is_basic_type(value):
        return value
    if isinstance(value, Mapping):
        return {k: deep_clone(v) for k, v in value.items()}
    if type(value) in _COLLECTION_TYPES:
        return type(value)(deep_clone(v) for v in value)
    if (
        hasattr(value, "__dict__")
        and not callable(value)
        and not isinstance(value, ModuleType)
    ):
        return {k: deep_clone(v) for k, v in vars(value).items()}
    return value


def _check_path(path: Any):
    if not isinstance(path, str):
        raise TypeError(f"path must be a str - path:{path!r}")


def _path_names(path: str) -> list[str]:
    return path.split(".") if path else []


def _property(value: Any, name: str) -> Any:
    """Read a single path segment, :data:`MISSING` when it cannot be resolved."""
    if is_basic_type(value):
        return MISSING
    if isinstance(value, Mapping):
        return value.get(name, MISSING)
    if isinstance(value, Sequence):
        if name.isascii() and name.isdigit() and int(name) < len(value):
            return value[int(name)]
        return MISSING
    return getattr(value, name, MISSING)
