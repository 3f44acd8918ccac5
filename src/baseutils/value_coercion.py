"""
Value-or-default coercion helpers.

Every helper takes a value of unknown shape and returns it (possibly parsed)
when it satisfies the helper's check, otherwise the caller's default. None of
them raise.
"""

from __future__ import annotations

import re
from typing import Any, List, Optional, Sequence

from baseutils.numeric import parse_float_prefix, parse_int_prefix

_TRUE_WORDS = frozenset({"on", "yes", "true"})
_FALSE_WORDS = frozenset({"off", "no", "false"})
_SCALAR_TYPES = (str, bytes, bytearray, bool, int, float, complex)
_TOKEN_SEPARATOR = ","

__all__ = [
    "get_specified_str",
    "get_valid_arr",
    "get_valid_bool",
    "get_valid_int",
    "get_valid_int_range",
    "get_valid_num",
    "get_valid_num_range",
    "get_valid_obj",
    "get_valid_str",
    "get_valid_str_expr",
    "get_valid_str_range",
    "get_valid_tokens",
]


def get_specified_str(value: Any, default_value: Optional[str] = None) -> Optional[str]:
    """Return ``value`` if it is a non-empty string."""
    if isinstance(value, str) and len(value) > 0:
        return value
    return default_value


def get_valid_arr(value: Any, default_value: Any = None) -> Any:
    """Return ``value`` if it is a list or tuple."""
    if isinstance(value, (list, tuple)):
        return value
    return default_value


def get_valid_obj(value: Any, default_value: Any = None) -> Any:
    """
    Return ``value`` if it is a structured value.

    Anything that is neither None nor a scalar (string, bytes, number, bool)
    qualifies: mappings, sequences, sets and arbitrary class instances.
    """
    if value is None or isinstance(value, _SCALAR_TYPES):
        return default_value
    return value


def get_valid_str(value: Any, default_value: Optional[str] = None) -> Optional[str]:
    """Return ``value`` if it is a string, empty or not."""
    if isinstance(value, str):
        return value
    return default_value


def get_valid_bool(value: Any, default_value: Optional[bool] = None) -> Optional[bool]:
    """
    Interpret ``value`` as a boolean.

    Args:
        value: bool (returned as is), number (zero is False) or one of the
            words on/yes/true and off/no/false in any letter case
        default_value: Returned for every other input

    Example:
        >>> get_valid_bool("YES")
        True
        >>> get_valid_bool(0)
        False
        >>> get_valid_bool("maybe", False)
        False
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
        return default_value
    if isinstance(value, (int, float)):
        return value != 0
    return default_value


def get_valid_int(value: Any, default_value: Optional[int] = None) -> Optional[int]:
    """
    Parse the leading integer of ``value``.

    Example:
        >>> get_valid_int("42abc", -1)
        42
        >>> get_valid_int("abc", -1)
        -1
    """
    parsed = parse_int_prefix(value)
    return default_value if parsed is None else parsed


def get_valid_num(value: Any, default_value: Optional[float] = None) -> Optional[float]:
    """Parse the leading decimal number of ``value``."""
    parsed = parse_float_prefix(value)
    return default_value if parsed is None else parsed


def _within(candidate: float, lower: Optional[float], upper: Optional[float]) -> bool:
    if lower is not None and candidate < lower:
        return False
    if upper is not None and candidate > upper:
        return False
    return True


def get_valid_int_range(
    value: Any,
    min_value: Any = None,
    max_value: Any = None,
    default_value: Optional[int] = None,
) -> Optional[int]:
    """
    Parse the leading integer of ``value`` and require it to lie in ``[min_value, max_value]``.

    Bounds are parsed the same way as ``value``; a bound that does not parse
    leaves that side open.

    Example:
        >>> get_valid_int_range("7 items", 1, 10, -1)
        7
        >>> get_valid_int_range(15, 1, 10, -1)
        -1
        >>> get_valid_int_range(5, "x", "y", -1)
        5
    """
    parsed = parse_int_prefix(value)
    if parsed is None:
        return default_value
    if not _within(parsed, parse_int_prefix(min_value), parse_int_prefix(max_value)):
        return default_value
    return parsed


def get_valid_num_range(
    value: Any,
    min_value: Any = None,
    max_value: Any = None,
    default_value: Optional[float] = None,
) -> Optional[float]:
    """Float counterpart of :func:`get_valid_int_range`."""
    parsed = parse_float_prefix(value)
    if parsed is None:
        return default_value
    if not _within(parsed, parse_float_prefix(min_value), parse_float_prefix(max_value)):
        return default_value
    return parsed


def get_valid_str_range(
    value: Any,
    min_value: Any = None,
    max_value: Any = None,
    default_value: Optional[str] = None,
) -> Optional[str]:
    """Return ``value`` if it is a string whose length lies in ``[min_value, max_value]``."""
    if not isinstance(value, str):
        return default_value
    if not _within(len(value), parse_int_prefix(min_value), parse_int_prefix(max_value)):
        return default_value
    return value


def get_valid_str_expr(value: Any, expr: Any, default_value: Optional[str] = None) -> Optional[str]:
    """
    Return ``value`` if it is a string fully matched by the compiled pattern ``expr``.

    A plain string is not accepted as ``expr``; compile it first.
    """
    if not isinstance(value, str) or not isinstance(expr, re.Pattern):
        return default_value
    try:
        matched = expr.fullmatch(value)
    except TypeError:  # policy_guard: allow-silent-handler
        # bytes pattern against a str value
        return default_value
    return value if matched is not None else default_value


def _split_tokens(value: Any) -> List[str]:
    if isinstance(value, str):
        parts: Sequence[Any] = value.split(_TOKEN_SEPARATOR)
    elif isinstance(value, (list, tuple)):
        parts = value
    else:
        return []

    tokens: List[str] = []
    for part in parts:
        if not isinstance(part, str):
            continue
        candidate = part.strip()
        if candidate:
            tokens.append(candidate)
    return tokens


def get_valid_tokens(value: Any, default_value: Optional[List[str]] = None) -> List[str]:
    """
    Normalize a comma separated string or a sequence of strings into tokens.

    Tokens are trimmed and empty ones dropped; order is preserved. When no
    token remains, ``default_value`` is returned if given, else an empty list.

    Example:
        >>> get_valid_tokens("a, b ,, c", [])
        ['a', 'b', 'c']
        >>> get_valid_tokens([" x ", "", "y"])
        ['x', 'y']
        >>> get_valid_tokens(None, ["all"])
        ['all']
    """
    tokens = _split_tokens(value)
    if tokens:
        return tokens
    if default_value is not None:
        return default_value
    return []
