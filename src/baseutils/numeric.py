"""
Leading-prefix numeric parsing.

Strings are parsed the lenient way: leading whitespace is skipped, a numeric
literal is read, and anything after it is ignored (``"42abc"`` -> ``42``).
This differs from ``int()``/``float()``, which reject any trailing text.
Callers that need strict whole-string parsing should use the builtins.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?)(?:(0[xX])([0-9a-fA-F]*)|([0-9]+))")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))")


def _text_of(value: object) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError:  # policy_guard: allow-silent-handler
            logger.debug("Undecodable bytes passed to numeric prefix parser")
            return None
    return None


def parse_int_prefix(value: object) -> Optional[int]:
    """
    Parse the leading integer literal of ``value``.

    Args:
        value: str, bytes, int or float; other types never parse

    Returns:
        Parsed integer, or None when ``value`` has no integer prefix or its
        decimal digit run is too long for the interpreter to convert

    Examples:
        >>> parse_int_prefix("  -42abc")
        -42
        >>> parse_int_prefix("0x1A")
        26
        >>> parse_int_prefix(5.9)
        5
        >>> parse_int_prefix("abc") is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value):
            return int(value)
        return None

    text = _text_of(value)
    if text is None:
        return None

    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    sign, hex_marker, hex_digits, digits = match.groups()
    if hex_marker:
        if not hex_digits:
            return None
        magnitude = int(hex_digits, 16)
    else:
        try:
            magnitude = int(digits)
        except ValueError:  # policy_guard: allow-silent-handler
            # digit run exceeds sys.get_int_max_str_digits()
            logger.debug("Integer literal of %d digits is too long to convert", len(digits))
            return None
    return -magnitude if sign == "-" else magnitude


def parse_float_prefix(value: object) -> Optional[float]:
    """
    Parse the leading decimal literal of ``value``.

    Args:
        value: str, bytes, int or float; other types never parse

    Returns:
        Parsed float, or None when ``value`` has no numeric prefix. Integers
        beyond the float range become a signed infinity.

    Examples:
        >>> parse_float_prefix("3.14 meters")
        3.14
        >>> parse_float_prefix(".5e1x")
        5.0
        >>> parse_float_prefix("-Infinity")
        -inf
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:  # policy_guard: allow-silent-handler
            logger.debug("Integer outside float range; saturating to infinity")
            return math.inf if value > 0 else -math.inf
    if isinstance(value, float):
        return None if math.isnan(value) else value

    text = _text_of(value)
    if text is None:
        return None

    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    literal = match.group(1).replace("Infinity", "inf")
    return float(literal)


__all__ = ["parse_int_prefix", "parse_float_prefix"]
