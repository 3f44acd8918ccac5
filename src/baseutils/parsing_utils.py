"""Lenient decoding helpers that fall back to a default instead of raising."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any

import orjson

logger = logging.getLogger(__name__)

_URLSAFE_TRANSLATION = str.maketrans("-_", "+/")


def get_json_value(value: Any, default_value: Any = None) -> Any:
    """
    Parse JSON text, returning ``default_value`` on any failure.

    Args:
        value: JSON document as str, bytes or bytearray
        default_value: Returned for malformed documents and unsupported types

    Returns:
        Parsed JSON value or ``default_value``
    """
    if not isinstance(value, (str, bytes, bytearray)):
        return default_value
    try:
        return orjson.loads(value)
    except orjson.JSONDecodeError:  # Expected exception in operation  # policy_guard: allow-silent-handler
        logger.debug("Value is not valid JSON; using default")
        return default_value


def base64_decode_lazy(encoded: Any, default_value: Any = None) -> Any:
    """
    Decode standard or URL-safe Base64 into UTF-8 text.

    Missing padding is restored and the URL-safe alphabet is mapped onto the
    standard one before decoding (RFC 4648 sections 4 and 5).

    Args:
        encoded: Base64 or Base64url text, padded or not
        default_value: Returned when the input is not a string, is not valid
            Base64 or does not decode to UTF-8

    Returns:
        Decoded text or ``default_value``
    """
    if not isinstance(encoded, str):
        return default_value

    normalized = encoded.translate(_URLSAFE_TRANSLATION)
    normalized += "=" * (-len(normalized) % 4)
    try:
        raw = base64.b64decode(normalized, validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, ValueError):  # Expected exception in operation  # policy_guard: allow-silent-handler
        logger.debug("Value is not decodable Base64 text; using default")
        return default_value


__all__ = ["get_json_value", "base64_decode_lazy"]
