"""Formal (syntactic) validators for common string formats.

Each validator accepts a value of any type and answers ``True`` only for a
string that matches the format. Nothing is checked beyond syntax: an address
accepted by ``is_email`` is not necessarily deliverable.
"""

from __future__ import annotations

import re

_NUMBER = re.compile(r"[0-9]+")
_SHA2 = re.compile(r"[0-9a-f]{64}", re.IGNORECASE)
_UUID = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE)
# https://html.spec.whatwg.org/multipage/input.html#valid-e-mail-address
_EMAIL = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)


def _matches(pattern: re.Pattern[str], value: object) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_number(value: object) -> bool:
    """Return True for an unsigned decimal integer literal such as ``"0042"``."""
    return _matches(_NUMBER, value)


def is_sha2(value: object) -> bool:
    """Return True for a 64 digit hexadecimal SHA-256 digest in either case."""
    return _matches(_SHA2, value)


def is_uuid(value: object) -> bool:
    """Return True for a UUID in canonical 8-4-4-4-12 layout in either case."""
    return _matches(_UUID, value)


def is_email(value: object) -> bool:
    """Return True for a string matching the HTML5 valid e-mail address grammar."""
    return _matches(_EMAIL, value)


__all__ = ["is_number", "is_sha2", "is_uuid", "is_email"]
