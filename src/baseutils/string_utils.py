"""Lossy transliteration of text to plain ASCII."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

_PLACEHOLDER = "_"
_BMP_LIMIT = 0xFFFF


def _build_latin1_table() -> Mapping[int, str]:
    groups = {
        "A": "ÀÁÂÃ",
        "AE": "ÄÅÆ",
        "C": "Ç",
        "E": "ÈÉÊË",
        "I": "ÌÍÎÏ",
        "D": "Ð",
        "N": "Ñ",
        "O": "ÒÓÔÕ",
        "OE": "ÖØ",
        "U": "ÙÚÛ",
        "UE": "Ü",
        "Y": "Ý",
        "ss": "ß",
        "a": "àáâã",
        "ae": "äåæ",
        "c": "ç",
        "e": "èéêë",
        "i": "ìíîï",
        "d": "ð",
        "n": "ñ",
        "o": "òóôõ",
        "oe": "öø",
        "u": "ùúû",
        "ue": "ü",
        "y": "ýÿ",
    }
    table = {ord(char): replacement for replacement, chars in groups.items() for char in chars}
    return MappingProxyType(table)


LATIN1_TO_ASCII: Mapping[int, str] = _build_latin1_table()


def _transliterate(char: str) -> str:
    code = ord(char)
    if code < 128:
        return char
    replacement = LATIN1_TO_ASCII.get(code)
    if replacement is not None:
        return replacement
    # astral characters occupy two UTF-16 code units and get one placeholder each
    if code > _BMP_LIMIT:
        return _PLACEHOLDER * 2
    return _PLACEHOLDER


def convert_utf8_to_ascii(value: Any, default_value: Any = "") -> str:
    """
    Convert text to ASCII, transliterating common Latin-1 letters.

    German umlauts and the accented letters of most western European languages
    are mapped to close ASCII spellings (``"ä"`` -> ``"ae"``, ``"ß"`` -> ``"ss"``,
    ``"É"`` -> ``"E"``). Every other non-ASCII UTF-16 code unit becomes ``_``.

    Args:
        value: Text to convert; non-string input converts to nothing
        default_value: Returned when the conversion is empty, provided it is a
            non-empty string

    Returns:
        ASCII text, ``default_value``, or ``""``

    Example:
        >>> convert_utf8_to_ascii("Grüße aus Köln €")
        'Gruesse aus Koeln _'
    """
    converted = "".join(_transliterate(char) for char in value) if isinstance(value, str) else ""
    if converted:
        return converted
    if isinstance(default_value, str) and default_value:
        return default_value
    return ""


__all__ = ["LATIN1_TO_ASCII", "convert_utf8_to_ascii"]
