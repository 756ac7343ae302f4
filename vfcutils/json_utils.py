"""Escaping of text for inclusion in JSON string literals."""

from __future__ import annotations

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _escape_char(char: str) -> str:
    if char in _ESCAPES:
        return _ESCAPES[char]
    if ord(char) < 0x20:
        return f"\\u{ord(char):04x}"
    return char


def escape(text: str | None) -> str:
    """Escape text for a JSON string body; None becomes ``null``."""
    if text is None:
        return "null"
    return "".join(_escape_char(char) for char in text)