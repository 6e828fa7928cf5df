"""Hex color parsing for editor colors."""

from __future__ import annotations

_HEX_DIGITS = frozenset("0123456789abcdef")


def normalize_hex_color(value: str) -> str:
    """Return ``#rrggbb`` or ``#rrggbbaa`` in lowercase; expand ``#rgb`` shorthand."""
    text = value.strip().lower()
    if text.startswith("#"):
        text = text[1:]
    if len(text) == 3:
        text = "".join(ch * 2 for ch in text)
    if len(text) not in {6, 8} or not set(text) <= _HEX_DIGITS:
        raise ValueError(f"Invalid hex color: {value!r}")
    return f"#{text}"
