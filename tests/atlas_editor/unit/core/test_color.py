from __future__ import annotations

import pytest

from atlas_editor.core.color import normalize_hex_color


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("#000000", "#000000"),
        ("FF8800", "#ff8800"),
        ("#AbC", "#aabbcc"),
        ("  #11223344 ", "#11223344"),
    ],
)
def test_normalize_hex_color(raw: str, expected: str) -> None:
    assert normalize_hex_color(raw) == expected


@pytest.mark.parametrize("raw", ["", "#12", "#12345", "#gggggg", "blue", "#1234567"])
def test_normalize_hex_color_rejects_invalid(raw: str) -> None:
    with pytest.raises(ValueError, match="Invalid hex color"):
        normalize_hex_color(raw)
