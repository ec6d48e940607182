"""5x7 column font for the LED matrix: letters, digits, dash and colon."""

from __future__ import annotations

GLYPH_WIDTH = 5
GLYPH_HEIGHT = 7

# Each glyph is five column bytes; bit 0 is the top row.
_FONT: tuple[tuple[int, int, int, int, int], ...] = (
    (0x7E, 0x09, 0x09, 0x7E, 0x00),  # A
    (0x7F, 0x49, 0x49, 0x36, 0x00),  # B
    (0x3E, 0x41, 0x41, 0x22, 0x00),  # C
    (0x7F, 0x41, 0x41, 0x3E, 0x00),  # D
    (0x7F, 0x49, 0x49, 0x41, 0x00),  # E
    (0x7F, 0x09, 0x09, 0x01, 0x00),  # F
    (0x3E, 0x41, 0x51, 0x32, 0x00),  # G
    (0x7F, 0x08, 0x08, 0x7F, 0x00),  # H
    (0x41, 0x7F, 0x41, 0x00, 0x00),  # I
    (0x20, 0x40, 0x41, 0x3F, 0x00),  # J
    (0x7F, 0x08, 0x14, 0x63, 0x00),  # K
    (0x7F, 0x40, 0x40, 0x40, 0x40),  # L
    (0x7F, 0x02, 0x04, 0x02, 0x7F),  # M
    (0x7F, 0x06, 0x18, 0x7F, 0x00),  # N
    (0x3E, 0x41, 0x41, 0x3E, 0x00),  # O
    (0x7F, 0x09, 0x09, 0x06, 0x00),  # P
    (0x3E, 0x41, 0x61, 0x7E, 0x00),  # Q
    (0x7F, 0x09, 0x19, 0x66, 0x00),  # R
    (0x46, 0x49, 0x49, 0x31, 0x00),  # S
    (0x01, 0x7F, 0x01, 0x00, 0x00),  # T
    (0x3F, 0x40, 0x40, 0x3F, 0x00),  # U
    (0x1F, 0x20, 0x40, 0x20, 0x1F),  # V
    (0x7F, 0x20, 0x18, 0x20, 0x7F),  # W
    (0x63, 0x14, 0x08, 0x14, 0x63),  # X
    (0x07, 0x08, 0x70, 0x08, 0x07),  # Y
    (0x61, 0x51, 0x49, 0x45, 0x43),  # Z
    (0x3E, 0x51, 0x49, 0x45, 0x3E),  # 0
    (0x00, 0x42, 0x7F, 0x40, 0x00),  # 1
    (0x42, 0x61, 0x51, 0x49, 0x46),  # 2
    (0x21, 0x41, 0x45, 0x4B, 0x31),  # 3
    (0x18, 0x14, 0x12, 0x7F, 0x10),  # 4
    (0x27, 0x45, 0x45, 0x45, 0x39),  # 5
    (0x3C, 0x4A, 0x49, 0x49, 0x30),  # 6
    (0x01, 0x71, 0x09, 0x05, 0x03),  # 7
    (0x36, 0x49, 0x49, 0x49, 0x36),  # 8
    (0x06, 0x49, 0x49, 0x29, 0x1E),  # 9
    (0x08, 0x08, 0x08, 0x08, 0x08),  # -
    (0x00, 0x24, 0x00, 0x00, 0x00),  # :
)

_SYMBOLS = {"-": 36, ":": 37}


def char_index(c: str) -> int | None:
    """Return the font index of a character, or None if it has no glyph.

    Lower-case letters share the glyphs of upper-case ones.
    """
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if "A" <= c <= "Z":
        return ord(c) - ord("A")
    if "a" <= c <= "z":
        return ord(c) - ord("a")
    if "0" <= c <= "9":
        return ord(c) - ord("0") + 26
    return _SYMBOLS.get(c)


def glyph(c: str) -> tuple[int, int, int, int, int] | None:
    """Return the five column bytes for a character, or None if it has no glyph."""
    index = char_index(c)
    return None if index is None else _FONT[index]