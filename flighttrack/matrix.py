"""LED matrix geometry and scrolling-text frame generation."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .font import GLYPH_HEIGHT, GLYPH_WIDTH, glyph

PANEL_WIDTH = 32
PANEL_HEIGHT = 8
SPACING = 1
PREFIX = "PLANE OVERHEAD: "


@dataclass(frozen=True)
class Rgb:
    """A 24-bit colour."""

    r: int
    g: int
    b: int


BLACK = Rgb(0, 0, 0)
PREFIX_COLOR = Rgb(255, 60, 0)
CALLSIGN_COLOR = Rgb(0, 255, 255)
MODEL_COLOR = Rgb(100, 0, 255)


def _check_bounds(width: int, height: int, x: int, y: int) -> None:
    if not (0 <= x < width and 0 <= y < height):
        raise IndexError(f"pixel ({x}, {y}) outside {width}x{height} panel")


@dataclass(frozen=True)
class Topology:
    """Column-major serpentine wiring, rotated by 180 degrees."""

    width: int = PANEL_WIDTH
    height: int = PANEL_HEIGHT

    def map(self, x: int, y: int) -> int:
        """Return the strip index of the pixel at column x, row y."""
        _check_bounds(self.width, self.height, x, y)
        column = self.width - 1 - x
        row = y if column % 2 else self.height - 1 - y
        return column * self.height + row


class Frame:
    """One image on the panel; unset pixels are black."""

    def __init__(self, width: int = PANEL_WIDTH, height: int = PANEL_HEIGHT) -> None:
        self.width = width
        self.height = height
        self._pixels: dict[tuple[int, int], Rgb] = {}

    def set(self, x: int, y: int, color: Rgb) -> None:
        _check_bounds(self.width, self.height, x, y)
        if color == BLACK:
            self._pixels.pop((x, y), None)
        else:
            self._pixels[(x, y)] = color

    def get(self, x: int, y: int) -> Rgb:
        _check_bounds(self.width, self.height, x, y)
        return self._pixels.get((x, y), BLACK)

    @property
    def pixels(self) -> dict[tuple[int, int], Rgb]:
        """The lit pixels, keyed by (x, y)."""
        return dict(self._pixels)

    def strip(self, topology: Topology) -> list[Rgb]:
        """Return the colours in LED strip order for the given wiring."""
        if (topology.width, topology.height) != (self.width, self.height):
            raise ValueError("topology does not match frame size")
        leds = [BLACK] * (self.width * self.height)
        for (x, y), color in self._pixels.items():
            leds[topology.map(x, y)] = color
        return leds


def scroll_frames(
    callsign: str,
    model: str,
    width: int = PANEL_WIDTH,
    height: int = PANEL_HEIGHT,
) -> Iterator[Frame]:
    """Yield the frames of the overhead-plane message scrolling right to left."""
    text = (
        [(c, PREFIX_COLOR) for c in PREFIX]
        + [(c, CALLSIGN_COLOR) for c in callsign]
        + [(c, MODEL_COLOR) for c in " " + model]
    )
    advance = GLYPH_WIDTH + SPACING
    total_width = len(text) * advance - SPACING
    rows = range(min(GLYPH_HEIGHT, height))
    glyphs = [(offset, glyph(c), color) for offset, (c, color) in enumerate(text) if c != " "]
    glyphs = [(offset, columns, color) for offset, columns, color in glyphs if columns]

    for scroll_pos in range(width, -total_width, -1):
        frame = Frame(width, height)
        for offset, columns, color in glyphs:
            start = scroll_pos + offset * advance
            if start >= width or start + GLYPH_WIDTH < 0:
                continue
            for col, bits in enumerate(columns):
                x = start + col
                if not 0 <= x < width:
                    continue
                for row in rows:
                    if bits >> row & 1:
                        frame.set(x, row, color)
        yield frame