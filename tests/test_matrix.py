import pytest

from flighttrack.font import GLYPH_HEIGHT, GLYPH_WIDTH, glyph
from flighttrack.matrix import (
    BLACK,
    CALLSIGN_COLOR,
    MODEL_COLOR,
    PANEL_HEIGHT,
    PANEL_WIDTH,
    PREFIX,
    PREFIX_COLOR,
    SPACING,
    Frame,
    Rgb,
    Topology,
    scroll_frames,
)


def test_topology_is_bijection():
    topo = Topology()
    indices = sorted(topo.map(x, y) for x in range(PANEL_WIDTH) for y in range(PANEL_HEIGHT))
    assert indices == list(range(PANEL_WIDTH * PANEL_HEIGHT))


def test_topology_columns_are_contiguous_serpentine():
    topo = Topology()
    for x in range(PANEL_WIDTH):
        column = [topo.map(x, y) for y in range(PANEL_HEIGHT)]
        assert len({index // PANEL_HEIGHT for index in column}) == 1
        for a, b in zip(column, column[1:]):
            assert abs(a - b) == 1


def test_topology_neighbouring_columns_join():
    topo = Topology()
    ends = {topo.map(x, 0) for x in range(PANEL_WIDTH)} | {
        topo.map(x, PANEL_HEIGHT - 1) for x in range(PANEL_WIDTH)
    }
    for x in range(PANEL_WIDTH - 1):
        first = max(topo.map(x + 1, y) for y in range(PANEL_HEIGHT))
        assert first + 1 in ends


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (PANEL_WIDTH, 0), (0, PANEL_HEIGHT)])
def test_topology_out_of_range(x, y):
    with pytest.raises(IndexError):
        Topology().map(x, y)


def test_frame_set_get():
    frame = Frame()
    color = Rgb(1, 2, 3)
    frame.set(4, 5, color)
    assert frame.get(4, 5) == color
    assert frame.get(0, 0) == BLACK
    frame.set(4, 5, BLACK)
    assert frame.pixels == {}


def test_frame_out_of_range():
    with pytest.raises(IndexError):
        Frame().set(PANEL_WIDTH, 0, PREFIX_COLOR)


def test_frame_strip_order():
    topo = Topology()
    frame = Frame()
    frame.set(3, 2, CALLSIGN_COLOR)
    leds = frame.strip(topo)
    assert len(leds) == PANEL_WIDTH * PANEL_HEIGHT
    assert leds[topo.map(3, 2)] == CALLSIGN_COLOR
    assert leds.count(BLACK) == len(leds) - 1


def test_frame_strip_size_mismatch():
    with pytest.raises(ValueError):
        Frame().strip(Topology(8, 8))


def test_scroll_starts_blank_and_off_panel():
    frames = list(scroll_frames("A", "B"))
    assert frames[0].pixels == {}
    assert all((f.width, f.height) == (PANEL_WIDTH, PANEL_HEIGHT) for f in frames)


def test_scroll_prefix_reaches_left_edge():
    frame = list(scroll_frames("A", "B"))[PANEL_WIDTH]
    first = glyph(PREFIX[0])[0]
    for row in range(PANEL_HEIGHT):
        expected = PREFIX_COLOR if row < GLYPH_HEIGHT and first >> row & 1 else BLACK
        assert frame.get(0, row) == expected


def test_scroll_callsign_colour():
    frames = list(scroll_frames("A", "B"))
    frame = frames[PANEL_WIDTH + len(PREFIX) * (GLYPH_WIDTH + SPACING)]
    bits = glyph("A")[0]
    for row in range(GLYPH_HEIGHT):
        assert frame.get(0, row) == (CALLSIGN_COLOR if bits >> row & 1 else BLACK)


def test_scroll_uses_only_message_colours_and_glyph_rows():
    colours = set()
    for frame in scroll_frames("ACA123", "Boeing 737"):
        for (x, y), color in frame.pixels.items():
            assert y < GLYPH_HEIGHT
            colours.add(color)
    assert colours == {PREFIX_COLOR, CALLSIGN_COLOR, MODEL_COLOR}


def test_scroll_longer_text_gives_more_frames():
    short = sum(1 for _ in scroll_frames("A", ""))
    long = sum(1 for _ in scroll_frames("A", "BB"))
    assert long - short == 2 * (GLYPH_WIDTH + SPACING)