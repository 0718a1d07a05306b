import logging
import math

import pytest

from rasterdraw import BLACK, RED, WHITE, DrawBuffer
from rasterdraw.buffer.ellipse import fill_ellipse, outline_ellipse, split_point
from tests.utils import RecordingWriter, touched

AXES = [(1, 1), (2, 2), (3, 3), (4, 4), (5, 5), (7, 7), (10, 10), (13, 13),
        (7, 3), (3, 7), (10, 1), (1, 10), (9, 4), (6, 11), (20, 15)]


def inside(a, b, dx, dy):
    return dx * dx * b * b + dy * dy * a * a < a * a * b * b


# =============================================================================
# Scenarios
# =============================================================================

def test_blended_filled_circle():
    buf = DrawBuffer(11, 11, BLACK)
    buf.draw_ellipse(5, 5, 3, 3, RED, 0, 0.5)
    for x in range(11):
        for y in range(11):
            d2 = (x - 5) ** 2 + (y - 5) ** 2
            if d2 < 9:
                assert buf.get_pixel(x, y) == (128, 0, 0), (x, y)
            elif d2 > 16:
                assert buf.get_pixel(x, y) == BLACK, (x, y)
            else:
                assert buf.get_pixel(x, y)[0] <= 128


def test_solid_filled_circle():
    buf = DrawBuffer(11, 11)
    buf.draw_circle(5, 5, 3, WHITE, 0)
    for dx, dy in [(0, 0), (2, 2), (-2, 1), (3, 0), (0, -3), (-3, 0), (0, 3)]:
        assert buf.get_pixel(5 + dx, 5 + dy) == WHITE
    assert buf.get_pixel(5 + 3, 5 + 3) == BLACK
    # Partial coverage just outside the boundary
    assert BLACK < buf.get_pixel(5 + 1, 5 + 3) < WHITE


def test_outline_circle():
    buf = DrawBuffer(11, 11)
    buf.draw_circle(5, 5, 3, WHITE)
    for dx, dy in [(3, 0), (-3, 0), (0, 3), (0, -3)]:
        assert buf.get_pixel(5 + dx, 5 + dy) == WHITE
    for x, y in touched(buf):
        assert 4 <= (x - 5) ** 2 + (y - 5) ** 2 <= 18
    assert buf.get_pixel(5, 5) == BLACK


def test_circle_is_equal_axis_ellipse():
    a = DrawBuffer(20, 20)
    b = DrawBuffer(20, 20)
    a.draw_circle(9, 10, 6, RED, 0, 0.7)
    b.draw_ellipse(9, 10, 6, 6, RED, 0, 0.7)
    assert a == b


def test_thick_outline_is_one_pixel():
    a = DrawBuffer(20, 20)
    b = DrawBuffer(20, 20)
    a.draw_ellipse(9, 9, 8, 5, WHITE, 1)
    b.draw_ellipse(9, 9, 8, 5, WHITE, 4)
    assert a == b


# =============================================================================
# Symmetry
# =============================================================================

@pytest.mark.parametrize("a, b", [ab for ab in AXES if max(ab) <= 10])
@pytest.mark.parametrize("thickness", [0, 1])
@pytest.mark.parametrize("opacity", [1.0, 0.4])
def test_reflective_symmetry(a, b, thickness, opacity):
    buf = DrawBuffer(23, 23)
    buf.draw_ellipse(11, 11, a, b, WHITE, thickness, opacity)
    for dx in range(12):
        for dy in range(12):
            px = buf.get_pixel(11 + dx, 11 + dy)
            assert buf.get_pixel(11 - dx, 11 + dy) == px
            assert buf.get_pixel(11 + dx, 11 - dy) == px
            assert buf.get_pixel(11 - dx, 11 - dy) == px


def test_circle_diagonal_symmetry():
    buf = DrawBuffer(21, 21)
    buf.draw_circle(10, 10, 8, WHITE, 1, 1.0)
    assert touched(buf) == {(y, x) for x, y in touched(buf)}


# =============================================================================
# Write accounting
# =============================================================================

@pytest.mark.parametrize("a, b", AXES)
@pytest.mark.parametrize("draw", [fill_ellipse, outline_ellipse])
def test_each_pixel_written_once(a, b, draw):
    writer = RecordingWriter()
    draw(writer, 0, 0, a, b)
    assert writer.duplicates() == []
    for (x, y), coverage in writer.writes:
        assert abs(x) <= a and abs(y) <= b
        assert 0.0 < coverage <= 1.0


@pytest.mark.parametrize("a, b", AXES)
def test_fill_covers_interior(a, b):
    writer = RecordingWriter()
    fill_ellipse(writer, 0, 0, a, b)
    coverage = writer.coverage()
    for dx in range(-a, a + 1):
        for dy in range(-b, b + 1):
            if inside(a, b, dx, dy):
                assert coverage.get((dx, dy)) == 1.0, (dx, dy)


@pytest.mark.parametrize("a, b", AXES)
def test_partial_pixels_lie_outside(a, b):
    writer = RecordingWriter()
    fill_ellipse(writer, 0, 0, a, b)
    for (dx, dy), coverage in writer.writes:
        if coverage < 1.0:
            assert not inside(a, b, dx, dy)


@pytest.mark.parametrize("a, b", AXES)
def test_outline_hits_cardinal_points(a, b):
    writer = RecordingWriter()
    outline_ellipse(writer, 0, 0, a, b)
    coverage = writer.coverage()
    for point in [(a, 0), (-a, 0), (0, b), (0, -b)]:
        assert coverage[point] == 1.0


@pytest.mark.parametrize("r", [2, 5, 8, 13])
def test_outline_cost_is_linear(r):
    writer = RecordingWriter()
    outline_ellipse(writer, 0, 0, r, r)
    # Two samples per step at most, mirrored four ways
    assert len(writer.writes) <= 16 * (r + 1)


def test_split_point_for_circle():
    col, row = split_point(10, 10)
    assert col == 7
    assert row == 7


# =============================================================================
# Rejected shapes
# =============================================================================

class TestNoOps:
    @pytest.mark.parametrize(
        "x, y, a, b",
        [
            (5, 5, 6, 6),
            (2, 5, 3, 3),
            (5, 2, 3, 3),
            (8, 5, 3, 3),
            (5, 8, 3, 3),
            (5, 5, 0, 3),
            (5, 5, 3, 0),
            (5, 5, -2, 3),
        ],
    )
    def test_bounding_box_must_fit(self, x, y, a, b):
        buf = DrawBuffer(11, 11)
        buf.draw_ellipse(x, y, a, b, WHITE, 0)
        buf.draw_ellipse(x, y, a, b, WHITE, 1)
        assert touched(buf) == set()

    def test_bounding_box_touching_edges(self):
        buf = DrawBuffer(11, 11)
        buf.draw_ellipse(5, 5, 5, 5, WHITE, 0)
        assert buf.get_pixel(0, 5) == WHITE
        assert buf.get_pixel(10, 5) == WHITE
        assert buf.get_pixel(5, 0) == WHITE
        assert buf.get_pixel(5, 10) == WHITE

    @pytest.mark.parametrize("opacity", [0.0, -0.3, math.nan])
    def test_non_positive_opacity(self, opacity):
        buf = DrawBuffer(11, 11)
        buf.draw_circle(5, 5, 4, WHITE, 0, opacity)
        assert buf.to_bytes() == bytes(363)

    def test_skip_is_logged(self, caplog):
        buf = DrawBuffer(11, 11)
        with caplog.at_level(logging.DEBUG, logger="rasterdraw.buffer.draw"):
            buf.draw_circle(1, 1, 4, WHITE)
        assert "exceeds the buffer" in caplog.text
