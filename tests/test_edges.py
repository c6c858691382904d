import numpy as np
import pytest

from toascii.charsets import EDGE_BUCKETS, EdgeGlyph
from toascii.edges import classify_angle, draw_edges, edge_angle_degrees
from toascii.engine import CharGrid
from toascii.errors import PartitionError
from toascii.gradient import estimate

from tests.conftest import step_samples


@pytest.mark.parametrize(
    "degrees,glyph",
    [
        (0, "-"),
        (19, "-"),
        (20, "\\"),
        (70, "\\"),
        (71, "|"),
        (109, "|"),
        (110, "/"),
        (160, "/"),
        (161, "-"),
        (180, "-"),
    ],
)
def test_bucket_boundaries(degrees, glyph):
    assert classify_angle(degrees).value == glyph


def test_every_degree_maps_to_exactly_one_bucket():
    for degrees in range(181):
        matches = [glyph for (low, high), glyph in EDGE_BUCKETS if low <= degrees <= high]
        assert len(matches) == 1, degrees
        assert classify_angle(degrees) is matches[0]


def test_corner_glyph_is_never_produced():
    produced = {classify_angle(d) for d in range(181)}
    assert EdgeGlyph.CORNER not in produced
    assert produced == {
        EdgeGlyph.HORIZONTAL,
        EdgeGlyph.RIGHT_DIAGONAL,
        EdgeGlyph.VERTICAL,
        EdgeGlyph.LEFT_DIAGONAL,
    }


@pytest.mark.parametrize("degrees", [-1, 181, 360])
def test_out_of_partition_angle_fails_fast(degrees):
    with pytest.raises(PartitionError, match="matched no glyph bucket"):
        classify_angle(degrees)


@pytest.mark.parametrize(
    "gx,gy,expected",
    [
        (1, 0, 90),  # gradient points right, edge runs vertically
        (-1, 0, 90),
        (0, 1, 0),  # gradient points down, edge runs horizontally
        (0, -1, 0),
        (1, 1, 135),
        (1, -1, 45),
        (-1, -1, 135),
    ],
)
def test_edge_angle_is_perpendicular_to_gradient(gx, gy, expected):
    assert edge_angle_degrees(gx, gy) == expected


def test_edge_angle_near_pi_rounds_to_180():
    # Just shy of a half turn: must land on 180, not wrap past it
    assert edge_angle_degrees(1, 1000) == 180
    assert classify_angle(edge_angle_degrees(1, 1000)) is EdgeGlyph.HORIZONTAL
    assert edge_angle_degrees(-1, 1000) == 0


def test_edge_angle_always_in_range():
    rng = np.random.default_rng(0)
    for gx, gy in rng.integers(-1020, 1021, size=(500, 2)):
        assert 0 <= edge_angle_degrees(int(gx), int(gy)) <= 180


def test_uniform_image_has_no_edges():
    samples = np.full((5, 7), 90, dtype=np.uint8)
    for ratio in (0.0, 0.5, 1.0):
        grid = draw_edges(CharGrid(7, 5), estimate(samples), ratio)
        assert grid.rows() == [" " * 7] * 5


def test_vertical_step_draws_vertical_bars():
    gradients = estimate(step_samples(height=4, width=6, split=3))
    grid = draw_edges(CharGrid(6, 4), gradients, 0.8)
    assert grid.rows() == ["  ||  "] * 4


def test_horizontal_step_draws_dashes():
    samples = step_samples(height=4, width=6, split=3).T.copy()
    grid = draw_edges(CharGrid(4, 6), estimate(samples), 0.8)
    assert grid.rows() == ["    ", "    ", "----", "----", "    ", "    "]


def test_threshold_is_strictly_greater_than():
    # Every edge cell sits exactly at the maximum, so a ratio of 1.0 keeps none
    grid = draw_edges(CharGrid(6, 4), estimate(step_samples()), 1.0)
    assert grid.rows() == [" " * 6] * 4


def test_existing_glyphs_survive_edge_pass():
    grid = CharGrid(6, 4)
    grid.write(0, 2, "@")
    draw_edges(grid, estimate(step_samples()), 0.8)
    assert grid.cell(0, 2) == "@"
    assert grid.cell(0, 3) == "|"


def test_diagonal_edge_uses_diagonal_glyphs():
    size = 9
    rows, cols = np.indices((size, size))
    # Bright below the main diagonal
    samples = np.where(rows > cols, 255, 0).astype(np.uint8)
    gradients = estimate(samples)
    grid = draw_edges(CharGrid(size, size), gradients, 0.5)
    glyphs = {c for row in grid.rows() for c in row if c != " "}
    assert glyphs
    assert glyphs <= {"\\", "|", "-"}
    assert "\\" in glyphs
