import math

from toascii.charsets import EDGE_BUCKETS, EdgeGlyph
from toascii.engine import CharGrid
from toascii.errors import PartitionError
from toascii.gradient import Gradients


def edge_angle_degrees(gx: float, gy: float) -> int:
    """Direction of the edge through a pixel, as integer degrees in [0, 180].

    The edge runs perpendicular to the gradient, so a quarter turn is added
    to the gradient angle before folding it into [0, pi).
    """
    edge_angle = math.atan2(gy, gx) + math.pi / 2
    normalized = math.fmod(edge_angle, math.pi)
    if normalized < 0:
        normalized += math.pi
    return round(normalized * 180 / math.pi)


def classify_angle(degrees: int) -> EdgeGlyph:
    for (low, high), glyph in EDGE_BUCKETS:
        if low <= degrees <= high:
            return glyph
    # EdgeGlyph.CORNER would go here once corners can be detected
    raise PartitionError(f"edge angle {degrees!r} matched no glyph bucket")


def draw_edges(grid: CharGrid, gradients: Gradients, threshold_ratio: float) -> CharGrid:
    """Write an edge glyph for every cell above the magnitude threshold, a space elsewhere."""
    threshold = gradients.max_magnitude * threshold_ratio
    gx = gradients.gx.tolist()
    gy = gradients.gy.tolist()
    magnitude = gradients.magnitude.tolist()

    for row in range(grid.height):
        for col in range(grid.width):
            if magnitude[row][col] > threshold:
                degrees = edge_angle_degrees(gx[row][col], gy[row][col])
                grid.write(row, col, classify_angle(degrees).value)
            else:
                grid.write(row, col, " ")
    return grid
