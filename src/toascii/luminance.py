import math

import numpy as np

from toascii.engine import CharGrid
from toascii.sampling import map_range


def luminance_char(value: float, density: str) -> str:
    """Pick the density character for a 0-255 sample; density runs dark to light."""
    index = math.floor(map_range(value, 0, 255, 0, len(density) - 1))
    return density[index]


def draw_luminance(grid: CharGrid, samples: np.ndarray, density: str) -> CharGrid:
    values = np.asarray(samples).tolist()
    for row in range(grid.height):
        for col in range(grid.width):
            grid.write(row, col, luminance_char(values[row][col], density))
    return grid
