from pathlib import Path

import numpy as np
from PIL import Image

from toascii.charsets import DENSITY
from toascii.edges import draw_edges
from toascii.engine import CharGrid
from toascii.gradient import estimate
from toascii.luminance import draw_luminance
from toascii.model import ConversionConfig, validate_density
from toascii.sampling import preprocess


def convert_samples(samples: np.ndarray, config: ConversionConfig, density: str = DENSITY) -> list[str]:
    """Convert a (height, width) sample grid into rows of text.

    Edges are drawn first and the luminance layer only fills the cells left
    blank, so edge glyphs always take priority over shading.
    """
    validate_density(density)
    samples = np.asarray(samples)
    if samples.shape != (config.height, config.width):
        raise ValueError(f"Sample grid shape {samples.shape} does not match {config.height}x{config.width}")

    grid = CharGrid(config.width, config.height)
    draw_edges(grid, estimate(samples), config.threshold)
    draw_luminance(grid, samples, density)
    return grid.rows()


def image_to_ascii(
    image: Image.Image | bytes | str | Path,
    config: ConversionConfig | None = None,
    density: str = DENSITY,
) -> list[str]:
    if config is None:
        config = ConversionConfig()
    validate_density(density)
    samples = preprocess(image, config.width, config.height)
    return convert_samples(samples, config, density)
