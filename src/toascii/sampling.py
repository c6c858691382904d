import io
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from toascii.errors import PreprocessError


def map_range(value: float, in_min: float, in_max: float, out_min: float, out_max: float) -> float:
    """Linearly map ``value`` from [in_min, in_max] onto [out_min, out_max]."""
    proportion = (value - in_min) / (in_max - in_min)
    return proportion * (out_max - out_min) + out_min


def open_image(source: Image.Image | bytes | str | Path) -> Image.Image:
    if isinstance(source, Image.Image):
        return source
    try:
        if isinstance(source, (bytes, bytearray)):
            image = Image.open(io.BytesIO(source))
        else:
            image = Image.open(source)
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise PreprocessError(f"Could not decode image: {e}") from e
    return image


def preprocess(source: Image.Image | bytes | str | Path, width: int, height: int) -> np.ndarray:
    """Decode, stretch to exactly width x height and greyscale an image.

    Returns a uint8 sample grid of shape (height, width).
    """
    image = open_image(source)
    # Drop alpha onto white so transparent regions read as background
    if image.mode in ("RGBA", "LA", "PA") or (image.mode == "P" and "transparency" in image.info):
        rgba = image.convert("RGBA")
        background = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
        image = Image.alpha_composite(background, rgba)
    if image.size != (width, height):
        image = image.resize((width, height), Image.LANCZOS)
    gray = image.convert("L")
    return np.asarray(gray, dtype=np.uint8)
