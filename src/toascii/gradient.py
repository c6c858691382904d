from dataclasses import dataclass

import numpy as np

from toascii.convolve import SOBEL_X, SOBEL_Y, convolve


@dataclass(frozen=True)
class Gradients:
    gx: np.ndarray  # (H, W) int16, horizontal Sobel response
    gy: np.ndarray  # (H, W) int16, vertical Sobel response
    magnitude: np.ndarray  # (H, W) float64, sqrt(gx^2 + gy^2)
    max_magnitude: float

    @property
    def shape(self) -> tuple[int, int]:
        return self.gx.shape


def estimate(samples: np.ndarray) -> Gradients:
    """Approximate the intensity gradient of a sample grid with the Sobel operator.

    A uniform grid has no gradient anywhere, so every magnitude and the
    maximum are 0.0.
    """
    samples = np.asarray(samples)
    if samples.ndim != 2:
        raise ValueError(f"Expected a 2D sample grid, got shape {samples.shape}")

    gx = convolve(samples, SOBEL_X)
    gy = convolve(samples, SOBEL_Y)
    for grid in (gx, gy):
        grid.setflags(write=False)

    gx_f = gx.astype(np.float64)
    gy_f = gy.astype(np.float64)
    magnitude = np.sqrt(gx_f * gx_f + gy_f * gy_f)
    magnitude.setflags(write=False)
    max_magnitude = float(magnitude.max()) if magnitude.size else 0.0

    return Gradients(gx=gx, gy=gy, magnitude=magnitude, max_magnitude=max_magnitude)
