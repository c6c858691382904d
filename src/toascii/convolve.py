import numpy as np
from numpy.lib.stride_tricks import as_strided

SOBEL_X = (-1, 0, 1, -2, 0, 2, -1, 0, 1)
SOBEL_Y = (-1, -2, -1, 0, 0, 0, 1, 2, 1)


def convolve(grid: np.ndarray, kernel) -> np.ndarray:
    """Apply a 3x3 kernel to a single-channel grid.

    The kernel is given row-major and applied as written (no flip), the way
    libvips applies convolution masks. Border pixels use clamp-to-edge: any
    neighbour outside the grid repeats the nearest edge pixel. This decides
    the values in the outermost rows and columns.

    Args:
        grid: (H, W) array of samples
        kernel: 9 weights, row-major

    Returns:
        (H, W) int16 array of signed responses
    """
    weights = np.asarray(kernel, dtype=np.int32).reshape(3, 3)
    padded = np.pad(np.asarray(grid, dtype=np.int32), 1, mode="edge")
    h, w = padded.shape[0] - 2, padded.shape[1] - 2

    # (H, W, 3, 3) view of each pixel's neighbourhood
    s = padded.strides
    windows = as_strided(padded, shape=(h, w, 3, 3), strides=(s[0], s[1], s[0], s[1]), writeable=False)
    out = np.einsum("ijkl,kl->ij", windows, weights)
    return out.astype(np.int16)
