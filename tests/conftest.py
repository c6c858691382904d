import shutil

import numpy as np
import pytest
from PIL import Image

HAS_FFMPEG = shutil.which("ffmpeg") is not None and shutil.which("ffprobe") is not None
needs_ffmpeg = pytest.mark.skipif(not HAS_FFMPEG, reason="ffmpeg/ffprobe not found on PATH")


def step_samples(height=4, width=6, split=3, dark=0, bright=255):
    """Sample grid dark on the left of ``split`` and bright from ``split`` on."""
    samples = np.full((height, width), dark, dtype=np.uint8)
    samples[:, split:] = bright
    return samples


@pytest.fixture
def write_png(tmp_path):
    """Save a sample grid as a greyscale PNG and return its path."""

    def _write(samples, name="frame.png"):
        path = tmp_path / name
        Image.fromarray(np.asarray(samples, dtype=np.uint8)).save(path)
        return path

    return _write
