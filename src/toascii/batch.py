from __future__ import annotations

import logging
import shutil
import tempfile
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from toascii.charsets import DENSITY
from toascii.converter import image_to_ascii
from toascii.model import ConversionConfig, validate_density

logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    """State owned by a single conversion run.

    ``frames`` are the image paths to convert, in order. ``results`` is filled
    by ``run`` with one list of row strings per frame. The temporary directory,
    when one was created, is removed on ``cleanup`` or when leaving the
    ``with`` block.
    """

    frames: list[Path] = field(default_factory=list)
    results: list[list[str]] = field(default_factory=list)
    tmp_dir: Path | None = None

    def make_tmp_dir(self) -> Path:
        if self.tmp_dir is None:
            self.tmp_dir = Path(tempfile.mkdtemp(prefix="frames_"))
        return self.tmp_dir

    def cleanup(self) -> None:
        if self.tmp_dir is not None and self.tmp_dir.exists():
            shutil.rmtree(self.tmp_dir, ignore_errors=True)
        self.tmp_dir = None

    def __enter__(self) -> RunContext:
        return self

    def __exit__(self, *exc) -> None:
        self.cleanup()

    def run(self, config: ConversionConfig, density: str = DENSITY, workers: int = 1) -> list[list[str]]:
        self.results = convert_frames(self.frames, config, density, workers)
        return self.results


def convert_frames(
    paths: list[Path],
    config: ConversionConfig,
    density: str = DENSITY,
    workers: int = 1,
) -> list[list[str]]:
    """Convert image files to text frames, preserving input order.

    Frames are independent, so with ``workers > 1`` they are converted on a
    thread pool. The first failing frame raises; if the caller is interrupted,
    frames not yet started are cancelled and nothing is returned.
    """
    validate_density(density)
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    logger.debug("Converting %d frame(s) at %dx%d with %d worker(s)", len(paths), config.width, config.height, workers)

    def convert(path: Path) -> list[str]:
        return image_to_ascii(Path(path), config, density)

    if workers == 1 or len(paths) <= 1:
        return [convert(path) for path in paths]

    executor = ThreadPoolExecutor(max_workers=workers)
    try:
        futures = [executor.submit(convert, path) for path in paths]
        results = [future.result() for future in futures]
    except BaseException:
        executor.shutdown(wait=False, cancel_futures=True)
        raise
    executor.shutdown()
    return results
