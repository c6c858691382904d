import logging
import math
import shutil
import subprocess
from pathlib import Path

from toascii.errors import VideoSplitError

logger = logging.getLogger(__name__)

PHOTO_EXTENSIONS = {"png", "jpg", "jpeg", "avif", "webp"}
VIDEO_EXTENSIONS = {"mp4", "mov"}


def input_kind(path: str | Path) -> str | None:
    """Return "photo", "video" or None for an unsupported extension."""
    ext = Path(path).suffix.lstrip(".").lower()
    if ext in PHOTO_EXTENSIONS:
        return "photo"
    if ext in VIDEO_EXTENSIONS:
        return "video"
    return None


def _run(cmd: list[str]) -> str:
    if shutil.which(cmd[0]) is None:
        raise VideoSplitError(cmd, f"{cmd[0]} not found on PATH")
    logger.debug("Running %s", " ".join(cmd))
    result = subprocess.run(cmd, capture_output=True, text=True)
    if result.returncode != 0:
        raise VideoSplitError(cmd, result.stderr)
    return result.stdout


def count_frames(video: str | Path) -> int:
    out = _run(
        [
            "ffprobe",
            "-v",
            "error",
            "-count_frames",
            "-select_streams",
            "v:0",
            "-show_entries",
            "stream=nb_read_frames",
            "-of",
            "default=nokey=1:noprint_wrappers=1",
            str(video),
        ]
    )
    try:
        return int(out.strip())
    except ValueError:
        raise VideoSplitError(["ffprobe", str(video)], f"unexpected frame count {out.strip()!r}") from None


def split_video(video: str | Path, out_dir: str | Path) -> list[Path]:
    """Split a video into numbered PNG frames inside ``out_dir``.

    Returns the frame paths sorted in playback order.
    """
    out_dir = Path(out_dir)
    total = count_frames(video)
    # Zero-padded so lexical order matches frame order
    digits = max(1, math.ceil(math.log10(total + 1)))
    _run(["ffmpeg", "-loglevel", "error", "-i", str(video), str(out_dir / f"frame_%0{digits}d.png")])

    frames = sorted(out_dir.glob("frame_*.png"))
    logger.debug("Split %s into %d frame(s)", video, len(frames))
    return frames
