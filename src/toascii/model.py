import json
import numbers
from dataclasses import dataclass
from pathlib import Path

from toascii.errors import ConfigError

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 40
DEFAULT_THRESHOLD = 0.8


@dataclass(frozen=True)
class ConversionConfig:
    """Output size and edge sensitivity for one conversion run.

    ``threshold`` is a fraction of the strongest gradient in a frame: only
    cells whose gradient magnitude is above ``threshold * max`` become edges.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    threshold: float = DEFAULT_THRESHOLD

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if not 0.0 <= self.threshold <= 1.0:
            raise ConfigError(f"threshold must be in range [0.0, 1.0], got {self.threshold!r}")


def validate_density(density: str) -> str:
    if not density:
        raise ConfigError("density string must not be empty")
    return density


def save_frames(path: str | Path, frames: list[list[str]], space_char: str = " ") -> None:
    """Write frames as a JSON array of arrays of row strings."""
    path = Path(path)
    if space_char != " ":
        frames = [[row.replace(" ", space_char) for row in frame] for frame in frames]
    with path.open("w", encoding="utf-8") as f:
        json.dump(frames, f, ensure_ascii=False)


def load_frames(path: str | Path) -> list[list[str]]:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Not a frames file: {e}") from e
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of frames, got {type(data).__name__}")
    for i, frame in enumerate(data):
        if not isinstance(frame, list) or not all(isinstance(row, str) for row in frame):
            raise ValueError(f"Frame {i} is not a list of strings")
    return data
