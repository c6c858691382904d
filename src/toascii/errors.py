class ToAsciiError(Exception):
    """Base class for errors raised by toascii."""


class ConfigError(ToAsciiError, ValueError):
    """Invalid conversion settings, raised before any conversion work starts."""


class PreprocessError(ToAsciiError):
    """An input image could not be decoded."""


class PartitionError(ToAsciiError, AssertionError):
    """An edge angle fell outside every glyph bucket.

    The buckets cover every integer degree in [0, 180], so this points at a
    rounding or normalization bug rather than at bad input.
    """


class VideoSplitError(ToAsciiError):
    """ffprobe or ffmpeg failed while splitting a video into frames."""

    def __init__(self, cmd: list[str], stderr: str):
        self.cmd = cmd
        self.stderr = stderr
        super().__init__(f"could not run '{' '.join(cmd)}'\n{stderr.strip()}")
