import os
import sys
import time
from typing import TextIO

ALT_SCREEN_ON = "\033[?1049h"
ALT_SCREEN_OFF = "\033[?1049l"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR = "\033[H\033[2J"


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return (80, 24)
    size = os.get_terminal_size()
    return (size.columns, size.lines)


def _show(frame: list[str], out: TextIO) -> None:
    out.write(CLEAR)
    out.write("\n".join(frame))


def preview(frames: list[list[str]], frame_rate: float = 30.0, out: TextIO | None = None, loops: int | None = None) -> None:
    """Show frames on the terminal's alternate screen.

    A single frame stays up until Ctrl+C. Several frames loop as an animation
    at ``frame_rate``, forever unless ``loops`` is given. The cursor and the
    normal screen are restored however the preview ends.
    """
    if out is None:
        out = sys.stdout
    if not frames:
        return
    frame_duration = 1.0 / frame_rate

    out.write(ALT_SCREEN_ON + HIDE_CURSOR)
    try:
        if len(frames) == 1:
            _show(frames[0], out)
            out.flush()
            if loops is None:
                while True:
                    time.sleep(1.0)
            return

        shown = 0
        i = 0
        while loops is None or shown < loops * len(frames):
            start = time.perf_counter()
            _show(frames[i], out)
            out.write(f"\nframe: {i + 1}/{len(frames)}")
            out.flush()
            # Subtract draw time so the frame rate stays steady
            elapsed = time.perf_counter() - start
            time.sleep(max(0.0, frame_duration - elapsed))
            shown += 1
            i = (i + 1) % len(frames)
    except KeyboardInterrupt:
        pass
    finally:
        out.write(SHOW_CURSOR + ALT_SCREEN_OFF)
        out.flush()
