import argparse
import logging
import secrets
import sys
from pathlib import Path

from toascii.batch import RunContext
from toascii.charsets import DENSITY
from toascii.errors import ToAsciiError
from toascii.model import DEFAULT_THRESHOLD, ConversionConfig, save_frames
from toascii.sampling import open_image
from toascii.terminal import get_terminal_size, preview
from toascii.video import input_kind, split_video

logger = logging.getLogger("toascii")

# Terminal cells are roughly twice as tall as they are wide
CELL_ASPECT = 0.5


def setup_logging(debug: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False


def _threshold(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError("Not a number") from None
    if not 0.0 <= parsed <= 1.0:
        raise argparse.ArgumentTypeError("Number must be in range [0.0, 1.0]")
    return parsed


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not an integer: {value!r}") from None
    if parsed <= 0:
        raise argparse.ArgumentTypeError("Must be greater than 0")
    return parsed


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a number: {value!r}") from None
    if parsed <= 0:
        raise argparse.ArgumentTypeError("Must be greater than 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="to-ascii", description="Convert videos and photos to ASCII art")
    parser.add_argument("input", help="Path to an image or video [png, jpg, jpeg, avif, webp, mp4, mov]")
    parser.add_argument(
        "-o", "--output", default=None, help="JSON file to write the frames to (default: ascii_<random>.json)"
    )
    parser.add_argument(
        "-W", "--width", type=_positive_int, default=None, help="Output width in columns (default: terminal width)"
    )
    parser.add_argument(
        "-H",
        "--height",
        type=_positive_int,
        default=None,
        help="Output height in rows (default: keep the image's aspect ratio)",
    )
    parser.add_argument(
        "-t",
        "--threshold",
        type=_threshold,
        default=DEFAULT_THRESHOLD,
        help=f"Fraction of the strongest edge a pixel needs to be drawn as an edge [0, 1] (default: {DEFAULT_THRESHOLD})",
    )
    parser.add_argument(
        "-p", "--pixels", default=DENSITY, help=f"Characters to shade with, dark to light (default: {DENSITY!r})"
    )
    parser.add_argument("-s", "--space-char", default=" ", help="Replace spaces in the output with this string")
    parser.add_argument("-j", "--workers", type=_positive_int, default=1, help="Frames to convert in parallel")
    parser.add_argument("-P", "--preview", action="store_true", default=False, help="Preview the result in the terminal")
    parser.add_argument(
        "-r", "--frame-rate", type=_positive_float, default=30.0, help="Preview frame rate (default: 30)"
    )
    parser.add_argument("-f", "--force", action="store_true", default=False, help="Overwrite an existing output file")
    parser.add_argument("-d", "--debug", action="store_true", default=False, help="Enable debug logging")
    return parser


def check_output(path: Path, force: bool) -> None:
    """Make sure ``path`` can be written, creating its directory if needed."""
    if path.is_dir():
        raise ToAsciiError(f"output file name collides with an existing directory: {path}")
    if path.exists() and not force:
        raise ToAsciiError(f"output file already exists: {path}. Use -f to overwrite it.")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ToAsciiError(f"cannot create output directory {path.parent}: {e}") from e


def resolve_size(width: int | None, height: int | None, first_frame: Path) -> tuple[int, int]:
    """Fill in whichever of width/height is missing from the source aspect ratio."""
    if width is not None and height is not None:
        return width, height
    src_w, src_h = open_image(first_frame).size
    if width is None and height is None:
        width = get_terminal_size()[0]
    if height is None:
        height = max(1, round(width * src_h / src_w * CELL_ASPECT))
    else:
        width = max(1, round(height * src_w / src_h / CELL_ASPECT))
    return width, height


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    input_path = Path(args.input).resolve()
    if not input_path.is_file():
        parser.error(f"No such file: {input_path}")
    kind = input_kind(input_path)
    if kind is None:
        parser.error("Invalid input type. Accepted types are [png, jpg, jpeg, avif, webp, mp4, mov]")
    if not args.pixels:
        parser.error("--pixels must not be empty")

    output = Path(args.output) if args.output else Path(f"ascii_{secrets.token_hex(5)}.json")
    output = output.resolve()

    try:
        check_output(output, args.force)
        with RunContext() as ctx:
            if kind == "video":
                ctx.frames = split_video(input_path, ctx.make_tmp_dir())
            else:
                ctx.frames = [input_path]
            if not ctx.frames:
                raise ToAsciiError(f"No frames found in {input_path}")

            width, height = resolve_size(args.width, args.height, ctx.frames[0])
            config = ConversionConfig(width=width, height=height, threshold=args.threshold)
            frames = ctx.run(config, args.pixels, args.workers)

        try:
            save_frames(output, frames, space_char=args.space_char)
        except OSError as e:
            raise ToAsciiError(f"cannot write output file {output}: {e}") from e
    except ToAsciiError as e:
        logger.error("%s", e)
        return 1

    logger.info("File written successfully to %s", output)

    if args.preview:
        preview(frames, frame_rate=args.frame_rate)
    return 0


if __name__ == "__main__":
    sys.exit(main())
