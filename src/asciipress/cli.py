import argparse
import logging
import sys
from pathlib import Path

from asciipress.charsets import DEFAULT_PALETTE, PALETTES
from asciipress.codec import write_compressed, write_decompressed
from asciipress.converter import image_to_ascii
from asciipress.errors import ConfigurationError

DEFAULT_WIDTH = 160

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render an image as ASCII art, optionally as compressed text. "
        "Without an image, decompress one line read from stdin."
    )
    parser.add_argument("image", nargs="?", default=None, help="Path to input image")
    parser.add_argument(
        "--colors", default=DEFAULT_PALETTE, help="Colour palette, in order of intensity (default: %(default)r)"
    )
    parser.add_argument("--preset", choices=sorted(PALETTES), default=None, help="Named palette, overrides --colors")
    parser.add_argument(
        "-w", "--width", type=int, default=DEFAULT_WIDTH, help="Output width in characters (default: %(default)s)"
    )
    parser.add_argument(
        "-s", "--squash", action="store_true", default=False, help="Squash the image vertically to half its height"
    )
    parser.add_argument("-c", "--compress", action="store_true", default=False, help="Print compressed text")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("asciipress").setLevel(level)

    palette = PALETTES[args.preset] if args.preset else args.colors

    try:
        if args.image is None:
            line = sys.stdin.readline()
            if line:
                write_decompressed(sys.stdout, line, palette, args.width)
            else:
                logger.debug("No input on stdin")
            return

        image_path = Path(args.image)
        if not image_path.exists():
            print(f"File not found: {image_path}", file=sys.stderr)
            sys.exit(1)

        art = image_to_ascii(image_path, palette, width=args.width, squash=args.squash)
        if args.compress:
            write_compressed(sys.stdout, art, palette)
        else:
            sys.stdout.write(art)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
