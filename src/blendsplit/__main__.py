import argparse
import logging
from typing import Optional

from blendsplit.api import pil_io
from blendsplit.composite import merge
from blendsplit.constants import (
    DEFAULT_BLOCK_SIZE,
    DEFAULT_LAYER_COUNT,
    MAX_BLOCK_SIZE,
    MAX_LAYER_COUNT,
    MIN_BLOCK_SIZE,
    MIN_LAYER_COUNT,
    BlendMode,
)
from blendsplit.errors import BlendSplitError
from blendsplit.partition import draw_seed, split
from blendsplit.version import __version__

logger = logging.getLogger("blendsplit")


def clamp(value: int, minimum: int, maximum: int, name: str, default: int) -> int:
    """
    Clamp an option into range, warning when it changes.

    Zero means unset and is replaced by ``default`` before clamping.
    """
    if value == 0:
        logger.warning("%s 0 is not allowed, using %d" % (name, default))
        value = default
    clamped = max(minimum, min(maximum, value))
    if clamped != value:
        logger.warning("%s %d is out of range, using %d" % (name, value, clamped))
    return clamped


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Merge images by blending, or split an image into layers."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)

    merge_parser = subparsers.add_parser("merge", help="Merge images into one")
    merge_parser.add_argument(
        "input_files", nargs="+", help="Input images, blended in the given order"
    )
    merge_parser.add_argument("-o", "--output", required=True, help="Output image file")
    merge_parser.add_argument(
        "--mode",
        choices=[mode.value for mode in BlendMode],
        default=BlendMode.AUTO.value,
        help="Blend mode (default: %(default)s)",
    )
    merge_parser.add_argument(
        "--invert", action="store_true", help="Invert the colors of the result"
    )

    split_parser = subparsers.add_parser("split", help="Split an image into layers")
    split_parser.add_argument("input_file", help="Input image")
    split_parser.add_argument(
        "-o", "--output", required=True, help="Output directory for layer files"
    )
    split_parser.add_argument(
        "--layers",
        type=int,
        default=DEFAULT_LAYER_COUNT,
        help="Number of layers, %d to %d (default: %%(default)s)"
        % (MIN_LAYER_COUNT, MAX_LAYER_COUNT),
    )
    split_parser.add_argument(
        "--block-size",
        type=int,
        default=DEFAULT_BLOCK_SIZE,
        help="Block size in pixels, %d to %d (default: %%(default)s)"
        % (MIN_BLOCK_SIZE, MAX_BLOCK_SIZE),
    )
    split_parser.add_argument(
        "--invert", action="store_true", help="Invert the colors of the layers"
    )
    split_parser.add_argument(
        "--seed",
        type=float,
        default=None,
        help="Shuffle seed in [0, 1); a random one is drawn if omitted",
    )

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    if args.verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    try:
        if args.command == "merge":
            if len(args.input_files) < 2:
                logger.error("merge needs at least 2 input images")
                return 1
            images = [pil_io.open_image(path) for path in args.input_files]
            result = merge(images, mode=args.mode, invert=args.invert)
            pil_io.save(result.display, args.output)
            logger.info("Saved merged image to %s" % args.output)

        elif args.command == "split":
            layer_count = clamp(
                args.layers, MIN_LAYER_COUNT, MAX_LAYER_COUNT, "Layers", MIN_LAYER_COUNT
            )
            block_size = clamp(
                args.block_size,
                MIN_BLOCK_SIZE,
                MAX_BLOCK_SIZE,
                "Block size",
                DEFAULT_BLOCK_SIZE,
            )
            seed = draw_seed() if args.seed is None else args.seed
            logger.info("Using seed %r" % seed)
            image = pil_io.open_image(args.input_file)
            partition = split(image, layer_count, block_size, args.invert, seed)
            pil_io.save_layers(partition.layers, args.output)

    except (BlendSplitError, FileNotFoundError) as e:
        logger.error(str(e))
        return 1

    return None


if __name__ == "__main__":
    main()
