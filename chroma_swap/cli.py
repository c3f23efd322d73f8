"""
Command line entry point.

# Key out the dominant color of foreground.png and save the result:
# python -m chroma_swap foreground.png background.png -o overlay.png
#
# Also save the edge preview of the background, using the reference scan:
# python -m chroma_swap foreground.png background.png -o overlay.png --edges edges.png --reference-scan
"""

import logging
import sys
from argparse import ArgumentParser
from typing import List, Optional

from PIL import Image

from chroma_swap.config import QuantizationConfig
from chroma_swap.edge_preview import edge_preview
from chroma_swap.overlay import create_overlay

log = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="chroma-swap",
        description="Replace the dominant color of an image with another image",
    )
    parser.add_argument("foreground", help="image whose dominant color is replaced")
    parser.add_argument("background", help="image shown through the replaced color")
    parser.add_argument("-o", "--output", help="overlay output location")
    parser.add_argument("--edges", help="edge preview output location for the background")
    parser.add_argument("--grid-size", type=int, default=4, help="buckets per channel")
    parser.add_argument(
        "--threshold", type=int, default=None, help="per-channel match distance"
    )
    parser.add_argument(
        "--reference-scan",
        action="store_true",
        help="skip the last row and column like the original tool",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the overlay tool.

    Args:
        argv: Command line arguments, defaults to sys.argv.

    Returns:
        The process exit status.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = QuantizationConfig(
            grid_size=args.grid_size,
            threshold=args.threshold,
            skip_last_row_and_column=args.reference_scan,
        )
        with Image.open(args.foreground) as foreground, Image.open(args.background) as background:
            overlay = create_overlay(foreground, background, config)

            if args.output:
                overlay.save(args.output)
                log.info("Saved overlay to %s", args.output)
            else:
                overlay.show()

            if args.edges:
                edge_preview(background).save(args.edges)
                log.info("Saved edge preview to %s", args.edges)
    except (ValueError, OSError) as e:
        log.error("%s", e)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
