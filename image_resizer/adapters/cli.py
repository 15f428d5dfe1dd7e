"""Command-line front end: resize files or a folder of images."""

import argparse
import logging
import sys
from typing import List, Optional

from ..core.filters import FilterType
from ..core.io_utils import gather_inputs
from ..core.models import ResizeSettings
from ..core.resize_service import resize_many
from ..core.wand import terminate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-resizer",
        description="Resize images, writing <name>_resized.<ext> next to the source or into --output-dir.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("files", nargs="*", help="Image files to resize")
    parser.add_argument("--folder", help="Resize every supported image under this folder")
    parser.add_argument("--width", type=int, help="Target width in pixels (requires --height)")
    parser.add_argument("--height", type=int, help="Target height in pixels (requires --width)")
    parser.add_argument("--quality", type=int, default=0,
                        help="Compression quality, usually 0-100 (0 = encoder default)")
    parser.add_argument(
        "--filter",
        type=FilterType.from_name,
        default=FilterType.UNDEFINED,
        metavar="NAME",
        help="Resampling filter: " + ", ".join(n.lower() for n in FilterType.__members__),
    )
    parser.add_argument("--output-dir", default="", help="Directory for resized images")
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging verbosity",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> ResizeSettings:
    return ResizeSettings(
        width=args.width,
        height=args.height,
        compression_quality=args.quality,
        filter_type=args.filter,
        output_dir=args.output_dir,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(message)s",
        stream=sys.stdout,
    )

    files = gather_inputs(args.files, args.folder)
    if not files:
        parser.error("no supported images given (pass files or --folder)")

    settings = settings_from_args(args)
    failed = 0
    try:
        for res in resize_many(files, settings):
            if res.ok:
                print(res.dst_path)
            else:
                failed += 1
    finally:
        terminate()

    if failed:
        logger.warning(f"{failed} of {len(files)} images failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
