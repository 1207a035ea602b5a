"""
Circle Transcoder - Command-line entry point
"""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from circle_transcoder import __version__
from circle_transcoder.config import get_settings
from circle_transcoder.core.constants import LoggingConstants
from circle_transcoder.core.enums import OutputEncoding
from circle_transcoder.core.exceptions import TranscoderError
from circle_transcoder.services.transcode_service import TranscodeService, build_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="circle-transcoder",
        description=(
            "Resize an image to a square JPEG, optionally cropped to a circle, "
            "desaturated and compressed below a size budget."
        ),
    )
    parser.add_argument("input", help="Path to the source image (any format Pillow reads)")
    parser.add_argument("output", help="Path of the file to write")
    parser.add_argument(
        "-s", "--size", type=int, default=None, help="Output width and height in pixels (default: 200)"
    )
    parser.add_argument(
        "-q",
        "--quality",
        type=int,
        default=None,
        help="JPEG quality 0-100 (default: 75, or searched when --max-filesize is set)",
    )
    parser.add_argument(
        "-c", "--circle", action="store_true", help="Crop to the inscribed circle on a black background"
    )
    parser.add_argument("-g", "--grayscale", action="store_true", help="Write a grayscale JPEG")
    parser.add_argument(
        "-m",
        "--max-filesize",
        type=int,
        default=None,
        help="Lower the quality until the JPEG is at most this many bytes",
    )
    parser.add_argument(
        "--quality-step",
        type=int,
        default=None,
        help="Quality decrement between size-budget attempts (default: 10)",
    )
    parser.add_argument(
        "-e",
        "--encoding",
        default=OutputEncoding.RAW.value,
        help="Output transport: raw, jpeg, base64 or dataurl (default: raw)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format=LoggingConstants.FORMAT)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the transcoder.

    Returns:
        Process exit code (0 on success, 1 on any transcoder error)
    """
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging(LoggingConstants.DEFAULT_LEVEL)
        logger.error(f"Invalid environment configuration: {e}")
        return 1

    configure_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        # Validated before any file is touched
        config = build_config(
            size=args.size if args.size is not None else settings.default_size,
            circle=args.circle,
            grayscale=args.grayscale,
            quality=args.quality,
            max_filesize=args.max_filesize,
            quality_step=(
                args.quality_step if args.quality_step is not None else settings.quality_step
            ),
            encoding=args.encoding,
        )
        service = TranscodeService(
            default_quality=settings.default_quality, block_size=settings.block_size
        )
        service.transcode_file(args.input, args.output, config)
    except TranscoderError as e:
        logger.error(e.message)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
