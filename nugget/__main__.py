"""
Video Nugget Generator

This module serves as the entry point for the nugget tool. It cuts the given
intervals out of a source video, joins them, and burns the source's automatic
captions, re-timed to the joined clip, into the rendered output.

Usage:
    nugget URL --interval 00:01:19 00:01:40 --interval 00:04:30 00:05:00

    Without --interval the two default intervals from the configuration are
    used. --source skips the download and cuts a local copy of the video.
"""

import argparse
import logging
import sys
import time

from dotenv import load_dotenv

from nugget.config import Config, reload_settings
from nugget.domain import InvalidInterval, parse_intervals
from nugget.errors import CollaboratorFailure
from nugget.pipeline import NuggetRequest, generate_nugget
from nugget.subtitles.overlay import InvalidCue
from nugget.utils.logger import configure_logging, get_logger
from nugget.utils.timecode import InvalidTimecode


logger: logging.Logger = get_logger("nugget")


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        description="Cut video intervals and burn re-timed captions into them"
    )
    parser.add_argument(
        "url",
        type=str,
        help="Address of the source video",
    )
    parser.add_argument(
        "--interval",
        nargs=2,
        action="append",
        metavar=("FROM", "TO"),
        help="Source interval as HH:MM:SS timecodes; repeat to add more",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path of the rendered video",
    )
    parser.add_argument(
        "--language",
        type=str,
        default=None,
        help="Caption language code",
    )
    parser.add_argument(
        "--source",
        type=str,
        default=None,
        help="Local copy of the source video; skips the download",
    )
    parser.add_argument(
        "--show-captions",
        action="store_true",
        help="Print the re-timed caption timeline before rendering",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level, overrides LOG_LEVEL",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """
    Main function to handle the command line interface logic.
    """
    load_dotenv()
    reload_settings()
    args: argparse.Namespace = parse_arguments(argv)
    configure_logging(args.log_level)

    try:
        intervals = parse_intervals(args.interval or Config.DEFAULT_INTERVALS)
    except (InvalidInterval, InvalidTimecode) as err:
        logger.error(msg=f"Invalid interval: {err}")
        sys.exit(1)

    request = NuggetRequest(
        url=args.url,
        intervals=intervals,
        output=args.output or Config.OUTPUT_CONFIG["file"],
        language=args.language or Config.SUBTITLE_CONFIG["language"],
        source_file=args.source,
        show_captions=args.show_captions,
    )

    logger.info(msg="Starting nugget generation...")
    start_time: float = time.time()
    try:
        result = generate_nugget(request)
    except CollaboratorFailure as err:
        logger.error(msg=f"Nugget generation stopped: stage '{err.stage}' failed.")
        sys.exit(1)
    except (InvalidCue, InvalidInterval, InvalidTimecode) as err:
        logger.error(msg=f"Nugget generation stopped: invalid input: {err}")
        sys.exit(1)

    logger.info(
        msg=(
            f"Nugget {result.output} generated in "
            f"{time.time() - start_time:.2f} seconds"
        )
    )


if __name__ == "__main__":
    main()
