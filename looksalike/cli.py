"""Command line entry point: compare two images."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Any

import structlog

from looksalike.api import create_diff, get_diff_area, looks_same
from looksalike.config.logging import setup_logging
from looksalike.config.settings import get_settings
from looksalike.exceptions import LooksAlikeError

logger = structlog.get_logger(__name__)

EXIT_SAME = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="looks-alike",
        description="Check whether two images look the same to a human observer.",
    )
    parser.add_argument("reference", help="Path to the reference image.")
    parser.add_argument("current", help="Path to the image compared against the reference.")
    parser.add_argument(
        "-d", "--diff", help="Write a highlighted diff image here when the images differ."
    )
    parser.add_argument(
        "-a", "--area", action="store_true", help="Print the bounding box of the differences."
    )
    parser.add_argument(
        "-s", "--strict", action="store_true", help="Require exact color equality."
    )
    parser.add_argument(
        "-t", "--tolerance", type=float, help="CIEDE2000 tolerance. Defaults to 2.3."
    )
    parser.add_argument(
        "--no-antialiasing",
        dest="ignore_antialiasing",
        action="store_false",
        help="Report differences on antialiased edges.",
    )
    parser.add_argument(
        "--antialiasing-tolerance",
        type=float,
        default=0.0,
        help="Brightness slack when classifying antialiased pixels. Defaults to 0.",
    )
    parser.add_argument(
        "-c", "--ignore-caret", action="store_true", help="Ignore a blinking text caret."
    )
    parser.add_argument(
        "-p",
        "--pixel-ratio",
        type=float,
        default=1.0,
        help="Device pixel ratio of the screenshots. Defaults to 1.",
    )
    parser.add_argument("--highlight-color", help="Color used to paint differences.")
    parser.add_argument("--log-level", help="Log level. Defaults to LOOKS_ALIKE_LOG_LEVEL or INFO.")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON.")
    return parser


def _options(args: argparse.Namespace) -> dict[str, Any]:
    options: dict[str, Any] = {
        "strict": args.strict,
        "ignore_antialiasing": args.ignore_antialiasing,
        "antialiasing_tolerance": args.antialiasing_tolerance,
        "ignore_caret": args.ignore_caret,
        "pixel_ratio": args.pixel_ratio,
    }
    if args.tolerance is not None:
        options["tolerance"] = args.tolerance
    return options


async def run(args: argparse.Namespace) -> int:
    options = _options(args)

    if args.diff:
        result = await create_diff(
            args.reference,
            args.current,
            args.diff,
            highlight_color=args.highlight_color,
            **options,
        )
        same = result.equal
        if not same:
            print(f"diff written to {result.diff_path}")
    else:
        same = await looks_same(args.reference, args.current, **options)

    if args.area and not same:
        area = await get_diff_area(args.reference, args.current, **options)
        if area is not None:
            print(f"left={area.left} top={area.top} width={area.width} height={area.height}")

    print("same" if same else "different")
    return EXIT_SAME if same else EXIT_DIFFERENT


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the comparison and return the exit code."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(
        log_level=args.log_level or settings.log_level,
        json_output=args.json_logs or settings.json_logs,
    )

    try:
        return asyncio.run(run(args))
    except LooksAlikeError as exc:
        logger.error("comparison_failed", error=str(exc))
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
