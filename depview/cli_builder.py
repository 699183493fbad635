"""Factory for constructing the CLI argument parser."""

import argparse

from .config import DEFAULT_REFRESH_RATE


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return number


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="depview",
        description="depview - live dependency verification table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--title",
        type=str,
        help="Title shown on the first line (default: current directory name)",
    )

    parser.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        help="Disable colors (also enabled by the NO_COLOR environment variable)",
    )

    parser.add_argument(
        "--header",
        action="store_true",
        help="Show column names above the table",
    )

    parser.add_argument(
        "--fps",
        type=_positive_float,
        default=DEFAULT_REFRESH_RATE,
        help=f"Screen refreshes per second (default: {DEFAULT_REFRESH_RATE:g})",
    )

    parser.add_argument(
        "--demo-rows",
        dest="demo_rows",
        type=_non_negative_int,
        default=200,
        help="Number of dependencies produced by the demo verification (default: 200)",
    )

    parser.add_argument(
        "--demo-delay",
        dest="demo_delay",
        type=float,
        default=0.05,
        help="Seconds between two demo progress steps (default: 0.05)",
    )

    parser.add_argument(
        "--log-file",
        dest="log_file",
        type=str,
        help="Write debug logs to this file (the terminal is owned by the viewer)",
    )

    return parser
