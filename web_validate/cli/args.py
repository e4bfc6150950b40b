"""
Argument parsing utilities for web_validate CLI.

Provides standard argument patterns shared across commands.
"""

import argparse
from pathlib import Path


def non_negative_int(value: str) -> int:
    """argparse type for integers >= 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def add_constraint_arguments(parser):
    """
    Add domain constraint arguments to an ArgumentParser.

    Args:
        parser: argparse.ArgumentParser instance
    """
    parser.add_argument(
        "--max-length",
        type=non_negative_int,
        help="Maximum total length in characters (default: 255)",
    )
    parser.add_argument(
        "--min-subdomains",
        type=non_negative_int,
        help="Minimum number of labels before the TLD",
    )
    parser.add_argument(
        "--max-subdomains",
        type=non_negative_int,
        help="Maximum number of labels before the TLD",
    )
    parser.add_argument(
        "--reject-numeric-tld",
        action="store_true",
        help="Reject all-numeric TLDs before the registry lookup",
    )


def add_logging_arguments(parser):
    """
    Add standard --verbose and --log-dir arguments to an ArgumentParser.

    Args:
        parser: argparse.ArgumentParser instance
    """
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug output",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Also write a timestamped log file to this directory",
    )
