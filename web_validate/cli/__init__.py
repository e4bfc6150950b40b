"""
CLI utilities for web_validate.

This package provides:
- Logging setup
- Argument parsing
- Command entry points
"""

from web_validate.cli.args import add_constraint_arguments, add_logging_arguments
from web_validate.cli.commands import run_cache, run_update_tlds, run_validate
from web_validate.cli.logging import setup_logging

__all__ = [
    "add_constraint_arguments",
    "add_logging_arguments",
    "run_cache",
    "run_update_tlds",
    "run_validate",
    "setup_logging",
]
