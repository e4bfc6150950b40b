"""
CLI command entry points for web_validate.

These functions are registered as console scripts in pyproject.toml.
Each returns a process exit code and accepts an optional argv for testing.
"""

import argparse
import json
import sys
from pathlib import Path

from tqdm import tqdm

from web_validate.cli.args import add_constraint_arguments, add_logging_arguments
from web_validate.cli.logging import setup_logging
from web_validate.config import get_settings
from web_validate.domain.models import DomainConstraints
from web_validate.domain.validation import validate_many
from web_validate.errors import RegistryError
from web_validate.registry import build_registry

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_REGISTRY_ERROR = 2


def _read_domains(path: Path) -> list[bytes]:
    """Read one candidate per line as raw bytes (invalid UTF-8 is kept)."""
    with open(path, "rb") as f:
        return [line.strip() for line in f if line.strip()]


def _display(candidate: bytes | str) -> str:
    if isinstance(candidate, bytes):
        return candidate.decode("utf-8", errors="backslashreplace")
    return candidate


def run_validate(argv: list[str] | None = None) -> int:
    """Entry point for validate-domain command."""
    parser = argparse.ArgumentParser(description="Validate domain names")
    parser.add_argument("domains", nargs="*", help="Domains to validate")
    parser.add_argument("--file", "-f", type=Path, help="File with one domain per line")
    parser.add_argument(
        "--tld-source",
        help="Refresh TLDs from this URL or path before validating",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON lines")
    add_constraint_arguments(parser)
    add_logging_arguments(parser)
    args = parser.parse_args(argv)

    if not args.domains and args.file is None:
        parser.error("give at least one domain or --file")

    logger = setup_logging("validate_domain", verbose=args.verbose, log_dir=args.log_dir)
    registry = build_registry(get_settings())

    if args.tld_source:
        try:
            registry.refresh(args.tld_source)
        except RegistryError as e:
            logger.error(f"TLD refresh failed: {e}")
            return EXIT_REGISTRY_ERROR

    constraints = DomainConstraints(
        max_length=args.max_length,
        min_subdomains=args.min_subdomains,
        max_subdomains=args.max_subdomains,
        reject_numeric_tld=args.reject_numeric_tld,
    )

    candidates: list[bytes | str] = list(args.domains)
    show_progress = False
    if args.file is not None:
        candidates.extend(_read_domains(args.file))
        show_progress = not args.json

    invalid = 0
    results = validate_many(candidates, constraints, registry)
    for candidate, error in tqdm(
        results,
        total=len(candidates),
        desc="Validating",
        unit="domain",
        disable=not show_progress,
    ):
        name = _display(candidate)
        if error is not None:
            invalid += 1
        if args.json:
            record = {"domain": name, "valid": error is None}
            if error is not None:
                record.update(error.to_dict())
            tqdm.write(json.dumps(record), file=sys.stdout)
        elif error is None:
            tqdm.write(f"{name}: valid", file=sys.stdout)
        else:
            tqdm.write(f"{name}: {error.kind} ({error.message})", file=sys.stdout)

    if len(candidates) > 1:
        logger.info(f"{len(candidates) - invalid:,} valid, {invalid:,} invalid")
    return EXIT_INVALID if invalid else EXIT_OK


def run_update_tlds(argv: list[str] | None = None) -> int:
    """Entry point for update-tlds command."""
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Refresh the cached TLD list")
    parser.add_argument(
        "--source",
        default=settings.tld_source_url,
        help=f"URL or path of the TLD list (default: {settings.tld_source_url})",
    )
    add_logging_arguments(parser)
    args = parser.parse_args(argv)

    logger = setup_logging("update_tlds", verbose=args.verbose, log_dir=args.log_dir)
    registry = build_registry(settings)
    if registry.cache is None:
        logger.warning("Cache disabled (WEB_VALIDATE_USE_CACHE=false); list won't persist")

    try:
        count = registry.refresh(args.source)
    except RegistryError as e:
        logger.error(f"TLD refresh failed: {e}")
        return EXIT_REGISTRY_ERROR

    logger.info(f"Updated TLD list: {count:,} entries from {args.source}")
    return EXIT_OK


def run_cache(argv: list[str] | None = None) -> int:
    """Entry point for tld-cache command."""
    from web_validate.cache import TLDCache

    parser = argparse.ArgumentParser(description="Manage the TLD list cache")
    parser.add_argument("command", choices=["stats", "clear"])
    parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")
    args = parser.parse_args(argv)

    with TLDCache(get_settings().cache_dir) as cache:
        if args.command == "stats":
            stats = cache.stats()
            print(f"Cache: {stats['cache_dir']}")
            print(f"  Cached lists: {stats['total']}")
            print(f"  Size: {stats['size_mb']} MB")
            for source, info in sorted(stats["by_source"].items()):
                print(f"    {source}: {info['count']:,} TLDs (fetched {info['fetched_at']})")

        elif args.command == "clear":
            if not args.yes:
                confirm = input("Clear all cached TLD lists? [y/N] ")
                if confirm.lower() != "y":
                    print("Aborted")
                    return EXIT_OK
            count = cache.clear()
            print(f"Cleared {count} cached lists")

    return EXIT_OK


def main_validate():
    sys.exit(run_validate())


def main_update_tlds():
    sys.exit(run_update_tlds())


def main_cache():
    sys.exit(run_cache())
