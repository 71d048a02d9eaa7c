"""Command line interface for dotpath."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import toml
from pydantic import ValidationError

from .config import APP_NAME, ConfigLoader
from .errors import DotPathError
from .logging import LogContext, setup_logging
from .normalizer import (
    evaluate_path,
    get_absolute_path,
    get_compatible_path,
    get_parent_path,
    resolve_path,
)
from .schema import DotPathConfig
from .segments import get_path_stack

logger = logging.getLogger(__name__)

# BASE argument of 'absolute' that selects paths.base_path from configuration
CONFIGURED_BASE = "-"


def _emit(result: str) -> None:
    print(result)


def _compatible_if(enabled: bool, path: str) -> str:
    return get_compatible_path(path) if enabled else path


def run_command(args: argparse.Namespace, config: DotPathConfig) -> int:
    """Execute a parsed subcommand.

    Args:
        args: Parsed command line arguments
        config: Loaded configuration

    Returns:
        Exit code (0 for success, 1 if no result could be produced)
    """
    compatible = getattr(args, "compatible", False) or config.paths.compatible_output

    if args.command == "resolve":
        _emit(resolve_path(args.base, args.path))
    elif args.command == "evaluate":
        _emit(_compatible_if(compatible, evaluate_path(args.path)))
    elif args.command == "absolute":
        base = config.paths.base_path if args.base == CONFIGURED_BASE else args.base
        result = get_absolute_path(base, args.path)
        if result is None:
            logger.error(f"No absolute path: {{'base': {base!r}, 'path': {args.path!r}}}")
            return 1
        _emit(result)
    elif args.command == "parent":
        _emit(_compatible_if(compatible, get_parent_path(args.path)))
    elif args.command == "compatible":
        _emit(get_compatible_path(args.path))
    elif args.command == "stack":
        for segment in get_path_stack(args.path, evaluate_dots=not args.raw):
            _emit(segment)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per path operation."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Resolve and normalize '/'-separated paths ('...' ascends two levels, '....' three)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (TOML)"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level (overrides config)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Append PATH to BASE unless PATH is absolute (dots are kept)")
    resolve.add_argument("base")
    resolve.add_argument("path")

    evaluate = subparsers.add_parser("evaluate", help="Evaluate dot-segments in PATH")
    evaluate.add_argument("path")
    evaluate.add_argument("--compatible", action="store_true", help="Expand '...' style segments to '../..'")

    absolute = subparsers.add_parser("absolute", help="Absolute path of PATH resolved against BASE")
    absolute.add_argument("base", help=f"Base path, '{CONFIGURED_BASE}' for the configured paths.base_path")
    absolute.add_argument("path")

    parent = subparsers.add_parser("parent", help="Evaluated parent of PATH")
    parent.add_argument("path")
    parent.add_argument("--compatible", action="store_true", help="Expand '...' style segments to '../..'")

    compatible = subparsers.add_parser("compatible", help="Evaluate PATH using only '.' and '..' segments")
    compatible.add_argument("path")

    stack = subparsers.add_parser("stack", help="Print the segments of PATH, one per line")
    stack.add_argument("path")
    stack.add_argument("--raw", action="store_true", help="Keep dot-segments instead of evaluating them")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the dotpath command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    loader = ConfigLoader(app_name=APP_NAME, config_class=DotPathConfig)
    try:
        config = loader.load(defaults_path=args.config)
    except (OSError, ValidationError, toml.TomlDecodeError) as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        return 1

    setup_logging(
        level=args.log_level or config.logging.level,
        format=config.logging.format,
        log_file=Path(config.logging.file) if config.logging.file else None,
    )

    with LogContext(logger, command=args.command):
        try:
            return run_command(args, config)
        except DotPathError as e:
            logger.error(f"{e.message}: {e.context}")
            return 1


if __name__ == "__main__":
    sys.exit(main())
