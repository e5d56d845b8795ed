"""CLI entry point for PkgSift.

    pkgsift <source> <query> [--page N] [--size N] [--output FILE]

Search failures never produce a non-zero exit code: they are printed to
stdout as an error document ``{"items": [{"title": "Error", "subtitle": ...}]}``.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

import yaml  # type: ignore[import-untyped]

from pkgsift.adapters.base.exceptions import AdapterError
from pkgsift.config.settings import Settings
from pkgsift.core.engine import SearchEngine
from pkgsift.models.envelope import ErrorEnvelope
from pkgsift.models.query import SearchOptions
from pkgsift.observability.logging import setup_logging
from pkgsift.output.writer import OutputError, dumps_pretty, write_json_to_file


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pkgsift",
        usage="%(prog)s <source> <query> [options]",
        description="PkgSift — Search public package registries",
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="Registry to search: npm, docker, jsdelivr, crates, composer",
    )
    parser.add_argument("query", nargs="?", help="Search text")
    parser.add_argument(
        "--page",
        type=_non_negative_int,
        default=None,
        help="Page number (registry default if omitted)",
    )
    parser.add_argument(
        "--size",
        "-n",
        type=_positive_int,
        default=None,
        help="Results per page (registry default if omitted)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Write the JSON result to this file instead of stdout",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"PkgSift {_get_version()}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    # Unknown tokens are tolerated: a dash-leading query ("-react") lands here,
    # and surplus positionals are ignored.
    args, extra = parser.parse_known_args(argv)
    if args.query is None and args.source is not None and extra:
        args.query = extra[0]

    if args.source is None or args.query is None:
        print(parser.format_usage().strip(), file=sys.stderr)
        return 0

    # Load settings
    try:
        if args.config:
            config_path = Path(args.config)
            if not config_path.exists():
                print(f"Error: Config file not found: {config_path}", file=sys.stderr)
                return 1
            settings = Settings.from_yaml(config_path)
        else:
            settings = Settings()
    except (yaml.YAMLError, ValueError) as e:
        # pydantic.ValidationError is a ValueError
        print(f"Error: Invalid configuration: {_one_line(e)}", file=sys.stderr)
        return 1

    if args.log_level:
        settings.observability.log_level = args.log_level
    setup_logging(settings.observability)

    engine = SearchEngine(settings)
    if args.source not in engine.sources:
        print(
            f"Unsupported source: {args.source}. "
            f"Supported sources are: {', '.join(engine.sources)}",
            file=sys.stderr,
        )
        return 0

    options = SearchOptions(page=args.page, size=args.size)
    try:
        result = asyncio.run(engine.search(args.source, args.query, options))
        if args.output:
            path = write_json_to_file(result, args.output)
            print(f"Wrote {args.source} results to {path}", file=sys.stderr)
        else:
            print(dumps_pretty(result))
    except (AdapterError, OutputError) as e:
        print(dumps_pretty(ErrorEnvelope.from_exception(e).to_json_value()))

    return 0


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def _one_line(exc: BaseException) -> str:
    lines = [line.strip() for line in str(exc).splitlines() if line.strip()]
    return "; ".join(lines) or type(exc).__name__


def _get_version() -> str:
    """Get the package version."""
    try:
        from pkgsift import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    sys.exit(main())
