"""Command line entry point for parsing nutrient analyses."""

import argparse
import logging
import sys

from nutrient_analysis.app_logging import configure_logging
from nutrient_analysis.containers import build_container

_logger = logging.getLogger(__name__)

_STDIN = "-"


def build_arg_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="nutrient-analysis",
        description="Parse a markdown nutrient analysis into structured JSON.",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=_STDIN,
        help="File containing the analysis text (default: stdin).",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print the JSON output with this indent.",
    )
    return parser


def read_source(source: str) -> str:
    """Read raw bytes from a file or stdin, replacing undecodable UTF-8."""
    if source == _STDIN:
        raw = sys.stdin.buffer.read()
    else:
        with open(source, "rb") as handle:
            raw = handle.read()
    return raw.decode("utf-8-sig", errors="replace")


def main(argv: list[str] | None = None) -> int:
    """Parse the analysis text and print the structured record."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    container = build_container()
    configure_logging(container.settings.log_level)

    try:
        text = read_source(args.source)
    except OSError as exc:
        arg_parser.error(f"can't open '{args.source}': {exc.strerror or exc}")
    result = container.parser.parse(text)
    _logger.debug("Parsed %s characters from %s", len(text), args.source)
    print(result.model_dump_json(indent=args.indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
