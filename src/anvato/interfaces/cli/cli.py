from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog

from anvato.domain.entities import CatalogError, SearchType
from anvato.infrastructure.composition import catalog_search
from anvato.infrastructure.config import load_config
from anvato.infrastructure.logging import configure_logging

log = structlog.get_logger(__name__)


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="anvato-search",
        description="Search the MCP video catalog for one station.",
    )

    # Search options
    parser.add_argument(
        "--type",
        required=True,
        choices=[t.value for t in SearchType],
        help="What to search for.",
    )
    parser.add_argument(
        "--station",
        default="",
        help="Station id as configured under mcp.stations.",
    )
    parser.add_argument(
        "--keyword",
        default=None,
        help="Only return items whose name matches this keyword.",
    )

    # Config wiring flags (no business logic)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file.",
    )
    parser.add_argument(
        "--dotenv",
        default=None,
        help="Path to .env file.",
    )
    parser.add_argument(
        "--mcp-url",
        default=None,
        help="Override the MCP base URL.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )

    return parser.parse_args(list(argv) if argv is not None else None)


def start(argv: Iterable[str] | None = None) -> int:
    """
    Process entrypoint.

    Loads config once, runs one search and writes each record as a JSON
    line to stdout. Returns 1 on any catalog error.
    """
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)

    config_path = Path(args.config) if args.config else None
    dotenv_path = Path(args.dotenv) if args.dotenv else None

    cli_overrides: dict[str, Any] = {}
    if args.mcp_url:
        cli_overrides["mcp_url"] = args.mcp_url
    if args.log_level:
        cli_overrides["log_level"] = args.log_level
    if args.log_format:
        cli_overrides["log_format"] = args.log_format

    config = load_config(
        config_path=config_path,
        dotenv_path=dotenv_path,
        cli_overrides=cli_overrides,
    )
    configure_logging(config)

    try:
        with catalog_search(config) as use_case:
            records = use_case.search(args.type, args.station, args.keyword)
    except CatalogError as exc:
        log.error("catalog_search_failed", kind=exc.kind.value, error=exc.message)
        print(exc.message, file=sys.stderr)
        return 1

    for record in records:
        print(json.dumps(record.to_dict(), ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(start())
