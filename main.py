#!/usr/bin/env python
"""CLI for browsing the remote UAE event feed."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from campus_events.config import (
    CampusEventsConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from campus_events.data import RangeFilter, RemoteEvent
from campus_events.fetch import Failed

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    search: str = ""
    config: Path
    range: RangeFilter | None = None
    endpoint: str | None = None
    preview: bool = False
    verbose: bool = False

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def format_event(event: RemoteEvent) -> str:
    when = event.parsed_date
    date_text = when.strftime("%a %d %b %Y %H:%M") if when else event.date_iso
    return f"{event.title}\n   {date_text} | {event.venue_line} | {event.source}"


async def run(args: CLIArgs, config: CampusEventsConfig) -> int:
    """Fetch the feed and print the filtered events.

    Args:
        args: Validated CLI arguments.
        config: Loaded configuration.

    Returns:
        Process exit code.
    """
    feed = create_from_config(config, endpoint_override=args.endpoint)
    if args.range is not None:
        feed.range_filter = args.range
    feed.search_text = args.search

    state = await feed.ensure_loaded()
    if isinstance(state, Failed):
        logger.error(state.message)
        return 1

    if args.preview:
        events = feed.preview()
        print(f"\nUAE Events (showing {len(events)}):\n")
    else:
        events = feed.visible_events()
        print(f"\n{feed.range_filter.label}: {len(events)} events\n")

    for i, event in enumerate(events, 1):
        print(f"{i}. {format_event(event)}")
        if event.link:
            print(f"   {event.link}")
    return 0


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Browse upcoming UAE events.")
    parser.add_argument(
        "search",
        nargs="?",
        default="",
        help="Text to match against event titles and descriptions",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--range",
        "-r",
        choices=[r.value for r in RangeFilter],
        default=None,
        help="Time window (default: from config)",
    )
    parser.add_argument(
        "--endpoint",
        default=None,
        help="Override the event feed URL",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        default=False,
        help="Show only the first few events, unfiltered",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            search=ns.search,
            config=config_path,
            range=ns.range,
            endpoint=ns.endpoint,
            preview=ns.preview,
            verbose=ns.verbose,
        )
        config = load_config(args.config)
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    logging.getLogger().setLevel(logging.DEBUG if args.verbose else config.logging.level)

    try:
        sys.exit(asyncio.run(run(args, config)))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
