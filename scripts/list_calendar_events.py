#!/usr/bin/env python3
"""Lista eventos futuros, passados e todos via API Tightknit.

Uso:
    TIGHTKNIT_API_KEY=... python scripts/list_calendar_events.py --per-page 5

Lê a configuração do ambiente (TIGHTKNIT_API_KEY, TIGHTKNIT_API_BASE_URL).
"""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Awaitable

from tightknit import (
    ConfigurationError,
    Ok,
    Result,
    TightknitClient,
    create_tightknit_client,
)
from tightknit.config.logging import configure_logging


async def print_events(
    client: TightknitClient, label: str, result_coro: Awaitable[Result]
) -> None:
    print(f"Fetching {label} events...")
    result = await result_coro
    if isinstance(result, Ok):
        print(f"Found {result.total} {label} events:")
        for record in result.records:
            event = client.calendar_events.format(record)
            print(f"- {event.title} ({event.date})")
    else:
        print(f"Error fetching {label} events: {result.message}")
    print()


async def run(per_page: int, status: str) -> None:
    client = create_tightknit_client()
    events = client.calendar_events
    await print_events(
        client, "upcoming", events.list(per_page=per_page, status=status, time_filter="upcoming")
    )
    await print_events(
        client, "past", events.list(per_page=per_page, status=status, time_filter="past")
    )
    await print_events(client, "all", events.all(per_page=per_page, status=status))


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--per-page", type=int, default=10)
    parser.add_argument("--status", default="published")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    configure_logging(level=args.log_level, service_name="tightknit_cli")
    try:
        asyncio.run(run(args.per_page, args.status))
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
