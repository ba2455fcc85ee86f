#!/usr/bin/env python3
"""
List calendar events stored in Cosmos DB.

Usage:
    uv run python src/scripts/list_events.py --date 2024-01-15
    uv run python src/scripts/list_events.py --start 2024-01-01 --end 2024-01-31
"""

import argparse
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import COSMOS_DB_CONNECTION, COSMOS_DB_DATABASE, EVENTS_CONTAINER
from core.database import CosmosDocumentStore, create_cosmos_client
from services.events import EventService


def main():
    parser = argparse.ArgumentParser(description="List calendar events by date or date range")
    parser.add_argument("--date", help="Exact date")
    parser.add_argument("--start", help="Range start (inclusive)")
    parser.add_argument("--end", help="Range end (inclusive)")
    args = parser.parse_args()

    client = create_cosmos_client(COSMOS_DB_CONNECTION)
    service = EventService(CosmosDocumentStore(client, COSMOS_DB_DATABASE, EVENTS_CONTAINER))

    result = service.list_events(date=args.date, start_date=args.start, end_date=args.end)
    if not result.ok:
        print(f"Error: {result.error.message}")
        sys.exit(1)

    events = result.value
    print(f"Found {len(events)} events\n")
    print("=" * 80)
    for event in sorted(events, key=lambda e: (e["date"] or "", e["time"] or "")):
        print(f"{event['date']}  {event['time'] or '--:--':<8} {event['title']}")
        print(f"  ID: {event['id']}")
    print("=" * 80)


if __name__ == "__main__":
    main()
