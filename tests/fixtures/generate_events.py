#!/usr/bin/env python3
"""
Generate sample calendar events and feedback notes.

Used by the test suite for payloads, and from the command line to seed a
development Cosmos DB account:

    uv run python tests/fixtures/generate_events.py --month 2025-11 --seed
"""

import argparse
import json
import random
import sys
from datetime import date, timedelta
from pathlib import Path

from faker import Faker

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

# Initialize Faker
fake = Faker()

EVENT_KINDS = [
    "Team meeting",
    "Client call",
    "Design review",
    "Dentist",
    "Birthday party",
    "Workshop",
    "Lunch",
    "Gym",
]

FEEDBACK_AREAS = ["Calendar", "Events", "Notifications", "Login", "General"]
FEEDBACK_TYPES = ["Bug", "Suggestion", "Praise", "Question"]


def month_days(year: int, month: int) -> list[date]:
    """All days of a month."""
    day = date(year, month, 1)
    days = []
    while day.month == month:
        days.append(day)
        day += timedelta(days=1)
    return days


def generate_event(day: date, with_time: bool = True) -> dict:
    """One event payload as a client would POST it."""
    event = {
        "title": f"{random.choice(EVENT_KINDS)}: {fake.catch_phrase()}",
        "date": day.isoformat(),
    }
    if with_time:
        event["time"] = f"{random.randint(7, 20):02d}:{random.choice([0, 15, 30, 45]):02d}"
    return event


def generate_events(days: list[date], per_day: int = 2) -> list[dict]:
    """Between zero and per_day events for every day."""
    events = []
    for day in days:
        for _ in range(random.randint(0, per_day)):
            events.append(generate_event(day, with_time=random.random() < 0.8))
    return events


def generate_feedback() -> dict:
    """One feedback payload as a client would POST it."""
    return {
        "feedbackArea": random.choice(FEEDBACK_AREAS),
        "feedbackText": fake.paragraph(nb_sentences=3),
        "feedbackType": random.choice(FEEDBACK_TYPES),
    }


def seed_store(events: list[dict], feedback: list[dict]) -> None:
    """Push generated payloads into the configured Cosmos DB account."""
    from core.config import (
        COSMOS_DB_CONNECTION,
        COSMOS_DB_DATABASE,
        EVENTS_CONTAINER,
        FEEDBACK_CONTAINER,
    )
    from core.database import CosmosDocumentStore, create_cosmos_client
    from services.events import EventService
    from services.feedback import FeedbackService

    client = create_cosmos_client(COSMOS_DB_CONNECTION)
    event_service = EventService(CosmosDocumentStore(client, COSMOS_DB_DATABASE, EVENTS_CONTAINER))
    feedback_service = FeedbackService(
        CosmosDocumentStore(client, COSMOS_DB_DATABASE, FEEDBACK_CONTAINER)
    )
    event_service.ensure_storage()
    feedback_service.ensure_storage()

    failed = 0
    for event in events:
        result = event_service.create_event(json.dumps(event).encode())
        if not result.ok:
            failed += 1
    for note in feedback:
        result = feedback_service.submit_feedback(json.dumps(note).encode())
        if not result.ok:
            failed += 1

    print(f"Seeded {len(events)} events and {len(feedback)} feedback notes ({failed} failed)")


def print_summary(events: list[dict]) -> None:
    print(f"\nTotal events generated: {len(events)}")
    by_day: dict[str, int] = {}
    for event in events:
        by_day[event["date"]] = by_day.get(event["date"], 0) + 1
    busiest = sorted(by_day.items(), key=lambda item: item[1], reverse=True)[:5]
    print("\nBusiest days:")
    for day, count in busiest:
        print(f"  {day}: {count}")


def main():
    parser = argparse.ArgumentParser(description="Generate sample events and feedback")
    parser.add_argument("--month", default="2025-11", help="Month to fill (YYYY-MM)")
    parser.add_argument("--per-day", type=int, default=2, help="Maximum events per day")
    parser.add_argument("--feedback", type=int, default=10, help="Number of feedback notes")
    parser.add_argument("--seed", action="store_true", help="Write the data to Cosmos DB")
    args = parser.parse_args()

    year, month = (int(part) for part in args.month.split("-"))
    events = generate_events(month_days(year, month), per_day=args.per_day)
    feedback = [generate_feedback() for _ in range(args.feedback)]
    print_summary(events)

    if args.seed:
        seed_store(events, feedback)
    else:
        print(json.dumps({"events": events, "feedback": feedback}, indent=2))


if __name__ == "__main__":
    main()
