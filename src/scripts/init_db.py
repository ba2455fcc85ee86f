#!/usr/bin/env python3
"""
Create the request log SQLite database and ensure the Cosmos DB containers.

Usage:
    uv run python src/scripts/init_db.py [--skip-cosmos]
"""

import argparse
import sqlite3
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import (
    COSMOS_DB_CONNECTION,
    COSMOS_DB_DATABASE,
    DB_PATH,
    EVENTS_CONTAINER,
    FEEDBACK_CONTAINER,
)
from core.database import CosmosDocumentStore, create_cosmos_client
from services.events import EventService
from services.feedback import FeedbackService


def create_database(db_path: Path = DB_PATH):
    """Create the request log database and tables if they don't exist."""
    # Ensure directory exists
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(db_path)
    conn.execute("PRAGMA foreign_keys = ON")
    cursor = conn.cursor()

    # Create API request logging table
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS api_requests (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            request_id TEXT UNIQUE NOT NULL,
            timestamp TEXT NOT NULL,
            endpoint TEXT NOT NULL,
            method TEXT NOT NULL,
            client_ip TEXT,
            record_id TEXT,
            result_count INTEGER,
            status_code INTEGER NOT NULL,
            error_code TEXT,
            error_message TEXT,
            processing_time_ms INTEGER NOT NULL
        )
    """)

    # Create API request details table (for validation errors)
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS api_request_details (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            request_id TEXT NOT NULL,
            detail_type TEXT NOT NULL CHECK(detail_type IN ('validation_error', 'warning')),
            message TEXT NOT NULL,
            FOREIGN KEY (request_id) REFERENCES api_requests(request_id)
        )
    """)

    # Create indexes for API logging
    cursor.execute(
        "CREATE INDEX IF NOT EXISTS idx_api_requests_timestamp ON api_requests(timestamp)"
    )
    cursor.execute(
        "CREATE INDEX IF NOT EXISTS idx_api_requests_status ON api_requests(status_code)"
    )
    cursor.execute(
        "CREATE INDEX IF NOT EXISTS idx_api_request_details_request ON api_request_details(request_id)"
    )

    conn.commit()
    conn.close()
    print(f"Database created successfully at: {db_path}")


def create_containers():
    """Ensure the Cosmos database and both containers exist."""
    client = create_cosmos_client(COSMOS_DB_CONNECTION)
    EventService(CosmosDocumentStore(client, COSMOS_DB_DATABASE, EVENTS_CONTAINER)).ensure_storage()
    FeedbackService(CosmosDocumentStore(client, COSMOS_DB_DATABASE, FEEDBACK_CONTAINER)).ensure_storage()
    print(f"Containers ensured in '{COSMOS_DB_DATABASE}': {EVENTS_CONTAINER}, {FEEDBACK_CONTAINER}")


def main():
    parser = argparse.ArgumentParser(description="Initialize request log and Cosmos DB containers")
    parser.add_argument(
        "--skip-cosmos",
        action="store_true",
        help="Only create the local request log database",
    )
    args = parser.parse_args()

    create_database()
    if not args.skip_cosmos:
        try:
            create_containers()
        except Exception as e:
            print(f"\nError: {e}")
            sys.exit(1)


if __name__ == "__main__":
    main()
