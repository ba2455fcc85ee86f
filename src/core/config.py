"""
Configuration constants and environment setup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = Path(os.environ.get("DB_PATH", PROJECT_ROOT / "data" / "db" / "request-log.db"))

# =============================================================================
# COSMOS DB CONFIGURATION
# =============================================================================

# Full connection string ("AccountEndpoint=...;AccountKey=...;") or a bare
# account endpoint URL authenticated through DefaultAzureCredential.
COSMOS_DB_CONNECTION = os.environ.get("COSMOS_DB_CONNECTION", "")
COSMOS_DB_DATABASE = os.environ.get("COSMOS_DB_DATABASE", "FeedbackDB")

EVENTS_CONTAINER = os.environ.get("EVENTS_CONTAINER", "CalendarEvents")
EVENTS_CONTAINER_THROUGHPUT = int(os.environ.get("EVENTS_CONTAINER_THROUGHPUT", "400"))
FEEDBACK_CONTAINER = os.environ.get("FEEDBACK_CONTAINER", "FeedbackContainer")

# Both containers are partitioned on the record id
PARTITION_KEY_PATH = "/id"

EVENTS_INDEXING_POLICY = {
    "indexingMode": "consistent",
    "includedPaths": [
        {"path": "/id/?"},
        {"path": "/date/?"},
        {"path": "/title/?"},
        {"path": "/time/?"},
    ],
    "excludedPaths": [{"path": "/*"}],
}

# =============================================================================
# VALIDATION
# =============================================================================

EVENT_REQUIRED_FIELDS = ("title", "date")
DELETE_REQUIRED_FIELDS = ("id", "date")
FEEDBACK_REQUIRED_FIELDS = ("feedbackArea", "feedbackText", "feedbackType")

# =============================================================================
# API CONFIGURATION
# =============================================================================

API_KEY = os.environ.get("API_KEY", "")
API_KEY_HEADER = "x-functions-key"
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
API_VERSION = "1.0.0"
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
CORS_ALLOW_METHODS = ["GET", "POST", "DELETE", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Content-Type", "Authorization", API_KEY_HEADER]
