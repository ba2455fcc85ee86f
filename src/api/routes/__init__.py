"""API route modules."""

from .events import router as events_router
from .feedback import router as feedback_router
from .health import router as health_router

__all__ = ["health_router", "events_router", "feedback_router"]
