from .changes import router as changes_router
from .health import router as health_router

__all__ = ["changes_router", "health_router"]
