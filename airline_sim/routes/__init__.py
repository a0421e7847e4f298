"""Routes package for API endpoints."""

from .game_routes import router as game_router
from .status_routes import router as status_router
from .save_routes import router as save_router

__all__ = ["game_router", "status_router", "save_router"]
