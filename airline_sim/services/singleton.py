"""Singleton pattern for the shared game service instance."""

from typing import Optional

from .game_service import GameService

# Global service instance (singleton pattern)
_game_service: Optional[GameService] = None


def get_game_service() -> GameService:
    """
    Get or create the singleton game service instance.

    Returns:
        GameService instance
    """
    global _game_service
    if _game_service is None:
        _game_service = GameService()
    return _game_service


def reset_game_service(service: Optional[GameService] = None) -> None:
    """Replace the shared service; used by tests to isolate state."""
    global _game_service
    _game_service = service
