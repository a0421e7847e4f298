"""Service layer for game sessions."""
