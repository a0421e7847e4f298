"""Competitor airline model."""

from typing import Any, Dict, List
from pydantic import BaseModel, Field


class Competitor(BaseModel):
    """Represents a scripted rival airline."""

    name: str
    cash: float
    color: str  # display only
    reputation: int = Field(ge=0, le=100)
    airports: List[str] = Field(default_factory=list)
    aggressive: bool = False
    strategy: str = "balanced"  # expansion, profit, balanced
    routes: List[Dict[str, Any]] = Field(default_factory=list)
    fleet: List[Dict[str, Any]] = Field(default_factory=list)
