"""Schemas for game and command endpoints."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from ..models.aircraft import AircraftType
from ..models.airport import Airport
from ..models.game_state import GameState


class NewGameRequest(BaseModel):
    """Request model for starting a game."""

    airline_name: Optional[str] = Field(None, min_length=1, description="Player airline name")
    difficulty: Optional[str] = Field(None, pattern="^(EASY|NORMAL|HARD|easy|normal|hard)$")
    seed: Optional[int] = Field(None, description="Random seed for a reproducible game")


class GameResponse(BaseModel):
    """Response model carrying a game id and its full state."""

    game_id: str
    state: GameState


class GameListResponse(BaseModel):
    game_ids: List[str]


class AircraftTypeRequest(BaseModel):
    """Request model for buying or leasing an aircraft."""

    type_name: str = Field(..., description="Catalog aircraft type name")


class CreateRouteRequest(BaseModel):
    """Request model for opening a route."""

    origin: str
    destination: str
    aircraft_id: int
    flights_per_week: int = Field(..., description="Weekly frequency")

    class Config:
        json_schema_extra = {
            "example": {
                "origin": "JFK",
                "destination": "LAX",
                "aircraft_id": 1,
                "flights_per_week": 7,
            }
        }


class LoanRequest(BaseModel):
    amount: float
    quarters: int


class EmergencyLoanRequest(BaseModel):
    amount: float


class AdvertisingRequest(BaseModel):
    amount: float = Field(..., ge=0, description="Quarterly advertising spend")


class FinancialReportResponse(BaseModel):
    """Response model for the projected quarterly financials."""

    revenue: float
    expenses: Dict[str, float]
    profit: float
    fuel_price: float
    economic_condition: float
    total_debt: float
    active_loans: int
    routes: List[Dict[str, Any]]


class NewsResponse(BaseModel):
    news: List[str]


class CatalogResponse(BaseModel):
    """Response model for static reference data."""

    aircraft_types: List[AircraftType]
    airports: List[Airport]
    competitors: List[Dict[str, Any]]
    events: List[Dict[str, Any]]
