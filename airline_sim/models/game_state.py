"""Game state model."""

from typing import List, Optional
from pydantic import BaseModel, Field

from ..config import (
    DEFAULT_AIRLINE_NAME,
    NEUTRAL_MULTIPLIER,
    NEWS_LOG_LIMIT,
    STARTING_CASH,
    STARTING_QUARTER,
    STARTING_REPUTATION,
    STARTING_YEAR,
)
from .aircraft import Aircraft
from .airport import Airport
from .competitor import Competitor
from .event import ActiveEvent
from .loan import Loan
from .route import Route


class GameState(BaseModel):
    """Represents the whole simulated world for one game."""

    year: int = STARTING_YEAR
    quarter: int = Field(default=STARTING_QUARTER, ge=1, le=4)
    airline_name: str = DEFAULT_AIRLINE_NAME
    difficulty: str = "NORMAL"
    cash: float = STARTING_CASH
    reputation: int = Field(default=STARTING_REPUTATION, ge=0, le=100)
    research_level: int = Field(default=0, ge=0, le=10)
    advertising_budget: float = 0.0
    fuel_price: float = NEUTRAL_MULTIPLIER
    economic_condition: float = NEUTRAL_MULTIPLIER

    airports: List[Airport] = Field(default_factory=list)
    fleet: List[Aircraft] = Field(default_factory=list)
    routes: List[Route] = Field(default_factory=list)
    competitors: List[Competitor] = Field(default_factory=list)
    loans: List[Loan] = Field(default_factory=list)
    events: List[ActiveEvent] = Field(default_factory=list)
    news_log: List[str] = Field(default_factory=list)
    news_total: int = 0  # entries ever published, including trimmed ones

    next_aircraft_id: int = 1
    next_route_id: int = 1
    consecutive_losses: int = 0
    last_quarter_profit: float = 0.0
    bankrupt: bool = False

    def add_news(self, message: str) -> None:
        """Append a news entry, keeping only the most recent ones."""
        self.news_log.append(message)
        self.news_total += 1
        if len(self.news_log) > NEWS_LOG_LIMIT:
            del self.news_log[:-NEWS_LOG_LIMIT]

    def find_airport(self, code: str) -> Optional[Airport]:
        return next((a for a in self.airports if a.code == code), None)

    def find_aircraft(self, aircraft_id: int) -> Optional[Aircraft]:
        return next((a for a in self.fleet if a.id == aircraft_id), None)

    def find_route(self, route_id: int) -> Optional[Route]:
        return next((r for r in self.routes if r.id == route_id), None)

    def aircraft_for_route(self, route: Route) -> Aircraft:
        """Resolve the aircraft flying a route."""
        aircraft = self.find_aircraft(route.aircraft_id)
        if aircraft is None:
            raise LookupError(f"Route {route.id} references missing aircraft {route.aircraft_id}")
        return aircraft

    def owned_airports(self) -> List[Airport]:
        return [a for a in self.airports if a.owned]

    def available_airports(self) -> List[Airport]:
        """Airports nobody holds slots at."""
        return [a for a in self.airports if a.is_available]

    def total_debt(self) -> float:
        return sum(loan.remaining for loan in self.loans)

    def can_afford(self, amount: float) -> bool:
        return self.cash >= amount

    def allocate_aircraft_id(self) -> int:
        aircraft_id = self.next_aircraft_id
        self.next_aircraft_id += 1
        return aircraft_id

    def aircraft_name(self, aircraft_id: int) -> str:
        """Fleet name for an aircraft, prefixed with the airline's first word."""
        prefix = (self.airline_name.split() or ["Aircraft"])[0]
        return f"{prefix} {aircraft_id}"

    def allocate_route_id(self) -> int:
        route_id = self.next_route_id
        self.next_route_id += 1
        return route_id

    def advance_quarter(self) -> bool:
        """
        Move the calendar forward one quarter.

        Returns:
            True if a new year started
        """
        self.quarter += 1
        if self.quarter > 4:
            self.quarter = 1
            self.year += 1
            return True
        return False

    def get_date_string(self) -> str:
        return f"Q{self.quarter} {self.year}"

    class Config:
        json_schema_extra = {
            "example": {
                "year": 1992,
                "quarter": 1,
                "airline_name": "Phoenix Air",
                "difficulty": "NORMAL",
                "cash": 50000000,
                "reputation": 75,
                "research_level": 0,
                "advertising_budget": 0,
                "fuel_price": 1.0,
                "economic_condition": 1.0,
                "airports": [],
                "fleet": [],
                "routes": [],
                "competitors": [],
                "loans": [],
                "events": [],
                "news_log": [],
            }
        }
