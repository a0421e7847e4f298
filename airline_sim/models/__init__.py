"""Game models package."""

from .aircraft import Aircraft, AircraftCategory, AircraftType
from .airport import Airport
from .competitor import Competitor
from .event import (
    ActiveEvent,
    DemandEvent,
    DisruptionEvent,
    EventTemplate,
    FuelPriceEvent,
    GameEvent,
    MarketShareEvent,
    ResearchEvent,
)
from .loan import Loan, annuity_payment
from .route import Route
from .game_state import GameState

__all__ = [
    "Aircraft",
    "AircraftCategory",
    "AircraftType",
    "Airport",
    "Competitor",
    "ActiveEvent",
    "DemandEvent",
    "DisruptionEvent",
    "EventTemplate",
    "FuelPriceEvent",
    "GameEvent",
    "MarketShareEvent",
    "ResearchEvent",
    "Loan",
    "annuity_payment",
    "Route",
    "GameState",
]
