"""Static reference data: rival airline profiles and random event templates."""

from typing import Any, Dict, List

from .models.competitor import Competitor
from .models.event import (
    DemandEvent,
    DisruptionEvent,
    EventTemplate,
    FuelPriceEvent,
    MarketShareEvent,
    ResearchEvent,
)


COMPETITOR_PROFILES: List[Dict[str, Any]] = [
    {
        "name": "Global Airways",
        "cash": 60_000_000,
        "color": "#ff0000",
        "reputation": 70,
        "aggressive": True,
        "strategy": "expansion",
    },
    {
        "name": "Sky Connect",
        "cash": 55_000_000,
        "color": "#00ffff",
        "reputation": 75,
        "aggressive": False,
        "strategy": "balanced",
    },
    {
        "name": "Pacific Airlines",
        "cash": 45_000_000,
        "color": "#ff00ff",
        "reputation": 65,
        "aggressive": True,
        "strategy": "expansion",
    },
]


EVENT_TEMPLATES: List[EventTemplate] = [
    FuelPriceEvent(
        type="fuel_crisis",
        name="Oil Crisis",
        description="Fuel prices surge by 50%",
        fuel_multiplier=1.5,
        duration=4,
    ),
    FuelPriceEvent(
        type="fuel_drop",
        name="Oil Glut",
        description="Fuel prices drop by 30%",
        fuel_multiplier=0.7,
        duration=4,
    ),
    DemandEvent(
        type="economic_boom",
        name="Economic Boom",
        description="Passenger demand increases 40%",
        demand_multiplier=1.4,
        duration=8,
    ),
    DemandEvent(
        type="recession",
        name="Economic Recession",
        description="Passenger demand drops 35%",
        demand_multiplier=0.65,
        duration=6,
    ),
    DisruptionEvent(
        type="airport_strike",
        name="Airport Strike",
        description="Operations disrupted at major hub",
        reputation_change=-10,
        cash_change=-2_000_000,
    ),
    ResearchEvent(
        type="tech_breakthrough",
        name="Technology Advance",
        description="New aircraft technology available",
        research_bonus=1,
    ),
    MarketShareEvent(
        type="competitor_bankrupt",
        name="Competitor Bankruptcy",
        description="A rival airline has gone bankrupt",
        market_share_bonus=0.1,
    ),
    DemandEvent(
        type="tourism_boom",
        name="Tourism Boom",
        description="International travel surges",
        demand_multiplier=1.2,
        duration=6,
    ),
    DisruptionEvent(
        type="volcanic_ash",
        name="Volcanic Eruption",
        description="Ash cloud disrupts European flights",
        reputation_change=-5,
        cash_change=-1_000_000,
    ),
    DemandEvent(
        type="pandemic_scare",
        name="Health Scare",
        description="Travel warnings reduce demand",
        demand_multiplier=0.8,
        duration=3,
    ),
]


def create_competitors() -> List[Competitor]:
    """Fresh competitor instances built from the profiles."""
    return [Competitor(**profile) for profile in COMPETITOR_PROFILES]
