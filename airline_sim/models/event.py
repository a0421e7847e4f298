"""Market event models.

Each event kind is its own model carrying only the fields it needs. ``apply``
runs once when the event fires; ``revert`` runs once when it expires and
returns the news line to publish, if any.
"""

from abc import abstractmethod
from typing import TYPE_CHECKING, Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field

from ..config import (
    NEUTRAL_MULTIPLIER,
    REPUTATION_MAX,
    REPUTATION_MIN,
    RESEARCH_LEVEL_MAX,
)
from ..utils import clamp

if TYPE_CHECKING:
    from .game_state import GameState


class EventTemplate(BaseModel):
    """Fields shared by every event kind. Only the concrete kinds are instantiated."""

    type: str
    name: str
    description: str
    duration: int = Field(default=1, ge=1)  # quarters

    model_config = {"frozen": True}

    @property
    def headline(self) -> str:
        return f"EVENT: {self.name} - {self.description}"

    @abstractmethod
    def apply(self, state: "GameState") -> None:
        """Apply the event's effect to the state."""

    def revert(self, state: "GameState") -> Optional[str]:
        return None


class FuelPriceEvent(EventTemplate):
    """Overrides the fuel price multiplier for its duration."""

    kind: Literal["fuel_price"] = "fuel_price"
    fuel_multiplier: float

    def apply(self, state: "GameState") -> None:
        state.fuel_price = self.fuel_multiplier

    def revert(self, state: "GameState") -> Optional[str]:
        # Unconditional: an overlapping fuel event still running loses its effect too.
        state.fuel_price = NEUTRAL_MULTIPLIER
        return f"{self.name} ended - fuel prices normalized"


class DemandEvent(EventTemplate):
    """Overrides the economic condition multiplier for its duration."""

    kind: Literal["demand"] = "demand"
    demand_multiplier: float

    def apply(self, state: "GameState") -> None:
        state.economic_condition = self.demand_multiplier

    def revert(self, state: "GameState") -> Optional[str]:
        state.economic_condition = NEUTRAL_MULTIPLIER
        return f"{self.name} ended - demand normalized"


class DisruptionEvent(EventTemplate):
    """One-time hit to reputation and cash."""

    kind: Literal["disruption"] = "disruption"
    reputation_change: int = 0
    cash_change: float = 0.0

    def apply(self, state: "GameState") -> None:
        state.reputation = int(
            clamp(state.reputation + self.reputation_change, REPUTATION_MIN, REPUTATION_MAX)
        )
        state.cash += self.cash_change


class ResearchEvent(EventTemplate):
    """One-time research level bonus."""

    kind: Literal["research"] = "research"
    research_bonus: int

    def apply(self, state: "GameState") -> None:
        state.research_level = min(RESEARCH_LEVEL_MAX, state.research_level + self.research_bonus)


class MarketShareEvent(EventTemplate):
    """Headline-only event; the bonus is informational."""

    kind: Literal["market_share"] = "market_share"
    market_share_bonus: float

    def apply(self, state: "GameState") -> None:
        pass


GameEvent = Annotated[
    Union[FuelPriceEvent, DemandEvent, DisruptionEvent, ResearchEvent, MarketShareEvent],
    Field(discriminator="kind"),
]


class ActiveEvent(BaseModel):
    """An event currently in effect with its countdown."""

    event: GameEvent
    quarters_remaining: int

    @classmethod
    def start(cls, event: EventTemplate) -> "ActiveEvent":
        return cls(event=event, quarters_remaining=event.duration)

    def tick(self) -> bool:
        """
        Count down one quarter.

        Returns:
            True when the event has expired
        """
        self.quarters_remaining -= 1
        return self.quarters_remaining <= 0
