"""Airport model."""

from typing import Optional
from pydantic import BaseModel, model_validator


class Airport(BaseModel):
    """Represents an airport on the world map and who holds its slots."""

    code: str
    name: str
    x: float
    y: float
    region: str
    market_size: int
    slots_available: int
    owned: bool = False  # held by the player
    competitor_owned: Optional[str] = None  # name of the rival holding it

    @model_validator(mode="after")
    def _check_single_owner(self) -> "Airport":
        if self.owned and self.competitor_owned is not None:
            raise ValueError(
                f"Airport {self.code} cannot be owned by the player and {self.competitor_owned}"
            )
        return self

    @property
    def is_available(self) -> bool:
        """True when neither the player nor a competitor holds the slots."""
        return not self.owned and self.competitor_owned is None

    def claim_for_player(self) -> None:
        """Mark the airport as player-owned."""
        if not self.is_available:
            raise ValueError(f"Airport {self.code} is already owned")
        self.owned = True

    def claim_for_competitor(self, competitor_name: str) -> None:
        """Mark the airport as owned by a competitor."""
        if not self.is_available:
            raise ValueError(f"Airport {self.code} is already owned")
        self.competitor_owned = competitor_name

    class Config:
        json_schema_extra = {
            "example": {
                "code": "JFK",
                "name": "New York",
                "x": 200,
                "y": 150,
                "region": "North America",
                "market_size": 1000000,
                "slots_available": 20,
                "owned": True,
                "competitor_owned": None,
            }
        }
