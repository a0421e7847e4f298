"""Aircraft models."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class AircraftCategory(str, Enum):
    """Aircraft market segment."""

    REGIONAL = "Regional"
    NARROW_BODY = "Narrow-body"
    WIDE_BODY = "Wide-body"
    JUMBO = "Jumbo"
    SUPERSONIC = "Supersonic"
    CARGO = "Cargo"


class AircraftType(BaseModel):
    """Represents a catalog aircraft type with capacity, range and costs."""

    name: str
    category: AircraftCategory
    capacity: int = Field(ge=0)  # passengers, 0 for pure cargo
    cargo_capacity: int = Field(default=0, ge=0)  # tonnes
    range: int = Field(gt=0)  # km
    price: float
    operating_cost: float  # per flight
    lease_per_quarter: float

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "name": "Airbus A320",
                "category": "Narrow-body",
                "capacity": 150,
                "cargo_capacity": 0,
                "range": 3300,
                "price": 40000000,
                "operating_cost": 8500,
                "lease_per_quarter": 1000000,
            }
        },
    }


class Aircraft(BaseModel):
    """An aircraft in the player's fleet."""

    id: int
    aircraft_type: AircraftType
    name: str
    owned: bool = True  # False when leased
    age: int = 0  # quarters
    route_id: Optional[int] = None

    @property
    def is_assigned(self) -> bool:
        """Check whether the aircraft currently flies a route."""
        return self.route_id is not None
