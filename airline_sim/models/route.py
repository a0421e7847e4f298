"""Route model."""

from pydantic import BaseModel, Field, model_validator


class Route(BaseModel):
    """A scheduled service between two airports flown by one aircraft."""

    id: int
    origin: str
    destination: str
    aircraft_id: int
    flights_per_week: int = Field(gt=0)
    distance: int  # km, fixed at creation

    @model_validator(mode="after")
    def _check_endpoints(self) -> "Route":
        if self.origin == self.destination:
            raise ValueError("Route origin and destination must differ")
        return self

    @property
    def label(self) -> str:
        """Human readable route name."""
        return f"{self.origin} → {self.destination}"

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "origin": "JFK",
                "destination": "LAX",
                "aircraft_id": 1,
                "flights_per_week": 7,
                "distance": 824,
            }
        }
