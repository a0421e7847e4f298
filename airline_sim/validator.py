"""Validator module for checking player commands before they touch the state."""

import logging
from typing import List, Optional
from pydantic import BaseModel, Field

from .config import EMERGENCY_LOAN_MIN_AMOUNT
from .economics import calculate_airport_price, calculate_distance
from .models.aircraft import AircraftType
from .models.game_state import GameState

logger = logging.getLogger(__name__)


class ValidationReport(BaseModel):
    """Validation report with errors and warnings."""

    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    distance: Optional[int] = None  # set by route validation

    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return len(self.errors) == 0

    @property
    def first_error(self) -> Optional[str]:
        return self.errors[0] if self.errors else None


class Validator:
    """Validates player commands against the current game state."""

    def validate_aircraft_purchase(
        self, state: GameState, aircraft_type: AircraftType
    ) -> ValidationReport:
        """
        Check the player can pay for a new aircraft.

        Args:
            state: Current game state
            aircraft_type: Type being bought

        Returns:
            ValidationReport
        """
        report = ValidationReport()
        if not state.can_afford(aircraft_type.price):
            report.errors.append("Insufficient funds to purchase aircraft!")
        return report

    def validate_aircraft_sale(self, state: GameState, aircraft_id: int) -> ValidationReport:
        """Check an aircraft can be sold: it must exist, be owned and idle."""
        report = ValidationReport()
        aircraft = state.find_aircraft(aircraft_id)

        if aircraft is None:
            report.errors.append("Aircraft not found!")
        elif not aircraft.owned:
            report.errors.append("Cannot sell leased aircraft! (You can only return it)")
        elif aircraft.is_assigned:
            report.errors.append(
                "Cannot sell aircraft assigned to a route! Remove it from the route first."
            )
        return report

    def validate_lease_return(self, state: GameState, aircraft_id: int) -> ValidationReport:
        """Check a leased aircraft can be handed back."""
        report = ValidationReport()
        aircraft = state.find_aircraft(aircraft_id)

        if aircraft is None:
            report.errors.append("Aircraft not found!")
        elif aircraft.owned:
            report.errors.append('This aircraft is owned, not leased! Use "Sell" instead.')
        elif aircraft.is_assigned:
            report.errors.append(
                "Cannot return aircraft assigned to a route! Remove it from the route first."
            )
        return report

    def validate_airport_purchase(self, state: GameState, airport_code: str) -> ValidationReport:
        """
        Check airport slots are for sale and affordable.

        Args:
            state: Current game state
            airport_code: Airport to buy

        Returns:
            ValidationReport
        """
        report = ValidationReport()
        airport = state.find_airport(airport_code)

        if airport is None:
            report.errors.append(f"Unknown airport {airport_code}!")
        elif airport.owned:
            report.errors.append(f"You already own slots at {airport.name}!")
        elif airport.competitor_owned is not None:
            report.errors.append(f"{airport.name} is controlled by {airport.competitor_owned}!")
        elif not state.can_afford(calculate_airport_price(airport)):
            report.errors.append("Insufficient funds to purchase airport slot!")
        return report

    def validate_route(
        self,
        state: GameState,
        origin_code: str,
        destination_code: str,
        aircraft_id: int,
        flights_per_week: int,
    ) -> ValidationReport:
        """
        Validate a new route request.

        Checks run in order and stop at the first failure, since later checks
        depend on the earlier lookups succeeding.

        Args:
            state: Current game state
            origin_code: Departure airport code
            destination_code: Arrival airport code
            aircraft_id: Aircraft to assign
            flights_per_week: Weekly frequency

        Returns:
            ValidationReport with the route distance when valid
        """
        report = ValidationReport()

        if origin_code == destination_code:
            report.errors.append("Cannot create route to same airport!")
            return report

        aircraft = state.find_aircraft(aircraft_id)
        if aircraft is None or aircraft.is_assigned:
            report.errors.append("Aircraft not available!")
            return report

        origin = state.find_airport(origin_code)
        destination = state.find_airport(destination_code)
        if origin is None or destination is None:
            report.errors.append("Invalid airports!")
            return report

        if not destination.owned:
            report.errors.append("You must own slots at the destination airport!")
            return report

        if flights_per_week < 1:
            report.errors.append("Routes need at least one flight per week!")
            return report

        distance = calculate_distance(origin, destination)
        if distance > aircraft.aircraft_type.range:
            report.errors.append(
                f"Aircraft range ({aircraft.aircraft_type.range}km) insufficient "
                f"for this route ({distance}km)!"
            )
            return report

        if not origin.owned:
            report.warnings.append(f"Route departs from {origin.code} where you hold no slots")
        if aircraft.aircraft_type.capacity == 0:
            report.warnings.append(f"{aircraft.aircraft_type.name} carries no passengers")

        report.distance = distance
        return report

    def validate_route_closure(self, state: GameState, route_id: int) -> ValidationReport:
        report = ValidationReport()
        if state.find_route(route_id) is None:
            report.errors.append("Route not found!")
        return report

    def validate_loan(self, amount: float, quarters: int) -> ValidationReport:
        """Loans need a positive principal and term."""
        report = ValidationReport()
        if amount <= 0:
            report.errors.append("Loan amount must be positive!")
        if quarters < 1:
            report.errors.append("Loan term must be at least one quarter!")
        return report

    def validate_emergency_loan(self, amount: float) -> ValidationReport:
        report = ValidationReport()
        if amount < EMERGENCY_LOAN_MIN_AMOUNT:
            report.errors.append(
                f"Emergency loans start at ${EMERGENCY_LOAN_MIN_AMOUNT:,}!"
            )
        return report

    def validate_state_integrity(self, state: GameState) -> ValidationReport:
        """
        Check the cross references inside a state, e.g. one read back from disk.

        Routes and aircraft must point at each other, ids must be unique and
        below the next id to be allocated, and route endpoints must be known airports.

        Args:
            state: Game state to check

        Returns:
            ValidationReport
        """
        report = ValidationReport()

        aircraft_ids = [a.id for a in state.fleet]
        route_ids = [r.id for r in state.routes]
        if len(set(aircraft_ids)) != len(aircraft_ids):
            report.errors.append("Duplicate aircraft ids in fleet")
        if len(set(route_ids)) != len(route_ids):
            report.errors.append("Duplicate route ids")
        if aircraft_ids and state.next_aircraft_id <= max(aircraft_ids):
            report.errors.append(
                f"next_aircraft_id {state.next_aircraft_id} is not above existing id {max(aircraft_ids)}"
            )
        if route_ids and state.next_route_id <= max(route_ids):
            report.errors.append(
                f"next_route_id {state.next_route_id} is not above existing id {max(route_ids)}"
            )

        airport_codes = {a.code for a in state.airports}
        for route in state.routes:
            aircraft = state.find_aircraft(route.aircraft_id)
            if aircraft is None:
                report.errors.append(
                    f"Route {route.id} references missing aircraft {route.aircraft_id}"
                )
            elif aircraft.route_id != route.id:
                report.errors.append(
                    f"Route {route.id} uses aircraft {aircraft.id} assigned to route {aircraft.route_id}"
                )
            for code in (route.origin, route.destination):
                if code not in airport_codes:
                    report.errors.append(f"Route {route.id} references unknown airport {code}")

        for aircraft in state.fleet:
            if aircraft.route_id is None:
                continue
            route = state.find_route(aircraft.route_id)
            if route is None or route.aircraft_id != aircraft.id:
                report.errors.append(
                    f"Aircraft {aircraft.id} claims route {aircraft.route_id} which it does not fly"
                )

        return report
