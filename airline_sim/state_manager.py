"""State manager for player commands issued between turns."""

import logging
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .config import (
    EMERGENCY_LOAN_INTEREST_RATE,
    EMERGENCY_LOAN_QUARTERS,
    get_difficulty_settings,
)
from .economics import calculate_airport_price, calculate_resale_value
from .models.aircraft import Aircraft, AircraftType
from .models.game_state import GameState
from .models.loan import Loan
from .models.route import Route
from .utils import format_money
from .validator import ValidationReport, Validator

logger = logging.getLogger(__name__)


class CommandResult(BaseModel):
    """Outcome of a player command."""

    success: bool
    error: Optional[str] = None
    warnings: List[str] = Field(default_factory=list)
    aircraft_id: Optional[int] = None
    route_id: Optional[int] = None
    amount: Optional[float] = None

    @classmethod
    def failed(cls, report: ValidationReport) -> "CommandResult":
        return cls(success=False, error=report.first_error, warnings=report.warnings)


class StateManager:
    """Applies validated player commands to the game state.

    Every command validates first and leaves the state untouched on failure.
    """

    def __init__(
        self,
        state: GameState,
        aircraft_types: Dict[str, AircraftType],
        validator: Optional[Validator] = None,
    ):
        """
        Initialize state manager.

        Args:
            state: Game state to manage
            aircraft_types: Aircraft catalog keyed by type name
            validator: Command validator (a default one is created if omitted)
        """
        self.state = state
        self.aircraft_types = aircraft_types
        self.validator = validator or Validator()
        logger.info(f"StateManager initialized at {state.get_date_string()}")

    def _lookup_type(self, type_name: str) -> Optional[AircraftType]:
        return self.aircraft_types.get(type_name)

    def _add_aircraft(self, aircraft_type: AircraftType, owned: bool) -> Aircraft:
        aircraft_id = self.state.allocate_aircraft_id()
        aircraft = Aircraft(
            id=aircraft_id,
            aircraft_type=aircraft_type,
            name=self.state.aircraft_name(aircraft_id),
            owned=owned,
        )
        self.state.fleet.append(aircraft)
        return aircraft

    def buy_aircraft(self, type_name: str) -> CommandResult:
        """
        Buy an aircraft outright.

        Args:
            type_name: Catalog name of the aircraft type

        Returns:
            CommandResult with the new aircraft id
        """
        aircraft_type = self._lookup_type(type_name)
        if aircraft_type is None:
            return CommandResult(success=False, error=f"Unknown aircraft type {type_name}!")

        report = self.validator.validate_aircraft_purchase(self.state, aircraft_type)
        if not report.is_valid():
            return CommandResult.failed(report)

        self.state.cash -= aircraft_type.price
        aircraft = self._add_aircraft(aircraft_type, owned=True)
        self.state.add_news(f"Purchased {aircraft_type.name} for ${format_money(aircraft_type.price)}")
        logger.info(f"Bought aircraft {aircraft.id} ({aircraft_type.name})")
        return CommandResult(success=True, aircraft_id=aircraft.id, amount=aircraft_type.price)

    def lease_aircraft(self, type_name: str) -> CommandResult:
        """Lease an aircraft; no upfront cost, the lease is a quarterly expense."""
        aircraft_type = self._lookup_type(type_name)
        if aircraft_type is None:
            return CommandResult(success=False, error=f"Unknown aircraft type {type_name}!")

        aircraft = self._add_aircraft(aircraft_type, owned=False)
        self.state.add_news(
            f"Leased {aircraft_type.name} for ${format_money(aircraft_type.lease_per_quarter)}/quarter"
        )
        logger.info(f"Leased aircraft {aircraft.id} ({aircraft_type.name})")
        return CommandResult(success=True, aircraft_id=aircraft.id)

    def sell_aircraft(self, aircraft_id: int) -> CommandResult:
        """
        Sell an owned, idle aircraft at its depreciated value.

        Args:
            aircraft_id: Aircraft to sell

        Returns:
            CommandResult with the sale amount
        """
        report = self.validator.validate_aircraft_sale(self.state, aircraft_id)
        if not report.is_valid():
            return CommandResult.failed(report)

        aircraft = self.state.find_aircraft(aircraft_id)
        resale_value = calculate_resale_value(aircraft)
        self.state.fleet.remove(aircraft)
        self.state.cash += resale_value
        self.state.add_news(
            f"Sold {aircraft.aircraft_type.name} for ${format_money(resale_value)}"
        )
        return CommandResult(success=True, aircraft_id=aircraft_id, amount=resale_value)

    def return_leased_aircraft(self, aircraft_id: int) -> CommandResult:
        report = self.validator.validate_lease_return(self.state, aircraft_id)
        if not report.is_valid():
            return CommandResult.failed(report)

        aircraft = self.state.find_aircraft(aircraft_id)
        self.state.fleet.remove(aircraft)
        self.state.add_news(f"Returned leased {aircraft.aircraft_type.name}")
        return CommandResult(success=True, aircraft_id=aircraft_id)

    def buy_airport_slot(self, airport_code: str) -> CommandResult:
        """
        Buy the slots at an unowned airport.

        Args:
            airport_code: Airport code

        Returns:
            CommandResult with the price paid
        """
        report = self.validator.validate_airport_purchase(self.state, airport_code)
        if not report.is_valid():
            return CommandResult.failed(report)

        airport = self.state.find_airport(airport_code)
        price = calculate_airport_price(airport)
        self.state.cash -= price
        airport.claim_for_player()
        self.state.add_news(f"Acquired slots at {airport.name}")
        logger.info(f"Bought slots at {airport.code} for {price}")
        return CommandResult(success=True, amount=price)

    def create_route(
        self,
        origin_code: str,
        destination_code: str,
        aircraft_id: int,
        flights_per_week: int,
    ) -> CommandResult:
        """
        Open a route and assign an aircraft to it.

        Args:
            origin_code: Departure airport code
            destination_code: Arrival airport code (must be player-owned)
            aircraft_id: Idle aircraft to fly the route
            flights_per_week: Weekly frequency

        Returns:
            CommandResult with the new route id
        """
        report = self.validator.validate_route(
            self.state, origin_code, destination_code, aircraft_id, flights_per_week
        )
        if not report.is_valid():
            return CommandResult.failed(report)

        if report.warnings:
            logger.warning(f"Route {origin_code}-{destination_code}: {report.warnings}")

        aircraft = self.state.find_aircraft(aircraft_id)
        route = Route(
            id=self.state.allocate_route_id(),
            origin=origin_code,
            destination=destination_code,
            aircraft_id=aircraft.id,
            flights_per_week=flights_per_week,
            distance=report.distance,
        )
        # Both sides of the link change together.
        aircraft.route_id = route.id
        self.state.routes.append(route)

        self.state.add_news(f"New route opened: {route.label}")
        return CommandResult(success=True, route_id=route.id, warnings=report.warnings)

    def close_route(self, route_id: int) -> CommandResult:
        """Close a route and free its aircraft."""
        report = self.validator.validate_route_closure(self.state, route_id)
        if not report.is_valid():
            return CommandResult.failed(report)

        route = self.state.find_route(route_id)
        aircraft = self.state.find_aircraft(route.aircraft_id)
        if aircraft is not None:
            aircraft.route_id = None
        self.state.routes.remove(route)

        self.state.add_news(f"Route closed: {route.label}")
        return CommandResult(success=True, route_id=route_id, aircraft_id=route.aircraft_id)

    def take_loan(self, amount: float, quarters: int) -> CommandResult:
        """
        Borrow money at the difficulty's interest rate.

        Args:
            amount: Principal
            quarters: Term in quarters

        Returns:
            CommandResult with the quarterly payment as amount
        """
        report = self.validator.validate_loan(amount, quarters)
        if not report.is_valid():
            return CommandResult.failed(report)

        rate = get_difficulty_settings(self.state.difficulty)["loan_interest_rate"]
        loan = Loan.originate(amount, quarters, rate)
        self.state.loans.append(loan)
        self.state.cash += amount
        self.state.add_news(f"Loan approved: ${format_money(amount)} over {quarters} quarters")
        return CommandResult(success=True, amount=loan.quarterly_payment)

    def take_emergency_loan(self, amount: float) -> CommandResult:
        """Borrow on fixed punitive terms; clears the consecutive-loss counter."""
        report = self.validator.validate_emergency_loan(amount)
        if not report.is_valid():
            return CommandResult.failed(report)

        loan = Loan.originate(amount, EMERGENCY_LOAN_QUARTERS, EMERGENCY_LOAN_INTEREST_RATE)
        self.state.loans.append(loan)
        self.state.cash += amount
        self.state.consecutive_losses = 0
        self.state.add_news(
            f"EMERGENCY LOAN: ${format_money(amount)} at "
            f"{EMERGENCY_LOAN_INTEREST_RATE * 100:.0f}% interest over {EMERGENCY_LOAN_QUARTERS} quarters"
        )
        return CommandResult(success=True, amount=loan.quarterly_payment)

    def set_advertising_budget(self, amount: float) -> CommandResult:
        """Replace the recurring quarterly advertising spend."""
        self.state.advertising_budget = amount
        self.state.add_news(f"Advertising budget set to ${format_money(amount)}/quarter")
        return CommandResult(success=True, amount=amount)
