"""Economic calculator: revenue, expenses, competition and scoring.

Every function here is pure: it reads the game state and never mutates it.
"""

import logging
import math
from typing import Dict, List

from .config import (
    AIRCRAFT_DEPRECIATION_PER_QUARTER,
    AIRCRAFT_MAINTENANCE_AGE_FACTOR,
    AIRCRAFT_MAINTENANCE_BASE,
    AIRCRAFT_RESALE_FACTOR,
    AIRPORT_MAINTENANCE_PER_QUARTER,
    AIRPORT_PRICE_MULTIPLIER,
    BASE_LOAD_FACTOR,
    COMPETITION_PENALTY_PER_COMPETITOR,
    DISTANCE_SCALE,
    MAX_LOAD_FACTOR,
    MIN_LOAD_FACTOR,
    PRICE_PER_KM,
    REPUTATION_LOAD_DIVISOR,
    RESEARCH_COST_PER_LEVEL,
    SCORE_AIRPORT_MULTIPLIER,
    SCORE_CASH_DIVISOR,
    SCORE_FLEET_MULTIPLIER,
    SCORE_REPUTATION_MULTIPLIER,
    SCORE_ROUTE_MULTIPLIER,
    STARTING_REPUTATION,
    WEEKS_PER_QUARTER,
)
from .models.aircraft import Aircraft
from .models.airport import Airport
from .models.game_state import GameState
from .models.route import Route

logger = logging.getLogger(__name__)


def calculate_distance(origin: Airport, destination: Airport) -> int:
    """
    Straight-line map distance between two airports, scaled to km.

    Args:
        origin: Departure airport
        destination: Arrival airport

    Returns:
        Distance in km (floored)
    """
    dx = destination.x - origin.x
    dy = destination.y - origin.y
    return math.floor(math.hypot(dx, dy) * DISTANCE_SCALE)


def calculate_airport_price(airport: Airport) -> float:
    """Price of the slots at an airport."""
    return airport.market_size * AIRPORT_PRICE_MULTIPLIER


def calculate_resale_value(aircraft: Aircraft) -> float:
    """
    Resale value of an owned aircraft after depreciation.

    Args:
        aircraft: Aircraft to price

    Returns:
        Sale proceeds (floored)
    """
    depreciation = (1 - AIRCRAFT_DEPRECIATION_PER_QUARTER) ** aircraft.age
    return math.floor(aircraft.aircraft_type.price * depreciation * AIRCRAFT_RESALE_FACTOR)


def calculate_route_competition(state: GameState, route: Route) -> int:
    """
    Count competitors present at either end of a route.

    Args:
        state: Current game state
        route: Route to inspect

    Returns:
        Number of competitors owning the origin or destination
    """
    return sum(
        1
        for comp in state.competitors
        if route.origin in comp.airports or route.destination in comp.airports
    )


def calculate_base_load_factor(reputation: float) -> float:
    """Load factor driven by reputation alone, clamped to the allowed band."""
    load_factor = BASE_LOAD_FACTOR + (reputation - STARTING_REPUTATION) / REPUTATION_LOAD_DIVISOR
    return max(MIN_LOAD_FACTOR, min(MAX_LOAD_FACTOR, load_factor))


def calculate_load_factor(state: GameState, route: Route) -> float:
    """
    Effective load factor for a route after economy and competition.

    Args:
        state: Current game state
        route: Route to evaluate

    Returns:
        Fraction of seats sold, never negative
    """
    load_factor = calculate_base_load_factor(state.reputation)
    load_factor *= state.economic_condition

    competition = calculate_route_competition(state, route)
    load_factor *= 1 - competition * COMPETITION_PENALTY_PER_COMPETITOR

    return max(0.0, load_factor)


def calculate_flights_per_quarter(route: Route) -> int:
    return route.flights_per_week * WEEKS_PER_QUARTER


def calculate_route_revenue(state: GameState, route: Route) -> float:
    """
    Quarterly ticket revenue for a route.

    Args:
        state: Current game state
        route: Route to evaluate

    Returns:
        Revenue for one quarter
    """
    aircraft = state.aircraft_for_route(route)
    passengers_per_flight = aircraft.aircraft_type.capacity * calculate_load_factor(state, route)
    revenue_per_flight = passengers_per_flight * route.distance * PRICE_PER_KM
    return revenue_per_flight * calculate_flights_per_quarter(route)


def calculate_route_operating_cost(state: GameState, route: Route) -> float:
    """Fuel-adjusted operating cost of a route for one quarter."""
    aircraft = state.aircraft_for_route(route)
    flights = calculate_flights_per_quarter(route)
    return aircraft.aircraft_type.operating_cost * flights * state.fuel_price


def calculate_route_expense(state: GameState, route: Route) -> float:
    """
    Direct quarterly cost of a route: operations plus the lease if any.

    Args:
        state: Current game state
        route: Route to evaluate

    Returns:
        Route expense for one quarter
    """
    aircraft = state.aircraft_for_route(route)
    lease_cost = 0.0 if aircraft.owned else aircraft.aircraft_type.lease_per_quarter
    return calculate_route_operating_cost(state, route) + lease_cost


def estimate_route_profitability(state: GameState, route: Route) -> float:
    """Estimated quarterly contribution of a single route."""
    return calculate_route_revenue(state, route) - calculate_route_expense(state, route)


def calculate_quarterly_revenue(state: GameState) -> float:
    """Total revenue across all routes."""
    return sum(calculate_route_revenue(state, route) for route in state.routes)


def calculate_expense_breakdown(state: GameState) -> Dict[str, float]:
    """
    Calculate every quarterly expense category.

    Args:
        state: Current game state

    Returns:
        Dictionary with per-category costs and the total
    """
    operating_cost = sum(calculate_route_operating_cost(state, r) for r in state.routes)
    lease_cost = sum(a.aircraft_type.lease_per_quarter for a in state.fleet if not a.owned)
    airport_cost = len(state.owned_airports()) * AIRPORT_MAINTENANCE_PER_QUARTER
    maintenance_cost = sum(
        AIRCRAFT_MAINTENANCE_BASE * (1 + a.age / AIRCRAFT_MAINTENANCE_AGE_FACTOR)
        for a in state.fleet
    )
    loan_cost = sum(loan.quarterly_payment for loan in state.loans)
    advertising_cost = state.advertising_budget
    research_cost = state.research_level * RESEARCH_COST_PER_LEVEL

    total_cost = (
        operating_cost
        + lease_cost
        + airport_cost
        + maintenance_cost
        + loan_cost
        + advertising_cost
        + research_cost
    )

    return {
        "operating_cost": operating_cost,
        "lease_cost": lease_cost,
        "airport_cost": airport_cost,
        "maintenance_cost": maintenance_cost,
        "loan_cost": loan_cost,
        "advertising_cost": advertising_cost,
        "research_cost": research_cost,
        "total_cost": total_cost,
    }


def calculate_quarterly_expenses(state: GameState) -> float:
    """Total expenses for the quarter."""
    return calculate_expense_breakdown(state)["total_cost"]


def calculate_score(state: GameState) -> int:
    """
    Final score used for the victory screen.

    Args:
        state: Current game state

    Returns:
        Floored score
    """
    cash_score = state.cash / SCORE_CASH_DIVISOR
    airport_score = len(state.owned_airports()) * SCORE_AIRPORT_MULTIPLIER
    fleet_score = len(state.fleet) * SCORE_FLEET_MULTIPLIER
    reputation_score = state.reputation * SCORE_REPUTATION_MULTIPLIER
    route_score = len(state.routes) * SCORE_ROUTE_MULTIPLIER
    return math.floor(cash_score + airport_score + fleet_score + reputation_score + route_score)


def build_financial_report(state: GameState) -> Dict:
    """
    Summarise the projected quarter for display.

    Args:
        state: Current game state

    Returns:
        Revenue, expense breakdown, profit and per-route estimates
    """
    revenue = calculate_quarterly_revenue(state)
    expenses = calculate_expense_breakdown(state)

    routes: List[Dict] = []
    for route in state.routes:
        routes.append({
            "route_id": route.id,
            "label": route.label,
            "competition": calculate_route_competition(state, route),
            "revenue": calculate_route_revenue(state, route),
            "expense": calculate_route_expense(state, route),
            "estimated_profit": estimate_route_profitability(state, route),
        })

    return {
        "revenue": revenue,
        "expenses": expenses,
        "profit": revenue - expenses["total_cost"],
        "fuel_price": state.fuel_price,
        "economic_condition": state.economic_condition,
        "total_debt": state.total_debt(),
        "active_loans": len(state.loans),
        "routes": routes,
    }
