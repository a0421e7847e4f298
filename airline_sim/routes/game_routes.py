"""Routes for game lifecycle, player commands and turn resolution."""

import logging
from fastapi import APIRouter, HTTPException
from ..models.game_state import GameState
from ..schemas.game_schemas import (
    AdvertisingRequest,
    AircraftTypeRequest,
    CreateRouteRequest,
    EmergencyLoanRequest,
    GameListResponse,
    GameResponse,
    LoanRequest,
    NewGameRequest,
)
from ..services.singleton import get_game_service
from ..state_manager import CommandResult
from ..turn_engine import TurnResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["games"])


def _run_command(game_id: str, command: str, **kwargs) -> CommandResult:
    """Execute a command and turn a rejection into HTTP 400."""
    result = get_game_service().execute(game_id, command, **kwargs)
    if not result.success:
        raise HTTPException(status_code=400, detail=result.error)
    return result


@router.post("/games", response_model=GameResponse, status_code=201)
def create_game(request: NewGameRequest):
    """
    Start a new game.

    Args:
        request: Airline name, difficulty and optional seed

    Returns:
        The new game id and its opening state
    """
    game_service = get_game_service()
    session = game_service.create_game(
        airline_name=request.airline_name,
        difficulty=request.difficulty,
        seed=request.seed,
    )
    return GameResponse(game_id=session.game_id, state=game_service.get_state(session.game_id))


@router.get("/games", response_model=GameListResponse)
def list_games():
    return GameListResponse(game_ids=get_game_service().list_games())


@router.get("/games/{game_id}", response_model=GameState)
def get_game(game_id: str):
    """Full state of a game."""
    return get_game_service().get_state(game_id)


@router.delete("/games/{game_id}", status_code=204)
def end_game(game_id: str):
    get_game_service().end_game(game_id)


@router.post("/games/{game_id}/aircraft/buy", response_model=CommandResult)
def buy_aircraft(game_id: str, request: AircraftTypeRequest):
    return _run_command(game_id, "buy_aircraft", type_name=request.type_name)


@router.post("/games/{game_id}/aircraft/lease", response_model=CommandResult)
def lease_aircraft(game_id: str, request: AircraftTypeRequest):
    return _run_command(game_id, "lease_aircraft", type_name=request.type_name)


@router.post("/games/{game_id}/aircraft/{aircraft_id}/sell", response_model=CommandResult)
def sell_aircraft(game_id: str, aircraft_id: int):
    return _run_command(game_id, "sell_aircraft", aircraft_id=aircraft_id)


@router.post("/games/{game_id}/aircraft/{aircraft_id}/return", response_model=CommandResult)
def return_leased_aircraft(game_id: str, aircraft_id: int):
    return _run_command(game_id, "return_leased_aircraft", aircraft_id=aircraft_id)


@router.post("/games/{game_id}/airports/{airport_code}/buy", response_model=CommandResult)
def buy_airport_slot(game_id: str, airport_code: str):
    return _run_command(game_id, "buy_airport_slot", airport_code=airport_code.upper())


@router.post("/games/{game_id}/routes", response_model=CommandResult, status_code=201)
def create_route(game_id: str, request: CreateRouteRequest):
    """
    Open a route.

    Args:
        game_id: Target game
        request: Endpoints, aircraft and weekly frequency

    Returns:
        CommandResult with the new route id and any warnings
    """
    return _run_command(
        game_id,
        "create_route",
        origin_code=request.origin.upper(),
        destination_code=request.destination.upper(),
        aircraft_id=request.aircraft_id,
        flights_per_week=request.flights_per_week,
    )


@router.delete("/games/{game_id}/routes/{route_id}", response_model=CommandResult)
def close_route(game_id: str, route_id: int):
    return _run_command(game_id, "close_route", route_id=route_id)


@router.post("/games/{game_id}/loans", response_model=CommandResult)
def take_loan(game_id: str, request: LoanRequest):
    return _run_command(game_id, "take_loan", amount=request.amount, quarters=request.quarters)


@router.post("/games/{game_id}/loans/emergency", response_model=CommandResult)
def take_emergency_loan(game_id: str, request: EmergencyLoanRequest):
    return _run_command(game_id, "take_emergency_loan", amount=request.amount)


@router.put("/games/{game_id}/advertising", response_model=CommandResult)
def set_advertising_budget(game_id: str, request: AdvertisingRequest):
    return _run_command(game_id, "set_advertising_budget", amount=request.amount)


@router.post("/games/{game_id}/turn", response_model=TurnResult)
def advance_turn(game_id: str):
    """
    Resolve the current quarter.

    Returns:
        TurnResult with financials, outcome flags and the quarter's news
    """
    result = get_game_service().advance_turn(game_id)
    if result.bankrupt:
        logger.warning(f"Game {game_id} ended in bankruptcy")
    elif result.victory:
        logger.info(f"Game {game_id} reached victory with score {result.score}")
    return result
