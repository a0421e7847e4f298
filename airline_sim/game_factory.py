"""Construction of a fresh game world."""

import logging
import random
from typing import Dict, Optional

from .catalog import create_competitors
from .config import (
    AI_STARTING_AIRPORTS_MAX,
    AI_STARTING_AIRPORTS_MIN,
    DEFAULT_AIRLINE_NAME,
    STARTING_AIRCRAFT_COUNT,
    STARTING_AIRCRAFT_TYPE,
    get_difficulty_settings,
)
from .data_loader import CatalogError, load_aircraft_types, load_airports
from .models.aircraft import Aircraft, AircraftType
from .models.airport import Airport
from .models.game_state import GameState

logger = logging.getLogger(__name__)

WELCOME_NEWS = [
    "Welcome to Aerobiz Supersonic! Build your airline empire.",
    "Manage routes, finances, and compete with rivals to dominate the skies.",
]


def assign_competitor_airports(state: GameState, rng: random.Random) -> None:
    """
    Hand each competitor one or two random unclaimed airports.

    Args:
        state: Game state with airports and competitors populated
        rng: Random source
    """
    for comp in state.competitors:
        count = rng.randint(AI_STARTING_AIRPORTS_MIN, AI_STARTING_AIRPORTS_MAX)
        for _ in range(count):
            available = state.available_airports()
            if not available:
                break
            airport = rng.choice(available)
            airport.claim_for_competitor(comp.name)
            comp.airports.append(airport.code)
        logger.debug(f"{comp.name} starts at {comp.airports}")


def create_game_state(
    rng: random.Random,
    difficulty: str = "NORMAL",
    airline_name: str = DEFAULT_AIRLINE_NAME,
    airports: Optional[Dict[str, Airport]] = None,
    aircraft_types: Optional[Dict[str, AircraftType]] = None,
) -> GameState:
    """
    Build the opening position of a new game.

    Airports passed in are copied, so one catalog can seed many games.

    Args:
        rng: Random source used for competitor placement
        difficulty: Difficulty preset name
        airline_name: Player airline name
        airports: Airport catalog (loaded from the bundled CSV if omitted)
        aircraft_types: Aircraft catalog (loaded from the bundled CSV if omitted)

    Returns:
        New GameState ready for the first turn

    Raises:
        UnknownDifficultyError: If the difficulty is unknown
        CatalogError: If the starting aircraft type is missing from the catalog
    """
    settings = get_difficulty_settings(difficulty)
    if airports is None:
        airports = load_airports()
    if aircraft_types is None:
        aircraft_types = load_aircraft_types()

    starting_type = aircraft_types.get(STARTING_AIRCRAFT_TYPE)
    if starting_type is None:
        raise CatalogError(f"Aircraft catalog lacks the starting type {STARTING_AIRCRAFT_TYPE}")

    state = GameState(
        airline_name=airline_name,
        difficulty=difficulty.upper(),
        cash=settings["starting_cash"],
        airports=[airport.model_copy(deep=True) for airport in airports.values()],
        competitors=create_competitors(),
    )
    assign_competitor_airports(state, rng)

    for _ in range(STARTING_AIRCRAFT_COUNT):
        aircraft_id = state.allocate_aircraft_id()
        state.fleet.append(
            Aircraft(
                id=aircraft_id,
                aircraft_type=starting_type,
                name=state.aircraft_name(aircraft_id),
            )
        )

    for message in WELCOME_NEWS:
        state.add_news(message)

    logger.info(
        f"New game for {airline_name} ({state.difficulty}) with "
        f"{len(state.airports)} airports and {len(state.competitors)} competitors"
    )
    return state
