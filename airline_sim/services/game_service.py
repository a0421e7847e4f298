"""Service for game session management."""

import logging
import random
import threading
import uuid
from typing import Any, Dict, List, Optional

from ..catalog import COMPETITOR_PROFILES, EVENT_TEMPLATES
from ..config import AUTOSAVE_SLOT, Config
from ..data_loader import load_aircraft_types, load_airports
from ..economics import build_financial_report
from ..game_factory import create_game_state
from ..logger import TurnLogger
from ..models.game_state import GameState
from ..save_manager import SaveManager, SaveMetadata
from ..state_manager import CommandResult, StateManager
from ..turn_engine import TurnEngine, TurnResult

logger = logging.getLogger(__name__)

COMMANDS = {
    "buy_aircraft",
    "lease_aircraft",
    "sell_aircraft",
    "return_leased_aircraft",
    "buy_airport_slot",
    "create_route",
    "close_route",
    "take_loan",
    "take_emergency_loan",
    "set_advertising_budget",
}


class GameNotFoundError(LookupError):
    """Raised for an unknown game id."""


class GameSession:
    """One running game: its state plus the engine objects bound to it."""

    def __init__(self, game_id: str, state: GameState, aircraft_types: Dict, rng: random.Random):
        self.game_id = game_id
        self.state = state
        self.rng = rng
        self.state_manager = StateManager(state, aircraft_types)
        self.engine = TurnEngine(state, rng, EVENT_TEMPLATES)
        self.lock = threading.Lock()


class GameService:
    """Service for creating games and routing commands to them."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize game service.

        Args:
            config: Application settings (read from the environment if omitted)
        """
        self.config = config or Config()
        self.airports = load_airports()
        self.aircraft_types = load_aircraft_types()
        self.save_manager = SaveManager(self.config.SAVE_DIR)
        self.turn_logger: Optional[TurnLogger] = (
            TurnLogger(self.config.TURN_LOG_FILE) if self.config.TURN_LOG_FILE else None
        )
        self.sessions: Dict[str, GameSession] = {}
        self._registry_lock = threading.Lock()

    def _new_rng(self, seed: Optional[int]) -> random.Random:
        if seed is None:
            seed = self.config.RANDOM_SEED
        return random.Random(seed)

    def _register(self, state: GameState, rng: random.Random) -> GameSession:
        session = GameSession(uuid.uuid4().hex, state, self.aircraft_types, rng)
        with self._registry_lock:
            self.sessions[session.game_id] = session
        return session

    def create_game(
        self,
        airline_name: Optional[str] = None,
        difficulty: Optional[str] = None,
        seed: Optional[int] = None,
    ) -> GameSession:
        """
        Start a new game.

        Args:
            airline_name: Player airline name (defaults to the configured one)
            difficulty: Difficulty preset (defaults to the configured one)
            seed: Random seed for a reproducible game

        Returns:
            The new session
        """
        rng = self._new_rng(seed)
        state = create_game_state(
            rng,
            difficulty=difficulty or self.config.DIFFICULTY,
            airline_name=airline_name or self.config.AIRLINE_NAME,
            airports=self.airports,
            aircraft_types=self.aircraft_types,
        )
        session = self._register(state, rng)
        logger.info(f"Created game {session.game_id} for {state.airline_name}")
        return session

    def get_session(self, game_id: str) -> GameSession:
        """
        Look up a session.

        Raises:
            GameNotFoundError: If no game has this id
        """
        session = self.sessions.get(game_id)
        if session is None:
            raise GameNotFoundError(f"Game {game_id} not found")
        return session

    def list_games(self) -> List[str]:
        return list(self.sessions)

    def end_game(self, game_id: str) -> None:
        with self._registry_lock:
            if self.sessions.pop(game_id, None) is None:
                raise GameNotFoundError(f"Game {game_id} not found")
        logger.info(f"Ended game {game_id}")

    def get_state(self, game_id: str) -> GameState:
        """Snapshot of a game's state."""
        session = self.get_session(game_id)
        with session.lock:
            return session.state.model_copy(deep=True)

    def get_financials(self, game_id: str) -> Dict[str, Any]:
        session = self.get_session(game_id)
        with session.lock:
            return build_financial_report(session.state)

    def execute(self, game_id: str, command: str, **kwargs: Any) -> CommandResult:
        """
        Run a player command against a game.

        Args:
            game_id: Target game
            command: State manager method name
            **kwargs: Command arguments

        Returns:
            CommandResult from the state manager

        Raises:
            GameNotFoundError: If no game has this id
            ValueError: If the command name is unknown
        """
        if command not in COMMANDS:
            raise ValueError(f"Unknown command: {command}")

        session = self.get_session(game_id)
        with session.lock:
            result = getattr(session.state_manager, command)(**kwargs)

        if not result.success:
            logger.info(f"Game {game_id}: {command} rejected: {result.error}")
        return result

    def advance_turn(self, game_id: str) -> TurnResult:
        """
        Resolve one quarter for a game.

        Raises:
            GameNotFoundError: If no game has this id
            GameOverError: If the game already ended in bankruptcy
        """
        session = self.get_session(game_id)
        with session.lock:
            result = session.engine.advance_turn()
            if self.turn_logger is not None:
                self.turn_logger.log_turn(session.state, result)
        return result

    def save_game(self, game_id: str, slot: int = AUTOSAVE_SLOT) -> SaveMetadata:
        session = self.get_session(game_id)
        with session.lock:
            return self.save_manager.save(session.state, slot)

    def load_game(self, slot: int = AUTOSAVE_SLOT, seed: Optional[int] = None) -> GameSession:
        """
        Open a saved game as a new session.

        Args:
            slot: Save slot to load
            seed: Random seed for the resumed game

        Returns:
            The new session

        Raises:
            SaveNotFoundError: If the slot is empty
            SaveFormatError: If the save cannot be read
        """
        state = self.save_manager.load(slot)
        session = self._register(state, self._new_rng(seed))
        logger.info(f"Loaded slot {slot} into game {session.game_id}")
        return session

    def list_saves(self) -> List[Optional[SaveMetadata]]:
        return self.save_manager.list_slots()

    def delete_save(self, slot: int) -> bool:
        return self.save_manager.delete(slot)

    def get_catalog(self) -> Dict[str, Any]:
        """Static reference data for display."""
        return {
            "aircraft_types": list(self.aircraft_types.values()),
            "airports": list(self.airports.values()),
            "competitors": COMPETITOR_PROFILES,
            "events": [event.model_dump() for event in EVENT_TEMPLATES],
        }
