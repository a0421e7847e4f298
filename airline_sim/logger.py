"""Logging setup and the JSON-lines turn log."""

import json
import logging
import logging.handlers
import threading
from datetime import datetime
from pathlib import Path
from typing import Optional

from .models.game_state import GameState
from .turn_engine import TurnResult


def configure_logging(level: str = "INFO", log_file: Optional[str] = "airline_sim.log") -> None:
    """
    Configure console and rotating file logging on the root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file, or None for console only
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


class TurnLogger:
    """Appends one JSON object per resolved turn for machine parsing."""

    def __init__(self, log_file: str = "turns.jsonl"):
        """
        Initialize turn logger.

        Args:
            log_file: Path to JSON lines file
        """
        self.log_file = Path(log_file)
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.file_handle = open(self.log_file, "a", encoding="utf-8")
        self._lock = threading.Lock()

    def log_turn(self, state: GameState, result: TurnResult) -> None:
        """
        Write the outcome of one turn.

        Args:
            state: Game state after the turn
            result: Turn result returned by the engine
        """
        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "airline": state.airline_name,
            "date": state.get_date_string(),
            "revenue": result.revenue,
            "expenses": result.expenses,
            "profit": result.profit,
            "cash": result.cash,
            "reputation": result.reputation,
            "fleet_size": len(state.fleet),
            "routes": len(state.routes),
            "bankrupt": result.bankrupt,
            "victory": result.victory,
            "emergency_loan_required": result.emergency_loan_required,
            "news": result.news,
        }

        line = json.dumps(log_entry) + "\n"
        # Shared across sessions: one write per entry
        with self._lock:
            self.file_handle.write(line)
            self.file_handle.flush()

    def close(self) -> None:
        """Close log file."""
        with self._lock:
            self.file_handle.close()
