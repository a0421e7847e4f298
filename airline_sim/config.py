"""Configuration module for game constants, difficulty presets, and settings."""

from pathlib import Path
from typing import Dict, Optional
from pydantic_settings import BaseSettings


# Starting conditions
STARTING_YEAR = 1992
STARTING_QUARTER = 1
STARTING_CASH = 50_000_000
STARTING_REPUTATION = 75
STARTING_AIRCRAFT_COUNT = 2
STARTING_AIRCRAFT_TYPE = "Boeing 737-300"
DEFAULT_AIRLINE_NAME = "Phoenix Air"


# Economic parameters
BASE_LOAD_FACTOR = 0.75
MIN_LOAD_FACTOR = 0.40
MAX_LOAD_FACTOR = 0.95
REPUTATION_LOAD_DIVISOR = 200
PRICE_PER_KM = 0.15
WEEKS_PER_QUARTER = 13
DISTANCE_SCALE = 10  # map units -> km


# Interest rates (per quarter)
LOAN_INTEREST_RATE = 0.02
EMERGENCY_LOAN_INTEREST_RATE = 0.05
EMERGENCY_LOAN_QUARTERS = 12
EMERGENCY_LOAN_MIN_AMOUNT = 10_000_000


# Costs
AIRPORT_MAINTENANCE_PER_QUARTER = 500_000
AIRCRAFT_MAINTENANCE_BASE = 200_000
AIRCRAFT_MAINTENANCE_AGE_FACTOR = 40  # divisor for the age penalty
RESEARCH_COST_PER_LEVEL = 100_000
AIRPORT_PRICE_MULTIPLIER = 10  # market_size * this


# Aircraft resale
AIRCRAFT_DEPRECIATION_PER_QUARTER = 0.10
AIRCRAFT_RESALE_FACTOR = 0.6


# Reputation
REPUTATION_MIN = 0
REPUTATION_MAX = 100
REPUTATION_GAIN_ON_PROFIT = 1
REPUTATION_LOSS_ON_LOSS = 2
ADVERTISING_REPUTATION_FACTOR = 1_000_000  # $1M advertising = 1 rep point
RESEARCH_LEVEL_MAX = 10


# Competition
COMPETITION_PENALTY_PER_COMPETITOR = 0.1
COMPETITOR_REPUTATION_FLOOR = 20
AI_EXPANSION_CASH_THRESHOLD = 15_000_000
AI_EXPANSION_PROBABILITY = 0.15
AI_BASE_PROFIT_PER_AIRPORT = 2_000_000
AI_PROFIT_VARIANCE_LOW = -0.3
AI_PROFIT_VARIANCE_HIGH = 0.2
AI_STARTING_AIRPORTS_MIN = 1
AI_STARTING_AIRPORTS_MAX = 2


# Events
EVENT_PROBABILITY_PER_QUARTER = 0.1
NEUTRAL_MULTIPLIER = 1.0


# Win/Loss conditions
BANKRUPTCY_THRESHOLD = -10_000_000
VICTORY_YEAR = 2000
LOW_CASH_WARNING_THRESHOLD = 5_000_000
CONSECUTIVE_LOSSES_FOR_EMERGENCY = 2


# Scoring
SCORE_CASH_DIVISOR = 1_000_000
SCORE_AIRPORT_MULTIPLIER = 100
SCORE_FLEET_MULTIPLIER = 50
SCORE_REPUTATION_MULTIPLIER = 10
SCORE_ROUTE_MULTIPLIER = 75


# News log
NEWS_LOG_LIMIT = 50


# Save slots
SAVE_VERSION = "1.0"
MAX_SAVE_SLOTS = 5
AUTOSAVE_SLOT = 0


# Difficulty presets
DIFFICULTY_SETTINGS: Dict[str, Dict[str, float]] = {
    "EASY": {
        "starting_cash": 75_000_000,
        "loan_interest_rate": 0.015,
        "competitor_aggression": 0.7,
        "event_probability": 0.05,
    },
    "NORMAL": {
        "starting_cash": STARTING_CASH,
        "loan_interest_rate": LOAN_INTEREST_RATE,
        "competitor_aggression": 1.0,
        "event_probability": EVENT_PROBABILITY_PER_QUARTER,
    },
    "HARD": {
        "starting_cash": 35_000_000,
        "loan_interest_rate": 0.025,
        "competitor_aggression": 1.3,
        "event_probability": 0.15,
    },
}


# Catalog files shipped with the package
DATA_DIR = Path(__file__).resolve().parent / "data"
AIRPORTS_CSV = DATA_DIR / "airports.csv"
AIRCRAFT_TYPES_CSV = DATA_DIR / "aircraft_types.csv"


class UnknownDifficultyError(ValueError):
    """Raised for a difficulty name with no preset."""


def get_difficulty_settings(level: str) -> Dict[str, float]:
    """
    Look up a difficulty preset.

    Args:
        level: Difficulty name (EASY, NORMAL, HARD), case-insensitive

    Returns:
        Preset dictionary

    Raises:
        UnknownDifficultyError: If the level is unknown
    """
    key = level.upper()
    if key not in DIFFICULTY_SETTINGS:
        raise UnknownDifficultyError(f"Unknown difficulty: {level}")
    return DIFFICULTY_SETTINGS[key]


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    # Game setup
    DIFFICULTY: str = "NORMAL"
    AIRLINE_NAME: str = DEFAULT_AIRLINE_NAME
    RANDOM_SEED: Optional[int] = None

    # Persistence
    SAVE_DIR: str = "saves"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "airline_sim.log"
    TURN_LOG_FILE: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }
