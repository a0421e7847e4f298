"""Competitor AI: quarterly finances and opportunistic airport expansion."""

import logging
import random
from typing import Optional

from .config import (
    AI_BASE_PROFIT_PER_AIRPORT,
    AI_EXPANSION_CASH_THRESHOLD,
    AI_EXPANSION_PROBABILITY,
    AI_PROFIT_VARIANCE_HIGH,
    AI_PROFIT_VARIANCE_LOW,
    COMPETITOR_REPUTATION_FLOOR,
    REPUTATION_GAIN_ON_PROFIT,
    REPUTATION_LOSS_ON_LOSS,
    REPUTATION_MAX,
    STARTING_REPUTATION,
)
from .economics import calculate_airport_price
from .models.competitor import Competitor
from .models.game_state import GameState

logger = logging.getLogger(__name__)


class CompetitorAI:
    """Simulates every rival airline once per turn."""

    def __init__(self, rng: random.Random, aggression: float = 1.0):
        """
        Initialize competitor AI.

        Args:
            rng: Shared random source
            aggression: Multiplier on the expansion probability (difficulty)
        """
        self.rng = rng
        self.aggression = aggression

    def simulate(self, state: GameState) -> None:
        """Run one quarter for each competitor, in roster order."""
        for comp in state.competitors:
            self.simulate_competitor(state, comp)

    def simulate_competitor(self, state: GameState, comp: Competitor) -> float:
        """
        Run one quarter for a single competitor.

        Args:
            state: Current game state
            comp: Competitor to update

        Returns:
            The competitor's profit for the quarter
        """
        profit = self._quarterly_profit(state, comp)
        comp.cash += profit

        if comp.aggressive and comp.cash > AI_EXPANSION_CASH_THRESHOLD:
            if self.rng.random() < AI_EXPANSION_PROBABILITY * self.aggression:
                self._try_expand(state, comp)

        if profit > 0:
            comp.reputation = min(REPUTATION_MAX, comp.reputation + REPUTATION_GAIN_ON_PROFIT)
        else:
            comp.reputation = max(
                COMPETITOR_REPUTATION_FLOOR, comp.reputation - REPUTATION_LOSS_ON_LOSS
            )

        logger.debug(f"{comp.name}: profit {profit:.0f}, cash {comp.cash:.0f}, rep {comp.reputation}")
        return profit

    def _quarterly_profit(self, state: GameState, comp: Competitor) -> float:
        base_profit = len(comp.airports) * AI_BASE_PROFIT_PER_AIRPORT
        reputation_factor = comp.reputation / STARTING_REPUTATION
        random_factor = self.rng.uniform(AI_PROFIT_VARIANCE_LOW, AI_PROFIT_VARIANCE_HIGH)
        return base_profit * reputation_factor * (1 + random_factor) * state.economic_condition

    def _try_expand(self, state: GameState, comp: Competitor) -> Optional[str]:
        """
        Buy slots at one random unclaimed airport if the competitor can pay.

        Returns:
            Code of the acquired airport, or None
        """
        available = state.available_airports()
        if not available:
            return None

        airport = self.rng.choice(available)
        price = calculate_airport_price(airport)
        if comp.cash < price:
            logger.debug(f"{comp.name} cannot afford {airport.code} ({price})")
            return None

        comp.cash -= price
        airport.claim_for_competitor(comp.name)
        comp.airports.append(airport.code)
        state.add_news(f"{comp.name} acquired slots at {airport.name}")
        logger.info(f"{comp.name} expanded to {airport.code}")
        return airport.code
