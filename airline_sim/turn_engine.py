"""Turn engine: resolves one quarter of the simulation."""

import logging
import random
from typing import List, Optional, Sequence
from pydantic import BaseModel, Field

from .catalog import EVENT_TEMPLATES
from .competitor_ai import CompetitorAI
from .config import (
    ADVERTISING_REPUTATION_FACTOR,
    BANKRUPTCY_THRESHOLD,
    CONSECUTIVE_LOSSES_FOR_EMERGENCY,
    LOW_CASH_WARNING_THRESHOLD,
    REPUTATION_GAIN_ON_PROFIT,
    REPUTATION_LOSS_ON_LOSS,
    REPUTATION_MAX,
    REPUTATION_MIN,
    VICTORY_YEAR,
    get_difficulty_settings,
)
from .economics import (
    calculate_quarterly_expenses,
    calculate_quarterly_revenue,
    calculate_score,
)
from .event_manager import EventManager
from .models.event import EventTemplate
from .models.game_state import GameState
from .utils import format_money

logger = logging.getLogger(__name__)


class GameOverError(Exception):
    """Raised when a turn is requested for a game that already ended in bankruptcy."""


class TurnResult(BaseModel):
    """Outcome of one resolved quarter."""

    year: int
    quarter: int
    revenue: float
    expenses: float
    profit: float
    cash: float
    reputation: int
    bankrupt: bool = False
    victory: bool = False
    score: Optional[int] = None
    emergency_loan_required: bool = False
    low_cash_warning: bool = False
    news: List[str] = Field(default_factory=list)


class TurnEngine:
    """Runs the quarterly resolution pipeline against one game state."""

    def __init__(
        self,
        state: GameState,
        rng: random.Random,
        event_templates: Sequence[EventTemplate] = EVENT_TEMPLATES,
    ):
        """
        Initialize turn engine.

        Args:
            state: Game state to advance
            rng: Random source shared by events and competitors
            event_templates: Catalog of random events
        """
        settings = get_difficulty_settings(state.difficulty)
        self.state = state
        self.rng = rng
        self.events = EventManager(rng, event_templates, settings["event_probability"])
        self.competitors = CompetitorAI(rng, settings["competitor_aggression"])

    def advance_turn(self) -> TurnResult:
        """
        Resolve one quarter.

        Returns:
            TurnResult with the quarter's financials and outcome flags

        Raises:
            GameOverError: If the game already ended in bankruptcy
        """
        state = self.state
        if state.bankrupt:
            raise GameOverError(f"{state.airline_name} is bankrupt; the game is over")

        news_before = state.news_total
        closing_date = state.get_date_string()

        # 1. Aging
        for aircraft in state.fleet:
            aircraft.age += 1

        # 2. Settlement
        revenue = calculate_quarterly_revenue(state)
        expenses = calculate_quarterly_expenses(state)
        profit = revenue - expenses
        state.cash += profit
        state.last_quarter_profit = profit
        state.consecutive_losses = state.consecutive_losses + 1 if profit < 0 else 0

        # 3. Reputation drift
        self._update_reputation(profit)

        # 4. Calendar
        last_quarter = state.quarter
        if state.advance_quarter():
            state.add_news(f"--- Year {state.year} begins ---")

        # 5. Financial news
        if profit > 0:
            state.add_news(f"Q{last_quarter}: Profit of ${format_money(profit)}")
        else:
            state.add_news(f"Q{last_quarter}: Loss of ${format_money(abs(profit))}")

        # 6-7. Events
        self.events.process_events(state)
        self.events.maybe_trigger(state)

        # 8. Loans
        self._process_loans()

        # 9. Competitors
        self.competitors.simulate(state)

        # 10. Terminal checks
        result = TurnResult(
            year=state.year,
            quarter=state.quarter,
            revenue=revenue,
            expenses=expenses,
            profit=profit,
            cash=state.cash,
            reputation=state.reputation,
            news=self._news_since(news_before),
        )

        if state.cash < BANKRUPTCY_THRESHOLD:
            state.bankrupt = True
            result.bankrupt = True
            logger.warning(f"{state.airline_name} went bankrupt with cash {state.cash:.0f}")
            return result

        result.emergency_loan_required = (
            state.consecutive_losses >= CONSECUTIVE_LOSSES_FOR_EMERGENCY
        )
        result.low_cash_warning = state.cash < LOW_CASH_WARNING_THRESHOLD and profit < 0
        if state.year >= VICTORY_YEAR:
            result.victory = True
            result.score = calculate_score(state)

        logger.info(
            f"Closed {closing_date}: revenue {revenue:.0f}, expenses {expenses:.0f}, "
            f"profit {profit:.0f}, cash {state.cash:.0f}"
        )
        return result

    def _update_reputation(self, profit: float) -> None:
        state = self.state
        if profit > 0 and state.routes:
            state.reputation = min(REPUTATION_MAX, state.reputation + REPUTATION_GAIN_ON_PROFIT)
        elif profit < 0:
            state.reputation = max(REPUTATION_MIN, state.reputation - REPUTATION_LOSS_ON_LOSS)

        if state.advertising_budget > 0:
            gain = int(state.advertising_budget // ADVERTISING_REPUTATION_FACTOR)
            state.reputation = min(REPUTATION_MAX, state.reputation + gain)

    def _process_loans(self) -> None:
        """Apply scheduled principal reduction and retire finished loans."""
        active_loans = []
        for loan in self.state.loans:
            if loan.amortize():
                self.state.add_news(
                    f"Loan paid off! Principal was ${format_money(loan.original_amount)}"
                )
            else:
                active_loans.append(loan)
        self.state.loans = active_loans

    def _news_since(self, total_before: int) -> List[str]:
        added = min(self.state.news_total - total_before, len(self.state.news_log))
        return self.state.news_log[-added:] if added > 0 else []
