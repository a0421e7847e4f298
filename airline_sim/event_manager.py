"""Random market events: triggering and expiry."""

import logging
import random
from typing import List, Optional, Sequence

from .models.event import ActiveEvent, EventTemplate
from .models.game_state import GameState

logger = logging.getLogger(__name__)


class EventManager:
    """Owns the lifecycle of active events on a game state."""

    def __init__(
        self,
        rng: random.Random,
        templates: Sequence[EventTemplate],
        probability: float,
    ):
        """
        Initialize event manager.

        Args:
            rng: Shared random source
            templates: Event catalog to draw from
            probability: Chance of a new event per quarter
        """
        self.rng = rng
        self.templates = list(templates)
        self.probability = probability

    def process_events(self, state: GameState) -> List[ActiveEvent]:
        """
        Count down active events and revert the ones that expire.

        Args:
            state: Current game state

        Returns:
            Events that expired this quarter
        """
        expired = []
        still_active = []

        for active in state.events:
            if active.tick():
                expired.append(active)
                message = active.event.revert(state)
                if message:
                    state.add_news(message)
                logger.info(f"Event expired: {active.event.type}")
            else:
                still_active.append(active)

        state.events = still_active
        return expired

    def maybe_trigger(self, state: GameState) -> Optional[ActiveEvent]:
        """Roll for a random event this quarter."""
        if self.templates and self.rng.random() < self.probability:
            return self.trigger(state, self.rng.choice(self.templates))
        return None

    def trigger(self, state: GameState, template: EventTemplate) -> ActiveEvent:
        """
        Start an event: apply its effect once and add it to the active list.

        Args:
            state: Current game state
            template: Event to start

        Returns:
            The new active event
        """
        active = ActiveEvent.start(template)
        template.apply(state)
        state.events.append(active)
        state.add_news(template.headline)
        logger.info(f"Event triggered: {template.type}")
        return active
