"""Shared fixtures for the simulation tests."""

from collections import deque
from typing import Iterable, Sequence

import pytest

from airline_sim.data_loader import load_aircraft_types, load_airports
from airline_sim.models.aircraft import Aircraft
from airline_sim.models.game_state import GameState
from airline_sim.models.route import Route


class ScriptedRandom:
    """Random source that replays queued values.

    Each method pops from its own queue and falls back to a value that keeps
    the simulation quiet: no event, no expansion, neutral competitor variance.
    """

    def __init__(
        self,
        randoms: Iterable[float] = (),
        uniforms: Iterable[float] = (),
        choices: Iterable[int] = (),
        randints: Iterable[int] = (),
    ):
        self.randoms = deque(randoms)
        self.uniforms = deque(uniforms)
        self.choices = deque(choices)
        self.randints = deque(randints)

    def random(self) -> float:
        return self.randoms.popleft() if self.randoms else 0.99

    def uniform(self, low: float, high: float) -> float:
        return self.uniforms.popleft() if self.uniforms else 0.0

    def choice(self, seq: Sequence):
        index = self.choices.popleft() if self.choices else 0
        return seq[index]

    def randint(self, low: int, high: int) -> int:
        return self.randints.popleft() if self.randints else low


@pytest.fixture(scope="session")
def aircraft_types():
    """Bundled aircraft catalog."""
    return load_aircraft_types()


@pytest.fixture
def airports():
    """Fresh copy of the bundled airport catalog."""
    return load_airports()


@pytest.fixture
def quiet_rng():
    return ScriptedRandom()


@pytest.fixture
def state(airports):
    """Game state with the airport map, JFK owned, no fleet and no rivals."""
    return GameState(airports=list(airports.values()))


@pytest.fixture
def jfk_lax_state(state, aircraft_types):
    """State flying one owned A320 JFK to LAX, seven times a week."""
    state.find_airport("LAX").claim_for_player()
    state.fleet.append(
        Aircraft(
            id=state.allocate_aircraft_id(),
            aircraft_type=aircraft_types["Airbus A320"],
            name="Phoenix 1",
            route_id=1,
        )
    )
    state.routes.append(
        Route(
            id=state.allocate_route_id(),
            origin="JFK",
            destination="LAX",
            aircraft_id=1,
            flights_per_week=7,
            distance=824,
        )
    )
    return state


@pytest.fixture
def scripted_rng():
    """Factory for scripted random sources."""
    return ScriptedRandom
