"""Tests for competitor AI module."""

import pytest
from airline_sim.competitor_ai import CompetitorAI
from airline_sim.models.competitor import Competitor


@pytest.fixture
def rival():
    return Competitor(
        name="Global Airways",
        cash=60_000_000,
        color="#ff0000",
        reputation=75,
        airports=["LAX", "ORD"],
        aggressive=True,
        strategy="expansion",
    )


def test_profit_formula(state, scripted_rng, rival):
    state.competitors = [rival]
    state.economic_condition = 1.4
    ai = CompetitorAI(scripted_rng(uniforms=[0.1], randoms=[0.9]))

    profit = ai.simulate_competitor(state, rival)

    assert profit == pytest.approx(2 * 2_000_000 * 1.0 * 1.1 * 1.4)
    assert rival.cash == pytest.approx(60_000_000 + profit)
    assert rival.reputation == 76


def test_loss_lowers_reputation_to_floor(state, scripted_rng, rival):
    rival.airports = []
    rival.reputation = 21
    ai = CompetitorAI(scripted_rng())

    ai.simulate_competitor(state, rival)
    assert rival.reputation == 20

    ai.simulate_competitor(state, rival)
    assert rival.reputation == 20


def test_expansion_claims_random_unowned_airport(state, scripted_rng, rival):
    state.competitors = [rival]
    available = state.available_airports()
    ai = CompetitorAI(scripted_rng(randoms=[0.1], choices=[3]))

    ai.simulate_competitor(state, rival)

    target = available[3]
    assert target.competitor_owned == "Global Airways"
    assert target.code in rival.airports
    assert state.news_log[-1] == f"Global Airways acquired slots at {target.name}"


def test_expansion_deducts_price(state, scripted_rng, rival):
    ai = CompetitorAI(scripted_rng(uniforms=[0.0], randoms=[0.0], choices=[0]))
    target = state.available_airports()[0]

    profit = ai.simulate_competitor(state, rival)

    assert rival.cash == pytest.approx(60_000_000 + profit - target.market_size * 10)


def test_no_expansion_when_draw_fails(state, scripted_rng, rival):
    ai = CompetitorAI(scripted_rng(randoms=[0.15]))
    ai.simulate_competitor(state, rival)
    assert rival.airports == ["LAX", "ORD"]


def test_passive_rival_never_expands(state, scripted_rng, rival):
    rival.aggressive = False
    rng = scripted_rng(randoms=[0.0])
    CompetitorAI(rng).simulate_competitor(state, rival)

    assert rival.airports == ["LAX", "ORD"]
    assert list(rng.randoms) == [0.0]


def test_poor_rival_never_expands(state, scripted_rng, rival):
    rival.cash = 1_000_000
    CompetitorAI(scripted_rng(randoms=[0.0])).simulate_competitor(state, rival)
    assert rival.airports == ["LAX", "ORD"]


def test_unaffordable_airport_is_skipped(state, scripted_rng, rival):
    rival.airports = []
    rival.cash = 16_000_000
    state.economic_condition = 0.0
    expensive = state.available_airports()[0]
    expensive.market_size = 5_000_000

    CompetitorAI(scripted_rng(randoms=[0.0], choices=[0])).simulate_competitor(state, rival)

    assert expensive.competitor_owned is None
    assert rival.cash == 16_000_000
