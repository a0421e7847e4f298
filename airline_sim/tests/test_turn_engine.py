"""Tests for the quarterly turn pipeline."""

import pytest
from airline_sim.catalog import EVENT_TEMPLATES
from airline_sim.models.aircraft import Aircraft
from airline_sim.models.competitor import Competitor
from airline_sim.turn_engine import GameOverError, TurnEngine


def test_four_quarters_roll_the_year(state, quiet_rng):
    engine = TurnEngine(state, quiet_rng)

    results = [engine.advance_turn() for _ in range(4)]

    assert (state.year, state.quarter) == (1993, 1)
    assert [(r.year, r.quarter) for r in results] == [(1992, 2), (1992, 3), (1992, 4), (1993, 1)]
    assert "--- Year 1993 begins ---" in results[-1].news


def test_settlement_revenue_scenario(jfk_lax_state, quiet_rng):
    engine = TurnEngine(jfk_lax_state, quiet_rng)

    result = engine.advance_turn()

    assert result.revenue == pytest.approx(150 * 0.75 * 824 * 0.15 * 91)
    assert result.profit == pytest.approx(result.revenue - result.expenses)
    assert jfk_lax_state.cash == pytest.approx(50_000_000 + result.profit)


def test_aging_happens_before_settlement(state, quiet_rng, aircraft_types):
    state.fleet.append(
        Aircraft(id=1, aircraft_type=aircraft_types["Boeing 737-300"], name="Phoenix 1", age=39)
    )
    result = TurnEngine(state, quiet_rng).advance_turn()

    assert state.fleet[0].age == 40
    # one airport plus maintenance at age 40
    assert result.expenses == pytest.approx(500_000 + 400_000)


def test_loss_news_and_reputation(state, quiet_rng):
    result = TurnEngine(state, quiet_rng).advance_turn()

    assert result.profit == pytest.approx(-500_000)
    assert state.reputation == 73
    assert "Q1: Loss of $500,000" in result.news


def test_profit_raises_reputation(jfk_lax_state, quiet_rng):
    jfk_lax_state.routes[0].flights_per_week = 21
    result = TurnEngine(jfk_lax_state, quiet_rng).advance_turn()

    assert result.profit > 0
    assert jfk_lax_state.reputation == 76
    assert any(line.startswith("Q1: Profit of $") for line in result.news)


def test_advertising_adds_reputation_regardless_of_profit(state, quiet_rng):
    state.advertising_budget = 2_500_000
    TurnEngine(state, quiet_rng).advance_turn()
    # -2 for the loss, +2 from advertising
    assert state.reputation == 75


def test_reputation_capped(jfk_lax_state, quiet_rng):
    jfk_lax_state.reputation = 100
    jfk_lax_state.advertising_budget = 5_000_000
    TurnEngine(jfk_lax_state, quiet_rng).advance_turn()
    assert jfk_lax_state.reputation == 100


def test_bankruptcy_below_threshold(state, quiet_rng):
    state.cash = -9_500_001
    engine = TurnEngine(state, quiet_rng)

    result = engine.advance_turn()

    assert state.cash == pytest.approx(-10_000_001)
    assert result.bankrupt
    assert state.bankrupt
    with pytest.raises(GameOverError):
        engine.advance_turn()


def test_threshold_itself_is_not_bankruptcy(state, quiet_rng):
    state.cash = -9_500_000
    result = TurnEngine(state, quiet_rng).advance_turn()
    assert not result.bankrupt


def test_victory_in_2000(jfk_lax_state, quiet_rng):
    jfk_lax_state.year = 1999
    jfk_lax_state.quarter = 4
    engine = TurnEngine(jfk_lax_state, quiet_rng)

    result = engine.advance_turn()

    assert result.victory
    # cash in millions + 2 airports*100 + 1 aircraft*50 + reputation*10 + 1 route*75
    assert result.score == int(result.cash // 1_000_000) + 200 + 50 + result.reputation * 10 + 75
    # play may continue after the milestone
    assert engine.advance_turn().victory


def test_no_victory_before_2000(state, quiet_rng):
    state.year = 1999
    result = TurnEngine(state, quiet_rng).advance_turn()
    assert not result.victory
    assert result.score is None


def test_consecutive_losses_flag_emergency_loan(state, quiet_rng):
    engine = TurnEngine(state, quiet_rng)

    assert not engine.advance_turn().emergency_loan_required
    assert engine.advance_turn().emergency_loan_required
    assert state.consecutive_losses == 2


def test_low_cash_warning(state, quiet_rng):
    state.cash = 4_000_000
    result = TurnEngine(state, quiet_rng).advance_turn()
    assert result.low_cash_warning


def test_fuel_event_resets_on_expiry_turn(state, quiet_rng):
    engine = TurnEngine(state, quiet_rng)
    engine.events.trigger(state, EVENT_TEMPLATES[0])

    for _ in range(3):
        engine.advance_turn()
        assert state.fuel_price == 1.5

    result = engine.advance_turn()
    assert state.fuel_price == 1.0
    assert "Oil Crisis ended - fuel prices normalized" in result.news


def test_random_event_fires_during_turn(state, scripted_rng):
    engine = TurnEngine(state, scripted_rng(randoms=[0.05], choices=[4]))

    result = engine.advance_turn()

    assert "EVENT: Airport Strike - Operations disrupted at major hub" in result.news
    # loss of 500k, -2 reputation, then the strike
    assert state.reputation == 63
    assert state.cash == pytest.approx(50_000_000 - 500_000 - 2_000_000)


def test_competitors_simulated_after_player(state, scripted_rng):
    rival = Competitor(name="Sky Connect", cash=55_000_000, color="#00ffff", reputation=75, airports=["LAX"])
    state.competitors = [rival]

    TurnEngine(state, scripted_rng(uniforms=[0.0])).advance_turn()

    assert rival.cash == pytest.approx(57_000_000)
    assert rival.reputation == 76


def test_hard_difficulty_uses_higher_event_probability(state, scripted_rng):
    state.difficulty = "HARD"
    engine = TurnEngine(state, scripted_rng(randoms=[0.12], choices=[5]))

    engine.advance_turn()

    assert state.research_level == 1
