"""Tests for event manager and event models."""

import pytest
from airline_sim.catalog import EVENT_TEMPLATES
from airline_sim.event_manager import EventManager
from airline_sim.models.event import (
    ActiveEvent,
    DisruptionEvent,
    EventTemplate,
    FuelPriceEvent,
    MarketShareEvent,
    ResearchEvent,
)


@pytest.fixture
def oil_crisis():
    return EVENT_TEMPLATES[0]


@pytest.fixture
def oil_glut():
    return EVENT_TEMPLATES[1]


def test_trigger_applies_and_announces(state, quiet_rng, oil_crisis):
    manager = EventManager(quiet_rng, EVENT_TEMPLATES, 0.1)

    active = manager.trigger(state, oil_crisis)

    assert state.fuel_price == 1.5
    assert active.quarters_remaining == 4
    assert state.events == [active]
    assert state.news_log[-1] == "EVENT: Oil Crisis - Fuel prices surge by 50%"


def test_fuel_resets_when_countdown_hits_zero(state, quiet_rng, oil_crisis):
    manager = EventManager(quiet_rng, EVENT_TEMPLATES, 0.1)
    manager.trigger(state, oil_crisis)

    for _ in range(3):
        assert manager.process_events(state) == []
        assert state.fuel_price == 1.5

    expired = manager.process_events(state)

    assert len(expired) == 1
    assert state.fuel_price == 1.0
    assert state.events == []
    assert state.news_log[-1] == "Oil Crisis ended - fuel prices normalized"


def test_overlapping_fuel_events_reset_unconditionally(state, quiet_rng, oil_crisis, oil_glut):
    """The first expiry clears the multiplier even though another event runs on."""
    manager = EventManager(quiet_rng, EVENT_TEMPLATES, 0.1)
    manager.trigger(state, oil_crisis)
    manager.process_events(state)
    manager.trigger(state, oil_glut)
    assert state.fuel_price == 0.7

    for _ in range(3):
        manager.process_events(state)

    assert state.fuel_price == 1.0
    assert len(state.events) == 1
    assert state.events[0].event.name == "Oil Glut"


def test_maybe_trigger_draws_probability_then_template(state, scripted_rng):
    manager = EventManager(scripted_rng(randoms=[0.05], choices=[2]), EVENT_TEMPLATES, 0.1)

    active = manager.maybe_trigger(state)

    assert active.event.name == "Economic Boom"
    assert state.economic_condition == 1.4


def test_maybe_trigger_misses(state, scripted_rng):
    manager = EventManager(scripted_rng(randoms=[0.1]), EVENT_TEMPLATES, 0.1)
    assert manager.maybe_trigger(state) is None
    assert state.events == []


def test_disruption_is_one_shot_and_clamped(state):
    strike = DisruptionEvent(
        type="strike", name="Strike", description="", reputation_change=-90, cash_change=-2_000_000
    )
    strike.apply(state)

    assert state.reputation == 0
    assert state.cash == 48_000_000
    assert strike.revert(state) is None


def test_research_bonus_is_capped(state):
    state.research_level = 10
    ResearchEvent(type="tech", name="Tech", description="", research_bonus=1).apply(state)
    assert state.research_level == 10


def test_market_share_event_changes_nothing(state):
    before = state.model_copy(deep=True)
    MarketShareEvent(type="m", name="M", description="", market_share_bonus=0.1).apply(state)
    assert state == before


def test_active_event_round_trips_through_json():
    active = ActiveEvent.start(
        FuelPriceEvent(type="f", name="F", description="d", fuel_multiplier=1.2, duration=2)
    )
    restored = ActiveEvent.model_validate_json(active.model_dump_json())

    assert isinstance(restored.event, FuelPriceEvent)
    assert restored == active


def test_event_template_needs_a_concrete_kind():
    with pytest.raises(TypeError):
        EventTemplate(type="economy", name="Nothing", description="Nothing happens")
