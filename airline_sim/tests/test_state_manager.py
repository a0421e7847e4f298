"""Tests for state manager module."""

import pytest
from airline_sim.state_manager import StateManager


@pytest.fixture
def manager(state, aircraft_types):
    return StateManager(state, aircraft_types)


def test_buy_aircraft(manager):
    result = manager.buy_aircraft("Airbus A320")

    assert result.success
    assert manager.state.cash == 50_000_000 - 40_000_000
    aircraft = manager.state.find_aircraft(result.aircraft_id)
    assert aircraft.owned
    assert aircraft.name == "Phoenix 1"
    assert manager.state.news_log[-1] == "Purchased Airbus A320 for $40,000,000"


def test_buy_aircraft_insufficient_funds_leaves_state_untouched(manager):
    before = manager.state.model_copy(deep=True)

    result = manager.buy_aircraft("Concorde")

    assert not result.success
    assert result.error == "Insufficient funds to purchase aircraft!"
    assert manager.state == before


def test_buy_unknown_type(manager):
    result = manager.buy_aircraft("Spruce Goose")
    assert not result.success
    assert manager.state.fleet == []


def test_lease_aircraft_costs_nothing_upfront(manager):
    result = manager.lease_aircraft("Concorde")

    assert result.success
    assert manager.state.cash == 50_000_000
    assert not manager.state.find_aircraft(result.aircraft_id).owned


def test_sell_aircraft_credits_resale(manager):
    aircraft_id = manager.buy_aircraft("Boeing 737-300").aircraft_id
    cash_after_purchase = manager.state.cash

    result = manager.sell_aircraft(aircraft_id)

    assert result.success
    assert result.amount == 21_000_000
    assert manager.state.cash == cash_after_purchase + 21_000_000
    assert manager.state.find_aircraft(aircraft_id) is None


def test_return_leased_aircraft(manager):
    aircraft_id = manager.lease_aircraft("Airbus A320").aircraft_id

    assert not manager.sell_aircraft(aircraft_id).success
    assert manager.return_leased_aircraft(aircraft_id).success
    assert manager.state.fleet == []


def test_buy_airport_slot(manager):
    result = manager.buy_airport_slot("LAX")

    assert result.success
    assert result.amount == 9_000_000
    assert manager.state.cash == 41_000_000
    assert manager.state.find_airport("LAX").owned


def test_buy_airport_slot_twice_fails(manager):
    manager.buy_airport_slot("LAX")
    cash = manager.state.cash

    result = manager.buy_airport_slot("LAX")

    assert not result.success
    assert manager.state.cash == cash


def test_create_route_links_both_sides(manager):
    aircraft_id = manager.buy_aircraft("Boeing 737-300").aircraft_id
    manager.buy_airport_slot("LAX")

    result = manager.create_route("JFK", "LAX", aircraft_id, 7)

    assert result.success
    route = manager.state.find_route(result.route_id)
    aircraft = manager.state.find_aircraft(aircraft_id)
    assert route.aircraft_id == aircraft_id
    assert aircraft.route_id == route.id
    assert route.distance == 824
    assert manager.state.news_log[-1] == "New route opened: JFK → LAX"


def test_create_route_failure_leaves_state_untouched(manager):
    aircraft_id = manager.buy_aircraft("Boeing 737-300").aircraft_id
    before = manager.state.model_copy(deep=True)

    result = manager.create_route("JFK", "LAX", aircraft_id, 7)

    assert result.error == "You must own slots at the destination airport!"
    assert manager.state == before


def test_aircraft_cannot_fly_two_routes(manager):
    aircraft_id = manager.buy_aircraft("Boeing 737-300").aircraft_id
    manager.buy_airport_slot("LAX")
    manager.create_route("JFK", "LAX", aircraft_id, 7)

    result = manager.create_route("LAX", "JFK", aircraft_id, 7)

    assert result.error == "Aircraft not available!"
    assert len(manager.state.routes) == 1


def test_close_route_frees_aircraft(manager):
    aircraft_id = manager.buy_aircraft("Boeing 737-300").aircraft_id
    manager.buy_airport_slot("LAX")
    route_id = manager.create_route("JFK", "LAX", aircraft_id, 7).route_id

    assert not manager.sell_aircraft(aircraft_id).success
    assert manager.close_route(route_id).success
    assert manager.state.routes == []
    assert manager.state.find_aircraft(aircraft_id).route_id is None
    assert not manager.close_route(route_id).success


def test_take_loan(manager):
    result = manager.take_loan(10_000_000, 8)

    assert result.success
    assert manager.state.cash == 60_000_000
    loan = manager.state.loans[0]
    assert loan.remaining == 10_000_000
    assert loan.principal_payment == pytest.approx(1_250_000)
    assert result.amount == pytest.approx(loan.quarterly_payment)
    assert manager.state.news_log[-1] == "Loan approved: $10,000,000 over 8 quarters"


def test_take_loan_rejects_bad_terms(manager):
    assert not manager.take_loan(0, 8).success
    assert not manager.take_loan(1_000_000, 0).success
    assert manager.state.loans == []
    assert manager.state.cash == 50_000_000


def test_emergency_loan_resets_losses(manager):
    manager.state.consecutive_losses = 3

    result = manager.take_emergency_loan(10_000_000)

    assert result.success
    assert manager.state.consecutive_losses == 0
    loan = manager.state.loans[0]
    assert loan.interest_rate == 0.05
    assert loan.quarters_remaining == 12


def test_emergency_loan_below_minimum(manager):
    manager.state.consecutive_losses = 3
    assert not manager.take_emergency_loan(5_000_000).success
    assert manager.state.consecutive_losses == 3


def test_set_advertising_budget(manager):
    assert manager.set_advertising_budget(3_000_000).success
    assert manager.state.advertising_budget == 3_000_000
    assert manager.set_advertising_budget(0).success
    assert manager.state.advertising_budget == 0


def test_failed_command_adds_no_news(manager):
    news = list(manager.state.news_log)
    manager.buy_airport_slot("JFK")
    manager.sell_aircraft(123)
    assert manager.state.news_log == news


def test_aircraft_ids_are_never_reused(manager):
    first = manager.lease_aircraft("Airbus A320").aircraft_id
    manager.return_leased_aircraft(first)
    second = manager.lease_aircraft("Airbus A320").aircraft_id
    assert second != first
