import pytest

from route_planner.schemas.directions import ProviderLeg, ProviderResponse
from route_planner.schemas.route import StopRole
from route_planner.services.reconciler import (
    address_display_name,
    extract_business_name,
    reconcile_stops,
    resolve_original_index,
)


def _leg(end_address, meters=1000, seconds=120, start_address=""):
    return ProviderLeg(
        distance_meters=meters,
        duration_seconds=seconds,
        start_address=start_address,
        end_address=end_address,
    )


def _response(legs, order=None):
    return ProviderResponse(status="OK", legs=legs, waypoint_order=order)


@pytest.mark.parametrize(
    "address,expected",
    [
        ("Starbucks, 789 Elm St, Houston, TX", "Starbucks"),
        ("  Joe's Diner , Main St", "Joe's Diner"),
        ("789 Elm St, Houston, TX", ""),
        ("Starbucks", ""),
        (" , Houston", ""),
        ("", ""),
    ],
)
def test_extract_business_name(address, expected):
    assert extract_business_name(address) == expected


def test_address_display_name_falls_back_to_full_address():
    assert address_display_name("789 Elm St, Houston, TX") == "789 Elm St, Houston, TX"
    assert address_display_name("Blue Bottle, 1 A St") == "Blue Bottle"


def test_resolve_original_index():
    assert resolve_original_index(0, [2, 0, 1], 3) == 2
    assert resolve_original_index(3, [2, 0, 1], 3) is None
    assert resolve_original_index(0, [7], 3) is None
    assert resolve_original_index(0, [-1], 3) is None


def test_original_labels_follow_optimized_order():
    stops = ["Costco, 1 A St", "Home Depot, 2 B St", "Kroger, 3 C St"]
    legs = [
        _leg("3 C St, Houston, TX, USA", start_address="10 Start Rd"),
        _leg("1 A St, Houston, TX, USA"),
        _leg("2 B St, Houston, TX, USA"),
        _leg("99 End Rd, Houston, TX, USA"),
    ]
    result = reconcile_stops("My House", "Office", stops, _response(legs, [2, 0, 1]))

    names = [s.display_name for s in result.stops]
    assert names == ["My House", "Kroger, 3 C St", "Costco, 1 A St", "Home Depot, 2 B St", "Office"]
    assert [s.address for s in result.stops[1:4]] == [
        "3 C St, Houston, TX, USA",
        "1 A St, Houston, TX, USA",
        "2 B St, Houston, TX, USA",
    ]
    assert result.stops[0].address == "10 Start Rd"
    assert result.stops[-1].address == "99 End Rd, Houston, TX, USA"
    assert result.waypoint_order == [2, 0, 1]
    assert result.degraded == 0


def test_roles_and_endpoint_metrics():
    legs = [_leg("A addr", meters=500, seconds=300), _leg("End addr", meters=2000, seconds=600)]
    result = reconcile_stops("Start", "End", ["A"], _response(legs, [0]))

    assert [s.role for s in result.stops] == [StopRole.start, StopRole.waypoint, StopRole.end]
    start, waypoint, end = result.stops
    assert start.distance_from_previous is None and start.duration_from_previous is None
    assert end.distance_from_previous is None and end.duration_from_previous is None
    assert waypoint.distance_from_previous == "0.3 mi"
    assert waypoint.duration_from_previous == "5 min"


def test_missing_order_is_identity():
    legs = [_leg("a"), _leg("b"), _leg("end")]
    result = reconcile_stops("S", "E", ["First", "Second"], _response(legs, None))
    assert [s.display_name for s in result.stops] == ["S", "First", "Second", "E"]
    assert result.waypoint_order == [0, 1]


def test_short_order_degrades_to_address_labels():
    stops = ["Alpha", "Bravo", "Charlie"]
    legs = [
        _leg("300 C St, Houston, TX"),
        _leg("Blue Bottle, 100 A St, Houston, TX"),
        _leg("200 B St, Houston, TX"),
        _leg("End"),
    ]
    result = reconcile_stops("S", "E", stops, _response(legs, [2]))

    assert len(result.stops) == len(stops) + 2
    assert result.stops[1].display_name == "Charlie"
    assert result.stops[2].display_name == "Blue Bottle"
    assert result.stops[2].original_input == ""
    assert result.stops[3].display_name == "200 B St, Houston, TX"
    assert result.degraded == 2


def test_out_of_range_index_uses_leg_address():
    legs = [_leg("Gas Station, 5 Fuel Rd"), _leg("7 Lane Rd, Houston"), _leg("End")]
    result = reconcile_stops("S", "E", ["One", "Two"], _response(legs, [0, 5]))
    assert result.stops[1].display_name == "One"
    assert result.stops[2].display_name == "7 Lane Rd, Houston"


def test_too_few_legs_still_lists_every_stop():
    legs = [_leg("b addr", meters=800), _leg("end addr")]
    result = reconcile_stops("S", "E", ["a", "b", "c"], _response(legs, [1, 0, 2]))

    assert len(result.stops) == 5
    assert [s.display_name for s in result.stops] == ["S", "b", "a", "c", "E"]
    assert result.stops[1].distance_from_previous == "0.5 mi"
    for unvisited in result.stops[2:4]:
        assert unvisited.address == ""
        assert unvisited.distance_from_previous is None
        assert unvisited.role == StopRole.waypoint


def test_surplus_legs_do_not_add_stops():
    legs = [_leg("a addr"), _leg("extra addr"), _leg("end addr")]
    result = reconcile_stops("S", "E", ["a"], _response(legs, [0]))
    assert [s.display_name for s in result.stops] == ["S", "a", "E"]
    assert result.stops[-1].address == "end addr"


def test_single_leg_without_stops():
    result = reconcile_stops("S", "E", [], _response([_leg("end addr", start_address="start addr")]))
    assert [s.role for s in result.stops] == [StopRole.start, StopRole.end]
    assert result.stops[0].address == "start addr"
    assert result.waypoint_order == []
