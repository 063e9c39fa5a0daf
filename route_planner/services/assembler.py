from typing import List, Tuple

from route_planner.schemas.directions import ProviderLeg, ProviderResponse
from route_planner.schemas.route import OptimizedRoute
from route_planner.services.formatting import format_total_distance, format_total_duration
from route_planner.services.reconciler import Reconciliation


def sum_legs(legs: List[ProviderLeg], consider_traffic: bool) -> Tuple[int, int]:
    """Total meters and seconds; traffic durations replace plain ones leg by leg."""
    meters = sum(leg.distance_meters for leg in legs)
    seconds = sum(leg.effective_duration(consider_traffic) for leg in legs)
    return meters, seconds


def assemble_route(
    reconciliation: Reconciliation,
    response: ProviderResponse,
    consider_traffic: bool,
) -> OptimizedRoute:
    meters, seconds = sum_legs(response.legs, consider_traffic)
    return OptimizedRoute(
        total_distance=format_total_distance(meters),
        total_duration=format_total_duration(seconds),
        total_distance_meters=meters,
        total_duration_seconds=seconds,
        stops=reconciliation.stops,
        path_geometry=response.overview_path,
        raw_waypoint_order=reconciliation.waypoint_order,
    )
