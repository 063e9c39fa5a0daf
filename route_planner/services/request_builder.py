from typing import List

from structlog import get_logger

from route_planner.config import settings
from route_planner.core.errors import InvalidRequest
from route_planner.schemas.directions import DirectionsQuery
from route_planner.schemas.route import RouteRequest

logger = get_logger()


def usable_stops(stops: List[str]) -> List[str]:
    """Drop empty and whitespace-only entries, keeping the user's order and text."""
    return [s for s in stops if s and s.strip()]


def effective_destination(request: RouteRequest) -> str:
    return request.start if request.round_trip else request.end


def build_directions_query(request: RouteRequest, traffic_model: str = settings.TRAFFIC_MODEL) -> DirectionsQuery:
    """
    Turn a user request into the provider query. Waypoint optimization is always
    requested; traffic mode adds a depart-now reference and the traffic model.
    """
    stops = usable_stops(request.stops)
    dropped = len(request.stops) - len(stops)
    if dropped:
        logger.debug("Dropped empty stops", dropped=dropped)

    destination = effective_destination(request)
    if not request.start.strip():
        raise InvalidRequest("Start location is required")
    if not destination.strip():
        raise InvalidRequest("End location is required")
    if not stops:
        raise InvalidRequest("At least one stop is required")

    return DirectionsQuery(
        origin=request.start,
        destination=destination,
        waypoints=stops,
        optimize=True,
        depart_now=request.consider_traffic,
        traffic_model=traffic_model if request.consider_traffic else None,
    )
