"""
Maps the provider's optimized waypoint order back onto what the user typed.

The directions provider geocodes every input and answers with canonical
addresses plus an index permutation; the labels the user actually chose
("Starbucks, 789 Elm St") are lost. Reconciliation restores them and lines each
stop up with the leg that arrives at it.
"""
from typing import List, Optional

from pydantic import BaseModel
from structlog import get_logger

from route_planner.schemas.directions import ProviderLeg, ProviderResponse
from route_planner.schemas.route import Stop, StopRole
from route_planner.services.formatting import format_leg_distance, format_leg_duration

logger = get_logger()


class Reconciliation(BaseModel):
    stops: List[Stop]
    waypoint_order: List[int]
    degraded: int = 0


def extract_business_name(address: str) -> str:
    """
    "Starbucks, 789 Elm St, Houston" -> "Starbucks"; "789 Elm St, Houston" -> "".
    Only a first comma-separated segment that does not start with a digit counts.
    """
    if "," not in address:
        return ""
    first = address.split(",", 1)[0].strip()
    if not first or first[0].isdigit():
        return ""
    return first


def address_display_name(address: str) -> str:
    return extract_business_name(address) or address


def resolve_original_index(position: int, waypoint_order: List[int], stop_count: int) -> Optional[int]:
    """Original stop index visited at ``position``, or None when the order can't tell."""
    if position >= len(waypoint_order):
        return None
    index = waypoint_order[position]
    if 0 <= index < stop_count:
        return index
    return None


def _waypoint_from_leg(leg: ProviderLeg, label: str, original: str) -> Stop:
    return Stop(
        address=leg.end_address,
        display_name=label,
        original_input=original,
        role=StopRole.waypoint,
        distance_from_previous=format_leg_distance(leg.distance_meters),
        duration_from_previous=format_leg_duration(leg.duration_seconds),
    )


def reconcile_stops(start: str, end: str, stops: List[str], response: ProviderResponse) -> Reconciliation:
    """
    Build the ordered stop list: start, every stop in optimized order, end.

    ``stops`` must be the list the provider was given, since ``waypoint_order``
    indexes into it. Malformed orders degrade to address-derived labels instead of
    failing; the result always holds ``len(stops) + 2`` entries.
    """
    legs = response.legs
    order = list(response.waypoint_order) if response.waypoint_order is not None else list(range(len(stops)))
    degraded = 0

    result = [
        Stop(
            address=legs[0].start_address if legs else "",
            display_name=start,
            original_input=start,
            role=StopRole.start,
        )
    ]

    claimed = set()
    # every leg but the last arrives at an intermediate stop
    intermediate = legs[:-1]
    for position, leg in enumerate(intermediate[: len(stops)]):
        index = resolve_original_index(position, order, len(stops))
        if index is None:
            degraded += 1
            logger.warning(
                "Waypoint order does not cover leg; using provider address",
                position=position,
                order_length=len(order),
                stop_count=len(stops),
            )
            result.append(_waypoint_from_leg(leg, address_display_name(leg.end_address), ""))
            continue
        claimed.add(index)
        result.append(_waypoint_from_leg(leg, stops[index], stops[index]))

    if len(intermediate) > len(stops):
        logger.warning("Provider returned surplus legs", leg_count=len(legs), stop_count=len(stops))

    missing = len(stops) - min(len(intermediate), len(stops))
    if missing:
        degraded += missing
        logger.warning("Provider returned too few legs", leg_count=len(legs), stop_count=len(stops))
        unvisited = [i for i in range(len(stops)) if i not in claimed][:missing]
        for index in unvisited:
            result.append(Stop(display_name=stops[index], original_input=stops[index], role=StopRole.waypoint))

    result.append(
        Stop(
            address=legs[-1].end_address if legs else "",
            display_name=end,
            original_input=end,
            role=StopRole.end,
        )
    )
    return Reconciliation(stops=result, waypoint_order=order, degraded=degraded)
