from typing import Optional
from uuid import uuid4

import structlog
from structlog import get_logger

from route_planner.core.errors import OptimizationError
from route_planner.schemas.route import OptimizedRoute, RouteRequest
from route_planner.services.assembler import assemble_route
from route_planner.services.directions import DirectionsGateway
from route_planner.services.lifecycle import OptimizationRun, RequestState
from route_planner.services.reconciler import reconcile_stops
from route_planner.services.request_builder import build_directions_query

logger = get_logger()


def _advance(run: OptimizationRun, state: RequestState) -> None:
    run.advance(state)
    logger.debug("Optimization state changed", state=state.value)


async def optimize_route(
    request: RouteRequest,
    gateway: Optional[DirectionsGateway] = None,
    run: Optional[OptimizationRun] = None,
) -> OptimizedRoute:
    """
    Build the provider query, make the single directions call, put the user's
    labels back on the optimized stops and package the totals.

    Raises InvalidRequest, TransportError, ParseError or ProviderError; nothing
    partial is returned. Cancelling the awaiting task abandons the call.
    """
    gateway = gateway or DirectionsGateway()
    run = run or OptimizationRun(uuid4().hex)

    with structlog.contextvars.bound_contextvars(request_id=run.request_id):
        logger.info(
            "Route optimization started",
            stop_count=len(request.stops),
            round_trip=request.round_trip,
            consider_traffic=request.consider_traffic,
        )
        try:
            _advance(run, RequestState.building)
            query = build_directions_query(request)

            _advance(run, RequestState.awaiting_provider)
            response = await gateway.fetch(query)

            _advance(run, RequestState.reconciling)
            reconciliation = reconcile_stops(request.start, query.destination, query.waypoints, response)
            route = assemble_route(reconciliation, response, request.consider_traffic)
        except OptimizationError as e:
            _advance(run, RequestState.failed)
            logger.warning("Route optimization failed", error=str(e), error_type=type(e).__name__)
            raise

        _advance(run, RequestState.complete)
        logger.info(
            "Route optimization complete",
            total_distance=route.total_distance,
            total_duration=route.total_duration,
            waypoint_order=route.raw_waypoint_order,
            degraded=reconciliation.degraded,
        )
        return route
