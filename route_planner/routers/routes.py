from fastapi import APIRouter, Depends, HTTPException, status
from structlog import get_logger

from route_planner.core.errors import InvalidRequest, ParseError, ProviderError, TransportError
from route_planner.dependencies.directions import get_directions_gateway
from route_planner.schemas.route import NavigationLinks, OptimizedRoute, OptimizeRouteResponse, RouteRequest
from route_planner.services.directions import DirectionsGateway
from route_planner.services.navigation import navigation_links
from route_planner.services.optimizer import optimize_route
from route_planner.services.polyline import decode_polyline

logger = get_logger()
router = APIRouter(prefix="/api/v1/routes", tags=["routes"])


@router.post("/optimize", response_model=OptimizeRouteResponse)
async def optimize(req: RouteRequest, gateway: DirectionsGateway = Depends(get_directions_gateway)):
    try:
        route = await optimize_route(req, gateway=gateway)
    except InvalidRequest as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ProviderError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=f"Could not calculate route: {e.status}")
    except ParseError:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Could not calculate route: unreadable provider response")
    except TransportError:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Could not calculate route: directions provider unavailable")

    path = None
    if route.path_geometry:
        try:
            path = decode_polyline(route.path_geometry)
        except ValueError as e:
            # the route itself is still usable without geometry
            logger.warning("Overview path could not be decoded", error=str(e))

    return OptimizeRouteResponse(route=route, path=path, links=navigation_links(route))


@router.post("/links", response_model=NavigationLinks)
async def links(route: OptimizedRoute):
    return navigation_links(route)
