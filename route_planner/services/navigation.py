from typing import Optional
from urllib.parse import quote

from route_planner.schemas.route import NavigationLinks, OptimizedRoute, Stop

GOOGLE_MAPS_DIR_URL = "https://www.google.com/maps/dir/?api=1"
APPLE_MAPS_URL = "http://maps.apple.com/"


def _location(stop: Stop) -> str:
    return stop.address or stop.display_name


def _encode(value: str) -> str:
    return quote(value, safe="")


def google_maps_url(route: OptimizedRoute) -> Optional[str]:
    """Deep link that opens the whole optimized route, waypoints in visiting order."""
    if not route.stops:
        return None
    origin = _location(route.stops[0])
    destination = _location(route.stops[-1])
    waypoints = "|".join(_location(s) for s in route.stops[1:-1] if _location(s))

    url = f"{GOOGLE_MAPS_DIR_URL}&origin={_encode(origin)}&destination={_encode(destination)}"
    if waypoints:
        url += f"&waypoints={_encode(waypoints)}"
    return url + "&travelmode=driving"


def apple_maps_url(route: OptimizedRoute) -> Optional[str]:
    # Apple Maps has no multi-stop URL scheme; only start and end are handed off
    if not route.stops:
        return None
    origin = _location(route.stops[0])
    destination = _location(route.stops[-1])
    return f"{APPLE_MAPS_URL}?daddr={_encode(destination)}&saddr={_encode(origin)}&dirflg=d"


def navigation_links(route: OptimizedRoute) -> NavigationLinks:
    return NavigationLinks(google_maps=google_maps_url(route), apple_maps=apple_maps_url(route))
