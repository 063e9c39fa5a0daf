from route_planner.config import settings
from route_planner.services.directions import DirectionsGateway

def get_directions_gateway() -> DirectionsGateway:
    return DirectionsGateway(
        api_key=settings.GOOGLE_MAPS_API_KEY,
        base_url=settings.DIRECTIONS_API_BASE,
        timeout=settings.PROVIDER_TIMEOUT_SECONDS,
    )
