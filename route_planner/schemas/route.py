from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class RouteRequest(BaseModel):
    start: str = Field(..., description="Free-text start location (address or business name).")
    end: str = Field("", description="Free-text destination. Ignored when round_trip is set.")
    stops: List[str] = Field(default_factory=list, description="Intermediate stops in the order the user entered them.")
    round_trip: bool = Field(False, description="Return to the start location at the end of the route.")
    consider_traffic: bool = Field(False, description="Use traffic-adjusted durations departing now.")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "start": "Walmart, 123 Main St, Houston, TX",
                "end": "Target, 456 Oak Ave, Houston, TX",
                "stops": ["Starbucks, 789 Elm St, Houston, TX"],
                "round_trip": False,
                "consider_traffic": True,
            }
        }


class StopRole(str, Enum):
    start = "start"
    waypoint = "waypoint"
    end = "end"


class Stop(BaseModel):
    address: str = Field("", description="Canonical address returned by the directions provider.")
    display_name: str
    original_input: str = Field("", description="Text the user typed for this stop, empty when address-derived.")
    role: StopRole
    distance_from_previous: Optional[str] = None
    duration_from_previous: Optional[str] = None


class OptimizedRoute(BaseModel):
    total_distance: str
    total_duration: str
    total_distance_meters: int = 0
    total_duration_seconds: int = 0
    stops: List[Stop]
    path_geometry: Optional[str] = None
    raw_waypoint_order: List[int] = Field(default_factory=list)

    def waypoints(self) -> List[Stop]:
        return [s for s in self.stops if s.role == StopRole.waypoint]


class NavigationLinks(BaseModel):
    google_maps: Optional[str] = None
    apple_maps: Optional[str] = None


class OptimizeRouteResponse(BaseModel):
    route: OptimizedRoute
    path: Optional[List[Tuple[float, float]]] = None
    links: NavigationLinks
