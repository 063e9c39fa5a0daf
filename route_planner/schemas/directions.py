"""Wire shapes of the Google Directions API and the provider-neutral view of them."""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# Raw JSON payload. Only the fields the optimizer reads are declared; the
# provider sends many more (steps, bounds, geocoded_waypoints...) which are ignored.

class DirectionsValue(BaseModel):
    value: int
    text: Optional[str] = None


class DirectionsLeg(BaseModel):
    distance: DirectionsValue
    duration: DirectionsValue
    duration_in_traffic: Optional[DirectionsValue] = None
    start_address: str = ""
    end_address: str = ""


class DirectionsPolyline(BaseModel):
    points: str


class DirectionsRoute(BaseModel):
    legs: List[DirectionsLeg]
    waypoint_order: Optional[List[int]] = None
    overview_polyline: Optional[DirectionsPolyline] = None
    summary: Optional[str] = None


class DirectionsPayload(BaseModel):
    status: str
    routes: List[DirectionsRoute] = Field(default_factory=list)
    error_message: Optional[str] = None


# Provider-neutral shapes consumed by reconciliation.

class ProviderLeg(BaseModel):
    distance_meters: int
    duration_seconds: int
    duration_in_traffic_seconds: Optional[int] = None
    start_address: str = ""
    end_address: str = ""

    class Config:
        frozen = True

    def effective_duration(self, consider_traffic: bool) -> int:
        if consider_traffic and self.duration_in_traffic_seconds is not None:
            return self.duration_in_traffic_seconds
        return self.duration_seconds


class ProviderResponse(BaseModel):
    status: str
    legs: List[ProviderLeg]
    waypoint_order: Optional[List[int]] = None
    overview_path: Optional[str] = None

    class Config:
        frozen = True

    @classmethod
    def from_route(cls, status: str, route: DirectionsRoute) -> "ProviderResponse":
        legs = [
            ProviderLeg(
                distance_meters=leg.distance.value,
                duration_seconds=leg.duration.value,
                duration_in_traffic_seconds=leg.duration_in_traffic.value if leg.duration_in_traffic else None,
                start_address=leg.start_address,
                end_address=leg.end_address,
            )
            for leg in route.legs
        ]
        return cls(
            status=status,
            legs=legs,
            waypoint_order=route.waypoint_order,
            overview_path=route.overview_polyline.points if route.overview_polyline else None,
        )


class DirectionsQuery(BaseModel):
    """Everything the provider needs for one optimization call."""
    origin: str
    destination: str
    waypoints: List[str]
    optimize: bool = True
    depart_now: bool = False
    traffic_model: Optional[str] = None

    class Config:
        frozen = True

    def waypoints_param(self) -> str:
        parts = ["optimize:true"] if self.optimize else []
        return "|".join(parts + list(self.waypoints))

    def to_params(self, api_key: str) -> Dict[str, str]:
        params = {
            "origin": self.origin,
            "destination": self.destination,
            "waypoints": self.waypoints_param(),
            "key": api_key,
        }
        if self.depart_now:
            params["departure_time"] = "now"
        if self.traffic_model:
            params["traffic_model"] = self.traffic_model
        return params
