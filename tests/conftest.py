import httpx
import pytest
import pytest_asyncio

from route_planner.dependencies.directions import get_directions_gateway
from route_planner.main import app
from route_planner.services.directions import DirectionsGateway

WALMART = "Walmart, 123 Main St, Houston, TX"
TARGET = "Target, 456 Oak Ave, Houston, TX"
STARBUCKS = "Starbucks, 789 Elm St, Houston, TX"

WALMART_ADDRESS = "123 Main St, Houston, TX 77002, USA"
TARGET_ADDRESS = "456 Oak Ave, Houston, TX 77004, USA"
STARBUCKS_ADDRESS = "789 Elm St, Houston, TX 77003, USA"

DIRECTIONS_URL = "https://directions.test/maps/api/directions/json"


def leg(meters, seconds, end_address, start_address="", traffic=None):
    data = {
        "distance": {"text": f"{meters} m", "value": meters},
        "duration": {"text": f"{seconds // 60} mins", "value": seconds},
        "start_address": start_address,
        "end_address": end_address,
    }
    if traffic is not None:
        data["duration_in_traffic"] = {"text": f"{traffic // 60} mins", "value": traffic}
    return data


def directions_payload(legs, waypoint_order=None, status="OK", points=None):
    route = {"legs": legs, "summary": "I-45 N"}
    if waypoint_order is not None:
        route["waypoint_order"] = waypoint_order
    if points is not None:
        route["overview_polyline"] = {"points": points}
    return {"status": status, "routes": [route], "geocoded_waypoints": []}


class FakeProvider:
    """Stands in for the Directions API behind an httpx.MockTransport."""

    def __init__(self):
        self.requests = []
        self.payload = None
        self.status_code = 200
        self.body = None
        self.error = None
        self.responder = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responder is not None:
            return self.responder(request)
        if self.error is not None:
            raise self.error
        if self.body is not None:
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def params(self) -> dict:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def scenario_a_payload():
    return directions_payload(
        [
            leg(500, 300, STARBUCKS_ADDRESS, start_address=WALMART_ADDRESS),
            leg(2000, 600, TARGET_ADDRESS, start_address=STARBUCKS_ADDRESS, traffic=900),
        ],
        waypoint_order=[0],
        points="_p~iF~ps|U_ulLnnqC_mqNvxq`@",
    )


@pytest_asyncio.fixture
async def gateway(provider):
    async with httpx.AsyncClient(transport=httpx.MockTransport(provider.handler)) as client:
        yield DirectionsGateway(api_key="test-key", base_url=DIRECTIONS_URL, timeout=5, client=client)


@pytest_asyncio.fixture
async def client(gateway):
    app.dependency_overrides[get_directions_gateway] = lambda: gateway
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides = {}
