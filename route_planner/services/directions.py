from typing import Optional

import httpx
from pydantic import ValidationError
from structlog import get_logger

from route_planner.config import settings
from route_planner.core.errors import ParseError, ProviderError, TransportError
from route_planner.schemas.directions import DirectionsPayload, DirectionsQuery, ProviderResponse

logger = get_logger()


class DirectionsGateway:
    """
    One Directions API call per optimization request. No retries and no caching:
    every failure surfaces immediately as an OptimizationError subclass.

    Pass a shared ``httpx.AsyncClient`` to reuse connections; otherwise a client is
    opened for the duration of each call.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.GOOGLE_MAPS_API_KEY
        self.base_url = base_url or settings.DIRECTIONS_API_BASE
        self.timeout = timeout if timeout is not None else settings.PROVIDER_TIMEOUT_SECONDS
        self._client = client

    async def fetch(self, query: DirectionsQuery) -> ProviderResponse:
        params = query.to_params(self.api_key)
        logger.info(
            "Directions request sent",
            origin=query.origin,
            destination=query.destination,
            waypoint_count=len(query.waypoints),
            traffic=query.depart_now,
        )
        if self._client is not None:
            response = await self._get(self._client, params)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await self._get(client, params)
        return self._parse(response)

    async def _get(self, client: httpx.AsyncClient, params: dict) -> httpx.Response:
        try:
            response = await client.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            logger.error("Directions HTTP error", status=e.response.status_code, text=e.response.text[:200])
            raise ProviderError(f"HTTP_{e.response.status_code}") from e
        except httpx.TimeoutException as e:
            logger.error("Directions request timed out", timeout=self.timeout)
            raise TransportError(f"Directions request timed out after {self.timeout}s") from e
        except httpx.RequestError as e:
            logger.error("Directions request failed", error=str(e), error_type=type(e).__name__)
            raise TransportError(f"Directions request failed: {e}") from e

    def _parse(self, response: httpx.Response) -> ProviderResponse:
        try:
            payload = DirectionsPayload.model_validate(response.json())
        except ValueError as e:
            # json.JSONDecodeError and pydantic's ValidationError are both ValueErrors
            kind = "validation" if isinstance(e, ValidationError) else "json"
            logger.error("Directions response unreadable", kind=kind, error=str(e)[:500])
            raise ParseError(f"Could not decode directions response: {e}") from e

        if payload.status != "OK":
            logger.warning("Directions provider error", status=payload.status, message=payload.error_message)
            raise ProviderError(payload.status, payload.error_message)
        if not payload.routes:
            logger.warning("Directions provider returned no routes", status=payload.status)
            raise ProviderError(payload.status, "no routes returned")

        result = ProviderResponse.from_route(payload.status, payload.routes[0])
        logger.info(
            "Directions response received",
            leg_count=len(result.legs),
            waypoint_order=result.waypoint_order,
        )
        return result
