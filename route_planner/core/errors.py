from typing import Optional


class OptimizationError(Exception):
    """Base class for every hard failure of a route optimization run."""


class InvalidRequest(OptimizationError):
    """Start/end missing or no usable stops; raised before any network call."""


class TransportError(OptimizationError):
    """The directions provider could not be reached (connect, DNS, timeout)."""


class ParseError(OptimizationError):
    """The provider answered but the body is not a directions payload."""


class ProviderError(OptimizationError):
    def __init__(self, status: str, detail: Optional[str] = None):
        self.status = status
        self.detail = detail
        message = f"Directions provider returned status {status}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
