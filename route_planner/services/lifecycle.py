from enum import Enum
from typing import Dict, FrozenSet, List


class RequestState(str, Enum):
    idle = "idle"
    building = "building"
    awaiting_provider = "awaiting_provider"
    reconciling = "reconciling"
    complete = "complete"
    failed = "failed"


class StateTransitionError(Exception):
    """Raised when an optimization run is moved to a state it cannot reach."""
    pass


_TRANSITIONS: Dict[RequestState, FrozenSet[RequestState]] = {
    RequestState.idle: frozenset({RequestState.building}),
    RequestState.building: frozenset({RequestState.awaiting_provider, RequestState.failed}),
    RequestState.awaiting_provider: frozenset({RequestState.reconciling, RequestState.failed}),
    RequestState.reconciling: frozenset({RequestState.complete, RequestState.failed}),
    RequestState.complete: frozenset(),
    RequestState.failed: frozenset(),
}


class OptimizationRun:
    """
    Lifecycle of a single optimization request. Terminal once complete or failed;
    a retry is a new run.
    """

    def __init__(self, request_id: str):
        self.request_id = request_id
        self.state = RequestState.idle
        self.history: List[RequestState] = [RequestState.idle]

    @property
    def finished(self) -> bool:
        return self.state in (RequestState.complete, RequestState.failed)

    def advance(self, target: RequestState) -> RequestState:
        if target not in _TRANSITIONS[self.state]:
            raise StateTransitionError(f"Run {self.request_id} cannot move from {self.state.value} to {target.value}")
        self.state = target
        self.history.append(target)
        return target
