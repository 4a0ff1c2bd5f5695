"""Clients for the NLU parser and the command executor."""

from travelchat.backend.errors import BackendError, MalformedResponseError, TransportError
from travelchat.backend.executor import ExecutionClient, ExecutionResult
from travelchat.backend.nlu import IntentResolution, IntentResolutionClient

__all__ = [
    "BackendError",
    "ExecutionClient",
    "ExecutionResult",
    "IntentResolution",
    "IntentResolutionClient",
    "MalformedResponseError",
    "TransportError",
]
