"""Execution client for the command endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from travelchat.backend.errors import MalformedResponseError
from travelchat.backend.http import post_json

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

EXECUTE_PATH = "/execute"


@dataclass
class ExecutionResult:
    """Opaque payload returned by the command service."""

    result: Any


class ExecutionClient:
    """Runs the backend command matched to a resolved intent.

    Unresolved intents are sent as ``null``; the command service decides
    what to do with them.
    """

    async def execute(self, intent: str | None, parameters: Mapping[str, Any]) -> ExecutionResult:
        body = await post_json(EXECUTE_PATH, {"intent": intent, "parameters": dict(parameters)})
        if not isinstance(body, dict) or "result" not in body:
            msg = f"{EXECUTE_PATH} response has no 'result' field"
            raise MalformedResponseError(msg)
        logger.info("Executed intent=%s", intent)
        return ExecutionResult(result=body["result"])
