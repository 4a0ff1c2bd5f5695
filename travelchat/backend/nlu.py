"""Intent resolution client for the NLU parse endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError

from travelchat.backend.errors import MalformedResponseError
from travelchat.backend.http import post_json

logger = logging.getLogger(__name__)

PARSE_PATH = "/nlu/parse"


class ParseResponse(BaseModel):
    """Wire shape of ``POST /nlu/parse``. Every field is optional."""

    intent: str | None = None
    confidence: float | None = None
    entities: dict[str, Any] | None = None
    matched_keywords: list[str] | None = None


@dataclass
class IntentResolution:
    """Normalized parse result. ``intent`` is None when nothing matched."""

    intent: str | None = None
    confidence: float = 0.0
    entities: dict[str, Any] = field(default_factory=dict)
    matched_keywords: list[str] = field(default_factory=list)

    @property
    def resolved(self) -> bool:
        return self.intent is not None


class IntentResolutionClient:
    """Sends user text to the NLU service and normalizes the answer."""

    async def resolve(self, text: str) -> IntentResolution:
        body = await post_json(PARSE_PATH, {"text": text})
        try:
            parsed = ParseResponse.model_validate(body)
        except ValidationError as exc:
            msg = f"Unexpected {PARSE_PATH} response shape: {exc.error_count()} error(s)"
            raise MalformedResponseError(msg) from exc

        resolution = IntentResolution(
            intent=parsed.intent,
            confidence=parsed.confidence or 0.0,
            entities=parsed.entities or {},
            matched_keywords=parsed.matched_keywords or [],
        )
        logger.info(
            "Resolved intent=%s confidence=%.2f entities=%s",
            resolution.intent,
            resolution.confidence,
            sorted(resolution.entities),
        )
        return resolution
