"""Shared JSON-over-HTTP POST helper for the backend clients."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from travelchat.backend.errors import MalformedResponseError, TransportError
from travelchat.config import settings

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


async def post_json(path: str, payload: dict[str, Any]) -> Any:
    """POST *payload* as JSON to ``BACKEND_URL + path`` and return the decoded body.

    Makes exactly one attempt. A non-2xx status is treated as a transport
    failure even when the body is JSON; the body is not decoded.

    Raises:
        TransportError: connection failure, timeout, or non-2xx status.
        MalformedResponseError: the body is not valid JSON.
    """
    url = settings.backend_endpoint(path)
    try:
        async with httpx.AsyncClient(timeout=settings.backend_timeout_seconds) as client:
            resp = await client.post(url, json=payload, headers=JSON_HEADERS)
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.warning("POST %s returned %d", url, exc.response.status_code)
        msg = f"POST {path} returned HTTP {exc.response.status_code}"
        raise TransportError(msg) from exc
    except httpx.HTTPError as exc:
        logger.warning("POST %s failed: %s", url, exc)
        msg = f"POST {path} failed: {exc.__class__.__name__}"
        raise TransportError(msg) from exc

    try:
        return resp.json()
    except ValueError as exc:
        logger.warning("POST %s returned non-JSON body: %r", url, resp.text[:200])
        msg = f"POST {path} returned a body that is not JSON"
        raise MalformedResponseError(msg) from exc
