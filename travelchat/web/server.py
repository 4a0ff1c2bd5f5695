"""Lightweight async HTTP front-end over the conversation sessions.

Each session is addressed by an opaque ID in the URL; sessions live in
memory until the process exits.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from aiohttp import web

from travelchat.conversation.session import get_session

logger = logging.getLogger(__name__)


async def _health(request: web.Request) -> web.Response:
    """GET /health — basic liveness check."""
    return web.json_response({"status": "ok"})


async def _list_turns(request: web.Request) -> web.Response:
    """GET /sessions/{session_id}/turns — full history plus the busy flag."""
    session = get_session(request.match_info["session_id"])
    return web.json_response(
        {
            "busy": session.pipeline.busy,
            "state": session.pipeline.state,
            "turns": [t.to_dict() for t in session.store.all()],
        }
    )


async def _submit_turn(request: web.Request) -> web.Response:
    """POST /sessions/{session_id}/turns — run one submission to completion."""
    session_id = request.match_info["session_id"]

    try:
        payload: Any = await request.json()
    except Exception:
        logger.warning("Submit bad request: invalid JSON (session=%s)", session_id)
        return web.json_response({"error": "invalid JSON"}, status=400)

    text = payload.get("text") if isinstance(payload, dict) else None
    if not isinstance(text, str):
        return web.json_response({"error": "'text' must be a string"}, status=400)

    session = get_session(session_id)
    if session.pipeline.busy:
        return web.json_response({"accepted": False, "error": "busy"}, status=409)
    if not text.strip():
        return web.json_response({"accepted": False, "error": "empty"}, status=422)

    before = len(session.store)
    # Shield so a client disconnect doesn't abandon a run halfway through.
    accepted = await asyncio.shield(session.pipeline.submit(text))
    if not accepted:
        return web.json_response({"accepted": False, "error": "busy"}, status=409)

    new_turns = session.store.all()[before:]
    return web.json_response({"accepted": True, "turns": [t.to_dict() for t in new_turns]})


def create_web_app() -> web.Application:
    """Build the aiohttp Application with routes."""
    app = web.Application()
    app.router.add_get("/health", _health)
    app.router.add_get("/sessions/{session_id}/turns", _list_turns)
    app.router.add_post("/sessions/{session_id}/turns", _submit_turn)
    return app
