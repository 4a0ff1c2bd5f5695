"""Per-session conversation state, held in memory for the process lifetime."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from travelchat.conversation.store import ConversationStore
from travelchat.pipeline import TurnPipeline

logger = logging.getLogger(__name__)


@dataclass
class ChatSession:
    """A conversation log plus the pipeline that writes to it."""

    store: ConversationStore
    pipeline: TurnPipeline

    @classmethod
    def create(cls) -> ChatSession:
        store = ConversationStore()
        return cls(store=store, pipeline=TurnPipeline(store))


# Global session store keyed by session ID (opaque string chosen by the client)
_sessions: dict[str, ChatSession] = {}


def get_session(session_id: str) -> ChatSession:
    """Get or create the session for an ID."""
    if session_id not in _sessions:
        _sessions[session_id] = ChatSession.create()
        logger.info("Created session %s", session_id)
    return _sessions[session_id]


def _reset() -> None:
    """Drop all sessions (for tests)."""
    _sessions.clear()
