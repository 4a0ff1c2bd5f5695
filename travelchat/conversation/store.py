"""Append-only, in-memory conversation log."""

from __future__ import annotations

import logging

from travelchat.config import settings
from travelchat.conversation.models import Turn

logger = logging.getLogger(__name__)


class ConversationStore:
    """Ordered log of turns for one session.

    Starts with a single assistant greeting. Turns can only be appended;
    ``all()`` hands out a tuple snapshot so readers never observe a later
    append or hold a reference they could mutate.
    """

    def __init__(self, greeting: str | None = None) -> None:
        self._turns: list[Turn] = [Turn.assistant(greeting or settings.greeting_text)]

    def append(self, turn: Turn) -> None:
        if not isinstance(turn, Turn):
            msg = f"Expected Turn, got {type(turn).__name__}"
            raise TypeError(msg)
        self._turns.append(turn)
        logger.debug("Appended %s turn (%d total)", turn.role, len(self._turns))

    def all(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    def __len__(self) -> int:
        return len(self._turns)
