"""Turn pipeline: user text → NLU parse → command execution → assistant turn."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from travelchat.backend import ExecutionClient, IntentResolutionClient
from travelchat.config import settings
from travelchat.conversation.models import UNKNOWN_INTENT, Annotation, Turn

if TYPE_CHECKING:
    from collections.abc import Callable

    from travelchat.backend import IntentResolution
    from travelchat.conversation.store import ConversationStore

logger = logging.getLogger(__name__)

IDLE = "idle"
RESOLVING = "resolving"
EXECUTING = "executing"


def serialize_result(result: Any) -> str:
    """Render a command result as indented JSON for display."""
    return json.dumps(result, indent=2, ensure_ascii=False)


def annotation_for(resolution: IntentResolution) -> Annotation:
    return Annotation(
        intent=resolution.intent if resolution.resolved else UNKNOWN_INTENT,
        confidence=resolution.confidence,
        matched_keywords=tuple(resolution.matched_keywords),
    )


class TurnPipeline:
    """Runs one submission at a time against the NLU and command services.

    ``submit()`` is rejected (returns False, appends nothing) while a run is
    in flight or when the text is blank. The guard runs before the first
    ``await``, so on a single event loop two submissions can never overlap.

    Every accepted submission appends exactly two turns: the user's text,
    then either the command result or the fixed failure text. Any error
    from either call produces the failure text; details only reach the log.
    """

    def __init__(
        self,
        store: ConversationStore,
        nlu: IntentResolutionClient | None = None,
        executor: ExecutionClient | None = None,
        *,
        failure_text: str | None = None,
        on_change: Callable[[TurnPipeline], None] | None = None,
    ) -> None:
        self._store = store
        self._nlu = nlu or IntentResolutionClient()
        self._executor = executor or ExecutionClient()
        self._failure_text = failure_text or settings.failure_text
        self._on_change = on_change
        self._state = IDLE

    @property
    def state(self) -> str:
        return self._state

    @property
    def busy(self) -> bool:
        """True while a run is in flight. Front-ends disable sending on this."""
        return self._state != IDLE

    @property
    def store(self) -> ConversationStore:
        return self._store

    def _set_state(self, state: str) -> None:
        self._state = state
        if self._on_change is not None:
            self._on_change(self)

    async def submit(self, text: str) -> bool:
        """Process one user message. Returns True if the submission was accepted."""
        cleaned = text.strip()
        if self.busy:
            logger.info("Submission rejected: pipeline is %s", self._state)
            return False
        if not cleaned:
            logger.debug("Submission rejected: blank input")
            return False

        logger.info("Submission accepted: %s", cleaned[:80])
        self._store.append(Turn.user(cleaned))
        self._set_state(RESOLVING)
        try:
            try:
                reply = await self._run(cleaned)
            except Exception:
                logger.exception("Pipeline run failed while %s", self._state)
                reply = Turn.assistant(self._failure_text)
            self._store.append(reply)
        finally:
            self._set_state(IDLE)
        return True

    async def _run(self, text: str) -> Turn:
        resolution = await self._nlu.resolve(text)
        self._set_state(EXECUTING)
        execution = await self._executor.execute(resolution.intent, resolution.entities)
        return Turn.assistant(serialize_result(execution.result), annotation_for(resolution))
