"""Interactive terminal chat on a single in-memory session."""

from __future__ import annotations

import asyncio
import logging

from travelchat.conversation.store import ConversationStore
from travelchat.pipeline import TurnPipeline
from travelchat.render import format_turn

logger = logging.getLogger(__name__)

PROMPT = "> "
QUIT_COMMANDS = {"/quit", "/exit"}


def _show_thinking(pipeline: TurnPipeline) -> None:
    if pipeline.busy:
        print(f"  ({pipeline.state}…)")


async def run_repl() -> None:
    """Read lines from stdin until EOF or /quit, printing each new turn."""
    store = ConversationStore()
    pipeline = TurnPipeline(store, on_change=_show_thinking)

    for turn in store.all():
        print(format_turn(turn))

    while True:
        try:
            line = await asyncio.to_thread(input, PROMPT)
        except EOFError:
            print()
            break
        if line.strip() in QUIT_COMMANDS:
            break

        before = len(store)
        if not await pipeline.submit(line):
            continue
        # The user's own line is already on screen; print only the reply.
        for turn in store.all()[before + 1 :]:
            print(format_turn(turn))
