"""Plain-text rendering of turns for terminal output."""

from travelchat.conversation.models import ROLE_USER, Annotation, Turn

SPEAKERS = {"user": "You", "assistant": "Agent"}


def format_badge(intent: str, confidence: float) -> str:
    """Intent badge, e.g. ``search_flights 92%``."""
    return f"{intent} {confidence * 100:.0f}%"


def format_annotation(annotation: Annotation) -> list[str]:
    lines = [f"Detected intent: {format_badge(annotation.intent, annotation.confidence)}"]
    if annotation.matched_keywords:
        lines.append(f"Keywords: {', '.join(annotation.matched_keywords)}")
    return lines


def format_turn(turn: Turn) -> str:
    """Render a turn as a speaker-prefixed block; annotation lines are indented."""
    speaker = SPEAKERS[turn.role]
    body = turn.text if turn.role == ROLE_USER else turn.text.replace("\n", "\n  ")
    lines = [f"{speaker}: {body}"]
    if turn.annotation is not None:
        lines.extend(f"  · {line}" for line in format_annotation(turn.annotation))
    return "\n".join(lines)
