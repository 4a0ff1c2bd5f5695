"""Conversation turn data model."""

from __future__ import annotations

from dataclasses import dataclass, field

ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"

UNKNOWN_INTENT = "unknown"


@dataclass(frozen=True)
class Annotation:
    """Intent metadata shown under an assistant turn.

    Attributes:
        intent: Resolved intent name, or ``"unknown"`` when the parser found none.
        confidence: Parser certainty, 0 when the parser did not report one.
        matched_keywords: Keywords the parser matched, in parser order.
    """

    intent: str
    confidence: float = 0.0
    matched_keywords: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "intent": self.intent,
            "confidence": self.confidence,
            "matched_keywords": list(self.matched_keywords),
        }


@dataclass(frozen=True)
class Turn:
    """A single conversation entry. Immutable once created."""

    role: str  # "user" or "assistant"
    text: str
    annotation: Annotation | None = field(default=None)

    def __post_init__(self) -> None:
        if self.role not in (ROLE_USER, ROLE_ASSISTANT):
            msg = f"Unknown turn role: {self.role!r}"
            raise ValueError(msg)
        if self.annotation is not None and self.role != ROLE_ASSISTANT:
            msg = "Only assistant turns carry an annotation"
            raise ValueError(msg)

    @classmethod
    def user(cls, text: str) -> Turn:
        return cls(role=ROLE_USER, text=text)

    @classmethod
    def assistant(cls, text: str, annotation: Annotation | None = None) -> Turn:
        return cls(role=ROLE_ASSISTANT, text=text, annotation=annotation)

    def to_dict(self) -> dict:
        """Serialize for the HTTP API."""
        return {
            "role": self.role,
            "text": self.text,
            "annotation": self.annotation.to_dict() if self.annotation else None,
        }
