"""Data models for the support assistant."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class QuickQuestion:
    """A canned question with its answer and trigger keywords."""

    id: int
    question: str
    answer: str
    keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class ChatMessage:
    """One message in a chat session."""

    id: int
    text: str
    is_bot: bool
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
