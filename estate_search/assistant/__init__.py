"""
Rule-based support assistant.

Usage:
    from estate_search.assistant import ChatSession, SupportAssistant

    session = ChatSession(SupportAssistant())
    reply = session.ask("What are your fees?")
"""

from .errors import AssistantConfigError, AssistantError, UnknownQuestionError
from .models import ChatMessage, QuickQuestion
from .responder import DEFAULT_FAQ_PATH, ChatSession, SupportAssistant

__all__ = [
    "SupportAssistant",
    "ChatSession",
    "ChatMessage",
    "QuickQuestion",
    "DEFAULT_FAQ_PATH",
    "AssistantError",
    "AssistantConfigError",
    "UnknownQuestionError",
]
