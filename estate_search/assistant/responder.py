"""Keyword-based support assistant and chat sessions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import AssistantConfigError, UnknownQuestionError
from .models import ChatMessage, QuickQuestion

logger = logging.getLogger(__name__)

DEFAULT_FAQ_PATH = Path(__file__).parent / "data" / "faq.yaml"

# A chat shows quick questions until the first exchange is done
QUICK_QUESTIONS_MAX_MESSAGES = 2
# The contact form is offered once the user has asked a couple of things
CONTACT_FORM_MIN_MESSAGES = 5


class SupportAssistant:
    """
    Answers support questions from a fixed FAQ.

    Free-text messages are lower-cased and matched by substring against
    each question's keywords, in the configured match order. The first
    hit wins; otherwise the fallback reply is returned.
    """

    def __init__(self, faq_path: Path | None = None):
        """
        Initialize assistant.

        Args:
            faq_path: Path to the FAQ YAML. If None, uses the packaged FAQ.
        """
        self._faq_path = faq_path or DEFAULT_FAQ_PATH
        config = self._load_config()

        self.greeting: str = config["greeting"]
        self.fallback: str = config["fallback"]
        self._ack_template: str = config["contact_acknowledgement"]
        self._questions = tuple(
            QuickQuestion(
                id=int(q["id"]),
                question=q["question"],
                answer=q["answer"],
                keywords=tuple(k.lower() for k in q.get("keywords", [])),
            )
            for q in config["quick_questions"]
        )
        self._by_id = {q.id: q for q in self._questions}

        unknown = [qid for qid in config["match_order"] if qid not in self._by_id]
        if unknown:
            raise AssistantConfigError(f"match_order has unknown question ids: {unknown}")
        self._match_order = tuple(self._by_id[qid] for qid in config["match_order"])

        logger.debug(
            f"SupportAssistant loaded {len(self._questions)} quick questions "
            f"from {self._faq_path}"
        )

    def _load_config(self) -> dict[str, Any]:
        """Load FAQ configuration from YAML."""
        try:
            with open(self._faq_path) as f:
                config = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise AssistantConfigError(f"FAQ file not found: {self._faq_path}") from e
        except yaml.YAMLError as e:
            raise AssistantConfigError(f"Invalid YAML in FAQ: {e}") from e

        required_keys = {
            "greeting",
            "fallback",
            "contact_acknowledgement",
            "match_order",
            "quick_questions",
        }
        if not isinstance(config, dict):
            raise AssistantConfigError("FAQ config must be a mapping")
        missing = required_keys - config.keys()
        if missing:
            raise AssistantConfigError(f"FAQ config missing required keys: {sorted(missing)}")
        return config

    @property
    def quick_questions(self) -> tuple[QuickQuestion, ...]:
        """Quick questions in display order."""
        return self._questions

    def get_question(self, question_id: int) -> QuickQuestion:
        """
        Look up a quick question.

        Raises:
            UnknownQuestionError: If the id does not exist
        """
        try:
            return self._by_id[question_id]
        except KeyError:
            raise UnknownQuestionError(f"Unknown quick question: {question_id}") from None

    def reply(self, text: str) -> str:
        """Answer a free-text message."""
        lowered = text.lower()
        for question in self._match_order:
            if any(keyword in lowered for keyword in question.keywords):
                return question.answer
        return self.fallback

    def acknowledge_contact(self, name: str, email: str) -> str:
        """Confirmation shown after the contact form is submitted."""
        return self._ack_template.format(name=name, email=email)


class ChatSession:
    """
    One visitor's conversation with the assistant.

    Starts with the greeting. Message ids are sequential from 1.
    """

    def __init__(self, assistant: SupportAssistant):
        self._assistant = assistant
        self._messages: list[ChatMessage] = []
        self._add(assistant.greeting, is_bot=True)

    @property
    def messages(self) -> list[ChatMessage]:
        return list(self._messages)

    @property
    def shows_quick_questions(self) -> bool:
        """Quick questions are offered until the first exchange."""
        return len(self._messages) <= QUICK_QUESTIONS_MAX_MESSAGES

    @property
    def offers_contact_form(self) -> bool:
        """The contact-support button appears after a few messages."""
        return len(self._messages) >= CONTACT_FORM_MIN_MESSAGES

    def _add(self, text: str, is_bot: bool) -> ChatMessage:
        message = ChatMessage(id=len(self._messages) + 1, text=text, is_bot=is_bot)
        self._messages.append(message)
        return message

    def ask(self, text: str) -> ChatMessage | None:
        """
        Send a free-text message and get the assistant's reply.

        Returns:
            The reply, or None if text is blank (nothing is recorded)
        """
        if not text.strip():
            return None
        self._add(text, is_bot=False)
        return self._add(self._assistant.reply(text), is_bot=True)

    def ask_quick(self, question_id: int) -> ChatMessage:
        """
        Ask one of the quick questions.

        Raises:
            UnknownQuestionError: If the id does not exist
        """
        question = self._assistant.get_question(question_id)
        self._add(question.question, is_bot=False)
        return self._add(question.answer, is_bot=True)

    def submit_contact(self, name: str, email: str, message: str) -> ChatMessage:
        """
        Record a contact-form submission and acknowledge it.

        Raises:
            ValueError: If any field is blank
        """
        if not name.strip() or not email.strip() or not message.strip():
            raise ValueError("Name, email and message are all required")
        logger.info(f"Support request from {email}")
        return self._add(
            self._assistant.acknowledge_contact(name.strip(), email.strip()),
            is_bot=True,
        )
