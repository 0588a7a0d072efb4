"""Custom exceptions for the support assistant."""


class AssistantError(Exception):
    """Base exception for support assistant errors."""

    pass


class AssistantConfigError(AssistantError):
    """
    Raised when the FAQ configuration is invalid or cannot be loaded.

    This can happen when:
    - FAQ file not found
    - Invalid YAML syntax
    - Missing required keys
    - match_order refers to an unknown question id
    """

    pass


class UnknownQuestionError(AssistantError):
    """Raised when a quick question id does not exist."""

    pass
