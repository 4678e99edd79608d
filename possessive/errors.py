from __future__ import annotations


class PossessiveError(Exception):
    """Base class for all possessive formatting errors."""


class ConfigurationError(PossessiveError, ValueError):
    """Raised when a formatter is built with invalid options."""


class InvalidInputError(PossessiveError, ValueError):
    """
    Raised when a noun (or a custom possessive form) cannot be processed.

    `reason` is one of "empty", "not-a-string" or "whitespace-only".
    """

    EMPTY = "empty"
    NOT_A_STRING = "not-a-string"
    WHITESPACE_ONLY = "whitespace-only"

    def __init__(self, reason: str, message: str):
        super().__init__(message)
        self.reason = reason
