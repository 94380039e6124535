"""Custom exceptions for webdriver-logic."""

from typing import Any


class WebDriverLogicError(Exception):
    """Base exception for all webdriver-logic errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class OracleError(WebDriverLogicError):
    """Raised when the browser session fails in an unexpected way.

    These faults abort the whole query.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.operation = operation


class TransientOracleError(WebDriverLogicError):
    """Base for the browser faults that count as "no value" for one element."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.operation = operation


class ElementStateError(TransientOracleError):
    """Raised when an element is stale or in an invalid state for the query."""


class UnknownServerError(TransientOracleError):
    """Raised when the remote end reports an unknown server error."""


class SessionError(WebDriverLogicError):
    """Raised when no browser session is active or one cannot be started."""

    def __init__(
        self,
        message: str = "No active browser session",
        browser: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.browser = browser


class ScopeError(WebDriverLogicError):
    """Raised when a scope expression cannot be parsed."""

    def __init__(
        self,
        message: str,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.expression = expression
