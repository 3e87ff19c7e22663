"""
Common exception classes for the portfolio terminal.

Command handlers never raise these for user mistakes; a bad argument is
reported through a failed ``CommandOutput``. The classes below cover
programmer errors found at startup and failures of the collaborators that
sit around the interpreter (configuration, data loading).
"""

from __future__ import annotations

from typing import Any


class PortfolioTerminalError(Exception):
    """Base exception class for all portfolio terminal errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in kwargs.items():
            setattr(self, key, value)

    def to_dict(self) -> dict[str, Any]:
        error_dict: dict[str, Any] = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        for attr_name, value in vars(self).items():
            if attr_name.startswith("_") or attr_name in ("message", "details"):
                continue
            if not callable(value):
                error_dict[attr_name] = value

        return {"error": error_dict}


class CommandRegistrationError(PortfolioTerminalError):
    """Raised when a command name or alias collides with an existing entry."""

    def __init__(
        self,
        message: str = "Command registration failed",
        command_name: str | None = None,
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, **kwargs)
        self.command_name = command_name


class ConfigurationError(PortfolioTerminalError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, **kwargs)


class PortfolioDataError(PortfolioTerminalError):
    """Raised when the portfolio snapshot cannot be loaded or validated."""

    def __init__(
        self,
        message: str = "Portfolio data unavailable",
        source: str | None = None,
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, **kwargs)
        self.source = source
