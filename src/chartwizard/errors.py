"""Error hierarchy for the chartwizard package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "WizardError",
    "ConfigNotFoundError",
    "ConfigError",
    "InvalidSectionError",
    "ErrorCodes",
]


class WizardError(Exception):
    """Base error for all chartwizard errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(WizardError):
    """Raised when a wizard settings file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(WizardError):
    """Raised when wizard settings are invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class InvalidSectionError(WizardError):
    """Raised when a deployment section name is not recognised."""

    def __init__(self, section: Any, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_SECTION",
            message=f"Unknown deployment section: {section!r}",
            details={"section": section},
            **kwargs,
        )

    @property
    def section(self) -> Any:
        """The rejected section value."""
        return self.details["section"]


class ErrorCodes:
    """All chartwizard error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_NOT_FOUND:
            fall_back_to_defaults()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    INVALID_SECTION = "INVALID_SECTION"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
