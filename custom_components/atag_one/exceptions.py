"""Custom exceptions for the ATAG One integration."""

from __future__ import annotations

from homeassistant.exceptions import HomeAssistantError


class AtagOneError(Exception):
    """Base exception for ATAG One."""


class AtagOneConnectionError(AtagOneError):
    """Raised when the client process cannot be started."""


class AtagOneTimeoutError(AtagOneError):
    """Raised when the client process exceeds its timeout."""


class AtagOneCommandError(AtagOneError):
    """Raised when the client process exits with a non-zero code."""

    def __init__(self, returncode: int | None, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"Command failed with code {returncode}: {stderr}")


class AtagOneParseError(AtagOneError):
    """Raised when the client output carries no usable JSON."""


class AtagOneConfigError(AtagOneError):
    """Raised when configuration validation fails."""


class AtagOneCommunicationError(HomeAssistantError):
    """Raised to Home Assistant when a write to the thermostat fails."""
