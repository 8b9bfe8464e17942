"""
Domain exceptions - Semantic error types for the registration form.

This module defines domain-specific exceptions that communicate
rule violations and collaborator failures without leaking
infrastructure details.
"""

from typing import Any


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class TransportError(RegistrationError):
    """
    Remote call failed - network error or non-2xx response.

    Attributes:
        status_code: HTTP status when a response was received, else None
        payload: Decoded response body (dict or raw string), if any
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: dict[str, Any] | str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload

    @property
    def server_message(self) -> str | None:
        """Message text carried by the response body, if there is one."""
        if isinstance(self.payload, dict):
            message = self.payload.get("message")
            if isinstance(message, str) and message.strip():
                return message
            return None
        if isinstance(self.payload, str) and self.payload.strip():
            return self.payload
        return None


class FormNotSubmittable(RegistrationError):
    """Submit requested while the form is invalid or already submitting."""

    pass


class FormSessionNotFound(RegistrationError):
    """No open form session with the given identifier."""

    pass
