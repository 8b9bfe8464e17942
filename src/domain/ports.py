"""
Port interfaces - Protocol definitions for collaborator abstraction.

This module defines the interfaces (ports) that the form engine requires
from the outside world, plus the enumerations shared across the domain.
Adapters implement these protocols.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class Field(str, Enum):
    """Input fields of the registration form."""

    NAME = "name"
    LOGIN = "login"
    PASSWORD = "password"


class AvailabilityStatus(str, Enum):
    """
    Client-side belief about whether the typed login is free.

    Transitions:
    - IDLE -> CHECKING (login edited to >= 3 characters)
    - CHECKING -> AVAILABLE | TAKEN (check resolved)
    - CHECKING -> IDLE (check failed, user is not blocked)
    - any -> IDLE (login edited to < 3 characters)
    - any -> TAKEN (submission rejected as duplicate login)
    """

    IDLE = "idle"
    CHECKING = "checking"
    AVAILABLE = "available"
    TAKEN = "taken"


class AvailabilityResult(Enum):
    """Outcome of a single uniqueness query."""

    AVAILABLE = "available"
    TAKEN = "taken"
    UNKNOWN = "unknown"


class SubmissionState(str, Enum):
    """At most one registration request is in flight."""

    IDLE = "idle"
    SUBMITTING = "submitting"


class Severity(str, Enum):
    """Notification severities understood by the notification sink."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class AuthSession:
    """
    Credentials of the signed-in operator.

    Passed explicitly to the transport at construction; the transport
    reads the token on every request.
    """

    token: str | None = None
    user_name: str | None = None

    def clear(self) -> None:
        self.token = None
        self.user_name = None


class Transport(Protocol):
    """Port interface for the remote auth authority."""

    async def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        """
        Issue a GET request.

        Returns:
            Decoded JSON payload, or the raw text when the body is not JSON

        Raises:
            TransportError: On network failure or any non-2xx response
        """
        ...

    async def post(self, path: str, body: dict[str, Any]) -> Any:
        """
        Issue a POST request with a JSON body.

        Returns:
            Decoded JSON payload, or the raw text when the body is not JSON

        Raises:
            TransportError: On network failure or any non-2xx response
        """
        ...


class Notifier(Protocol):
    """Port interface for user notifications (toasts). Fire-and-forget."""

    def notify(self, severity: Severity, message: str) -> None: ...


class TimerHandle(Protocol):
    """A scheduled callback that can be cancelled before it fires."""

    def cancel(self) -> None: ...


class Timer(Protocol):
    """Port interface for deferred callbacks."""

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` once after ``delay_seconds``."""
        ...
