"""
Sign-in service - Obtains the bearer token the transport attaches.

The token and display name land in the AuthSession object shared with
the transport; nothing is kept in module-level storage.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from . import messages
from .exceptions import TransportError
from .ports import AuthSession, Notifier, Severity, Transport

logger = logging.getLogger(__name__)


class SignInResult(Enum):
    SUCCESS = "success"
    REJECTED = "rejected"
    TRANSPORT_FAILURE = "transport_failure"


@dataclass(frozen=True)
class SignInOutcome:
    result: SignInResult
    message: str
    user_name: str | None = None


class SignInService:
    """Authenticates an operator against the remote authority."""

    def __init__(
        self,
        transport: Transport,
        session: AuthSession,
        notifier: Notifier,
        path: str = "/api/Auth/login",
    ) -> None:
        self._transport = transport
        self._session = session
        self._notifier = notifier
        self._path = path

    async def sign_in(self, login: str, password: str) -> SignInOutcome:
        """
        Exchange credentials for a token and store it in the session.

        Failures leave the session untouched and are reported through the
        notifier; a plain-text rejection body is shown as-is.
        """
        try:
            payload = await self._transport.post(
                self._path, {"login": login, "password": password}
            )
        except TransportError as e:
            if e.status_code is None:
                outcome = SignInOutcome(SignInResult.TRANSPORT_FAILURE, messages.SIGN_IN_UNREACHABLE)
            elif isinstance(e.payload, str) and e.payload.strip():
                outcome = SignInOutcome(SignInResult.REJECTED, e.payload)
            else:
                outcome = SignInOutcome(SignInResult.REJECTED, messages.SIGN_IN_FAILED)
            logger.warning("Sign-in failed for %s: %s", login, e)
            self._notifier.notify(Severity.ERROR, outcome.message)
            return outcome

        if not isinstance(payload, dict) or not payload.get("token"):
            logger.warning("Sign-in response for %s carried no token", login)
            self._notifier.notify(Severity.ERROR, messages.SIGN_IN_FAILED)
            return SignInOutcome(SignInResult.REJECTED, messages.SIGN_IN_FAILED)

        self._session.token = payload["token"]
        self._session.user_name = payload.get("name")
        welcome = messages.SIGN_IN_WELCOME.format(name=self._session.user_name or login)
        logger.info("Signed in as %s", login)
        self._notifier.notify(Severity.SUCCESS, welcome)
        return SignInOutcome(SignInResult.SUCCESS, welcome, user_name=self._session.user_name)

    def sign_out(self) -> None:
        self._session.clear()
