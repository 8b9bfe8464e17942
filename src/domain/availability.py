"""
Availability checker - Remote uniqueness query for a candidate login.

The checker only talks to the transport and returns a result; applying
that result (and discarding it when stale) is the form's job.
"""

import logging
from typing import Any

from .exceptions import TransportError
from .ports import AvailabilityResult, Transport
from .validators import MIN_LOGIN_LENGTH, login_has_min_length

logger = logging.getLogger(__name__)


def interpret_availability(payload: Any) -> AvailabilityResult:
    """
    Map a successful check-login payload to a result.

    The authority answers either a bare boolean or ``{"available": bool}``.
    Anything other than an explicit true counts as taken.
    """
    if payload is True:
        return AvailabilityResult.AVAILABLE
    if isinstance(payload, dict) and payload.get("available") is True:
        return AvailabilityResult.AVAILABLE
    return AvailabilityResult.TAKEN


class AvailabilityChecker:
    """Issues one check-login query per call; never raises on transport failure."""

    def __init__(
        self,
        transport: Transport,
        path: str = "/api/Auth/check-login",
        min_length: int = MIN_LOGIN_LENGTH,
    ) -> None:
        self._transport = transport
        self._path = path
        self._min_length = min_length

    async def check_availability(self, login: str) -> AvailabilityResult:
        """
        Ask the remote authority whether ``login`` is free.

        Args:
            login: Candidate login, at least ``min_length`` characters once trimmed

        Returns:
            AVAILABLE or TAKEN on a response, UNKNOWN when the call failed

        Raises:
            ValueError: If the login is too short to be checked
        """
        if not login_has_min_length(login, self._min_length):
            raise ValueError(f"Login too short to check: {login!r}")

        candidate = login.strip()
        try:
            payload = await self._transport.get(self._path, params={"login": candidate})
        except TransportError as e:
            # Infrastructure failure must not block the user; submit re-validates.
            logger.warning("Availability check failed for %s: %s", candidate, e)
            return AvailabilityResult.UNKNOWN

        result = interpret_availability(payload)
        logger.debug("Availability of %s: %s", candidate, result.value)
        return result
