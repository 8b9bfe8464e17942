"""
Submission coordinator - Sends the registration and maps the answer back.

Error-to-field mapping
======================

The authority rejects registrations with free-text messages. When the
payload names a field explicitly (``{"field": "login", ...}``) that wins;
otherwise the message is matched on keywords:

- contains "login"              -> login field
- contains "senha" / "password" -> password field
- anything else                 -> general slot

A login message that reads as a duplicate also forces the availability
status to TAKEN. The keyword match depends on the server's wording and
language; it is kept for compatibility only.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from . import messages
from .exceptions import TransportError
from .form import FieldErrors, RegistrationForm
from .ports import Field, Notifier, Severity, Transport

logger = logging.getLogger(__name__)

_PASSWORD_KEYWORDS = ("senha", "password")
_DUPLICATE_KEYWORDS = ("já", "cadastrad", "em uso", "exist", "taken", "duplic", "in use")


class SubmitResult(Enum):
    """Terminal result of one submission."""

    SUCCESS = "success"
    REJECTED = "rejected"
    TRANSPORT_FAILURE = "transport_failure"


@dataclass(frozen=True)
class SubmitOutcome:
    result: SubmitResult
    errors: FieldErrors = field(default_factory=FieldErrors)
    login_taken: bool = False


def map_rejection(message: str, field_hint: str | None = None) -> SubmitOutcome:
    """
    Attribute a rejection message to the most specific field possible.

    Args:
        message: Message text from the rejection payload
        field_hint: Field named by the payload, if the server sent one

    Returns:
        REJECTED outcome carrying the mapped error
    """
    lowered = message.lower()

    if field_hint in (f.value for f in Field):
        target = field_hint
    elif Field.LOGIN.value in lowered:
        target = Field.LOGIN.value
    elif any(keyword in lowered for keyword in _PASSWORD_KEYWORDS):
        target = Field.PASSWORD.value
    else:
        target = "general"

    login_taken = target == Field.LOGIN.value and any(
        keyword in lowered for keyword in _DUPLICATE_KEYWORDS
    )
    return SubmitOutcome(
        result=SubmitResult.REJECTED,
        errors=FieldErrors(**{target: message}),
        login_taken=login_taken,
    )


def classify_failure(error: TransportError) -> SubmitOutcome:
    """Turn a failed registration call into a REJECTED or TRANSPORT_FAILURE outcome."""
    message = error.server_message
    if message is None:
        return SubmitOutcome(
            result=SubmitResult.TRANSPORT_FAILURE,
            errors=FieldErrors(general=messages.REGISTER_FAILED),
        )

    field_hint = None
    if isinstance(error.payload, dict) and isinstance(error.payload.get("field"), str):
        field_hint = error.payload["field"].lower()
    return map_rejection(message, field_hint)


class SubmissionCoordinator:
    """Serializes the submit action of a registration form."""

    def __init__(
        self,
        transport: Transport,
        notifier: Notifier,
        path: str = "/api/Auth/register",
    ) -> None:
        self._transport = transport
        self._notifier = notifier
        self._path = path

    async def submit(self, form: RegistrationForm) -> SubmitOutcome:
        """
        Submit the form once.

        The caller must only offer submission while ``form.derive_validity()``
        holds; the form stays SUBMITTING for exactly the duration of the call
        and is back to IDLE on every exit path.

        Returns:
            SubmitOutcome; on SUCCESS the caller ends the session

        Raises:
            FormNotSubmittable: If the form is invalid or already submitting
        """
        body = form.begin_submission()
        try:
            await self._transport.post(self._path, body)
        except TransportError as e:
            outcome = classify_failure(e)
            logger.info(
                "Registration of %s failed (%s): %s",
                body["login"],
                outcome.result.value,
                e,
            )
            form.apply_rejection(outcome.errors, login_taken=outcome.login_taken)
            shown = e.server_message or messages.REGISTER_FAILED
            self._notifier.notify(Severity.ERROR, shown)
            return outcome
        finally:
            form.end_submission()

        logger.info("Registration of %s accepted", body["login"])
        self._notifier.notify(Severity.SUCCESS, messages.REGISTER_SUCCESS)
        return SubmitOutcome(result=SubmitResult.SUCCESS)
