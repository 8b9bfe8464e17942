"""
Registration form state machine - Sole owner of the form's mutable state.

The form holds the field values, field errors, password criteria, login
availability status and submission state. Every other component talks to
it through values in and results out; none of them write to it directly.

Login Availability (per login value)
====================================

    IDLE --(login edited, >= 3 chars)--> CHECKING
    CHECKING --(check resolved)--> AVAILABLE | TAKEN
    CHECKING --(check failed)--> IDLE
    any --(login edited, < 3 chars)--> IDLE
    any --(submission rejected as duplicate, login unchanged)--> TAKEN

Staleness
=========

Every login edit bumps a generation counter. A debounced check captures
the generation it was scheduled under, and its result is applied only if
no edit happened since and the login still equals the value it was issued
for. Stale in-flight requests are left to finish; their results are
discarded, which from the form's point of view is the same as cancelling
them.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

from . import messages
from .availability import AvailabilityChecker
from .debounce import DebounceScheduler
from .exceptions import FormNotSubmittable
from .ports import AvailabilityResult, AvailabilityStatus, Field, SubmissionState
from .validators import (
    MIN_LOGIN_LENGTH,
    PasswordCriteria,
    evaluate_password,
    login_has_min_length,
    name_has_surname,
    validate_name,
)

logger = logging.getLogger(__name__)

GENERAL = "general"

DEFAULT_DEBOUNCE_MS = 400

_RESULT_TO_STATUS = {
    AvailabilityResult.AVAILABLE: AvailabilityStatus.AVAILABLE,
    AvailabilityResult.TAKEN: AvailabilityStatus.TAKEN,
    AvailabilityResult.UNKNOWN: AvailabilityStatus.IDLE,
}


@dataclass(frozen=True)
class FieldErrors:
    """Per-field error messages plus a general slot for form-wide errors."""

    name: str | None = None
    login: str | None = None
    password: str | None = None
    general: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {
            "name": self.name,
            "login": self.login,
            "password": self.password,
            "general": self.general,
        }


@dataclass(frozen=True)
class FormSnapshot:
    """Immutable view of the form, for rendering and for the HTTP surface."""

    values: dict[str, str]
    errors: FieldErrors
    password_criteria: PasswordCriteria
    availability: AvailabilityStatus
    submission: SubmissionState
    valid: bool
    login_message: str | None = None

    @property
    def checking(self) -> bool:
        """Whether the login spinner should show."""
        return self.availability is AvailabilityStatus.CHECKING


class RegistrationForm:
    """
    State machine for one registration form session.

    Lives until the session ends: navigation away (``close()``) or a
    successful submission.
    """

    def __init__(
        self,
        checker: AvailabilityChecker,
        scheduler: DebounceScheduler,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        min_login_length: int = MIN_LOGIN_LENGTH,
    ) -> None:
        self._checker = checker
        self._scheduler = scheduler
        self._debounce_ms = debounce_ms
        self._min_login_length = min_login_length

        self._values: dict[Field, str] = {f: "" for f in Field}
        self._errors: dict[str, str | None] = {f.value: None for f in Field}
        self._errors[GENERAL] = None
        self._criteria = PasswordCriteria()
        self._availability = AvailabilityStatus.IDLE
        self._submission = SubmissionState.IDLE
        # Raw login value sent by the submission in flight
        self._submitted_login: str | None = None

        self._generation = 0
        self._checks: set[asyncio.Task[None]] = set()

    # -- read side ---------------------------------------------------------

    def value(self, name: Field | str) -> str:
        return self._values[Field(name)]

    @property
    def errors(self) -> FieldErrors:
        return FieldErrors(**self._errors)

    @property
    def password_criteria(self) -> PasswordCriteria:
        return self._criteria

    @property
    def availability(self) -> AvailabilityStatus:
        return self._availability

    @property
    def submission(self) -> SubmissionState:
        return self._submission

    @property
    def login_message(self) -> str | None:
        """Inline message under the login input while the login is taken."""
        if self._availability is AvailabilityStatus.TAKEN:
            return messages.LOGIN_TAKEN
        return None

    def derive_validity(self) -> bool:
        """
        Whether the form may be submitted right now.

        Pure function of current state: name has a surname, every password
        criterion holds, login is long enough, the login is not known to be
        taken, and nothing is being submitted.
        """
        return (
            name_has_surname(self._values[Field.NAME])
            and self._criteria.satisfied
            and login_has_min_length(self._values[Field.LOGIN], self._min_login_length)
            and self._availability is not AvailabilityStatus.TAKEN
            and self._submission is SubmissionState.IDLE
        )

    def snapshot(self) -> FormSnapshot:
        return FormSnapshot(
            values={f.value: v for f, v in self._values.items()},
            errors=self.errors,
            password_criteria=self._criteria,
            availability=self._availability,
            submission=self._submission,
            valid=self.derive_validity(),
            login_message=self.login_message,
        )

    # -- input events ------------------------------------------------------

    def set_field(self, name: Field | str, value: str) -> None:
        """
        Apply a user edit to one field.

        Errors for the field (and the general slot) are cleared before any
        availability check is scheduled.

        Raises:
            ValueError: If ``name`` is not a form field
        """
        name = Field(name)
        self._values[name] = value
        self._errors[name.value] = None
        self._errors[GENERAL] = None

        if name is Field.NAME:
            self._errors[Field.NAME.value] = validate_name(value)
        elif name is Field.PASSWORD:
            self._criteria = evaluate_password(value)
        else:
            self._on_login_changed(value)

    def apply_availability_result(self, login: str, result: AvailabilityResult) -> bool:
        """
        Apply a check result if it belongs to the current login value.

        Returns:
            True if applied, False if discarded as stale
        """
        if login != self._values[Field.LOGIN]:
            logger.debug("Discarding availability for stale login %r", login)
            return False
        self._availability = _RESULT_TO_STATUS[result]
        return True

    def _on_login_changed(self, login: str) -> None:
        # Invalidates every check issued or scheduled for earlier values.
        self._generation += 1

        if not login_has_min_length(login, self._min_login_length):
            self._scheduler.cancel(Field.LOGIN)
            self._availability = AvailabilityStatus.IDLE
            return

        self._availability = AvailabilityStatus.CHECKING
        generation = self._generation
        self._scheduler.schedule(
            Field.LOGIN,
            self._debounce_ms,
            lambda: self._start_check(generation, login),
        )

    def _start_check(self, generation: int, login: str) -> None:
        if generation != self._generation:
            return
        task = asyncio.get_running_loop().create_task(self._run_check(generation, login))
        self._checks.add(task)
        task.add_done_callback(self._on_check_done)

    def _on_check_done(self, task: asyncio.Task[None]) -> None:
        self._checks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Availability check crashed", exc_info=task.exception())

    async def _run_check(self, generation: int, login: str) -> None:
        result = AvailabilityResult.UNKNOWN
        try:
            result = await self._checker.check_availability(login)
        finally:
            # Runs on failure and cancellation too, so the spinner never sticks.
            if generation == self._generation:
                self.apply_availability_result(login, result)
            else:
                logger.debug("Discarding availability result for superseded login %r", login)

    async def wait_for_checks(self) -> None:
        """Wait until every availability check in flight has finished."""
        while self._checks:
            await asyncio.wait(set(self._checks))

    # -- submission (called by the submission coordinator) ------------------

    def begin_submission(self) -> dict[str, Any]:
        """
        Enter SUBMITTING and return the registration request body.

        Raises:
            FormNotSubmittable: If the form is invalid or already submitting
        """
        if self._submission is SubmissionState.SUBMITTING:
            raise FormNotSubmittable("A submission is already in flight")
        if not self.derive_validity():
            raise FormNotSubmittable("Form is not valid")

        for key in self._errors:
            self._errors[key] = None
        self._submission = SubmissionState.SUBMITTING
        self._submitted_login = self._values[Field.LOGIN]
        return {
            "name": self._values[Field.NAME].strip(),
            "login": self._values[Field.LOGIN].strip(),
            "password": self._values[Field.PASSWORD],
        }

    def apply_rejection(self, errors: FieldErrors, login_taken: bool = False) -> None:
        """
        Record errors mapped from a rejected submission.

        Only the slots set in ``errors`` are written; the rest stay untouched.
        A duplicate-login rejection also forces availability to TAKEN so the
        two login signals agree.

        If the login was edited while the submission was in flight, the
        verdict is about a value the user no longer sees: the login error
        and the TAKEN status are dropped, and the new value's pending check
        keeps running.
        """
        stale_login = (
            self._submitted_login is not None
            and self._submitted_login != self._values[Field.LOGIN]
        )
        if stale_login:
            logger.debug("Discarding login rejection for superseded login %r", self._submitted_login)

        for key, message in errors.to_dict().items():
            if message is None:
                continue
            if key == Field.LOGIN.value and stale_login:
                continue
            self._errors[key] = message

        if login_taken and not stale_login:
            self._generation += 1
            self._scheduler.cancel(Field.LOGIN)
            self._availability = AvailabilityStatus.TAKEN

    def end_submission(self) -> None:
        self._submission = SubmissionState.IDLE
        self._submitted_login = None

    # -- lifecycle ---------------------------------------------------------

    def close(self) -> None:
        """End the session: no timer fires and no check result lands afterwards."""
        self._generation += 1
        self._scheduler.cancel_all()
        for task in list(self._checks):
            task.cancel()
