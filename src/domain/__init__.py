"""
Domain layer - Pure form logic with zero framework imports.

This package contains the registration form engine: field validators,
the debounce scheduler, the availability checker, the form state machine
and the submission coordinator. It defines its own port interfaces for
the transport, notifications and timers.
"""

from .availability import AvailabilityChecker
from .debounce import DebounceScheduler
from .exceptions import FormNotSubmittable, FormSessionNotFound, RegistrationError, TransportError
from .form import FieldErrors, FormSnapshot, RegistrationForm
from .ports import (
    AuthSession,
    AvailabilityResult,
    AvailabilityStatus,
    Field,
    Notifier,
    Severity,
    SubmissionState,
    Timer,
    Transport,
)
from .signin import SignInOutcome, SignInResult, SignInService
from .submission import SubmissionCoordinator, SubmitOutcome, SubmitResult
from .validators import PasswordCriteria, evaluate_password, validate_name

__all__ = [
    "AuthSession",
    "AvailabilityChecker",
    "AvailabilityResult",
    "AvailabilityStatus",
    "DebounceScheduler",
    "Field",
    "FieldErrors",
    "FormNotSubmittable",
    "FormSessionNotFound",
    "FormSnapshot",
    "Notifier",
    "PasswordCriteria",
    "RegistrationError",
    "RegistrationForm",
    "Severity",
    "SignInOutcome",
    "SignInResult",
    "SignInService",
    "SubmissionCoordinator",
    "SubmissionState",
    "SubmitOutcome",
    "SubmitResult",
    "Timer",
    "Transport",
    "TransportError",
    "evaluate_password",
    "validate_name",
]
