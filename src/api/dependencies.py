"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from collections.abc import Callable

from fastapi import Depends, Request

from src.adapters.clock.asyncio_timer import AsyncioTimer
from src.adapters.notify.console import ConsoleNotifier
from src.api.sessions import FormSessionRegistry
from src.config.settings import Settings, get_settings
from src.domain.availability import AvailabilityChecker
from src.domain.debounce import DebounceScheduler
from src.domain.form import RegistrationForm
from src.domain.ports import AuthSession, Notifier, Transport
from src.domain.signin import SignInService
from src.domain.submission import SubmissionCoordinator

# Module-level singletons - both adapters are stateless
_notifier = ConsoleNotifier()
_timer = AsyncioTimer()


def get_transport(request: Request) -> Transport:
    """
    Get HTTP transport from app state.

    The transport is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.transport


def get_auth_session(request: Request) -> AuthSession:
    """Get the auth session shared with the transport."""
    return request.app.state.auth_session


def get_form_registry(request: Request) -> FormSessionRegistry:
    """Get the registry of open form sessions."""
    return request.app.state.forms


def get_notifier() -> Notifier:
    """Get console notifier (singleton)."""
    return _notifier


def get_form_factory(
    transport: Transport = Depends(get_transport),
    settings: Settings = Depends(get_settings),
) -> Callable[[], RegistrationForm]:
    """
    Build a factory for new form sessions.

    Each form gets its own debounce scheduler so closing one session never
    cancels another session's timer.
    """
    checker = AvailabilityChecker(
        transport,
        path=settings.check_login_path,
        min_length=settings.min_login_length,
    )

    def create_form() -> RegistrationForm:
        return RegistrationForm(
            checker=checker,
            scheduler=DebounceScheduler(_timer),
            debounce_ms=settings.debounce_ms,
            min_login_length=settings.min_login_length,
        )

    return create_form


def get_submission_coordinator(
    transport: Transport = Depends(get_transport),
    notifier: Notifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
) -> SubmissionCoordinator:
    """Create submission coordinator with injected dependencies."""
    return SubmissionCoordinator(transport, notifier, path=settings.register_path)


def get_sign_in_service(
    transport: Transport = Depends(get_transport),
    session: AuthSession = Depends(get_auth_session),
    notifier: Notifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
) -> SignInService:
    """Create sign-in service writing into the shared auth session."""
    return SignInService(transport, session, notifier, path=settings.login_path)
