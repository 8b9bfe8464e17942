"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- The asyncio backend used by the anyio pytest plugin
- Port fakes (virtual timer, scripted transport, recording notifier)
- A registration form wired to the fakes
"""

import pytest

from src.domain.availability import AvailabilityChecker
from src.domain.debounce import DebounceScheduler
from src.domain.form import RegistrationForm
from src.domain.submission import SubmissionCoordinator
from tests.fakes import RecordingNotifier, ScriptedTransport, VirtualTimer

DEBOUNCE_MS = 400


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def timer() -> VirtualTimer:
    return VirtualTimer()


@pytest.fixture
def transport() -> ScriptedTransport:
    return ScriptedTransport()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def scheduler(timer: VirtualTimer) -> DebounceScheduler:
    return DebounceScheduler(timer)


@pytest.fixture
def form(transport: ScriptedTransport, scheduler: DebounceScheduler) -> RegistrationForm:
    """Fresh form session with the default 400 ms debounce."""
    return RegistrationForm(
        checker=AvailabilityChecker(transport),
        scheduler=scheduler,
        debounce_ms=DEBOUNCE_MS,
    )


@pytest.fixture
def coordinator(
    transport: ScriptedTransport, notifier: RecordingNotifier
) -> SubmissionCoordinator:
    return SubmissionCoordinator(transport, notifier)
