"""
Form session registry - Open registration forms keyed by session id.

A session ends when its form is submitted successfully, when the client
navigates away (DELETE), or when nobody has touched it for longer than the
idle timeout. Closing a form cancels its pending debounce timer and
in-flight availability checks.

Idle sessions are swept lazily whenever a new session is opened; there is
no background task.
"""

import logging
import time
import uuid
from collections.abc import Callable

from src.domain.exceptions import FormSessionNotFound
from src.domain.form import RegistrationForm
from src.domain.ports import SubmissionState

logger = logging.getLogger(__name__)

DEFAULT_IDLE_TIMEOUT_SECONDS = 1800.0


class FormSessionRegistry:
    """In-memory registry; lives for the lifetime of the application."""

    def __init__(
        self,
        idle_timeout_seconds: float = DEFAULT_IDLE_TIMEOUT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._forms: dict[str, RegistrationForm] = {}
        self._last_seen: dict[str, float] = {}
        self._idle_timeout = idle_timeout_seconds
        self._clock = clock

    def open(self, factory: Callable[[], RegistrationForm]) -> tuple[str, RegistrationForm]:
        self.sweep()
        form_id = uuid.uuid4().hex
        form = factory()
        self._forms[form_id] = form
        self._last_seen[form_id] = self._clock()
        logger.info("Form session %s opened", form_id)
        return form_id, form

    def get(self, form_id: str) -> RegistrationForm:
        """
        Look up an open session and mark it as active.

        Raises:
            FormSessionNotFound: If no open session has this id
        """
        try:
            form = self._forms[form_id]
        except KeyError:
            raise FormSessionNotFound(form_id) from None
        self._last_seen[form_id] = self._clock()
        return form

    def close(self, form_id: str) -> None:
        """
        Raises:
            FormSessionNotFound: If no open session has this id
        """
        if not self.discard(form_id):
            raise FormSessionNotFound(form_id)

    def discard(self, form_id: str) -> bool:
        """
        Close a session if it is still open.

        Returns:
            True if a session was closed, False if it had already ended
        """
        form = self._forms.pop(form_id, None)
        self._last_seen.pop(form_id, None)
        if form is None:
            return False
        form.close()
        logger.info("Form session %s closed", form_id)
        return True

    def sweep(self) -> int:
        """
        Close sessions idle for longer than the timeout.

        Sessions with a submission in flight are kept.

        Returns:
            Number of sessions closed
        """
        cutoff = self._clock() - self._idle_timeout
        expired = [
            form_id
            for form_id, seen in self._last_seen.items()
            if seen < cutoff and self._forms[form_id].submission is not SubmissionState.SUBMITTING
        ]
        for form_id in expired:
            self.discard(form_id)
        if expired:
            logger.info("Swept %d idle form sessions", len(expired))
        return len(expired)

    def close_all(self) -> None:
        for form_id in list(self._forms):
            self.discard(form_id)

    def __len__(self) -> int:
        return len(self._forms)
