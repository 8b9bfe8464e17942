"""
Debounce scheduler - Coalesces bursts of events into one deferred action.

Each key has at most one pending invocation. Scheduling again for the
same key cancels the pending timer outright and restarts the delay, so
the action only runs once the key has been quiet for the full delay.
"""

import logging
from collections.abc import Callable, Hashable

from .ports import Timer, TimerHandle

logger = logging.getLogger(__name__)


class DebounceScheduler:
    """
    Delay-and-cancel primitive keyed by an arbitrary hashable.

    The timer port decides what "later" means: the running asyncio loop
    in production, a virtual clock in tests.
    """

    def __init__(self, timer: Timer) -> None:
        self._timer = timer
        self._pending: dict[Hashable, TimerHandle] = {}

    def schedule(self, key: Hashable, delay_ms: int, action: Callable[[], None]) -> None:
        """
        Run ``action`` after ``delay_ms`` of inactivity for ``key``.

        Any invocation already pending for ``key`` is cancelled first.
        """
        self.cancel(key)

        def fire() -> None:
            # Drop our entry before running so the action may reschedule.
            if self._pending.get(key) is handle:
                del self._pending[key]
                action()

        handle = self._timer.call_later(delay_ms / 1000, fire)
        self._pending[key] = handle

    def cancel(self, key: Hashable) -> bool:
        """
        Cancel the pending invocation for ``key``.

        Returns:
            True if an invocation was pending and will now never run
        """
        handle = self._pending.pop(key, None)
        if handle is None:
            return False
        handle.cancel()
        logger.debug("Debounced action cancelled for %s", key)
        return True

    def cancel_all(self) -> None:
        """Cancel every pending invocation (session teardown)."""
        for key in list(self._pending):
            self.cancel(key)

    def pending(self, key: Hashable) -> bool:
        """True while an invocation for ``key`` is waiting to fire."""
        return key in self._pending
