"""
Console notifier adapter - Implements Notifier protocol.

This module provides a console-based implementation of the domain's
notification port, logging toasts instead of rendering them.
"""

import logging

from src.domain.ports import Severity

logger = logging.getLogger(__name__)

_LEVELS = {
    Severity.SUCCESS: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class ConsoleNotifier:
    """
    Implements Notifier protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    A front end replaces this with its toast component.
    """

    def notify(self, severity: Severity, message: str) -> None:
        """
        Log a notification at the level matching its severity.

        Args:
            severity: success, warning or error
            message: Text shown to the user
        """
        logger.log(_LEVELS[severity], "[NOTIFY] %s: %s", severity.value, message)
