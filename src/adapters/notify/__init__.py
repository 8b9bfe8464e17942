"""Notification adapters - User notification sinks."""

from .console import ConsoleNotifier

__all__ = ["ConsoleNotifier"]
