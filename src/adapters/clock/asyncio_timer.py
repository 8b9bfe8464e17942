"""
asyncio timer adapter - Implements the Timer protocol.

Callbacks run on the event loop that is running when they are scheduled.
"""

import asyncio
from collections.abc import Callable


class AsyncioTimer:
    """
    Implements Timer protocol via ``loop.call_later``.

    Must be used from inside a running event loop. The returned
    ``asyncio.TimerHandle`` satisfies the domain's TimerHandle port.
    """

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return asyncio.get_running_loop().call_later(delay_seconds, callback)
