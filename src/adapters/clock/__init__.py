"""Timer adapters - Deferred callback implementations."""

from .asyncio_timer import AsyncioTimer

__all__ = ["AsyncioTimer"]
