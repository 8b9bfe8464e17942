"""HTTP adapters - Transport implementations."""

from .transport import HttpTransport

__all__ = ["HttpTransport"]
