"""
API v1 package.

Contains versioned routes for driving registration form sessions.
"""

from src.api.v1.routes import router

__all__ = ["router"]
