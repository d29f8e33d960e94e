"""
REST API package.

Contains the member routes mounted under /rest.
"""

from kitchensink.api.rest.routes import router

__all__ = ["router"]
