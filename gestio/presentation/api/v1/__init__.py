"""Version 1 of the Gestio HTTP API."""

from .router import router

__all__ = ["router"]
