"""Route modules exposed by the API package."""

from . import customers, health, tickets

__all__ = ["customers", "health", "tickets"]
