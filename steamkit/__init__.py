"""Clients for Steam curator reviews and the Steam Web API."""

__version__ = "0.1.0"
__all__ = ["api", "client", "curator", "webapi"]