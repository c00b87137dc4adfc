"""Comfort Catalogue package."""

from .shared.core.errors import CatalogueError, ConfigurationError, RemoteCallError, ValidationError
from .shared.core.event_bus import EventBus

__all__ = [
    "CatalogueError",
    "ConfigurationError",
    "EventBus",
    "RemoteCallError",
    "ValidationError",
]
