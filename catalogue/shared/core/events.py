"""Canonical event definitions for Comfort Catalogue."""

from __future__ import annotations

from typing import Any, Dict

from .event_bus import EventPayload

# Event Topics
TOPIC_SETTINGS_UPDATED = "settings.updated"


def create_settings_updated_event(settings: Dict[str, Any], source: str) -> EventPayload:
    """Create a settings updated event.

    Args:
        settings: The merged settings in wire (camelCase) form
        source: ``"load"`` or ``"save"``
    """
    return {
        "settings": settings,
        "source": source,
    }
