"""Display settings store.

Holds the cosmetic settings (colors, font, grid columns, background image)
for the running application. Values are fetched once at startup, merged
field by field on every load and save, and pushed to subscribers through the
event bus. The store is constructed once by the host and injected into the
screens that need it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

from catalogue.shared.core import events
from catalogue.shared.core.errors import RemoteCallError
from catalogue.shared.core.event_bus import EventBus, EventPayload, Subscription
from catalogue.shared.domain.models import (
    DisplaySettings,
    TEXT_SETTING_FIELDS,
    parse_font_size,
    parse_grid_columns,
)
from catalogue.shared.infrastructure.remote.gateway import Action, RemoteGateway

logger = logging.getLogger(__name__)

SettingsHandler = Callable[[DisplaySettings], Awaitable[None]]


@dataclass(frozen=True)
class SaveResult:
    """Outcome of :meth:`SettingsStore.save`."""
    success: bool
    message: Optional[str] = None


class SettingsStore:
    """Read-mostly store for :class:`DisplaySettings`."""

    def __init__(
        self,
        gateway: RemoteGateway,
        event_bus: Optional[EventBus] = None,
        initial: Optional[DisplaySettings] = None,
    ) -> None:
        self.gateway = gateway
        self.bus = event_bus or EventBus()
        self._settings = initial or DisplaySettings()
        self._loaded = False

    @property
    def current(self) -> DisplaySettings:
        return self._settings

    @property
    def loaded(self) -> bool:
        """True once the first load attempt has finished, successful or not."""
        return self._loaded

    def merge(self, incoming: Union[Mapping[str, Any], DisplaySettings, None]) -> DisplaySettings:
        """Merge wire-form fields over the current settings.

        Numeric fields only overwrite when they parse; text fields overwrite
        when present and non-empty. Unspecified fields are kept.
        """
        if incoming is None:
            return self._settings
        if isinstance(incoming, DisplaySettings):
            incoming = incoming.to_wire()
        if not isinstance(incoming, Mapping):
            logger.warning(f"SettingsStore: ignoring non-mapping settings ({type(incoming).__name__})")
            return self._settings

        updates: Dict[str, Any] = {}
        for wire_key in TEXT_SETTING_FIELDS:
            value = incoming.get(wire_key)
            if isinstance(value, str) and value.strip():
                updates[_attr(wire_key)] = value.strip()

        if "baseFontSizePx" in incoming:
            font_size = parse_font_size(incoming.get("baseFontSizePx"))
            if font_size is None:
                logger.warning(
                    f"SettingsStore: invalid baseFontSizePx {incoming.get('baseFontSizePx')!r}, "
                    f"keeping {self._settings.base_font_size_px}"
                )
            else:
                updates["base_font_size_px"] = font_size

        if "categoryGridColumns" in incoming:
            columns = parse_grid_columns(incoming.get("categoryGridColumns"))
            if columns is None:
                logger.warning(
                    f"SettingsStore: invalid categoryGridColumns {incoming.get('categoryGridColumns')!r}, "
                    f"keeping {self._settings.category_grid_columns}"
                )
            else:
                updates["category_grid_columns"] = columns

        if updates:
            self._settings = self._settings.model_copy(update=updates)
        return self._settings

    async def load(self) -> DisplaySettings:
        """Fetch settings from the remote side. Never raises."""
        try:
            data = await self.gateway.call(Action.GET_SETTINGS)
        except RemoteCallError as exc:
            logger.warning(f"SettingsStore: could not load settings, keeping current values: {exc}")
        else:
            remote = data.get("settings")
            if isinstance(remote, Mapping):
                self.merge(remote)
                logger.info("SettingsStore: settings loaded from remote")
            else:
                logger.warning("SettingsStore: getSettings response has no settings object")
        finally:
            self._loaded = True

        await self._notify("load")
        return self._settings

    async def save(self, new_settings: Union[DisplaySettings, Mapping[str, Any]]) -> SaveResult:
        """Persist settings remotely and merge them locally on success."""
        if isinstance(new_settings, DisplaySettings):
            submitted = new_settings.to_wire()
        else:
            submitted = {**self._settings.to_wire(), **dict(new_settings)}

        try:
            data = await self.gateway.call(Action.UPDATE_SETTINGS, {"settings": submitted})
        except RemoteCallError as exc:
            logger.error(f"SettingsStore: save failed: {exc}")
            return SaveResult(success=False, message=exc.message)

        message = data.get("message") if isinstance(data.get("message"), str) else None
        if not data.get("success"):
            logger.error(f"SettingsStore: server rejected settings: {message}")
            return SaveResult(success=False, message=message or RemoteCallError.DEFAULT_MESSAGE)

        echoed = data.get("settings")
        self.merge(echoed if isinstance(echoed, Mapping) else submitted)
        logger.info("SettingsStore: settings saved")
        await self._notify("save")
        return SaveResult(success=True, message=message)

    def subscribe(self, handler: SettingsHandler) -> Subscription:
        """Call ``handler`` with the new settings after every load and save."""

        async def _on_settings(payload: EventPayload) -> None:
            await handler(self._settings)

        _on_settings.__name__ = getattr(handler, "__name__", "settings_handler")
        return self.bus.subscribe(events.TOPIC_SETTINGS_UPDATED, _on_settings)

    async def _notify(self, source: str) -> None:
        await self.bus.publish(
            events.TOPIC_SETTINGS_UPDATED,
            events.create_settings_updated_event(self._settings.to_wire(), source),
        )


def _attr(wire_key: str) -> str:
    field_name = next(
        name for name, info in DisplaySettings.model_fields.items() if info.alias == wire_key
    )
    return field_name
