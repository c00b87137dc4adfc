"""Service container for the showroom.

Wires the gateway, settings store, catalog accessor, mutations and the
application state together once, then gets passed to every screen
controller. The host owns the store (one per Streamlit session) and hands it
down; there is no class-level instance.
"""

from __future__ import annotations

from typing import Optional

import httpx

from catalogue.shared.core.configuration import AppConfig
from catalogue.shared.core.event_bus import EventBus
from catalogue.shared.domain.auth import StaticAuthenticator
from catalogue.shared.domain.catalog import CatalogAccessor, ProductMutations
from catalogue.shared.domain.settings import SettingsStore
from catalogue.shared.infrastructure.remote.gateway import RemoteGateway

from .app_state import AppState


class Store:
    """Container for the shared services of one showroom session.

    Usage:
        # During app initialization
        store = Store(config)
        await store.settings.load()

        # In any screen controller
        controller = DashboardController(store)
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        """Initialize store.

        Args:
            config: Application configuration (defaults to ``AppConfig()``)
            transport: Optional httpx transport for the gateway (tests)
            event_bus: Optional shared event bus
        """
        self.config = config or AppConfig()
        self.bus = event_bus or EventBus()
        self.gateway = RemoteGateway(self.config.remote, transport=transport)
        self.settings = SettingsStore(self.gateway, self.bus)
        self.catalog = CatalogAccessor(self.gateway)
        self.mutations = ProductMutations(self.gateway)
        self.app = AppState(StaticAuthenticator())
        self.settings_version = 0
        self._settings_subscription = self.settings.subscribe(self._on_settings)

    @property
    def ui(self):
        return self.config.ui

    async def _on_settings(self, settings) -> None:
        self.settings_version += 1

    async def start(self) -> None:
        """Load remote settings once; never blocks on failure."""
        if not self.settings.loaded:
            await self.settings.load()
