"""Session state management wrapper for the Streamlit showroom.

Provides type-safe access to st.session_state and centralized initialization
of the per-session service store, the screen controller cache and the async
runner used by every view.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

import streamlit as st

from catalogue.shared.core.configuration import ValidationLevel, get_config
from catalogue.shared.core.logging_config import setup_logging
from catalogue.shared.domain.models import DisplaySettings
from catalogue.showroom.controllers import ScreenController
from catalogue.showroom.state import AppState, Screen, Store

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_async(awaitable: Awaitable[T]) -> T:
    """Run one user action to completion inside the current script run."""
    return asyncio.run(_await(awaitable))


async def _await(awaitable: Awaitable[T]) -> T:
    return await awaitable


class Session:
    """Wrapper around st.session_state for type safety and centralized management."""

    @property
    def store(self) -> Store:
        """Service store of this browser session."""
        return st.session_state['store']

    @property
    def app(self) -> AppState:
        return self.store.app

    @property
    def settings(self) -> DisplaySettings:
        return self.store.settings.current

    @property
    def settings_version(self) -> int:
        """Bumped after every settings load and save; part of settings-bound widget keys."""
        return self.store.settings_version

    def initialize(self):
        """Create the store and load remote settings once per session."""
        if 'store' in st.session_state:
            return

        config = get_config(ValidationLevel.LENIENT)
        setup_logging(config.logging)

        store = Store(config)
        st.session_state['store'] = store
        st.session_state['controller'] = None

        with st.spinner("Loading catalogue settings..."):
            run_async(store.start())
        logger.info("Showroom session initialized")

    def run(self, awaitable: Awaitable[T]) -> T:
        return run_async(awaitable)

    def controller_for(self, screen: Screen, factory: Callable[[Store], ScreenController]) -> Any:
        """Return the controller of the current screen, building it on first render.

        A controller lives exactly as long as the screen's task scope, so a
        fresh navigation (even to an equal screen) gets a fresh controller.
        """
        scope_id = self.app.screen_scope.scope_id
        cached = st.session_state.get('controller')
        if cached is not None and cached[0] == scope_id:
            return cached[1]
        controller = factory(self.store)
        st.session_state['controller'] = (scope_id, controller)
        return controller

    def widget_key(self, name: str, *parts: Any) -> str:
        """Widget key unique to the current screen instance."""
        suffix = "_".join(str(part) for part in parts)
        base = f"s{self.app.screen_scope.scope_id}_{name}"
        return f"{base}_{suffix}" if suffix else base

    def logout(self):
        self.app.logout()
        st.session_state['controller'] = None
