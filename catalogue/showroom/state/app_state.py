"""Application Shell State.

Top-level state of the showroom: authentication, the current screen and its
context, the search term, the confirmation gate and the alert surface. The
screen changes only through :meth:`AppState.navigate`.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Union

from catalogue.shared.core.task_scope import TaskScope
from catalogue.shared.domain.auth import INVALID_CREDENTIALS_MESSAGE, StaticAuthenticator
from catalogue.shared.domain.models import Product

from .dialogs import Alert, AlertKind, ConfirmAction, ConfirmationGate, PendingConfirmation
from .screens import (
    AppSettings,
    Dashboard,
    EditProduct,
    ProductDetail,
    ProductList,
    Screen,
    Search,
    Settings,
    SettingsProducts,
    is_screen,
    parse_screen,
    screen_key,
)

logger = logging.getLogger(__name__)

ChangeListener = Callable[[Screen], None]


class AppState:
    """State for the Application Shell.

    Usage:
        state = AppState()
        state.login("Admin", "MarketingComfort25")
        state.navigate("ProductList-Towels")
        state.navigate(state.back_target())
    """

    def __init__(self, authenticator: Optional[StaticAuthenticator] = None) -> None:
        self.authenticator = authenticator or StaticAuthenticator()

        # Authentication
        self.authenticated: bool = False
        self.login_error: str = ""

        # Navigation
        self._screen: Screen = Dashboard()
        self._scope = TaskScope(screen_key(self._screen))
        self.search_term: str = ""

        # Dialogs
        self.confirmation = ConfirmationGate()
        self.alert: Optional[Alert] = None

        self._listeners: List[ChangeListener] = []

    # --- Authentication ---

    def login(self, username: str, password: str) -> bool:
        if self.authenticator.check(username, password):
            self.authenticated = True
            self.login_error = ""
            logger.info("AppState: user authenticated")
            return True
        self.login_error = INVALID_CREDENTIALS_MESSAGE
        return False

    def logout(self) -> None:
        self.authenticated = False
        self.login_error = ""
        self.search_term = ""
        self.alert = None
        self.confirmation.cancel()
        self._set_screen(Dashboard())

    # --- Navigation ---

    @property
    def screen(self) -> Screen:
        return self._screen

    @property
    def screen_scope(self) -> TaskScope:
        """Task scope of the current screen; closed as soon as it is left."""
        return self._scope

    @property
    def selected_product(self) -> Optional[Product]:
        if isinstance(self._screen, (ProductDetail, EditProduct)):
            return self._screen.product
        return None

    def navigate(
        self,
        screen: Union[Screen, str],
        category: Optional[str] = None,
        product: Optional[Product] = None,
    ) -> Screen:
        """Switch screens, replacing all navigation context at once."""
        if is_screen(screen):
            target = screen
        else:
            target = parse_screen(str(screen), category=category, product=product, search_term=self.search_term)
            if target == Dashboard() and str(screen) != Dashboard.id.value:
                logger.debug(f"AppState: unrecognised screen {screen!r}, falling back to Dashboard")

        if isinstance(target, Search):
            self.search_term = target.term
        self._set_screen(target)
        return target

    def back_target(self) -> Screen:
        """Forward target of the current screen's back button."""
        screen = self._screen
        if isinstance(screen, ProductDetail):
            if screen.product.category:
                return ProductList(screen.product.category)
            return Dashboard()
        if isinstance(screen, EditProduct):
            return ProductDetail(screen.product)
        if isinstance(screen, (AppSettings, SettingsProducts)):
            return Settings()
        return Dashboard()

    def go_back(self) -> Screen:
        return self.navigate(self.back_target())

    def submit_search(self, text: Optional[str]) -> bool:
        term = (text or "").strip()
        if not term:
            return False
        self.navigate(Search(term=term))
        return True

    def on_change(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def _set_screen(self, target: Screen) -> None:
        self._scope.close()
        self._screen = target
        self._scope = TaskScope(screen_key(target))
        logger.debug(f"AppState: screen -> {screen_key(target)}")
        for listener in list(self._listeners):
            listener(target)

    # --- Confirmation gate ---

    @property
    def pending_confirmation(self) -> Optional[PendingConfirmation]:
        return self.confirmation.pending

    def request_confirmation(self, message: str, action: ConfirmAction, danger: bool = False) -> None:
        self.confirmation.request(message, action, danger)

    async def confirm(self) -> None:
        await self.confirmation.confirm()

    def cancel_confirmation(self) -> None:
        self.confirmation.cancel()

    # --- Alerts ---

    def show_alert(self, message: str, kind: AlertKind = "info", then: Optional[Screen] = None) -> None:
        self.alert = Alert(message, kind, then)

    def dismiss_alert(self) -> None:
        alert, self.alert = self.alert, None
        if alert is not None and alert.is_success and alert.then is not None:
            self.navigate(alert.then)
