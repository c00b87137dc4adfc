"""State management for the showroom.

Architecture:
- AppState: authentication, navigation, confirmation gate, alerts
- Store: container wiring the shared services into one injectable object
- screens: tagged screen states
"""

from .app_state import AppState
from .dialogs import Alert, ConfirmationGate, PendingConfirmation
from .screens import (
    AddProduct,
    AppSettings,
    Dashboard,
    EditProduct,
    ProductDetail,
    ProductList,
    Screen,
    ScreenId,
    Search,
    Settings,
    SettingsProducts,
    parse_screen,
)
from .store import Store

__all__ = [
    "AppState",
    "Alert",
    "ConfirmationGate",
    "PendingConfirmation",
    "AddProduct",
    "AppSettings",
    "Dashboard",
    "EditProduct",
    "ProductDetail",
    "ProductList",
    "Screen",
    "ScreenId",
    "Search",
    "Settings",
    "SettingsProducts",
    "parse_screen",
    "Store",
]
