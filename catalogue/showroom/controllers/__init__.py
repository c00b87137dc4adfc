"""Screen controllers.

One controller per screen; each holds the screen's local state and talks to
the shared services through the injected :class:`~catalogue.showroom.state.Store`.
"""

from .base import ProductCollectionController, ScreenController
from .browse import DashboardController, ProductDetailController, ProductListController, SearchController
from .editor import AddProductController, EditProductController
from .management import AppSettingsController, SettingsController, SettingsProductsController

__all__ = [
    "ProductCollectionController",
    "ScreenController",
    "DashboardController",
    "ProductDetailController",
    "ProductListController",
    "SearchController",
    "AddProductController",
    "EditProductController",
    "AppSettingsController",
    "SettingsController",
    "SettingsProductsController",
]
