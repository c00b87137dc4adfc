"""Screen states for the showroom router.

Each screen is a frozen dataclass carrying exactly the context it needs, so a
product list always knows its category and a detail page always has its
product. String ids are only accepted at the ``navigate`` boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from catalogue.shared.domain.models import Product

PRODUCT_LIST_PREFIX = "ProductList-"


class ScreenId(str, Enum):
    DASHBOARD = "Dashboard"
    ADD_PRODUCT = "AddProduct"
    SETTINGS = "Settings"
    APP_SETTINGS = "AppSettings"
    SETTINGS_PRODUCTS = "SettingsProducts"
    SEARCH = "Search"
    PRODUCT_LIST = "ProductList"
    PRODUCT_DETAIL = "ProductDetail"
    EDIT_PRODUCT = "EditProduct"


@dataclass(frozen=True)
class Dashboard:
    id = ScreenId.DASHBOARD


@dataclass(frozen=True)
class AddProduct:
    initial_category: Optional[str] = None
    id = ScreenId.ADD_PRODUCT


@dataclass(frozen=True)
class Settings:
    id = ScreenId.SETTINGS


@dataclass(frozen=True)
class AppSettings:
    id = ScreenId.APP_SETTINGS


@dataclass(frozen=True)
class SettingsProducts:
    id = ScreenId.SETTINGS_PRODUCTS


@dataclass(frozen=True)
class Search:
    term: str = ""
    id = ScreenId.SEARCH


@dataclass(frozen=True)
class ProductList:
    category: str
    id = ScreenId.PRODUCT_LIST

    @property
    def key(self) -> str:
        return f"{PRODUCT_LIST_PREFIX}{self.category}"


@dataclass(frozen=True)
class ProductDetail:
    product: Product
    id = ScreenId.PRODUCT_DETAIL


@dataclass(frozen=True)
class EditProduct:
    product: Product
    id = ScreenId.EDIT_PRODUCT


Screen = Union[
    Dashboard,
    AddProduct,
    Settings,
    AppSettings,
    SettingsProducts,
    Search,
    ProductList,
    ProductDetail,
    EditProduct,
]

SCREEN_TYPES = (
    Dashboard,
    AddProduct,
    Settings,
    AppSettings,
    SettingsProducts,
    Search,
    ProductList,
    ProductDetail,
    EditProduct,
)


def is_screen(value: object) -> bool:
    return isinstance(value, SCREEN_TYPES)


def parse_screen(
    screen_id: str,
    category: Optional[str] = None,
    product: Optional[Product] = None,
    search_term: str = "",
) -> Screen:
    """Build a screen from a string id and optional context.

    ``"ProductList-<category>"`` is split on the first dash only, so
    categories such as ``Eco-Friendly`` survive. Unknown ids, and ids whose
    required context is missing, resolve to :class:`Dashboard`.
    """
    screen_id = (screen_id or "").strip()

    if screen_id.startswith(PRODUCT_LIST_PREFIX):
        list_category = screen_id[len(PRODUCT_LIST_PREFIX):]
        return ProductList(list_category) if list_category else Dashboard()

    try:
        known = ScreenId(screen_id)
    except ValueError:
        return Dashboard()

    if known is ScreenId.DASHBOARD:
        return Dashboard()
    if known is ScreenId.ADD_PRODUCT:
        return AddProduct(initial_category=category)
    if known is ScreenId.SETTINGS:
        return Settings()
    if known is ScreenId.APP_SETTINGS:
        return AppSettings()
    if known is ScreenId.SETTINGS_PRODUCTS:
        return SettingsProducts()
    if known is ScreenId.SEARCH:
        return Search(term=search_term)
    if known is ScreenId.PRODUCT_LIST:
        return ProductList(category) if category else Dashboard()
    if known is ScreenId.PRODUCT_DETAIL:
        return ProductDetail(product) if product is not None else Dashboard()
    if known is ScreenId.EDIT_PRODUCT:
        return EditProduct(product) if product is not None else Dashboard()
    return Dashboard()


def screen_key(screen: Screen) -> str:
    """Stable string key, e.g. for widget keys."""
    if isinstance(screen, ProductList):
        return screen.key
    return screen.id.value
