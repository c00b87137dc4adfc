"""Browsing screens: dashboard, category list, search results, detail page."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from catalogue.shared.domain.models import Category, Product
from catalogue.showroom.state.screens import AddProduct, EditProduct, ProductList, Settings

from .base import ProductCollectionController, ScreenController

if TYPE_CHECKING:
    from catalogue.showroom.state.store import Store

logger = logging.getLogger(__name__)


class DashboardController(ScreenController):
    """Category tiles, search box and the add-product shortcut."""

    def __init__(self, store: "Store") -> None:
        super().__init__(store)
        self.search_text = ""

    @property
    def categories(self) -> List[str]:
        return Category.labels()

    @property
    def grid_columns(self) -> int:
        return self.settings.category_grid_columns

    def category_rows(self) -> List[List[str]]:
        """Categories chunked into rows of ``grid_columns``."""
        columns = max(1, self.grid_columns)
        labels = self.categories
        return [labels[i:i + columns] for i in range(0, len(labels), columns)]

    def submit_search(self, text: str | None = None) -> bool:
        if text is not None:
            self.search_text = text
        return self.app.submit_search(self.search_text)

    def open_category(self, category: str) -> None:
        self.app.navigate(ProductList(category))

    def open_settings(self) -> None:
        self.app.navigate(Settings())

    def add_product(self) -> None:
        self.app.navigate(AddProduct())


class ProductListController(ProductCollectionController):
    """Products of one category."""

    empty_message = "No products found in this category."

    def __init__(self, store: "Store", category: str) -> None:
        super().__init__(store)
        self.category = category

    def derive(self, products: List[Product]) -> List[Product]:
        return self.store.catalog.by_category(self.category, products)

    def add_product(self) -> None:
        self.app.navigate(AddProduct(initial_category=self.category))


class SearchController(ProductCollectionController):
    """Client-side search over the full product list."""

    def __init__(self, store: "Store", term: str) -> None:
        super().__init__(store)
        self.term = term

    @property
    def title(self) -> str:
        return f'Search Results for "{self.term}"'

    def derive(self, products: List[Product]) -> List[Product]:
        return self.store.catalog.search(self.term, products)


class ProductDetailController(ScreenController):

    def __init__(self, store: "Store", product: Product) -> None:
        super().__init__(store)
        self.product = product

    @property
    def images(self) -> List[str]:
        return self.product.gallery(self.store.ui.detail_placeholder)

    @property
    def price_label(self) -> str:
        return self.product.price_label

    def edit(self) -> None:
        self.app.navigate(EditProduct(self.product))
