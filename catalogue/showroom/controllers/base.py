"""Common plumbing for screen controllers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from catalogue.shared.core.errors import CatalogueError
from catalogue.shared.domain.models import Product
from catalogue.showroom.state.screens import ProductDetail

if TYPE_CHECKING:
    from catalogue.showroom.state.store import Store

logger = logging.getLogger(__name__)


class ScreenController:
    """Base class: binds a controller to the screen scope it was created in."""

    def __init__(self, store: "Store") -> None:
        self.store = store
        self.app = store.app
        self.scope = store.app.screen_scope

    @property
    def settings(self):
        return self.store.settings.current

    def fail(self, prefix: str, exc: CatalogueError) -> None:
        """Route a caught failure to the alert surface."""
        message = f"{prefix}: {exc}" if prefix else str(exc)
        logger.warning(f"{type(self).__name__}: {message}")
        if self.scope.active:
            self.app.show_alert(message, "error")

    def back(self) -> None:
        self.app.go_back()


class ProductCollectionController(ScreenController):
    """Loads the full product list and keeps a derived subset."""

    empty_message = "No products found."

    def __init__(self, store: "Store") -> None:
        super().__init__(store)
        self.loading = True
        self.error: Optional[str] = None
        self.products: List[Product] = []

    def derive(self, products: List[Product]) -> List[Product]:
        return products

    async def load(self) -> bool:
        """Fetch and derive. Returns False when the result arrived stale."""
        self.loading = True
        self.error = None
        try:
            result = await self.scope.run(self.store.catalog.fetch_all())
        except CatalogueError as exc:
            self.error = str(exc) or "Failed to load products."
            self.loading = False
            return True
        if result.stale:
            return False
        self.products = self.derive(result.value or [])
        self.loading = False
        return True

    def select(self, product: Product) -> None:
        self.app.navigate(ProductDetail(product))

    def thumbnail(self, product: Product) -> str:
        return product.thumbnail_url(self.store.ui.thumbnail_placeholder)
