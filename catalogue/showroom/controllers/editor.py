"""Add and edit product forms."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from catalogue.shared.core.errors import CatalogueError
from catalogue.shared.domain.catalog import ProductForm
from catalogue.shared.domain.models import Category, DEFAULT_CATEGORY, Product
from catalogue.showroom.state.screens import Dashboard, ProductDetail

from .base import ScreenController

if TYPE_CHECKING:
    from catalogue.showroom.state.store import Store

logger = logging.getLogger(__name__)

ADDED_MESSAGE = "Product added successfully!"
UPDATED_MESSAGE = "Product updated successfully!"


class ProductFormController(ScreenController):
    """Shared form behaviour for the add and edit screens."""

    def __init__(self, store: "Store", form: ProductForm) -> None:
        super().__init__(store)
        self.form = form
        self.saving = False
        self.generation = 0

    @property
    def categories(self) -> List[str]:
        return Category.labels()

    def select_category(self, category: str) -> None:
        self.form.category = category

    @property
    def preview_urls(self) -> List[str]:
        return self.form.image_urls()

    @property
    def preview_placeholder(self) -> str:
        return self.store.ui.preview_placeholder

    def _check(self) -> bool:
        problem = self.form.validate()
        if problem:
            self.app.show_alert(problem, "error")
            return False
        return True


class AddProductController(ProductFormController):

    def __init__(self, store: "Store", initial_category: Optional[str] = None) -> None:
        self.initial_category = initial_category if initial_category else DEFAULT_CATEGORY
        super().__init__(store, ProductForm(category=self.initial_category))

    async def save(self) -> bool:
        if not self._check():
            return False
        self.saving = True
        try:
            await self.store.mutations.add(self.form)
        except CatalogueError as exc:
            self.fail("Failed to add product", exc)
            return False
        finally:
            self.saving = False

        if self.scope.closed:
            logger.debug("AddProductController: screen left before add completed")
            return True
        self.form.clear(self.initial_category)
        self.generation += 1
        self.app.show_alert(ADDED_MESSAGE, "success", then=Dashboard())
        return True


class EditProductController(ProductFormController):

    def __init__(self, store: "Store", product: Product) -> None:
        super().__init__(store, ProductForm.from_product(product))
        self.original = product

    async def save(self) -> Optional[Product]:
        """Submit the update and show the updated product in place."""
        if not self._check():
            return None
        self.saving = True
        try:
            updated = await self.store.mutations.update(self.form)
        except CatalogueError as exc:
            self.fail("Failed to update product", exc)
            return None
        finally:
            self.saving = False

        if self.scope.closed:
            logger.debug("EditProductController: screen left before update completed")
            return updated
        self.app.navigate(ProductDetail(updated))
        self.app.show_alert(UPDATED_MESSAGE, "success")
        return updated

    def cancel(self) -> None:
        self.app.navigate(ProductDetail(self.original))
