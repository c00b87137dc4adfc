"""Settings hub, product management and display settings screens."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from catalogue.shared.core.errors import CatalogueError
from catalogue.shared.domain.models import (
    DisplaySettings,
    MAX_GRID_COLUMNS,
    MIN_GRID_COLUMNS,
    Product,
    format_number,
    parse_font_size,
    parse_grid_columns,
)
from catalogue.showroom.state.screens import AppSettings, EditProduct, SettingsProducts

from .base import ProductCollectionController, ScreenController

if TYPE_CHECKING:
    from catalogue.showroom.state.store import Store

logger = logging.getLogger(__name__)

DELETE_CONFIRM_MESSAGE = "Are you sure you want to delete this product?"
CLEAR_ALL_CONFIRM_MESSAGE = (
    "WARNING: This will delete ALL products in the catalog. "
    "This action cannot be undone. Are you sure?"
)
DELETED_MESSAGE = "Product deleted successfully!"
CLEARED_MESSAGE = "All catalog data cleared!"
SETTINGS_SAVED_MESSAGE = "Settings saved successfully!"
FONT_SIZE_INVALID_MESSAGE = "Base font size must be a positive number."
GRID_COLUMNS_INVALID_MESSAGE = (
    f"Category grid columns must be a whole number between {MIN_GRID_COLUMNS} and {MAX_GRID_COLUMNS}."
)


class SettingsController(ScreenController):
    """Hub linking to display settings and product management."""

    def open_app_settings(self) -> None:
        self.app.navigate(AppSettings())

    def open_products(self) -> None:
        self.app.navigate(SettingsProducts())


class SettingsProductsController(ProductCollectionController):
    """Filterable product list with edit, delete and clear-all."""

    def __init__(self, store: "Store") -> None:
        super().__init__(store)
        self.filter_text = ""

    @property
    def filtered(self) -> List[Product]:
        return self.store.catalog.filter_by_name(self.filter_text, self.products)

    def edit(self, product: Product) -> None:
        self.app.navigate(EditProduct(product))

    def request_delete(self, product: Product) -> None:
        self.app.request_confirmation(DELETE_CONFIRM_MESSAGE, lambda: self._delete(product.id))

    def request_clear_all(self) -> None:
        self.app.request_confirmation(CLEAR_ALL_CONFIRM_MESSAGE, self._clear_all, danger=True)

    async def _delete(self, product_id) -> bool:
        try:
            await self.store.mutations.delete(product_id)
        except CatalogueError as exc:
            self.fail("Failed to delete product", exc)
            return False
        if self.scope.closed:
            return True
        self.app.show_alert(DELETED_MESSAGE, "success")
        await self.load()
        return True

    async def _clear_all(self) -> bool:
        try:
            await self.store.mutations.clear_all()
        except CatalogueError as exc:
            self.fail("Failed to clear all data", exc)
            return False
        if self.scope.closed:
            return True
        self.products = []
        self.app.show_alert(CLEARED_MESSAGE, "success")
        return True


class AppSettingsController(ScreenController):
    """Editable draft of the display settings."""

    def __init__(self, store: "Store") -> None:
        super().__init__(store)
        self.saving = False
        self.revision = 0
        self._fill(self.settings)

    def _fill(self, settings: DisplaySettings) -> None:
        self.revision += 1
        self.background_url = settings.background_url
        self.primary_color = settings.primary_color
        self.secondary_color = settings.secondary_color
        self.font_family = settings.font_family
        self.base_font_size_px = format_number(settings.base_font_size_px)
        self.category_grid_columns = str(settings.category_grid_columns)

    def validate(self) -> Optional[str]:
        if parse_font_size(self.base_font_size_px) is None:
            return FONT_SIZE_INVALID_MESSAGE
        columns = parse_grid_columns(self.category_grid_columns)
        if columns is None or not MIN_GRID_COLUMNS <= columns <= MAX_GRID_COLUMNS:
            return GRID_COLUMNS_INVALID_MESSAGE
        return None

    def draft(self) -> DisplaySettings:
        """The draft as settings, keeping current values for blank text fields."""
        current = self.settings
        return DisplaySettings(
            background_url=self.background_url.strip() or current.background_url,
            primary_color=self.primary_color.strip() or current.primary_color,
            secondary_color=self.secondary_color.strip() or current.secondary_color,
            font_family=self.font_family.strip() or current.font_family,
            base_font_size_px=parse_font_size(self.base_font_size_px),
            category_grid_columns=parse_grid_columns(self.category_grid_columns),
        )

    async def save(self) -> bool:
        problem = self.validate()
        if problem:
            self.app.show_alert(problem, "error")
            return False

        self.saving = True
        try:
            result = await self.store.settings.save(self.draft())
        finally:
            self.saving = False

        if self.scope.closed:
            return result.success
        if not result.success:
            self.app.show_alert(f"Failed to save settings: {result.message}", "error")
            return False
        self._fill(self.settings)
        self.app.show_alert(result.message or SETTINGS_SAVED_MESSAGE, "success")
        return True

    def reset_to_defaults(self) -> None:
        """Reset the draft only; nothing is saved until :meth:`save`."""
        self._fill(DisplaySettings())

    def revert(self) -> None:
        self._fill(self.settings)
