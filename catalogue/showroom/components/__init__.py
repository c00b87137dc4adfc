from .dialogs import render_alert, render_confirmation
from .product_grid import render_product_grid

__all__ = [
    "render_alert",
    "render_confirmation",
    "render_product_grid",
]
