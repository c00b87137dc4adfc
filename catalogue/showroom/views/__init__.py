"""Views package - Streamlit page implementations for the showroom.

Each page follows the same pattern: a render function that takes a Session
object (and, where the page needs it, the current screen) and renders the UI.
"""

from .browse import render_product_detail, render_product_list, render_search
from .dashboard import render_dashboard
from .editor import render_add_product, render_edit_product
from .login import render_login
from .settings import render_app_settings, render_settings, render_settings_products

__all__ = [
    'render_add_product',
    'render_app_settings',
    'render_dashboard',
    'render_edit_product',
    'render_login',
    'render_product_detail',
    'render_product_list',
    'render_search',
    'render_settings',
    'render_settings_products',
]
