"""Main Streamlit application entry point for the Comfort Digital Catalogue.

Run with: streamlit run catalogue/showroom/app.py

This application provides a web-based interface for:
- Browsing the product catalogue by category or free-text search
- Adding, editing and deleting products
- Editing the shared display settings (background, colours, font, grid)
"""

import logging

import streamlit as st

from catalogue.shared.core.configuration import ValidationLevel, get_config
from catalogue.showroom.components import render_alert, render_confirmation
from catalogue.showroom.session import Session
from catalogue.showroom.state import (
    AddProduct,
    AppSettings,
    Dashboard,
    EditProduct,
    ProductDetail,
    ProductList,
    Search,
    Settings,
    SettingsProducts,
)
from catalogue.showroom.theme import build_css
from catalogue.showroom.views import (
    render_add_product,
    render_app_settings,
    render_dashboard,
    render_edit_product,
    render_login,
    render_product_detail,
    render_product_list,
    render_search,
    render_settings,
    render_settings_products,
)

logger = logging.getLogger(__name__)


def main():
    """Main Streamlit application entry point."""
    ui = get_config(ValidationLevel.LENIENT).ui
    st.set_page_config(
        page_title=ui.page_title,
        page_icon=ui.page_icon,
        layout=ui.layout,
        initial_sidebar_state="collapsed"
    )

    # Initialize session
    session = Session()
    session.initialize()

    if not session.app.authenticated:
        render_login(session)
    else:
        render_main_app(session)


def render_main_app(session: Session):
    """Render the current screen with the theme, alert and confirmation surfaces."""
    screen = session.app.screen
    st.markdown(
        build_css(session.settings, with_background=isinstance(screen, Dashboard)),
        unsafe_allow_html=True,
    )

    # Dialogs render above the page and block it until answered
    if render_alert(session) or render_confirmation(session):
        return

    try:
        if isinstance(screen, Dashboard):
            render_dashboard(session)
        elif isinstance(screen, ProductList):
            render_product_list(session, screen)
        elif isinstance(screen, Search):
            render_search(session, screen)
        elif isinstance(screen, ProductDetail):
            render_product_detail(session, screen)
        elif isinstance(screen, AddProduct):
            render_add_product(session, screen)
        elif isinstance(screen, EditProduct):
            render_edit_product(session, screen)
        elif isinstance(screen, Settings):
            render_settings(session)
        elif isinstance(screen, AppSettings):
            render_app_settings(session)
        elif isinstance(screen, SettingsProducts):
            render_settings_products(session)
        else:
            session.app.navigate(Dashboard())
            st.rerun()
    except Exception as e:
        logger.exception(f"Error rendering {type(screen).__name__}")
        st.error(f"Error rendering page: {e}")
        st.markdown("**Debug Info:**")
        st.code(str(e))


if __name__ == "__main__":
    main()
