"""Dashboard page - category tiles, search and the add-product shortcut."""

import streamlit as st

from catalogue.showroom.controllers import DashboardController
from catalogue.showroom.session import Session


def render_dashboard(session: Session):
    """Render the Dashboard page."""
    controller: DashboardController = session.controller_for(session.app.screen, DashboardController)

    header_col, settings_col = st.columns([0.9, 0.1])
    with header_col:
        st.title(session.store.ui.page_title)
    with settings_col:
        if st.button("⚙️", key=session.widget_key("open_settings"), help="Settings"):
            controller.open_settings()
            st.rerun()

    with st.form(session.widget_key("search_form"), clear_on_submit=False):
        search_col, button_col = st.columns([0.85, 0.15])
        with search_col:
            text = st.text_input(
                "Search",
                placeholder="Search for a product...",
                label_visibility="collapsed",
            )
        with button_col:
            submitted = st.form_submit_button("Search", width="stretch")
    if submitted and controller.submit_search(text):
        st.rerun()

    st.subheader("Browse Categories")
    for row in controller.category_rows():
        columns = st.columns(controller.grid_columns)
        for column, category in zip(columns, row):
            with column:
                key = session.widget_key("category", category, session.settings_version)
                if st.button(category, key=key, width="stretch"):
                    controller.open_category(category)
                    st.rerun()

    st.markdown("")
    if st.button("+ Add New Product", key=session.widget_key("add_product"), type="primary"):
        controller.add_product()
        st.rerun()
