"""Settings pages - hub, display settings and product management."""

import re

import streamlit as st

from catalogue.showroom.controllers import (
    AppSettingsController,
    SettingsController,
    SettingsProductsController,
)
from catalogue.showroom.session import Session
from catalogue.showroom.theme import DANGER_RED, markdown_text

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def _back_button(session: Session, label: str):
    if st.button(label, key=session.widget_key("back")):
        session.app.go_back()
        st.rerun()


def _color_input(session: Session, label: str, value: str, version: int) -> str:
    """Colour picker for hex values, plain text for any other CSS colour."""
    key = session.widget_key(label.lower().replace(" ", "_"), version)
    if HEX_COLOR.match(value):
        return st.color_picker(label, value=value, key=key)
    return st.text_input(label, value=value, key=key)


def render_settings(session: Session):
    """Render the Settings hub."""
    controller: SettingsController = session.controller_for(session.app.screen, SettingsController)
    _back_button(session, "← Back to Dashboard")
    st.header("Settings")

    col1, col2 = st.columns(2)
    with col1:
        with st.container(border=True):
            st.subheader("🎨 App Settings")
            st.caption("Background, colors, font and category grid layout.")
            if st.button("Open App Settings", key=session.widget_key("app_settings"), width="stretch"):
                controller.open_app_settings()
                st.rerun()
    with col2:
        with st.container(border=True):
            st.subheader("📦 Manage Products")
            st.caption("Edit or delete products, or clear the whole catalog.")
            if st.button("Open Product Management", key=session.widget_key("products"), width="stretch"):
                controller.open_products()
                st.rerun()

    st.divider()
    if st.button("Log out", key=session.widget_key("logout")):
        session.logout()
        st.rerun()


def render_app_settings(session: Session):
    controller: AppSettingsController = session.controller_for(session.app.screen, AppSettingsController)
    _back_button(session, "← Back to Settings")
    st.header("App Settings")

    # Inputs are rebuilt whenever the draft is refilled by a save or reset.
    version = controller.revision

    controller.background_url = st.text_input(
        "Background Image URL", value=controller.background_url,
        key=session.widget_key("background_url", version),
    )
    color_col1, color_col2 = st.columns(2)
    with color_col1:
        controller.primary_color = _color_input(
            session, "Primary Color", controller.primary_color, version
        )
    with color_col2:
        controller.secondary_color = _color_input(
            session, "Secondary Color", controller.secondary_color, version
        )
    controller.font_family = st.text_input(
        "Font Family", value=controller.font_family,
        key=session.widget_key("font_family", version),
    )
    size_col, grid_col = st.columns(2)
    with size_col:
        controller.base_font_size_px = st.text_input(
            "Base Font Size (px)", value=controller.base_font_size_px,
            key=session.widget_key("font_size", version),
        )
    with grid_col:
        controller.category_grid_columns = st.text_input(
            "Category Grid Columns (1-5)", value=controller.category_grid_columns,
            key=session.widget_key("grid_columns", version),
        )

    save_col, reset_col = st.columns(2)
    with save_col:
        if st.button("Save Settings", key=session.widget_key("save"), type="primary", width="stretch"):
            with st.spinner("Saving settings..."):
                session.run(controller.save())
            st.rerun()
    with reset_col:
        if st.button("Reset to Defaults", key=session.widget_key("reset"), width="stretch"):
            controller.reset_to_defaults()
            st.rerun()


def render_settings_products(session: Session):
    controller: SettingsProductsController = session.controller_for(
        session.app.screen, SettingsProductsController
    )
    _back_button(session, "← Back to Settings")
    st.header("Manage Products")

    if controller.loading:
        with st.spinner("Loading products..."):
            session.run(controller.load())
    if controller.error:
        st.error(f"Error: {controller.error}")
        return

    controller.filter_text = st.text_input(
        "Filter by name", value=controller.filter_text,
        placeholder="Type to filter products...",
        key=session.widget_key("filter"),
    )

    products = controller.filtered
    if not products:
        st.markdown(f"*{controller.empty_message}*")
    for index, product in enumerate(products):
        with st.container(border=True):
            name_col, category_col, price_col, edit_col, delete_col = st.columns([0.4, 0.2, 0.15, 0.1, 0.15])
            with name_col:
                st.markdown(f"**{markdown_text(product.name)}**")
            with category_col:
                st.caption(markdown_text(product.category))
            with price_col:
                st.markdown(markdown_text(product.price_label))
            with edit_col:
                if st.button("Edit", key=session.widget_key("edit", index)):
                    controller.edit(product)
                    st.rerun()
            with delete_col:
                if st.button("Delete", key=session.widget_key("delete", index)):
                    controller.request_delete(product)
                    st.rerun()

    st.divider()
    st.markdown(
        f"<p style='color: {DANGER_RED}; font-weight: bold;'>Danger Zone</p>",
        unsafe_allow_html=True,
    )
    if st.button("Clear All Data", key=session.widget_key("clear_all"), type="primary"):
        controller.request_clear_all()
        st.rerun()
