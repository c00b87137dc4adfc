"""Browsing pages - category product list, search results and product detail."""

from html import escape

import streamlit as st

from catalogue.showroom.components import render_product_grid
from catalogue.showroom.controllers import (
    ProductCollectionController,
    ProductDetailController,
    ProductListController,
    SearchController,
)
from catalogue.showroom.session import Session
from catalogue.showroom.state import ProductDetail, ProductList, Search
from catalogue.showroom.theme import markdown_text


def _back_button(session: Session, label: str):
    if st.button(label, key=session.widget_key("back")):
        session.app.go_back()
        st.rerun()


def _ensure_loaded(session: Session, controller: ProductCollectionController, message: str) -> bool:
    """Run the screen's one fetch on first render. Returns False on error."""
    if controller.loading:
        with st.spinner(message):
            session.run(controller.load())
    if controller.error:
        st.error(f"Error: {controller.error}")
        return False
    return True


def render_product_list(session: Session, screen: ProductList):
    controller: ProductListController = session.controller_for(
        screen, lambda store: ProductListController(store, screen.category)
    )
    _back_button(session, "← Back to Dashboard")

    title_col, add_col = st.columns([0.8, 0.2])
    with title_col:
        st.header(screen.category)
    with add_col:
        if st.button("+ Add Product", key=session.widget_key("add_in_category"), type="primary"):
            controller.add_product()
            st.rerun()
    st.divider()

    if _ensure_loaded(session, controller, "Loading products..."):
        render_product_grid(session, controller, controller.products)


def render_search(session: Session, screen: Search):
    controller: SearchController = session.controller_for(
        screen, lambda store: SearchController(store, screen.term)
    )
    _back_button(session, "← Back to Dashboard")
    st.header(markdown_text(controller.title))

    if _ensure_loaded(session, controller, "Searching..."):
        render_product_grid(session, controller, controller.products)


def render_product_detail(session: Session, screen: ProductDetail):
    controller: ProductDetailController = session.controller_for(
        screen, lambda store: ProductDetailController(store, screen.product)
    )
    back_col, edit_col = st.columns([0.8, 0.2])
    with back_col:
        _back_button(session, "← Back to List")
    with edit_col:
        if st.button("✏️ Edit", key=session.widget_key("edit")):
            controller.edit()
            st.rerun()

    _, center, _ = st.columns([1, 2, 1])
    with center:
        for index, url in enumerate(controller.images):
            st.image(url, caption=f"{controller.product.name} image {index + 1}", width="stretch")
        st.header(markdown_text(controller.product.name))
        st.markdown(
            f"<p class='catalogue-detail-price'>{controller.price_label}</p>"
            f"<p class='catalogue-description'>{escape(controller.product.description)}</p>",
            unsafe_allow_html=True,
        )
        if controller.product.category:
            st.caption(f"Category: {markdown_text(controller.product.category)}")
