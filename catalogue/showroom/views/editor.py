"""Product form pages - add a new product or edit an existing one."""

import streamlit as st

from catalogue.showroom.controllers import AddProductController, EditProductController
from catalogue.showroom.controllers.editor import ProductFormController
from catalogue.showroom.session import Session
from catalogue.showroom.state import AddProduct, EditProduct
from catalogue.showroom.theme import markdown_text


def _render_form_fields(session: Session, controller: ProductFormController):
    """Bind the form widgets to the controller's ProductForm."""
    form = controller.form
    generation = controller.generation

    form.name = st.text_input(
        "Product Name", value=form.name, key=session.widget_key("name", generation)
    )
    form.description = st.text_area(
        "Product Description", value=form.description, height=80,
        key=session.widget_key("description", generation),
    )
    form.price = st.text_input(
        "Price", value=form.price, placeholder="0.00", key=session.widget_key("price", generation)
    )
    form.image_urls_input = st.text_area(
        "Image URLs (separate with commas)", value=form.image_urls_input, height=80,
        key=session.widget_key("image_urls", generation),
    )

    categories = controller.categories
    index = categories.index(form.category) if form.category in categories else 0
    selected = st.radio(
        "Category", categories, index=index, horizontal=True,
        key=session.widget_key("category", generation),
    )
    controller.select_category(selected)

    previews = controller.preview_urls
    st.markdown("**Preview**")
    if not previews:
        st.image(controller.preview_placeholder, width=250)
    else:
        columns = st.columns(min(len(previews), 3))
        for position, url in enumerate(previews):
            with columns[position % len(columns)]:
                st.image(url, caption=f"Preview {position + 1}", width="stretch")


def render_add_product(session: Session, screen: AddProduct):
    controller: AddProductController = session.controller_for(
        screen, lambda store: AddProductController(store, screen.initial_category)
    )
    if st.button("← Back to Dashboard", key=session.widget_key("back")):
        session.app.go_back()
        st.rerun()
    st.header("Add a New Product")

    _render_form_fields(session, controller)

    if st.button("Save Product", key=session.widget_key("save"), type="primary", width="stretch"):
        with st.spinner("Saving product..."):
            session.run(controller.save())
        st.rerun()


def render_edit_product(session: Session, screen: EditProduct):
    controller: EditProductController = session.controller_for(
        screen, lambda store: EditProductController(store, screen.product)
    )
    if st.button("← Back to Product", key=session.widget_key("back")):
        controller.cancel()
        st.rerun()
    st.header(f"Edit {markdown_text(controller.original.name) or 'Product'}")

    _render_form_fields(session, controller)

    if st.button("Update Product", key=session.widget_key("save"), type="primary", width="stretch"):
        with st.spinner("Updating product..."):
            session.run(controller.save())
        st.rerun()
