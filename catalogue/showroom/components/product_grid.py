"""Product card grid shared by the category list and search results."""

from html import escape
from typing import List

import streamlit as st

from catalogue.shared.domain.models import Product
from catalogue.showroom.controllers import ProductCollectionController
from catalogue.showroom.session import Session

GRID_COLUMNS = 4


def render_product_grid(session: Session, controller: ProductCollectionController, products: List[Product]):
    """Render product cards; clicking "View" opens the detail page."""
    if not products:
        st.markdown(f"*{controller.empty_message}*")
        return

    for row_start in range(0, len(products), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS)
        for offset, (column, product) in enumerate(zip(columns, products[row_start:row_start + GRID_COLUMNS])):
            with column:
                with st.container(border=True):
                    st.image(controller.thumbnail(product), width="stretch")
                    st.markdown(
                        f"<p class='catalogue-product-name'>{escape(product.name)}</p>"
                        f"<p class='catalogue-price'>{product.price_label}</p>",
                        unsafe_allow_html=True,
                    )
                    if st.button("View", key=session.widget_key("view", row_start + offset)):
                        controller.select(product)
                        st.rerun()
