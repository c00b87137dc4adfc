"""Login page - static credential gate in front of the catalogue."""

import streamlit as st

from catalogue.showroom.session import Session
from catalogue.showroom.theme import login_css


def render_login(session: Session):
    st.markdown(login_css(session.store.ui.login_background_url), unsafe_allow_html=True)
    st.title(session.store.ui.page_title)

    if session.app.login_error:
        st.error(session.app.login_error)

    with st.form("login_form"):
        username = st.text_input("Username", placeholder="Username")
        password = st.text_input("Password", placeholder="Password", type="password")
        submitted = st.form_submit_button("Enter", type="primary", width="stretch")

    if submitted:
        session.app.login(username, password)
        st.rerun()
