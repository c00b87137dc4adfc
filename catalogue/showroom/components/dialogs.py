"""Confirmation and alert components.

Both render inline at the top of the page instead of using native browser
dialogs.
"""

import streamlit as st

from catalogue.showroom.session import Session
from catalogue.showroom.theme import DANGER_RED


def render_confirmation(session: Session) -> bool:
    """Render the pending yes/cancel prompt. Returns True if one is shown."""
    pending = session.app.pending_confirmation
    if pending is None:
        return False

    with st.container(border=True):
        if pending.danger:
            st.markdown(
                f"<p style='color:{DANGER_RED};font-weight:bold'>{pending.message}</p>",
                unsafe_allow_html=True,
            )
        else:
            st.warning(pending.message)

        col1, col2, _ = st.columns([1, 1, 4])
        with col1:
            if st.button("Yes", key=session.widget_key("confirm_yes"), type="primary", width="stretch"):
                with st.spinner("Working..."):
                    session.run(session.app.confirm())
                st.rerun()
        with col2:
            if st.button("Cancel", key=session.widget_key("confirm_cancel"), width="stretch"):
                session.app.cancel_confirmation()
                st.rerun()
    return True


def render_alert(session: Session) -> bool:
    """Render the current alert with its dismiss button."""
    alert = session.app.alert
    if alert is None:
        return False

    with st.container(border=True):
        if alert.kind == "success":
            st.success(alert.message)
        elif alert.kind == "error":
            st.error(alert.message)
        else:
            st.info(alert.message)

        if st.button("OK", key=session.widget_key("alert_ok")):
            session.app.dismiss_alert()
            st.rerun()
    return True
