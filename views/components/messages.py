"""
Inline success/error messages shared by the forms.
"""

import streamlit as st
from typing import Optional


def render_form_messages(ok: Optional[str], err: Optional[str]):
    """Show the success and error messages of a form, if any."""
    if ok:
        st.success(ok)
    if err:
        st.error(err)


def render_banner(banner: Optional[dict]):
    """
    Render a {type, text} banner.

    Args:
        banner: Dict with type "success", "error" or "info", or None
    """
    if not banner:
        return

    if banner["type"] == "success":
        st.success(banner["text"])
    elif banner["type"] == "error":
        st.error(banner["text"])
    else:
        st.info(banner["text"])
