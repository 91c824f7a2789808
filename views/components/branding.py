"""
Branding panel shown beside the login and register forms.
"""

import streamlit as st


def render_branding(tagline: str):
    """Render the Atgest logo block with a tagline."""
    st.markdown("# Atgest")
    st.markdown(f"#### {tagline}")
    st.markdown("")
    st.info("Gestión automotriz moderna para talleres y servicios especializados.")
