"""
Atgest - Home Page

Landing page of the Atgest workshop management dashboard.
"""

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="Atgest",
    page_icon="🚗",
    layout="wide"
)

from config.logger import setup_logging
from views.home_view import HomeView

setup_logging()

view = HomeView()
view.render()
