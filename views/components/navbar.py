"""
Dashboard navigation: top bar with user/logout and the side menu.
"""

import streamlit as st
from typing import Callable

from config.navigation import ORDERS_PAGE, INVENTORY_PAGE, LOGIN_PAGE

# (label, page script or None for sections not built yet, icon)
MENU_ITEMS = [
    ("Órdenes", ORDERS_PAGE, "🔧"),
    ("Inventario", INVENTORY_PAGE, "📦"),
    ("Clientes", None, "👥"),
    ("Servicios", None, "🛠️"),
    ("Ajustes", None, "⚙️"),
]


def render_navbar(title: str, user_name: str, on_logout: Callable[[], None]):
    """
    Render the top bar of a dashboard page.

    Args:
        title: Section title (e.g. "Inventario")
        user_name: Name shown next to the logout button
        on_logout: Callback that ends the session
    """
    col_title, col_user, col_logout = st.columns([6, 2, 1])

    with col_title:
        st.title(f"Atgest · {title}")

    with col_user:
        st.caption("Sesión")
        st.markdown(f"**{user_name}**")

    with col_logout:
        if st.button("Salir", key="navbar_logout", use_container_width=True):
            on_logout()
            st.switch_page(LOGIN_PAGE)


def render_side_menu(active: str):
    """
    Render the section menu in the sidebar.

    Args:
        active: Label of the current section (highlighted)
    """
    with st.sidebar:
        st.markdown("### Atgest")
        st.markdown("---")

        for label, page, icon in MENU_ITEMS:
            if page is None:
                st.button(
                    f"{icon} {label}",
                    key=f"menu_{label}",
                    disabled=True,
                    use_container_width=True,
                    help="Próximamente",
                )
            elif label == active:
                st.markdown(f"**{icon} {label}**")
            else:
                st.page_link(page, label=label, icon=icon)
