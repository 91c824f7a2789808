"""
Inventory View - inventory articles with stock levels.

Mirrors the orders dashboard: navbar, side menu, search, summary metrics
and the article table with add/edit/delete dialogs.
"""

import streamlit as st

from config.auth import require_auth, get_user_display_name
from controllers.auth_controller import AuthController
from controllers.inventory_controller import InventoryController
from views.components.navbar import render_navbar, render_side_menu
from views.components.inventory_table import (
    render_stock_summary,
    render_inventory_table_header,
    render_inventory_row,
    add_item_dialog,
    edit_item_dialog,
    confirm_delete_item_dialog,
)


class InventoryView:
    """View for inventory management."""

    def __init__(self):
        require_auth()
        self.controller = InventoryController()
        self.auth = AuthController()

    def render(self):
        """Main render method."""
        render_navbar("Inventario", get_user_display_name(), on_logout=self.auth.logout)
        render_side_menu(active="Inventario")

        with st.spinner("Cargando..."):
            self.controller.load_items()

        list_error = self.controller.get_list_error()
        if list_error:
            st.error(list_error)

        notice = self.controller.pop_notice()
        if notice:
            st.error(notice)

        render_stock_summary(self.controller.get_summary())
        st.markdown("---")
        self._render_toolbar()
        self._render_table()

        st.markdown("---")
        st.caption("Atgest · Gestión de inventario")

    def _render_toolbar(self):
        """Search box, refresh and add buttons."""
        col_search, col_refresh, col_add = st.columns([6, 1, 2])

        with col_search:
            query = st.text_input(
                "Buscar",
                value=self.controller.get_query(),
                placeholder="Buscar por nombre, SKU, proveedor…",
                label_visibility="collapsed",
            )
            if query != self.controller.get_query():
                self.controller.set_query(query)

        with col_refresh:
            if st.button("↻", help="Recargar", use_container_width=True):
                self.controller.load_items(force=True)
                st.rerun()

        with col_add:
            if st.button("➕ Agregar artículo", type="primary", use_container_width=True):
                add_item_dialog(self.controller.save)

    def _render_table(self):
        """Article rows; dialogs open after the table is drawn."""
        items = self.controller.get_filtered_items()
        action = {}

        render_inventory_table_header()
        for item in items:
            render_inventory_row(
                item,
                on_edit=lambda item_id: action.update(edit=item_id),
                on_delete=lambda item_id: action.update(delete=item_id),
            )

        if not items:
            st.info(self.controller.get_empty_message())

        if "edit" in action:
            item_id = action["edit"]
            edit_item_dialog(self.controller.get_draft(item_id), item_id, self.controller.save)
        elif "delete" in action:
            item = self.controller.get_item(action["delete"])
            if item:
                confirm_delete_item_dialog(item, self.controller.delete)
