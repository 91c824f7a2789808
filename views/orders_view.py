"""
Orders View - service-order dashboard.

This view handles:
- Navbar and side menu
- Search and status metrics
- The order table with add/edit/delete dialogs

It delegates data access and state to the OrdersController.
"""

import streamlit as st

from config.auth import require_auth, get_user_display_name
from controllers.auth_controller import AuthController
from controllers.orders_controller import OrdersController
from views.components.navbar import render_navbar, render_side_menu
from views.components.order_table import (
    render_order_table_header,
    render_order_row,
    add_order_dialog,
    edit_order_dialog,
    confirm_delete_order_dialog,
)


class OrdersView:
    """View for the service-order dashboard."""

    def __init__(self):
        require_auth()
        self.controller = OrdersController()
        self.auth = AuthController()

    def render(self):
        """Main render method."""
        render_navbar("Órdenes", get_user_display_name(), on_logout=self.auth.logout)
        render_side_menu(active="Órdenes")

        with st.spinner("Cargando..."):
            self.controller.load_orders()

        list_error = self.controller.get_list_error()
        if list_error:
            st.error(list_error)

        notice = self.controller.pop_notice()
        if notice:
            st.error(notice)

        self._render_metrics()
        st.markdown("---")
        self._render_toolbar()
        self._render_table()

    def _render_metrics(self):
        """Order counts per status."""
        counts = self.controller.status_counts()
        for col, (label, count) in zip(st.columns(len(counts)), counts.items()):
            with col:
                st.metric(label, count)

    def _render_toolbar(self):
        """Search box, refresh and add buttons."""
        col_search, col_refresh, col_add = st.columns([6, 1, 2])

        with col_search:
            query = st.text_input(
                "Buscar",
                value=self.controller.get_query(),
                placeholder="Buscar por cliente, vehículo, servicio…",
                label_visibility="collapsed",
            )
            if query != self.controller.get_query():
                self.controller.set_query(query)

        with col_refresh:
            if st.button("↻", help="Recargar", use_container_width=True):
                self.controller.load_orders(force=True)
                st.rerun()

        with col_add:
            if st.button("➕ Agregar orden", type="primary", use_container_width=True):
                add_order_dialog(self.controller.save)

    def _render_table(self):
        """Order rows; dialogs open after the table is drawn."""
        orders = self.controller.get_filtered_orders()
        action = {}

        render_order_table_header()
        for order in orders:
            render_order_row(
                order,
                on_edit=lambda order_id: action.update(edit=order_id),
                on_delete=lambda order_id: action.update(delete=order_id),
            )

        if not orders:
            st.info(self.controller.get_empty_message())

        if "edit" in action:
            order_id = action["edit"]
            edit_order_dialog(self.controller.get_draft(order_id), order_id, self.controller.save)
        elif "delete" in action:
            order = self.controller.get_order(action["delete"])
            if order:
                confirm_delete_order_dialog(order, self.controller.delete)
