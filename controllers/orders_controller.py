"""
Orders Controller - manages the service-order dashboard.

This controller handles:
- Loading the order list once per session (reloaded after saves)
- The search query
- Saving and deleting orders
"""

import streamlit as st
from typing import Optional

from config.auth import get_access_token
from models.order import Order, OrderDraft
from models.repositories import OrderRepository
from services.api_client import ApiClient
from services.order_service import OrderService, SaveResult


class OrdersController:
    """Controller for service-order management."""

    def __init__(self, service: Optional[OrderService] = None):
        self.service = service or OrderService(
            OrderRepository(ApiClient(token_provider=get_access_token))
        )
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "orders" not in st.session_state:
            st.session_state.orders = {
                "items": None,  # None until the first load
                "query": "",
                "list_error": None,
                "notice": None,  # error from the last delete
            }

    # ==========================================
    # Loading & Search
    # ==========================================

    def load_orders(self, force: bool = False) -> list[Order]:
        """Load orders from the API (cached in session unless forced)."""
        state = st.session_state.orders
        if state["items"] is None or force:
            result = self.service.list_orders()
            if result.success:
                state["items"] = result.orders
                state["list_error"] = None
            else:
                state["items"] = state["items"] or []
                state["list_error"] = result.error
        return state["items"]

    def get_list_error(self) -> Optional[str]:
        return st.session_state.orders["list_error"]

    def get_query(self) -> str:
        return st.session_state.orders["query"]

    def set_query(self, query: str):
        st.session_state.orders["query"] = query

    def get_filtered_orders(self) -> list[Order]:
        """Orders matching the current search query."""
        return self.service.filter_orders(self.load_orders(), self.get_query())

    def get_order(self, order_id: int) -> Optional[Order]:
        for order in self.load_orders():
            if order.id == order_id:
                return order
        return None

    def status_counts(self) -> dict[str, int]:
        return self.service.status_counts(self.load_orders())

    def get_empty_message(self) -> str:
        return self.service.empty_message(self.get_query())

    # ==========================================
    # Editing
    # ==========================================

    def get_draft(self, order_id: Optional[int] = None) -> OrderDraft:
        """Form values for a new order, or prefilled from `order_id`."""
        order = self.get_order(order_id) if order_id else None
        return OrderDraft.from_order(order) if order else OrderDraft()

    def save(self, draft: OrderDraft, order_id: Optional[int] = None) -> SaveResult:
        """Create or update an order, refreshing the list on success."""
        result = self.service.save(draft, order_id)
        if result.success:
            self.load_orders(force=True)
        return result

    def delete(self, order_id: int) -> bool:
        """Delete an order and drop it from the cached list."""
        result = self.service.delete(order_id)
        state = st.session_state.orders

        if not result.success:
            state["notice"] = result.error
            return False

        state["items"] = [o for o in state["items"] or [] if o.id != order_id]
        state["notice"] = None
        return True

    def pop_notice(self) -> Optional[str]:
        """Return and clear the last delete error."""
        notice = st.session_state.orders["notice"]
        st.session_state.orders["notice"] = None
        return notice
