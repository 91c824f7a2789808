"""
Inventory Controller - manages the inventory page.

Same shape as the orders controller: cached list, search query,
save/delete with inline errors.
"""

import streamlit as st
from typing import Optional

from config.auth import get_access_token
from models.inventory import InventoryItem, InventoryDraft
from models.repositories import InventoryRepository
from services.api_client import ApiClient
from services.inventory_service import InventoryService, StockSummary
from services.order_service import SaveResult


class InventoryController:
    """Controller for inventory management."""

    def __init__(self, service: Optional[InventoryService] = None):
        self.service = service or InventoryService(
            InventoryRepository(ApiClient(token_provider=get_access_token))
        )
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "inventory" not in st.session_state:
            st.session_state.inventory = {
                "items": None,
                "query": "",
                "list_error": None,
                "notice": None,
            }

    def load_items(self, force: bool = False) -> list[InventoryItem]:
        """Load articles from the API (cached in session unless forced)."""
        state = st.session_state.inventory
        if state["items"] is None or force:
            result = self.service.list_items()
            if result.success:
                state["items"] = result.items
                state["list_error"] = None
            else:
                state["items"] = state["items"] or []
                state["list_error"] = result.error
        return state["items"]

    def get_list_error(self) -> Optional[str]:
        return st.session_state.inventory["list_error"]

    def get_query(self) -> str:
        return st.session_state.inventory["query"]

    def set_query(self, query: str):
        st.session_state.inventory["query"] = query

    def get_filtered_items(self) -> list[InventoryItem]:
        return self.service.filter_items(self.load_items(), self.get_query())

    def get_item(self, item_id: int) -> Optional[InventoryItem]:
        for item in self.load_items():
            if item.id == item_id:
                return item
        return None

    def get_summary(self) -> StockSummary:
        return self.service.stock_summary(self.load_items())

    def get_empty_message(self) -> str:
        return self.service.empty_message(self.get_query())

    def get_draft(self, item_id: Optional[int] = None) -> InventoryDraft:
        """Form values for a new article, or prefilled from `item_id`."""
        item = self.get_item(item_id) if item_id else None
        return InventoryDraft.from_item(item) if item else InventoryDraft()

    def save(self, draft: InventoryDraft, item_id: Optional[int] = None) -> SaveResult:
        """Create or update an article, refreshing the list on success."""
        result = self.service.save(draft, item_id)
        if result.success:
            self.load_items(force=True)
        return result

    def delete(self, item_id: int) -> bool:
        """Delete an article and drop it from the cached list."""
        result = self.service.delete(item_id)
        state = st.session_state.inventory

        if not result.success:
            state["notice"] = result.error
            return False

        state["items"] = [i for i in state["items"] or [] if i.id != item_id]
        state["notice"] = None
        return True

    def pop_notice(self) -> Optional[str]:
        notice = st.session_state.inventory["notice"]
        st.session_state.inventory["notice"] = None
        return notice
