"""
Order Repository - data access for service orders.

All persistence lives in the backend; this repository only translates
between the /orders/ REST resource and Order records.
"""

from services.api_client import ApiClient
from models.order import Order, OrderDraft


class OrderRepository:
    """Repository for service order API operations."""

    BASE_PATH = "/orders/"

    def __init__(self, api: ApiClient):
        """Initialize with an API client."""
        self.api = api

    def _detail_path(self, order_id: int) -> str:
        return f"{self.BASE_PATH}{order_id}/"

    def get_all(self) -> list[Order]:
        """Get all orders visible to the current user."""
        data = self.api.get(self.BASE_PATH) or []
        if isinstance(data, dict):
            # Paginated response
            data = data.get("results", [])
        return [Order.model_validate(o) for o in data]

    def create(self, draft: OrderDraft) -> dict:
        """Create an order from a form draft."""
        return self.api.post(self.BASE_PATH, draft.to_payload())

    def update(self, order_id: int, draft: OrderDraft) -> dict:
        """Replace an existing order with the draft values."""
        return self.api.put(self._detail_path(order_id), draft.to_payload())

    def delete(self, order_id: int) -> None:
        """Delete an order."""
        self.api.delete(self._detail_path(order_id))
