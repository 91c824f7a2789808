"""
Inventory Repository - data access for inventory articles.
"""

from services.api_client import ApiClient
from models.inventory import InventoryItem, InventoryDraft


class InventoryRepository:
    """Repository for inventory API operations."""

    BASE_PATH = "/inventory/"

    def __init__(self, api: ApiClient):
        """Initialize with an API client."""
        self.api = api

    def _detail_path(self, item_id: int) -> str:
        return f"{self.BASE_PATH}{item_id}/"

    def get_all(self) -> list[InventoryItem]:
        """Get all inventory articles."""
        data = self.api.get(self.BASE_PATH) or []
        if isinstance(data, dict):
            # Paginated response
            data = data.get("results", [])
        return [InventoryItem.model_validate(item) for item in data]

    def create(self, draft: InventoryDraft) -> dict:
        """Create an article from a form draft."""
        return self.api.post(self.BASE_PATH, draft.to_payload())

    def update(self, item_id: int, draft: InventoryDraft) -> dict:
        """Replace an existing article with the draft values."""
        return self.api.put(self._detail_path(item_id), draft.to_payload())

    def delete(self, item_id: int) -> None:
        """Delete an article."""
        self.api.delete(self._detail_path(item_id))
