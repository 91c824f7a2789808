"""
Inventory Service - article listing, search, editing and stock summary.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from models.inventory import InventoryItem, InventoryDraft, StockStatus
from models.repositories import InventoryRepository
from services.api_client import ApiClient, ApiError
from services.order_service import SaveResult

logger = logging.getLogger(__name__)


@dataclass
class InventoryListResult:
    """Result of loading the inventory."""
    success: bool
    items: list[InventoryItem] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class StockSummary:
    """Aggregate figures shown above the inventory table."""
    total: int
    low_stock: int
    out_of_stock: int
    inventory_value: Decimal


class InventoryService:
    """Service for inventory management."""

    def __init__(self, repository: Optional[InventoryRepository] = None):
        self.repository = repository or InventoryRepository(ApiClient())

    def list_items(self) -> InventoryListResult:
        """Load every article from the backend."""
        try:
            return InventoryListResult(success=True, items=self.repository.get_all())
        except ApiError as e:
            logger.error(f"Could not load inventory: {e.message}")
            return InventoryListResult(
                success=False,
                error="No se pudieron cargar los artículos de inventario.",
            )
        except ValueError as e:
            logger.error(f"Unexpected inventory payload: {e}")
            return InventoryListResult(
                success=False,
                error="No se pudieron cargar los artículos de inventario.",
            )

    def filter_items(self, items: list[InventoryItem], query: str) -> list[InventoryItem]:
        """Case-insensitive search over name, SKU, supplier and stock status."""
        needle = query.strip().lower()
        if not needle:
            return items
        return [
            i for i in items
            if needle in i.name.lower()
            or needle in i.sku_display.lower()
            or needle in i.supplier_display.lower()
            or needle in i.stock_label.lower()
        ]

    def validate(self, draft: InventoryDraft) -> Optional[str]:
        """Return the form error, or None if the draft can be saved."""
        if (
            not draft.name.strip()
            or draft.quantity < 0
            or draft.min_stock < 0
            or draft.price < 0
        ):
            return "El nombre es obligatorio. Cantidad, stock mínimo y precio deben ser >= 0."
        return None

    def save(self, draft: InventoryDraft, item_id: Optional[int] = None) -> SaveResult:
        """Create a new article, or update `item_id` when given."""
        problem = self.validate(draft)
        if problem:
            return SaveResult(success=False, error=problem)

        try:
            if item_id:
                self.repository.update(item_id, draft)
                logger.info(f"Inventory item {item_id} updated")
            else:
                self.repository.create(draft)
                logger.info(f"Inventory item '{draft.name}' created")
        except ApiError as e:
            logger.error(f"Could not save inventory item: {e.message}")
            return SaveResult(success=False, error="No se pudo guardar el artículo de inventario.")

        return SaveResult(success=True)

    def delete(self, item_id: int) -> SaveResult:
        """Delete an article."""
        try:
            self.repository.delete(item_id)
        except ApiError as e:
            logger.error(f"Could not delete inventory item {item_id}: {e.message}")
            return SaveResult(success=False, error="No se pudo eliminar el artículo.")

        logger.info(f"Inventory item {item_id} deleted")
        return SaveResult(success=True)

    def stock_summary(self, items: list[InventoryItem]) -> StockSummary:
        """Count low/out-of-stock articles and total stock value."""
        return StockSummary(
            total=len(items),
            low_stock=sum(1 for i in items if i.stock == StockStatus.LOW_STOCK),
            out_of_stock=sum(1 for i in items if i.stock == StockStatus.OUT_OF_STOCK),
            inventory_value=sum((i.price * i.quantity for i in items), Decimal("0")),
        )

    def empty_message(self, query: str) -> str:
        """Text shown when the table has no rows."""
        if query:
            return f"No hay resultados para “{query}”."
        return "No hay artículos en el inventario."
