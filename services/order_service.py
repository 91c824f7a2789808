"""
Order Service - service order listing, search and editing.

Wraps OrderRepository and turns API failures into result objects with
user-facing messages.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from models.order import Order, OrderDraft, STATUS_OPTIONS
from models.repositories import OrderRepository
from services.api_client import ApiClient, ApiError

logger = logging.getLogger(__name__)


@dataclass
class OrderListResult:
    """Result of loading the order list."""
    success: bool
    orders: list[Order] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class SaveResult:
    """Result of a create, update or delete."""
    success: bool
    error: Optional[str] = None


class OrderService:
    """Service for service-order management."""

    def __init__(self, repository: Optional[OrderRepository] = None):
        self.repository = repository or OrderRepository(ApiClient())

    def list_orders(self) -> OrderListResult:
        """Load every order from the backend."""
        try:
            return OrderListResult(success=True, orders=self.repository.get_all())
        except ApiError as e:
            logger.error(f"Could not load orders: {e.message}")
            return OrderListResult(success=False, error="No se pudieron cargar las órdenes.")
        except ValueError as e:
            # Pydantic ValidationError: an order without the expected fields
            logger.error(f"Unexpected orders payload: {e}")
            return OrderListResult(success=False, error="No se pudieron cargar las órdenes.")

    def filter_orders(self, orders: list[Order], query: str) -> list[Order]:
        """Case-insensitive search over client, vehicle, service and status."""
        needle = query.strip().lower()
        if not needle:
            return orders
        return [
            o for o in orders
            if needle in o.client.lower()
            or needle in o.vehicle.lower()
            or needle in o.service.lower()
            or needle in o.status_label.lower()
        ]

    def validate(self, draft: OrderDraft) -> Optional[str]:
        """Return the form error, or None if the draft can be saved."""
        if not draft.client.strip() or not draft.vehicle.strip() or not draft.service.strip():
            return "Completa cliente, vehículo y servicio."
        return None

    def save(self, draft: OrderDraft, order_id: Optional[int] = None) -> SaveResult:
        """
        Create a new order, or update `order_id` when given.

        Args:
            draft: Form values
            order_id: ID of the order being edited (None to create)

        Returns:
            SaveResult with the validation or API error, if any
        """
        problem = self.validate(draft)
        if problem:
            return SaveResult(success=False, error=problem)

        try:
            if order_id:
                self.repository.update(order_id, draft)
                logger.info(f"Order {order_id} updated")
            else:
                self.repository.create(draft)
                logger.info("Order created")
        except ApiError as e:
            logger.error(f"Could not save order: {e.message}")
            return SaveResult(success=False, error="No se pudo guardar la orden.")

        return SaveResult(success=True)

    def delete(self, order_id: int) -> SaveResult:
        """Delete an order."""
        try:
            self.repository.delete(order_id)
        except ApiError as e:
            logger.error(f"Could not delete order {order_id}: {e.message}")
            return SaveResult(success=False, error="No se pudo eliminar la orden.")

        logger.info(f"Order {order_id} deleted")
        return SaveResult(success=True)

    def status_counts(self, orders: list[Order]) -> dict[str, int]:
        """Number of orders per status label, in workflow order."""
        counts = Counter(o.status_label for o in orders)
        return {label: counts.get(label, 0) for label in STATUS_OPTIONS}

    def empty_message(self, query: str) -> str:
        """Text shown when the table has no rows."""
        if query:
            return f"No hay resultados para “{query}”."
        return "No hay órdenes registradas."
