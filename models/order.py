"""
Service order records - mirrors the /orders/ API resource.

The API speaks English status codes; the UI shows Spanish labels.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class OrderStatus(str, Enum):
    """Workflow state of a service order."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_LABELS = {
    OrderStatus.PENDING: "Pendiente",
    OrderStatus.IN_PROGRESS: "En curso",
    OrderStatus.DONE: "Completado",
}

# Labels in display order (used by the status selectbox)
STATUS_OPTIONS = [STATUS_LABELS[s] for s in OrderStatus]


def status_from_label(label: str) -> OrderStatus:
    """Map a UI label back to its API status, defaulting to pending."""
    for status, status_label in STATUS_LABELS.items():
        if status_label == label:
            return status
    return OrderStatus.PENDING


class Order(BaseModel):
    """A service order as returned by GET /orders/."""
    id: int
    client: str = ""
    vehicle: str = ""
    service: str = ""
    status: OrderStatus = Field(default=OrderStatus.PENDING)
    created_at: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _unknown_status_is_pending(cls, value):
        try:
            return OrderStatus(value)
        except ValueError:
            return OrderStatus.PENDING

    @field_validator("client", "vehicle", "service", mode="before")
    @classmethod
    def _none_is_blank(cls, value):
        return value if value is not None else ""

    @property
    def status_label(self) -> str:
        return self.status.label


@dataclass
class OrderDraft:
    """Editable state of the add/edit order form."""
    client: str = ""
    vehicle: str = ""
    service: str = ""
    status_label: str = STATUS_LABELS[OrderStatus.PENDING]

    @classmethod
    def from_order(cls, order: Order) -> "OrderDraft":
        return cls(
            client=order.client,
            vehicle=order.vehicle,
            service=order.service,
            status_label=order.status_label,
        )

    def to_payload(self) -> dict:
        """Build the JSON body for POST/PUT /orders/."""
        return {
            "client": self.client,
            "vehicle": self.vehicle,
            "service": self.service,
            "status": status_from_label(self.status_label).value,
        }
