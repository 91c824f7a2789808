"""
Models - records mirrored from the Atgest backend API.
"""

from models.order import (
    Order,
    OrderDraft,
    OrderStatus,
    STATUS_LABELS,
    STATUS_OPTIONS,
    status_from_label,
)
from models.inventory import (
    InventoryItem,
    InventoryDraft,
    StockStatus,
    STOCK_LABELS,
    DEFAULT_MIN_STOCK,
)
from models.user import AuthTokens, UserProfile

__all__ = [
    # Orders
    "Order",
    "OrderDraft",
    "OrderStatus",
    "STATUS_LABELS",
    "STATUS_OPTIONS",
    "status_from_label",
    # Inventory
    "InventoryItem",
    "InventoryDraft",
    "StockStatus",
    "STOCK_LABELS",
    "DEFAULT_MIN_STOCK",
    # Auth
    "AuthTokens",
    "UserProfile",
]
