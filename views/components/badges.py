"""
Colored status labels for order and stock tables.
"""

from models.order import OrderStatus
from models.inventory import StockStatus

ORDER_STATUS_COLORS = {
    OrderStatus.DONE: "green",
    OrderStatus.IN_PROGRESS: "orange",
    OrderStatus.PENDING: "gray",
}

STOCK_STATUS_COLORS = {
    StockStatus.OUT_OF_STOCK: "red",
    StockStatus.LOW_STOCK: "orange",
    StockStatus.IN_STOCK: "green",
}


def order_status_badge(status: OrderStatus) -> str:
    """Markdown for an order status."""
    color = ORDER_STATUS_COLORS.get(status, "gray")
    return f":{color}[**{status.label}**]"


def stock_status_badge(status: StockStatus | None, label: str) -> str:
    """Markdown for a stock status (unknown statuses render in stock color)."""
    color = STOCK_STATUS_COLORS.get(status, "green")
    return f":{color}[**{label}**]"
