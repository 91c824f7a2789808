"""
Inventory records - mirrors the /inventory/ API resource.

The backend uses Spanish field names (nombre, cantidad, ...). They are
kept as aliases so the Python side can use English attribute names while
parsing and emitting the exact wire format.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MIN_STOCK = 5
NOT_AVAILABLE = "N/A"
UNKNOWN_STOCK_LABEL = "Desconocido"


class StockStatus(str, Enum):
    """Stock level computed by the backend."""
    IN_STOCK = "en_stock"
    LOW_STOCK = "bajo_stock"
    OUT_OF_STOCK = "agotado"

    @property
    def label(self) -> str:
        return STOCK_LABELS[self]


STOCK_LABELS = {
    StockStatus.IN_STOCK: "En Stock",
    StockStatus.LOW_STOCK: "Bajo Stock",
    StockStatus.OUT_OF_STOCK: "Agotado",
}


class InventoryItem(BaseModel):
    """An inventory article as returned by GET /inventory/."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str = Field(default="", alias="nombre")
    sku: Optional[str] = None
    quantity: int = Field(default=0, alias="cantidad")
    min_stock: int = Field(default=DEFAULT_MIN_STOCK, alias="stock_minimo")
    price: Decimal = Field(default=Decimal("0"), alias="precio")
    supplier: Optional[str] = Field(default=None, alias="proveedor")
    description: Optional[str] = Field(default=None, alias="descripcion")
    stock_status: Optional[str] = Field(default=None, alias="estado_stock")
    created_at: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _none_is_blank(cls, value):
        return value if value is not None else ""

    @field_validator("quantity", "price", mode="before")
    @classmethod
    def _none_is_zero(cls, value):
        return value if value is not None else 0

    @field_validator("min_stock", mode="before")
    @classmethod
    def _none_is_default_min_stock(cls, value):
        return value if value is not None else DEFAULT_MIN_STOCK

    @property
    def sku_display(self) -> str:
        return self.sku or NOT_AVAILABLE

    @property
    def supplier_display(self) -> str:
        return self.supplier or NOT_AVAILABLE

    @property
    def stock(self) -> Optional[StockStatus]:
        """Parsed stock status, or None if the backend sent something else."""
        try:
            return StockStatus(self.stock_status)
        except ValueError:
            return None

    @property
    def stock_label(self) -> str:
        stock = self.stock
        return stock.label if stock else UNKNOWN_STOCK_LABEL

    @property
    def is_low_stock(self) -> bool:
        """Still available but at or below the minimum stock."""
        return 0 < self.quantity <= self.min_stock


def _to_decimal(value) -> Decimal:
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")


@dataclass
class InventoryDraft:
    """Editable state of the add/edit inventory form."""
    name: str = ""
    sku: str = ""
    quantity: int = 0
    min_stock: int = DEFAULT_MIN_STOCK
    price: Decimal = Decimal("0")
    supplier: str = ""
    description: str = ""

    @classmethod
    def from_item(cls, item: InventoryItem) -> "InventoryDraft":
        """Prefill the form, blanking the N/A placeholders."""
        return cls(
            name=item.name,
            sku=item.sku or "",
            quantity=item.quantity,
            min_stock=item.min_stock,
            price=item.price,
            supplier=item.supplier or "",
            description=item.description or "",
        )

    def to_payload(self) -> dict:
        """Build the JSON body for POST/PUT /inventory/."""
        return {
            "nombre": self.name,
            "sku": self.sku.strip() or None,
            "cantidad": int(self.quantity),
            "stock_minimo": int(self.min_stock),
            "precio": float(_to_decimal(self.price)),
            "proveedor": self.supplier.strip(),
            "descripcion": self.description.strip(),
        }
