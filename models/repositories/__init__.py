"""
Repositories - Data access layer over the backend REST API.
"""

from models.repositories.order_repository import OrderRepository
from models.repositories.inventory_repository import InventoryRepository

__all__ = ["OrderRepository", "InventoryRepository"]
