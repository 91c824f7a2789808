"""
Controllers layer - orchestration and session state management.
"""

from controllers.auth_controller import AuthController
from controllers.home_controller import HomeController
from controllers.inventory_controller import InventoryController
from controllers.orders_controller import OrdersController
from controllers.payment_controller import PaymentController

__all__ = [
    "AuthController",
    "HomeController",
    "InventoryController",
    "OrdersController",
    "PaymentController",
]
