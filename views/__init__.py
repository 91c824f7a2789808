"""
Views layer - UI presentation components.
"""

from views.home_view import HomeView
from views.login_view import LoginView
from views.register_view import RegisterView
from views.orders_view import OrdersView
from views.inventory_view import InventoryView
from views.pay_view import PayView

__all__ = [
    "HomeView",
    "LoginView",
    "RegisterView",
    "OrdersView",
    "InventoryView",
    "PayView",
]
