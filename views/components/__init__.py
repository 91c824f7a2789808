"""
Reusable UI components.
"""

from views.components.badges import order_status_badge, stock_status_badge
from views.components.branding import render_branding
from views.components.messages import render_banner, render_form_messages
from views.components.navbar import render_navbar, render_side_menu

# Table components
from views.components.order_table import (
    render_order_table_header,
    render_order_row,
    add_order_dialog,
    edit_order_dialog,
    confirm_delete_order_dialog,
)
from views.components.inventory_table import (
    render_stock_summary,
    render_inventory_table_header,
    render_inventory_row,
    add_item_dialog,
    edit_item_dialog,
    confirm_delete_item_dialog,
)

__all__ = [
    # Common
    "order_status_badge",
    "stock_status_badge",
    "render_branding",
    "render_banner",
    "render_form_messages",
    "render_navbar",
    "render_side_menu",
    # Orders
    "render_order_table_header",
    "render_order_row",
    "add_order_dialog",
    "edit_order_dialog",
    "confirm_delete_order_dialog",
    # Inventory
    "render_stock_summary",
    "render_inventory_table_header",
    "render_inventory_row",
    "add_item_dialog",
    "edit_item_dialog",
    "confirm_delete_item_dialog",
]
