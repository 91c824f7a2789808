"""
Tests for the API-backed repositories.
"""

from __future__ import annotations

from unittest.mock import MagicMock

from models.inventory import InventoryDraft
from models.order import OrderDraft
from models.repositories import InventoryRepository, OrderRepository


def test_order_repository_lists_orders() -> None:
    api = MagicMock()
    api.get.return_value = [
        {"id": 1, "client": "Ana", "vehicle": "Yaris", "service": "Aceite", "status": "done"},
        {"id": 2, "client": "Bea", "vehicle": "Swift", "service": "Frenos", "status": "pending"},
    ]

    orders = OrderRepository(api).get_all()

    api.get.assert_called_once_with("/orders/")
    assert [o.id for o in orders] == [1, 2]
    assert orders[0].status_label == "Completado"


def test_order_repository_handles_empty_body() -> None:
    api = MagicMock()
    api.get.return_value = None

    assert OrderRepository(api).get_all() == []


def test_order_repository_write_paths() -> None:
    api = MagicMock()
    repo = OrderRepository(api)
    draft = OrderDraft(client="Ana", vehicle="Yaris", service="Aceite")

    repo.create(draft)
    repo.update(5, draft)
    repo.delete(5)

    api.post.assert_called_once_with("/orders/", draft.to_payload())
    api.put.assert_called_once_with("/orders/5/", draft.to_payload())
    api.delete.assert_called_once_with("/orders/5/")


def test_inventory_repository_paths() -> None:
    api = MagicMock()
    api.get.return_value = [{"id": 3, "nombre": "Bujía", "cantidad": 8}]
    repo = InventoryRepository(api)
    draft = InventoryDraft(name="Bujía", quantity=8)

    items = repo.get_all()
    repo.create(draft)
    repo.update(3, draft)
    repo.delete(3)

    assert items[0].name == "Bujía"
    api.get.assert_called_once_with("/inventory/")
    api.post.assert_called_once_with("/inventory/", draft.to_payload())
    api.put.assert_called_once_with("/inventory/3/", draft.to_payload())
    api.delete.assert_called_once_with("/inventory/3/")


def test_repositories_accept_paginated_responses() -> None:
    api = MagicMock()
    api.get.return_value = {"count": 1, "results": [{"id": 8, "client": "Ana", "status": "done"}]}

    orders = OrderRepository(api).get_all()

    assert [o.id for o in orders] == [8]
