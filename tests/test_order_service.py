"""
Tests for OrderService: loading, search, validation and save/delete results.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from models.order import Order, OrderDraft, OrderStatus
from services.api_client import ApiError
from services.order_service import OrderService


@pytest.fixture
def orders() -> list[Order]:
    return [
        Order(id=1, client="Ana Pérez", vehicle="Toyota Yaris", service="Cambio de aceite", status=OrderStatus.PENDING),
        Order(id=2, client="Luis Soto", vehicle="Nissan V16", service="Frenos", status=OrderStatus.IN_PROGRESS),
        Order(id=3, client="Marta Díaz", vehicle="Kia Rio", service="Alineación", status=OrderStatus.DONE),
    ]


@pytest.fixture
def repo() -> MagicMock:
    return MagicMock()


def test_list_orders(repo, orders) -> None:
    repo.get_all.return_value = orders

    result = OrderService(repo).list_orders()

    assert result.success
    assert result.orders == orders


def test_list_orders_failure(repo) -> None:
    repo.get_all.side_effect = ApiError("boom", 500)

    result = OrderService(repo).list_orders()

    assert not result.success
    assert result.orders == []
    assert result.error == "No se pudieron cargar las órdenes."


@pytest.mark.parametrize(
    "query, expected_ids",
    [
        ("", [1, 2, 3]),
        ("   ", [1, 2, 3]),
        ("ana", [1]),
        ("NISSAN", [2]),
        ("frenos", [2]),
        ("completado", [3]),
        ("en curso", [2]),
        ("zzz", []),
    ],
)
def test_filter_orders(repo, orders, query, expected_ids) -> None:
    assert [o.id for o in OrderService(repo).filter_orders(orders, query)] == expected_ids


def test_save_requires_client_vehicle_service(repo) -> None:
    result = OrderService(repo).save(OrderDraft(client="Ana", vehicle=" ", service="Aceite"))

    assert not result.success
    assert result.error == "Completa cliente, vehículo y servicio."
    repo.create.assert_not_called()


def test_save_creates_or_updates(repo) -> None:
    service = OrderService(repo)
    draft = OrderDraft(client="Ana", vehicle="Yaris", service="Aceite")

    assert service.save(draft).success
    repo.create.assert_called_once_with(draft)

    assert service.save(draft, order_id=4).success
    repo.update.assert_called_once_with(4, draft)


def test_save_failure(repo) -> None:
    repo.create.side_effect = ApiError("bad", 400)

    result = OrderService(repo).save(OrderDraft(client="Ana", vehicle="Yaris", service="Aceite"))

    assert result.error == "No se pudo guardar la orden."


def test_delete(repo) -> None:
    service = OrderService(repo)

    assert service.delete(2).success
    repo.delete.assert_called_once_with(2)

    repo.delete.side_effect = ApiError("nope", 404)
    result = service.delete(2)
    assert not result.success
    assert result.error == "No se pudo eliminar la orden."


def test_status_counts(repo, orders) -> None:
    counts = OrderService(repo).status_counts(orders + [orders[0]])

    assert counts == {"Pendiente": 2, "En curso": 1, "Completado": 1}
    assert OrderService(repo).status_counts([]) == {"Pendiente": 0, "En curso": 0, "Completado": 0}


def test_empty_message(repo) -> None:
    service = OrderService(repo)

    assert service.empty_message("") == "No hay órdenes registradas."
    assert service.empty_message("zzz") == "No hay resultados para “zzz”."
