"""
Tests for InventoryService: search, validation, stock summary and messages.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from models.inventory import InventoryDraft, InventoryItem
from models.repositories import InventoryRepository
from services.api_client import ApiError
from services.inventory_service import InventoryService


@pytest.fixture
def items() -> list[InventoryItem]:
    return [
        InventoryItem(id=1, name="Filtro de aceite", sku="FA-01", quantity=20, price=Decimal("10"),
                      supplier="Repuestos Sur", stock_status="en_stock"),
        InventoryItem(id=2, name="Pastillas de freno", sku=None, quantity=2, price=Decimal("35.5"),
                      supplier=None, stock_status="bajo_stock"),
        InventoryItem(id=3, name="Bujía", sku="BJ-9", quantity=0, price=Decimal("4"),
                      supplier="Chispa Ltda", stock_status="agotado"),
    ]


@pytest.fixture
def service() -> InventoryService:
    return InventoryService(MagicMock())


@pytest.mark.parametrize(
    "query, expected_ids",
    [
        ("", [1, 2, 3]),
        ("filtro", [1]),
        ("bj-9", [3]),
        ("n/a", [2]),
        ("chispa", [3]),
        ("bajo stock", [2]),
        ("agotado", [3]),
    ],
)
def test_filter_items(service, items, query, expected_ids) -> None:
    assert [i.id for i in service.filter_items(items, query)] == expected_ids


@pytest.mark.parametrize(
    "draft",
    [
        InventoryDraft(name=""),
        InventoryDraft(name="Bujía", quantity=-1),
        InventoryDraft(name="Bujía", min_stock=-1),
        InventoryDraft(name="Bujía", price=Decimal("-0.01")),
    ],
)
def test_validate_rejects(service, draft) -> None:
    assert service.validate(draft) == (
        "El nombre es obligatorio. Cantidad, stock mínimo y precio deben ser >= 0."
    )


def test_validate_accepts_zeroes(service) -> None:
    assert service.validate(InventoryDraft(name="Bujía", quantity=0, min_stock=0, price=Decimal("0"))) is None


def test_save_create_update_and_failure() -> None:
    repo = MagicMock()
    service = InventoryService(repo)
    draft = InventoryDraft(name="Bujía", quantity=3)

    assert service.save(draft).success
    repo.create.assert_called_once_with(draft)
    assert service.save(draft, item_id=3).success
    repo.update.assert_called_once_with(3, draft)

    repo.update.side_effect = ApiError("bad", 400)
    assert service.save(draft, item_id=3).error == "No se pudo guardar el artículo de inventario."


def test_list_and_delete_failures() -> None:
    repo = MagicMock()
    repo.get_all.side_effect = ApiError("down")
    repo.delete.side_effect = ApiError("down")
    service = InventoryService(repo)

    assert service.list_items().error == "No se pudieron cargar los artículos de inventario."
    assert service.delete(1).error == "No se pudo eliminar el artículo."


def test_stock_summary(service, items) -> None:
    summary = service.stock_summary(items)

    assert summary.total == 3
    assert summary.low_stock == 1
    assert summary.out_of_stock == 1
    assert summary.inventory_value == Decimal("271")


def test_empty_message(service) -> None:
    assert service.empty_message("") == "No hay artículos en el inventario."
    assert service.empty_message("xyz") == "No hay resultados para “xyz”."


def test_row_with_null_numbers_does_not_hide_the_others() -> None:
    api = MagicMock()
    api.get.return_value = [
        {"id": 1, "nombre": "Filtro", "cantidad": 3, "precio": "10.00"},
        {"id": 2, "nombre": "Aceite", "cantidad": None, "precio": None},
    ]
    service = InventoryService(InventoryRepository(api))

    result = service.list_items()

    assert result.success
    assert [i.id for i in result.items] == [1, 2]
    assert result.items[1].quantity == 0
    assert result.items[1].price == Decimal("0")
