from decimal import Decimal

import pytest

from pharmacy_inventory.core.exceptions import (
    InvalidAddress,
    NotFound,
    UnsupportedOperation,
    ValidationError,
)
from pharmacy_inventory.schemas.drug import SaleStatus
from pharmacy_inventory.services.address import item_address

AUTHORITY = "com.example.android.pharmacyinventory"


def test_insert_on_collection_returns_item_address(resolver):
    address = resolver.insert("drugs", {"name": "Ibuprofen", "quantity": 5, "price": "3.00"})
    assert address == item_address(1)
    assert resolver.query(str(address), ["name", "quantity"]) == [{"name": "Ibuprofen", "quantity": 5}]


def test_query_collection_and_item(resolver):
    resolver.insert("drugs", {"name": "A", "price": "1.00"})
    resolver.insert("drugs", {"name": "B", "price": "2.00"})
    assert [row["name"] for row in resolver.query("drugs")] == ["A", "B"]
    assert resolver.query("drugs/2") == [
        {"id": 2, "name": "B", "quantity": 0, "sold": 0, "price": Decimal("2.00"), "image_reference": None}
    ]


def test_query_item_validates_columns(resolver, ibuprofen):
    with pytest.raises(ValidationError):
        resolver.query(f"drugs/{ibuprofen}", ["strength"])


def test_query_missing_item(resolver):
    with pytest.raises(NotFound):
        resolver.query("drugs/5")


def test_update_and_sell_through_content_uri(resolver, ibuprofen):
    uri = f"content://{AUTHORITY}/drugs/{ibuprofen}"
    assert resolver.update(uri, {"quantity": 1}) == 1
    assert resolver.sell(uri).status == SaleStatus.SOLD
    assert resolver.sell(uri).status == SaleStatus.OUT_OF_STOCK


def test_delete_item_and_collection(resolver):
    for name in ("A", "B", "C"):
        resolver.insert("drugs", {"name": name, "price": "1.00"})
    assert resolver.delete("drugs/2") == 1
    assert resolver.delete("drugs/2") == 0
    assert resolver.delete("drugs") == 2
    assert resolver.query("drugs") == []


@pytest.mark.parametrize(
    "call",
    [
        lambda r: r.insert("drugs/1", {"name": "X", "price": "1.00"}),
        lambda r: r.update("drugs", {"price": "1.00"}),
        lambda r: r.sell("drugs"),
    ],
)
def test_unsupported_operations(resolver, ibuprofen, call):
    with pytest.raises(UnsupportedOperation):
        call(resolver)
    # Nothing changed
    assert len(resolver.query("drugs")) == 1
    assert resolver.query("drugs/1", ["quantity", "price"]) == [{"quantity": 5, "price": Decimal("3.00")}]


def test_malformed_address_has_no_side_effects(resolver, ibuprofen):
    with pytest.raises(InvalidAddress):
        resolver.delete("drugs/one")
    assert resolver.query("drugs/1", ["id"]) == [{"id": 1}]


def test_get_type(resolver):
    assert resolver.get_type("drugs") == f"vnd.android.cursor.dir/{AUTHORITY}/drugs"
    assert resolver.get_type("drugs/9") == f"vnd.android.cursor.item/{AUTHORITY}/drugs"
