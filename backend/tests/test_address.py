import pytest

from pharmacy_inventory.core.exceptions import InvalidAddress
from pharmacy_inventory.services.address import (
    Address,
    AddressKind,
    collection_address,
    content_type,
    content_uri,
    item_address,
    parse_address,
)

AUTHORITY = "com.example.android.pharmacyinventory"


@pytest.mark.parametrize("text", ["drugs", "/drugs", "drugs/", "/drugs/", "  drugs  "])
def test_collection_addresses(text):
    address = parse_address(text)
    assert address.kind == AddressKind.COLLECTION
    assert address.drug_id is None
    assert not address.is_item


@pytest.mark.parametrize("text, drug_id", [("drugs/1", 1), ("/drugs/42/", 42), ("drugs/007", 7)])
def test_item_addresses(text, drug_id):
    address = parse_address(text)
    assert address == Address(AddressKind.ITEM, drug_id)
    assert address.is_item


def test_content_uri_form_with_configured_authority():
    assert parse_address(f"content://{AUTHORITY}/drugs/3", AUTHORITY) == item_address(3)
    assert parse_address(f"content://{AUTHORITY}/drugs", AUTHORITY) == collection_address()


@pytest.mark.parametrize(
    "text",
    [
        "",
        "/",
        "drug",
        "staff",
        "staff/1",
        "drugs/abc",
        "drugs/3.5",
        "drugs/-1",
        "drugs/0",
        "drugs//3",
        "drugs/3/sell",
        "drugs/٣",
        "content://other.authority/drugs/1",
        f"http://{AUTHORITY}/drugs/1",
        f"content://{AUTHORITY}/drugs/1?x=1",
        f"content://{AUTHORITY}/pets/1",
    ],
)
def test_malformed_addresses_are_rejected(text):
    with pytest.raises(InvalidAddress):
        parse_address(text, AUTHORITY)


def test_non_string_address_is_rejected():
    with pytest.raises(InvalidAddress):
        parse_address(3)


def test_address_string_forms():
    assert str(collection_address()) == "drugs"
    assert str(item_address(12)) == "drugs/12"
    assert content_uri(item_address(12), AUTHORITY) == f"content://{AUTHORITY}/drugs/12"
    # Building then parsing gives the same address back
    assert parse_address(content_uri(item_address(12), AUTHORITY), AUTHORITY) == item_address(12)


@pytest.mark.parametrize("bad_id", [0, -4, "3", True, 2.0])
def test_item_address_requires_positive_int(bad_id):
    with pytest.raises(InvalidAddress):
        item_address(bad_id)


def test_content_types():
    assert content_type(collection_address(), AUTHORITY) == f"vnd.android.cursor.dir/{AUTHORITY}/drugs"
    assert content_type(item_address(1), AUTHORITY) == f"vnd.android.cursor.item/{AUTHORITY}/drugs"


@pytest.mark.parametrize("text", ["drugs/9223372036854775808", "drugs/99999999999999999999"])
def test_ids_beyond_integer_range_are_rejected(text):
    with pytest.raises(InvalidAddress):
        parse_address(text)


def test_largest_integer_id_is_accepted():
    assert parse_address("drugs/9223372036854775807").drug_id == 2**63 - 1
    with pytest.raises(InvalidAddress):
        item_address(2**63)
