"""
Drug addresses.

Two address kinds name everything the store holds:

    drugs          the whole collection
    drugs/{id}     exactly one drug

The content-URI spelling `content://<authority>/drugs/{id}` is accepted as
well, as long as the authority is the configured one. Parsing is all or
nothing: anything else raises InvalidAddress.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urlsplit

from pharmacy_inventory.core.config import settings
from pharmacy_inventory.core.exceptions import InvalidAddress
from pharmacy_inventory.models.drug import MAX_INTEGER

PATH_DRUGS = "drugs"
CONTENT_SCHEME = "content"

# MIME-style type prefixes for a list of rows / a single row
LIST_TYPE_PREFIX = "vnd.android.cursor.dir"
ITEM_TYPE_PREFIX = "vnd.android.cursor.item"


class AddressKind(str, Enum):
    COLLECTION = "collection"
    ITEM = "item"


@dataclass(frozen=True)
class Address:
    kind: AddressKind
    drug_id: Optional[int] = None

    @property
    def is_item(self) -> bool:
        return self.kind == AddressKind.ITEM

    def __str__(self) -> str:
        if self.is_item:
            return f"{PATH_DRUGS}/{self.drug_id}"
        return PATH_DRUGS


def _parse_id(raw: str, address: str) -> int:
    # isdigit() alone lets through non-ASCII digits such as "٣"
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidAddress(address, f"drug id {raw!r} is not a number")
    drug_id = int(raw)
    if drug_id <= 0:
        raise InvalidAddress(address, "drug id must be positive")
    if drug_id > MAX_INTEGER:
        raise InvalidAddress(address, "drug id is out of range")
    return drug_id


def parse_address(address: str, authority: Optional[str] = None) -> Address:
    """
    Resolve an address string to a collection or item Address.

    >>> parse_address("drugs/3")
    Address(kind=<AddressKind.ITEM: 'item'>, drug_id=3)
    """
    if not isinstance(address, str):
        raise InvalidAddress(address, "address must be a string")

    text = address.strip()
    if "://" in text:
        parts = urlsplit(text)
        expected = authority or settings.CONTENT_AUTHORITY
        if parts.scheme != CONTENT_SCHEME:
            raise InvalidAddress(address, f"unsupported scheme {parts.scheme!r}")
        if parts.netloc != expected:
            raise InvalidAddress(address, f"unknown authority {parts.netloc!r}")
        if parts.query or parts.fragment:
            raise InvalidAddress(address, "query and fragment are not allowed")
        text = parts.path

    segments = [segment for segment in text.strip("/").split("/")]
    if not segments or segments[0] != PATH_DRUGS or "" in segments:
        raise InvalidAddress(address, f"expected {PATH_DRUGS!r} or {PATH_DRUGS!r}/<id>")

    if len(segments) == 1:
        return Address(AddressKind.COLLECTION)
    if len(segments) == 2:
        return Address(AddressKind.ITEM, _parse_id(segments[1], address))
    raise InvalidAddress(address, "too many path segments")


def collection_address() -> Address:
    return Address(AddressKind.COLLECTION)


def item_address(drug_id: int) -> Address:
    if isinstance(drug_id, bool) or not isinstance(drug_id, int) or not 0 < drug_id <= MAX_INTEGER:
        raise InvalidAddress(drug_id, "drug id must be a positive integer in range")
    return Address(AddressKind.ITEM, drug_id)


def content_uri(address: Address, authority: Optional[str] = None) -> str:
    """Full `content://` form of an address."""
    return f"{CONTENT_SCHEME}://{authority or settings.CONTENT_AUTHORITY}/{address}"


def content_type(address: Address, authority: Optional[str] = None) -> str:
    """MIME-style type: the list type for the collection, the item type for one drug."""
    prefix = ITEM_TYPE_PREFIX if address.is_item else LIST_TYPE_PREFIX
    return f"{prefix}/{authority or settings.CONTENT_AUTHORITY}/{PATH_DRUGS}"
