"""Address-keyed access to the inventory store.

    drugs       query (list), insert, delete (delete all)
    drugs/{id}  query (get), update, delete, sell
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pharmacy_inventory.core.exceptions import UnsupportedOperation
from pharmacy_inventory.schemas.drug import SaleResult
from pharmacy_inventory.services.address import (
    Address,
    content_type,
    item_address,
    parse_address,
)
from pharmacy_inventory.services.inventory_service import InventoryStore, resolve_columns


class InventoryResolver:

    def __init__(self, store: InventoryStore, authority: Optional[str] = None):
        self.store = store
        self.authority = authority

    def _resolve(self, address: str) -> Address:
        return parse_address(address, self.authority)

    def query(self, address: str, columns: Optional[Iterable[str]] = None) -> List[Dict[str, Any]]:
        """Rows at `address`: every drug for the collection, a one-row list for an item."""
        target = self._resolve(address)
        if not target.is_item:
            return self.store.list(columns)

        projection = resolve_columns(columns)
        record = self.store.get(target.drug_id).model_dump()
        return [{column: record[column] for column in projection}]

    def insert(self, address: str, fields: Mapping[str, Any]) -> Address:
        """Create a drug; returns the item address of the new row."""
        target = self._resolve(address)
        if target.is_item:
            raise UnsupportedOperation(address, "insert")
        return item_address(self.store.create(fields))

    def update(self, address: str, fields: Mapping[str, Any]) -> int:
        target = self._resolve(address)
        if not target.is_item:
            raise UnsupportedOperation(address, "update")
        return self.store.update(target.drug_id, fields)

    def delete(self, address: str) -> int:
        target = self._resolve(address)
        if target.is_item:
            return self.store.delete(target.drug_id)
        return self.store.delete_all()

    def sell(self, address: str) -> SaleResult:
        target = self._resolve(address)
        if not target.is_item:
            raise UnsupportedOperation(address, "sell")
        return self.store.sell(target.drug_id)

    def get_type(self, address: str) -> str:
        return content_type(self._resolve(address), self.authority)
