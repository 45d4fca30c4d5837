"""FastAPI dependencies: the inventory store and resolver."""
from functools import lru_cache

from fastapi import Depends

from pharmacy_inventory.services.inventory_service import InventoryStore
from pharmacy_inventory.services.resolver import InventoryResolver


@lru_cache
def get_store() -> InventoryStore:
    """One store per process so its write lock covers every request."""
    return InventoryStore()


def get_resolver(store: InventoryStore = Depends(get_store)) -> InventoryResolver:
    return InventoryResolver(store)
