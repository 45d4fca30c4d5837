"""Drugs: list, create, read, update, sell, delete. Mirrors the drugs / drugs/{id} addresses."""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from pharmacy_inventory.api.deps import get_store
from pharmacy_inventory.core.exceptions import BusinessError
from pharmacy_inventory.schemas.drug import DrugRecord, SaleResult
from pharmacy_inventory.services.address import item_address
from pharmacy_inventory.services.inventory_service import InventoryStore

router = APIRouter()


# ==============================================================================
# COLLECTION: drugs
# ==============================================================================

@router.get("", response_model=list)
def list_drugs(
    columns: Optional[List[str]] = Query(None, description="Columns to return; all when omitted"),
    store: InventoryStore = Depends(get_store),
):
    """All drugs in insertion order."""
    return store.list(columns)


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_drug(
    fields: Dict[str, Any] = Body(...),
    store: InventoryStore = Depends(get_store),
):
    """Add a new drug. `name` and `price` are required; quantity and sold default to 0."""
    drug_id = store.create(fields)
    return {
        "id": drug_id,
        "address": str(item_address(drug_id)),
        "message": "Drug saved",
    }


@router.delete("", response_model=dict)
def delete_all_drugs(store: InventoryStore = Depends(get_store)):
    """Administrative reset: remove every drug."""
    return {"deleted": store.delete_all()}


# ==============================================================================
# ITEM: drugs/{id}
# ==============================================================================

@router.get("/{drug_id}", response_model=DrugRecord)
def get_drug(drug_id: int, store: InventoryStore = Depends(get_store)):
    return store.get(drug_id)


@router.patch("/{drug_id}", response_model=dict)
def update_drug(
    drug_id: int,
    fields: Dict[str, Any] = Body(...),
    store: InventoryStore = Depends(get_store),
):
    """Replace only the supplied fields."""
    return {"updated": store.update(drug_id, fields)}


@router.post("/{drug_id}/sell", response_model=SaleResult)
def sell_drug(drug_id: int, store: InventoryStore = Depends(get_store)):
    """Sell one unit. 409 when the drug is out of stock."""
    result = store.sell(drug_id)
    if not result.is_sold:
        raise BusinessError.conflict("Drug out of stock")
    return result


@router.delete("/{drug_id}", response_model=dict)
def delete_drug(drug_id: int, store: InventoryStore = Depends(get_store)):
    return {"deleted": store.delete(drug_id)}
