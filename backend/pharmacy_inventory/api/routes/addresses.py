"""Addresses: resolve drugs / drugs/{id} strings the way store callers use them."""
from fastapi import APIRouter, Depends, Query

from pharmacy_inventory.api.deps import get_resolver
from pharmacy_inventory.services.address import content_uri, parse_address
from pharmacy_inventory.services.resolver import InventoryResolver

router = APIRouter()


@router.get("/resolve", response_model=dict)
def resolve_address(
    address: str = Query(..., description="drugs, drugs/{id} or content://<authority>/drugs[/{id}]"),
    resolver: InventoryResolver = Depends(get_resolver),
):
    target = parse_address(address, resolver.authority)
    return {
        "address": str(target),
        "kind": target.kind.value,
        "drug_id": target.drug_id,
        "content_type": resolver.get_type(address),
        "content_uri": content_uri(target, resolver.authority),
    }


@router.get("/query", response_model=list)
def query_address(
    address: str = Query(...),
    resolver: InventoryResolver = Depends(get_resolver),
):
    """Rows at an address: every drug, or a one-element list for a single drug."""
    return resolver.query(address)
