"""Sample inventory for demos and first runs."""
import logging
from decimal import Decimal
from typing import List

from pharmacy_inventory.services.inventory_service import InventoryStore

logger = logging.getLogger(__name__)

SAMPLE_DRUG = {"name": "Ibuprofen", "quantity": 5, "price": Decimal("3.00")}

CATALOGUE = [
    SAMPLE_DRUG,
    {"name": "Paracetamol 500mg", "quantity": 40, "price": Decimal("2.50")},
    {"name": "Amoxicillin 250mg", "quantity": 12, "price": Decimal("8.75")},
    {"name": "Cetirizine 10mg", "quantity": 25, "price": Decimal("1.20")},
    {"name": "Omeprazole 20mg", "quantity": 0, "price": Decimal("6.40")},
]


def insert_sample_drug(store: InventoryStore) -> int:
    """Insert the single hardcoded sample drug (Ibuprofen, 5 in stock, 3.00)."""
    return store.create(SAMPLE_DRUG)


def seed_inventory(store: InventoryStore, reset: bool = False) -> List[int]:
    """Insert the demo catalogue, optionally wiping the table first."""
    if reset:
        store.delete_all()
    ids = [store.create(item) for item in CATALOGUE]
    logger.info(f"Seeded {len(ids)} drugs")
    return ids
