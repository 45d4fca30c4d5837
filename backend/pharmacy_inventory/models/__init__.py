from pharmacy_inventory.models.drug import Drug, DRUG_COLUMNS

__all__ = ["Drug", "DRUG_COLUMNS"]
