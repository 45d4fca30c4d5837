"""Seed the drugs table with a demo catalogue.

    python seed_inventory.py            # add the catalogue
    python seed_inventory.py --reset    # delete every drug first
    python seed_inventory.py --sample   # only the single Ibuprofen sample row
"""
import argparse
import logging

from pharmacy_inventory.db.init_db import init_db
from pharmacy_inventory.seed import insert_sample_drug, seed_inventory
from pharmacy_inventory.services.inventory_service import InventoryStore


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--reset", action="store_true", help="delete all drugs before seeding")
    parser.add_argument("--sample", action="store_true", help="insert only the sample drug")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    init_db(seed=False)
    store = InventoryStore()

    if args.reset:
        print(f"Deleted {store.delete_all()} drugs")
    if args.sample:
        ids = [insert_sample_drug(store)]
    else:
        ids = seed_inventory(store)

    print(f"Inserted {len(ids)} drugs:")
    for row in store.list(["id", "name", "quantity", "price"]):
        if row["id"] in ids:
            print(f"  {row['id']:>4}  {row['name']:<24} qty {row['quantity']:>4}  {row['price']}")


if __name__ == "__main__":
    main()
