from decimal import Decimal

from sqlalchemy import inspect

from pharmacy_inventory.db.init_db import init_db
from pharmacy_inventory.db.session import build_engine, build_sessionmaker
from pharmacy_inventory.seed import CATALOGUE, insert_sample_drug, seed_inventory
from pharmacy_inventory.services.inventory_service import InventoryStore


def test_insert_sample_drug(store):
    drug = store.get(insert_sample_drug(store))
    assert (drug.name, drug.quantity, drug.sold, drug.price) == ("Ibuprofen", 5, 0, Decimal("3.00"))


def test_seed_inventory_with_reset(store):
    store.create({"name": "Leftover", "price": "1.00"})
    ids = seed_inventory(store, reset=True)
    assert len(ids) == len(CATALOGUE)
    assert [row["name"] for row in store.list(["name"])] == [item["name"] for item in CATALOGUE]


def test_init_db_creates_table_and_seeds_once(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'inventory.db'}")
    init_db(bind=engine, seed=True)
    init_db(bind=engine, seed=True)

    assert "drugs" in inspect(engine).get_table_names()
    store = InventoryStore(build_sessionmaker(engine))
    assert [row["name"] for row in store.list(["name"])] == ["Ibuprofen"]
    engine.dispose()


def test_init_db_without_seed_leaves_table_empty(engine):
    init_db(bind=engine, seed=False)
    assert InventoryStore(build_sessionmaker(engine)).list() == []
