import os

# Keep the module-level engine off the developer's inventory.db
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from pharmacy_inventory.api.deps import get_store
from pharmacy_inventory.db.base import Base
from pharmacy_inventory.db.session import build_engine, build_sessionmaker
from pharmacy_inventory.main import app
from pharmacy_inventory.models import Drug  # noqa: F401 - register models
from pharmacy_inventory.services.inventory_service import InventoryStore
from pharmacy_inventory.services.resolver import InventoryResolver

AUTHORITY = "com.example.android.pharmacyinventory"


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest.fixture
def store(session_factory):
    return InventoryStore(session_factory)


@pytest.fixture
def file_store(tmp_path):
    """Store on a real database file; connections are not shared between threads."""
    engine = build_engine(f"sqlite:///{tmp_path / 'inventory.db'}")
    Base.metadata.create_all(bind=engine)
    yield InventoryStore(build_sessionmaker(engine))
    engine.dispose()


@pytest.fixture
def resolver(store):
    return InventoryResolver(store, authority=AUTHORITY)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def ibuprofen(store):
    return store.create({"name": "Ibuprofen", "quantity": 5, "price": "3.00"})
