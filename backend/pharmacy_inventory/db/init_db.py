"""Create all tables. Run on app startup."""
import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from pharmacy_inventory.core.config import settings
from pharmacy_inventory.db.base import Base
from pharmacy_inventory.db.session import engine, build_sessionmaker
from pharmacy_inventory.models import drug  # noqa: F401 - register models
from pharmacy_inventory.models.drug import Drug

logger = logging.getLogger(__name__)


def init_db(bind: Optional[Engine] = None, seed: Optional[bool] = None) -> None:
    bind = bind if bind is not None else engine
    Base.metadata.create_all(bind=bind)

    if seed is None:
        seed = settings.SEED_SAMPLE_DATA
    if not seed:
        return

    # Imported here: seeding goes through the store, which depends on this module's engine
    from pharmacy_inventory.services.inventory_service import InventoryStore
    from pharmacy_inventory.seed import insert_sample_drug

    session_factory = build_sessionmaker(bind)
    with session_factory() as db:
        drug_count = db.scalar(select(func.count()).select_from(Drug))
    if drug_count == 0:
        drug_id = insert_sample_drug(InventoryStore(session_factory))
        logger.info(f"Seeded sample drug with id {drug_id}")
