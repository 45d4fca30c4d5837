"""
Drug inventory store.

All reads and writes of the drugs table go through InventoryStore. Writes
are serialized by a per-store lock and each runs in one transaction; a sale
is a single conditional UPDATE, so quantity and sold move together or not
at all and quantity can never drop below zero.
"""
import logging
import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional

import pydantic
from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session, sessionmaker

from pharmacy_inventory.core.audit import AuditLog
from pharmacy_inventory.core.exceptions import NotFound, ValidationError
from pharmacy_inventory.models.drug import Drug, DRUG_COLUMNS, MAX_INTEGER
from pharmacy_inventory.schemas.drug import (
    DrugCreate,
    DrugRecord,
    DrugUpdate,
    SaleResult,
    SaleStatus,
)

logger = logging.getLogger(__name__)

RESOURCE = "drug"


def _validate(schema, fields: Optional[Mapping[str, Any]]):
    if fields is None:
        fields = {}
    if not isinstance(fields, Mapping):
        raise ValidationError(f"Drug fields must be a mapping, got {type(fields).__name__}")
    try:
        return schema.model_validate(dict(fields))
    except pydantic.ValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc


def resolve_columns(columns: Optional[Iterable[str]]) -> List[str]:
    if columns is None:
        return list(DRUG_COLUMNS)
    if isinstance(columns, str):
        columns = [columns]
    requested = list(columns)
    unknown = [c for c in requested if c not in DRUG_COLUMNS]
    if unknown:
        raise ValidationError(
            f"Unknown drug column(s): {', '.join(unknown)}",
            [{"field": c, "message": "unknown column"} for c in unknown],
        )
    if not requested:
        return list(DRUG_COLUMNS)
    # Keep caller order, drop duplicates
    return list(dict.fromkeys(requested))


def _check_id(drug_id: Any) -> int:
    if isinstance(drug_id, bool) or not isinstance(drug_id, int):
        raise ValidationError(f"Drug id must be an integer, got {drug_id!r}")
    return drug_id


def _storable(drug_id: int) -> bool:
    # Ids outside the INTEGER range can never match a row
    return 0 < drug_id <= MAX_INTEGER


class InventoryStore:
    """CRUD and sale bookkeeping over the drugs table."""

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        if session_factory is None:
            from pharmacy_inventory.db.session import SessionLocal
            session_factory = SessionLocal
        self._session_factory = session_factory
        self._write_lock = threading.RLock()

    def _load(self, db: Session, drug_id: int, for_update: bool = False) -> Drug:
        if not _storable(drug_id):
            raise NotFound(drug_id)
        stmt = select(Drug).where(Drug.id == drug_id)
        if for_update:
            stmt = stmt.with_for_update()
        drug = db.scalars(stmt).first()
        if drug is None:
            raise NotFound(drug_id)
        return drug

    # ------------------------------------------------------------------
    # Collection operations
    # ------------------------------------------------------------------

    def create(self, fields: Mapping[str, Any]) -> int:
        """Insert a new drug and return its id."""
        data = _validate(DrugCreate, fields)
        with self._write_lock, self._session_factory() as db:
            with db.begin():
                drug = Drug(**data.model_dump())
                db.add(drug)
                db.flush()
                drug_id = drug.id

        logger.info(f"Created drug {drug_id} ({data.name})")
        AuditLog.log_action("create", RESOURCE, drug_id, changes=data.model_dump())
        return drug_id

    def list(self, columns: Optional[Iterable[str]] = None) -> List[Dict[str, Any]]:
        """All drugs in id order, each projected to `columns` (every column by default)."""
        projection = resolve_columns(columns)
        stmt = select(*(getattr(Drug, c) for c in projection)).order_by(Drug.id)
        with self._session_factory() as db:
            rows = db.execute(stmt).all()
        return [dict(zip(projection, row)) for row in rows]

    def delete_all(self) -> int:
        """Remove every drug. Administrative reset; returns how many rows went."""
        with self._write_lock, self._session_factory() as db:
            with db.begin():
                deleted = db.execute(delete(Drug)).rowcount

        logger.warning(f"Deleted all drugs ({deleted} rows)")
        AuditLog.log_action("delete_all", RESOURCE, None, changes={"deleted": deleted})
        return deleted

    # ------------------------------------------------------------------
    # Item operations
    # ------------------------------------------------------------------

    def get(self, drug_id: int) -> DrugRecord:
        drug_id = _check_id(drug_id)
        with self._session_factory() as db:
            drug = self._load(db, drug_id)
            return DrugRecord.model_validate(drug)

    def update(self, drug_id: int, fields: Mapping[str, Any]) -> int:
        """
        Replace only the supplied fields.

        Returns 1 when a stored value changed and 0 when every supplied value
        already matched (or nothing was supplied). Raises NotFound for an
        unknown id.
        """
        drug_id = _check_id(drug_id)
        data = _validate(DrugUpdate, fields)
        values = data.model_dump(exclude_unset=True)

        with self._write_lock, self._session_factory() as db:
            with db.begin():
                drug = self._load(db, drug_id, for_update=True)
                changes = {
                    column: value
                    for column, value in values.items()
                    if getattr(drug, column) != value
                }
                for column, value in changes.items():
                    setattr(drug, column, value)

        if not changes:
            logger.debug(f"Update of drug {drug_id} changed nothing")
            return 0

        AuditLog.log_action("update", RESOURCE, drug_id, changes=changes)
        return 1

    def sell(self, drug_id: int) -> SaleResult:
        """
        Sell one unit: quantity - 1 and sold + 1 in one statement.

        With zero quantity nothing is written and the result reports
        OUT_OF_STOCK.
        """
        drug_id = _check_id(drug_id)
        stmt = (
            update(Drug)
            .where(Drug.id == drug_id, Drug.quantity > 0)
            .values(quantity=Drug.quantity - 1, sold=Drug.sold + 1)
            .execution_options(synchronize_session=False)
        )
        if not _storable(drug_id):
            raise NotFound(drug_id)
        with self._write_lock, self._session_factory() as db:
            with db.begin():
                sold = db.execute(stmt).rowcount == 1
                record = DrugRecord.model_validate(self._load(db, drug_id))

        if not sold:
            logger.info(f"Sale of drug {drug_id} rejected: out of stock")
            AuditLog.log_rejected("sell", RESOURCE, drug_id, "out_of_stock")
            return SaleResult(status=SaleStatus.OUT_OF_STOCK, drug=record)

        AuditLog.log_action(
            "sell", RESOURCE, drug_id, changes={"quantity": record.quantity, "sold": record.sold}
        )
        return SaleResult(status=SaleStatus.SOLD, drug=record)

    def delete(self, drug_id: int) -> int:
        """Remove one drug; 0 when it did not exist."""
        drug_id = _check_id(drug_id)
        if not _storable(drug_id):
            return 0
        with self._write_lock, self._session_factory() as db:
            with db.begin():
                deleted = db.execute(delete(Drug).where(Drug.id == drug_id)).rowcount

        if deleted:
            AuditLog.log_action("delete", RESOURCE, drug_id)
        return deleted
