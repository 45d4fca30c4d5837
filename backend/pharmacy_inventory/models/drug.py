from sqlalchemy import CheckConstraint, Column, Integer, String, Numeric
from pharmacy_inventory.db.base import Base


class Drug(Base):
    """
    One pharmacy inventory record.

    `sold` only ever moves through a sale, which takes one unit off
    `quantity` in the same statement. `image_reference` is opaque: a URI or
    path owned by whoever picked the image, never interpreted here.
    """
    __tablename__ = "drugs"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_drugs_quantity_non_negative"),
        CheckConstraint("sold >= 0", name="ck_drugs_sold_non_negative"),
        CheckConstraint("price >= 0", name="ck_drugs_price_non_negative"),
        # AUTOINCREMENT: ids of deleted rows are never handed out again
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False, default=0, server_default="0")
    sold = Column(Integer, nullable=False, default=0, server_default="0")
    price = Column(Numeric(10, 2), nullable=False)
    image_reference = Column(String(1024), nullable=True)


# Column order of a full projection
DRUG_COLUMNS = ("id", "name", "quantity", "sold", "price", "image_reference")

# Largest value an INTEGER column holds (signed 64-bit); ids and counts above it cannot be stored
MAX_INTEGER = 2**63 - 1
