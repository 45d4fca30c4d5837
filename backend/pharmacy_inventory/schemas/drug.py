from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from pharmacy_inventory.core.exceptions import OutOfStock
from pharmacy_inventory.models.drug import MAX_INTEGER

# Same bounds as the Numeric(10, 2) price column
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2


def _strip_name(value):
    if isinstance(value, str):
        value = value.strip()
    if not value:
        raise ValueError("name must not be empty")
    return value


class DrugCreate(BaseModel):
    name: str
    quantity: int = Field(0, ge=0, le=MAX_INTEGER)
    sold: int = Field(0, ge=0, le=MAX_INTEGER)
    price: Decimal = Field(ge=0, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES)
    image_reference: Optional[str] = None

    class Config:
        extra = "forbid"

    @field_validator("name", mode="before")
    @classmethod
    def name_not_blank(cls, value):
        return _strip_name(value)

    @field_validator("quantity", "sold", mode="before")
    @classmethod
    def blank_count_is_zero(cls, value):
        # An untouched editor field arrives as "" or None: treat it as omitted
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0
        return value

    @field_validator("price", mode="before")
    @classmethod
    def price_present(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("price is required")
        return value.strip() if isinstance(value, str) else value

    @field_validator("image_reference", mode="before")
    @classmethod
    def blank_image_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class DrugUpdate(BaseModel):
    """Partial update: only fields present in the input are written."""
    name: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0, le=MAX_INTEGER)
    sold: Optional[int] = Field(None, ge=0, le=MAX_INTEGER)
    price: Optional[Decimal] = Field(
        None, ge=0, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES
    )
    image_reference: Optional[str] = None

    class Config:
        extra = "forbid"

    @field_validator("name", mode="before")
    @classmethod
    def name_not_blank(cls, value):
        return _strip_name(value)

    @field_validator("quantity", "sold", "price", mode="before")
    @classmethod
    def required_not_null(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValueError("field may not be cleared")
        return value

    @field_validator("image_reference", mode="before")
    @classmethod
    def blank_image_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class DrugRecord(BaseModel):
    id: int
    name: str
    quantity: int
    sold: int
    price: Decimal
    image_reference: Optional[str] = None

    class Config:
        from_attributes = True


class SaleStatus(str, Enum):
    SOLD = "sold"
    OUT_OF_STOCK = "out_of_stock"


class SaleResult(BaseModel):
    """Outcome of selling one unit. Out of stock is a normal outcome, not an exception."""
    status: SaleStatus
    drug: DrugRecord

    @property
    def is_sold(self) -> bool:
        return self.status == SaleStatus.SOLD

    def raise_for_status(self) -> "SaleResult":
        if self.status == SaleStatus.OUT_OF_STOCK:
            raise OutOfStock(self.drug.id, self.drug.name)
        return self
