"""
Inventory error taxonomy and its HTTP mapping.

Store operations raise the InventoryError subclasses below. The API layer
turns them into HTTPException via BusinessError, logging the detail
internally and keeping 500 responses generic.
"""
from typing import Any, Dict, List, Optional
import logging

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


class InventoryError(Exception):
    """Base class for every failure a store operation can report."""


class ValidationError(InventoryError):
    """Bad input shape or value: missing name, unparseable or negative number, unknown column."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []

    @classmethod
    def from_pydantic(cls, exc) -> "ValidationError":
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        summary = "; ".join(f"{e['field']}: {e['message']}" if e["field"] else e["message"] for e in errors)
        return cls(summary or "Invalid drug fields", errors)


class NotFound(InventoryError):
    """The targeted drug id does not exist."""

    def __init__(self, drug_id: int):
        super().__init__(f"Drug {drug_id} not found")
        self.drug_id = drug_id


class InvalidAddress(InventoryError):
    """The address string is malformed (unknown segment, non-numeric id, wrong authority)."""

    def __init__(self, address: Any, reason: str = ""):
        message = f"Invalid address {address!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.address = address


class UnsupportedOperation(InvalidAddress):
    """The address is well formed but its kind does not support the operation."""

    def __init__(self, address: Any, operation: str):
        super().__init__(address, f"{operation} is not supported for this address")
        self.operation = operation


class OutOfStock(InventoryError):
    """A sale was attempted against a drug with zero quantity."""

    def __init__(self, drug_id: int, name: str = ""):
        label = name or f"Drug {drug_id}"
        super().__init__(f"{label} is out of stock")
        self.drug_id = drug_id


class BusinessError:
    """HTTP responses for inventory errors."""

    @staticmethod
    def not_found(detail: str = "Drug not found") -> HTTPException:
        logger.info(f"Not found: {detail}")
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )

    @staticmethod
    def bad_request(detail: Any) -> HTTPException:
        """
        400 for input validation errors.

        OK to include specific details here since the caller caused the issue.
        """
        logger.info(f"Bad request: {detail}")
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
        )

    @staticmethod
    def conflict(detail: str) -> HTTPException:
        """409 for business-rule conflicts such as selling an out-of-stock drug."""
        logger.info(f"Conflict: {detail}")
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
        )

    @staticmethod
    def server_error(original_error: Exception = None) -> HTTPException:
        """Generic 500. Logs the actual error internally, hides it from the caller."""
        if original_error:
            logger.error(
                f"Internal server error: {type(original_error).__name__}: {str(original_error)}",
                exc_info=True
            )
        else:
            logger.error("Internal server error occurred", exc_info=True)

        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An internal error occurred. Please try again later.",
        )

    @staticmethod
    def from_inventory_error(exc: InventoryError) -> HTTPException:
        if isinstance(exc, NotFound):
            return BusinessError.not_found(str(exc))
        if isinstance(exc, ValidationError):
            return BusinessError.bad_request({"message": str(exc), "errors": exc.errors})
        if isinstance(exc, InvalidAddress):
            return BusinessError.bad_request(str(exc))
        if isinstance(exc, OutOfStock):
            return BusinessError.conflict("Drug out of stock")
        return BusinessError.server_error(exc)
