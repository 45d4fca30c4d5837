"""
Audit logging for inventory mutations.

Every create, update, sale, and delete is written to the "audit" logger as a
single JSON line so stock movements can be reconstructed later.
"""
import logging
import json
from datetime import datetime, timezone
from typing import Any, Optional, Dict

# Separate logger for audit events (can be shipped to centralized logging)
audit_logger = logging.getLogger("audit")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class AuditLog:
    """Central audit logging for stock-changing events."""

    @staticmethod
    def log_action(
        action: str,  # "create", "update", "sell", "delete", "delete_all"
        resource_type: str,  # "drug"
        resource_id: Optional[int],
        changes: Optional[Dict[str, Any]] = None,
    ):
        """
        Log a committed mutation.

        Usage:
            AuditLog.log_action("sell", "drug", 3, changes={"quantity": 4, "sold": 1})
            AuditLog.log_action("delete_all", "drug", None, changes={"deleted": 12})
        """
        log_entry = {
            "timestamp": _now(),
            "event_type": f"{resource_type}.{action}",
            "resource_id": resource_id,
        }

        if changes:
            log_entry["changes"] = changes

        audit_logger.info(json.dumps(log_entry, default=str))

    @staticmethod
    def log_rejected(
        action: str,
        resource_type: str,
        resource_id: Optional[int],
        reason: str,
    ):
        """
        Log an operation refused by a business rule (e.g. selling with zero stock).

        Usage:
            AuditLog.log_rejected("sell", "drug", 3, "out_of_stock")
        """
        log_entry = {
            "timestamp": _now(),
            "event_severity": "WARNING",
            "event_type": f"{resource_type}.{action}.rejected",
            "resource_id": resource_id,
            "reason": reason,
        }

        audit_logger.warning(json.dumps(log_entry))
