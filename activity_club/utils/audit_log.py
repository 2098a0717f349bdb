from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Literal, Optional

from .request_id import get_request_id

AuditAction = Literal[
    "order.invalid",
    "order.submitted",
    "order.rejected",
    "order.created",
    "capacity.reset",
    "capacity.reset_failed",
    "catalog.load_failed",
]
AuditInitiator = Literal["user", "system"]

_audit_logger = logging.getLogger("audit")
_audit_logger.setLevel(logging.INFO)
if not _audit_logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    _audit_logger.addHandler(handler)
_audit_logger.propagate = False


def emit_audit_log(
    *,
    action: AuditAction,
    initiator: AuditInitiator,
    activity_id: Optional[str] = None,
    order_id: Optional[int] = None,
    item_count: Optional[int] = None,
    total: Optional[float] = None,
    level: Literal["info", "warning"] = "info",
    message: Optional[str] = None,
    extra: Optional[dict[str, Any]] = None,
) -> None:
    """Emit structured JSON audit log. Raises RuntimeError if logging fails."""
    payload: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "level": level,
        "action": action,
        "initiator": initiator,
        "request_id": get_request_id(),
        "activity_id": activity_id,
        "order_id": order_id,
        "item_count": item_count,
        "total": total,
    }
    if message is not None:
        payload["message"] = message
    if extra:
        payload.update(extra)

    compact_payload = {k: v for k, v in payload.items() if v is not None}
    try:
        line = json.dumps(compact_payload, ensure_ascii=True)
        if level == "warning":
            _audit_logger.warning(line)
        else:
            _audit_logger.info(line)
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("failed to emit audit log") from exc
