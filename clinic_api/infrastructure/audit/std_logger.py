import hashlib
import json
import logging
from datetime import datetime, timezone
from typing import Optional, Dict, Any

from ...application.ports.audit_logger import AuditLogger


class StdAuditLogger(AuditLogger):
    def __init__(self, enabled: bool = True) -> None:
        self._logger = logging.getLogger(__name__)
        self.enabled = enabled

    def log(self, action: str, entity_id: int, phone: Optional[str] = None, success: bool = True, details: Optional[Dict[str, Any]] = None) -> None:
        if not self.enabled:
            return
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "action": action,
            "entity_id": entity_id,
            "phone_hash": hashlib.sha256(phone.encode()).hexdigest() if phone else None,
            "success": success,
            "details": details or {},
        }
        self._logger.info(f"AUDIT: {json.dumps(entry)}")
