# services/audit_log.py
"""
Audit Log Sink - append-only record of sensitive events.

Entries join the caller's transaction; they become durable when the
request's session commits. The "audit" logger mirrors each entry at DEBUG
as soon as it is flushed, so a mirrored line may belong to a transaction
that is later rolled back.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from models import AuditLog

logger = logging.getLogger("audit")

FAILED_LOGIN = "Tentativa de acesso ao sistema"
PROPERTY_REMOVED = "Exclusão de: {title}"


class AuditLogSink:
     """Write-only sink for AuditLog rows."""

     def __init__(self, db: Session):
          self.db = db

     def record(self, description: str, detail: str, admin_id: Optional[str]) -> AuditLog:
          entry = AuditLog(description=description, detail=detail, admin_id=admin_id)
          self.db.add(entry)
          self.db.flush()
          logger.debug("%s | %s | admin=%s", description, detail, admin_id)
          return entry

     def failed_login(self, admin_id: str, admin_name: str) -> AuditLog:
          return self.record(FAILED_LOGIN, f"Admin: {admin_id} - {admin_name}", admin_id)

     def property_removed(self, title: str, admin_id: Optional[str], admin_name: str) -> AuditLog:
          return self.record(PROPERTY_REMOVED.format(title=title), f"Admin: {admin_name}", admin_id)
