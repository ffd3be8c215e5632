# models/audit_log.py
"""
AuditLog model - append-only trail of sensitive events.

Rows are written for failed admin logins and listing removals; the
application never updates or deletes them.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from .base import Base


class AuditLog(Base):
     """Audit entry - maps to the 'audit_logs' table."""
     __tablename__ = "audit_logs"

     id = Column(Integer, primary_key=True, autoincrement=True)
     description = Column(String(120), nullable=False)
     detail = Column(String(255), nullable=True)
     admin_id = Column(String(36), ForeignKey("admins.id"), nullable=True, index=True)
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     admin = relationship("Admin", back_populates="audit_logs")

     def __repr__(self):
          return f"<AuditLog(id={self.id}, description='{self.description}')>"
