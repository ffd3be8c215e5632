# models/admin.py
import uuid

from sqlalchemy import Column, Integer, String, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


def _new_id() -> str:
     return str(uuid.uuid4())


class Admin(TimestampMixin, Base):
     """
     Admin model - back-office accounts allowed to manage listings.
     Passwords are stored as bcrypt hashes only.
     """
     __tablename__ = "admins"
     __table_args__ = (
          CheckConstraint("level BETWEEN 1 AND 5", name="ck_admins_level"),
     )

     id = Column(String(36), primary_key=True, default=_new_id)
     name = Column(String(60), nullable=False)
     email = Column(String(255), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=False)
     level = Column(Integer, default=2, nullable=False)

     # Relationships
     properties = relationship("Property", back_populates="admin")
     audit_logs = relationship("AuditLog", back_populates="admin")

     def __repr__(self):
          return f"<Admin(id={self.id}, email='{self.email}', level={self.level})>"
