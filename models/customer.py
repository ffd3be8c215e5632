# models/customer.py
import uuid

from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.orm import relationship
from .base import Base


class Customer(Base):
     """
     Customer model - prospective tenants browsing listings.
     Maps to the 'customers' table.
     """
     __tablename__ = "customers"

     id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
     name = Column(String(60), nullable=False)
     email = Column(String(255), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=False)
     phone = Column(String(20), nullable=True)
     city = Column(String(60), nullable=True)
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     proposals = relationship("Proposal", back_populates="customer")

     def __repr__(self):
          return f"<Customer(id={self.id}, email='{self.email}')>"
