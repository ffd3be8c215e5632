# models/landlord.py
"""
Landlord model - owner record attached to every listing.

A landlord is provisioned lazily the first time an admin creates a
property; name, email and password hash are copied from the admin at that
moment and are not kept in sync afterwards. The unique email column is what
guarantees a single landlord per admin under concurrent creations.
"""
from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from .base import Base


class Landlord(Base):
     """Property owner profile - maps to the 'landlords' table."""
     __tablename__ = "landlords"

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(60), nullable=False)
     email = Column(String(255), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=False)
     phone = Column(String(20), nullable=True)
     city = Column(String(60), nullable=True)
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     properties = relationship("Property", back_populates="landlord")

     def __repr__(self):
          return f"<Landlord(id={self.id}, email='{self.email}')>"
