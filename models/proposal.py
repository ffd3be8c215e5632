# models/proposal.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class Proposal(TimestampMixin, Base):
     """
     Proposal model - a customer's offer on a listing and the owner's answer.
     """
     __tablename__ = "proposals"

     id = Column(Integer, primary_key=True, autoincrement=True)
     customer_id = Column(String(36), ForeignKey("customers.id"), nullable=False, index=True)
     property_id = Column(Integer, ForeignKey("properties.id"), nullable=False, index=True)
     description = Column(Text, nullable=False)
     answer = Column(Text, nullable=True)

     # Relationships
     customer = relationship("Customer", back_populates="proposals")
     property = relationship("Property", back_populates="proposals")

     def __repr__(self):
          return f"<Proposal(id={self.id}, customer_id={self.customer_id}, property_id={self.property_id})>"
