# models/property.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, Boolean, Text, ForeignKey, Enum, CheckConstraint
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class PropertyType(str, enum.Enum):
     """Closed set of listing categories."""
     CASA = "CASA"
     APARTAMENTO = "APARTAMENTO"
     KITNET = "KITNET"
     STUDIO = "STUDIO"
     COBERTURA = "COBERTURA"
     SOBRADO = "SOBRADO"
     COMERCIAL = "COMERCIAL"
     SALA_COMERCIAL = "SALA_COMERCIAL"
     LOJA = "LOJA"
     GALPAO = "GALPAO"
     TERRENO = "TERRENO"
     CHACARA = "CHACARA"


class Property(TimestampMixin, Base):
     """
     Property model - a rental listing.

     Listings are never physically deleted; removing one flips
     ``available`` to False so it drops out of the public listing while
     remaining reachable by id.
     """
     __tablename__ = "properties"
     __table_args__ = (
          CheckConstraint("monthly_rent > 0", name="ck_properties_monthly_rent"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     title = Column(String(100), nullable=False)
     description = Column(Text, nullable=True)

     # Address
     address = Column(String(255), nullable=False)
     city = Column(String(60), nullable=False, index=True)
     neighborhood = Column(String(60), nullable=True)
     postal_code = Column(String(10), nullable=True)

     type = Column(
          Enum(PropertyType, name="property_type", create_constraint=True),
          nullable=False,
          index=True
     )
     monthly_rent = Column(Numeric(10, 2), nullable=False)
     available = Column(Boolean, default=True, nullable=False, index=True)
     photos = Column(Text, nullable=True)

     # Foreign keys (always resolved server-side)
     landlord_id = Column(Integer, ForeignKey("landlords.id"), nullable=False, index=True)
     admin_id = Column(String(36), ForeignKey("admins.id"), nullable=False, index=True)

     # Relationships
     landlord = relationship("Landlord", back_populates="properties")
     admin = relationship("Admin", back_populates="properties")
     proposals = relationship("Proposal", back_populates="property")

     def __repr__(self):
          return f"<Property(id={self.id}, title='{self.title}', available={self.available})>"

     def mark_unavailable(self) -> None:
          """Soft-delete the listing."""
          self.available = False
