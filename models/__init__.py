# models/__init__.py
from .base import Base
from .admin import Admin
from .landlord import Landlord
from .property import Property, PropertyType
from .audit_log import AuditLog
from .customer import Customer
from .proposal import Proposal

__all__ = [
     "Base",
     "Admin",
     "Landlord",
     "Property",
     "PropertyType",
     "AuditLog",
     "Customer",
     "Proposal",
]
