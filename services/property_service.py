# services/property_service.py
"""
Property Service - listing lifecycle.

Handles:
- Public listing / featured listing / lookup by id
- Creation with lazy landlord provisioning for the acting admin
- Partial updates (no ownership check: any authenticated admin may edit)
- Soft deletion with an audit trail
- Dual-mode search: a numeric term is a rent ceiling, anything else is a
  case-insensitive substring match on title, city or landlord name
"""
import logging
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from errors import AdminNotFound, NotFound
from models import Admin, Landlord, Property
from services.audit_log import AuditLogSink

logger = logging.getLogger(__name__)

FEATURED_LIMIT = 6

# Attribute names accepted from create/update payloads. landlord_id and
# admin_id are deliberately absent: they are always resolved server-side.
WRITABLE_FIELDS = (
     "title",
     "description",
     "address",
     "city",
     "neighborhood",
     "postal_code",
     "type",
     "monthly_rent",
     "available",
     "photos",
)


def parse_price_ceiling(term: str) -> Optional[Decimal]:
     """
     Return the term as a number when it is entirely numeric, else None.

     "1500", " 1500.50 " and "1e3" are numeric; "Pelotas", "12 de Maio",
     "nan", "Infinity", "1_500", non-ASCII digits and "" are not.
     """
     text = term.strip()
     if not text or "_" in text or not text.isascii():
          return None
     try:
          value = Decimal(text)
     except InvalidOperation:
          return None
     if not value.is_finite():
          return None
     return value


class PropertyService:
     """Session-bound operations over property listings."""

     def __init__(self, db: Session, featured_limit: int = FEATURED_LIMIT):
          self.db = db
          self.featured_limit = featured_limit

     def _available(self):
          return (
               self.db.query(Property)
               .options(joinedload(Property.landlord))
               .filter(Property.available.is_(True))
          )

     # ------------------------------------------------------------------
     # Reads
     # ------------------------------------------------------------------

     def list_available(self) -> List[Property]:
          return self._available().order_by(Property.id.desc()).all()

     def list_featured(self) -> List[Property]:
          return self._available().order_by(Property.id.desc()).limit(self.featured_limit).all()

     def get_by_id(self, property_id: int) -> Property:
          """Fetch a listing regardless of availability."""
          prop = (
               self.db.query(Property)
               .options(joinedload(Property.landlord))
               .filter(Property.id == property_id)
               .first()
          )
          if prop is None:
               raise NotFound("Imóvel não encontrado")
          return prop

     def search(self, term: str) -> List[Property]:
          """
          Single entry point for two query semantics.

          A term that parses as a number filters by ``monthly_rent <= term``;
          otherwise title, city and landlord name are matched as
          case-insensitive substrings. Unavailable listings are excluded in
          both modes. A numeric-looking city or title is therefore never
          matched as text. "%" and "_" in the term match literally.
          """
          ceiling = parse_price_ceiling(term)
          query = self._available()
          if ceiling is not None:
               query = query.filter(Property.monthly_rent <= ceiling)
          else:
               query = query.outerjoin(Property.landlord).filter(
                    or_(
                         Property.title.icontains(term, autoescape=True),
                         Property.city.icontains(term, autoescape=True),
                         Landlord.name.icontains(term, autoescape=True),
                    )
               )
          return query.order_by(Property.id.desc()).all()

     # ------------------------------------------------------------------
     # Writes
     # ------------------------------------------------------------------

     def resolve_admin(self, admin_id: Optional[str]) -> Admin:
          admin = self.db.get(Admin, admin_id) if admin_id else None
          if admin is None:
               raise AdminNotFound()
          return admin

     def get_or_create_landlord(self, admin: Admin) -> Landlord:
          """
          Return the landlord tied to the admin's e-mail, creating it if needed.

          The insert runs in a savepoint; if a concurrent request won the race
          the unique e-mail constraint fires and the existing row is reused.
          """
          landlord = self.db.query(Landlord).filter(Landlord.email == admin.email).first()
          if landlord is not None:
               return landlord

          landlord = Landlord(
               name=admin.name,
               email=admin.email,
               password=admin.password,
               phone=None,
               city=None,
          )
          try:
               with self.db.begin_nested():
                    self.db.add(landlord)
          except IntegrityError:
               logger.info("Landlord for %s created concurrently; reusing it", admin.email)
               landlord = self.db.query(Landlord).filter(Landlord.email == admin.email).one()
          else:
               logger.info("Provisioned landlord %s for admin %s", landlord.id, admin.id)
          return landlord

     def create(self, data: dict, acting_admin_id: Optional[str]) -> Property:
          """
          Persist a new listing for the acting admin.

          Args:
               data: validated payload (attribute names, see WRITABLE_FIELDS)
               acting_admin_id: uniform principal id from the request context

          Raises:
               AdminNotFound: the principal does not resolve to an admin
          """
          admin = self.resolve_admin(acting_admin_id)
          landlord = self.get_or_create_landlord(admin)

          values = {key: value for key, value in data.items() if key in WRITABLE_FIELDS}
          if values.get("available") is None:
               values["available"] = True

          prop = Property(**values, landlord_id=landlord.id, admin_id=admin.id)
          self.db.add(prop)
          self.db.flush()
          self.db.refresh(prop)
          logger.info("Admin %s created property %s", admin.id, prop.id)
          return prop

     def update(self, property_id: int, changes: dict) -> Property:
          """
          Apply a partial update. Only keys present in ``changes`` are written.

          No ownership check: any authenticated admin may edit any listing.
          """
          prop = self.get_by_id(property_id)
          for key, value in changes.items():
               if key in WRITABLE_FIELDS:
                    setattr(prop, key, value)
          self.db.flush()
          logger.info("Property %s updated (%s)", prop.id, ", ".join(sorted(changes)) or "no fields")
          return prop

     def soft_delete(self, property_id: int, actor_id: Optional[str], actor_name: str) -> Property:
          """
          Mark a listing unavailable and append an audit entry.

          ``actor_id`` is the uniform principal id. It is recorded as the
          audit admin only when it names an existing admin.
          """
          prop = self.get_by_id(property_id)
          prop.mark_unavailable()

          admin_id = actor_id if actor_id and self.db.get(Admin, actor_id) else None
          AuditLogSink(self.db).property_removed(prop.title, admin_id, actor_name)
          self.db.flush()
          logger.info("Property %s soft-deleted by %s", prop.id, actor_id)
          return prop
