# services/auth_service.py
"""
Authentication Service - credential checks and token issuance.

Both login flows answer with the same generic error whether the e-mail is
unknown or the password is wrong. Failed admin attempts with a known
e-mail are written to the audit log so operators can tell the cases apart.
"""
import logging
from functools import lru_cache
from typing import Optional, Tuple

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from errors import InvalidCredentials
from models import Admin, Customer
from services.audit_log import AuditLogSink
from services.token_service import AdminPrincipal, CustomerPrincipal, TokenService

logger = logging.getLogger(__name__)


@lru_cache
def get_password_context(rounds: int = 12) -> CryptContext:
     """Bcrypt context; one instance per work factor."""
     return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(password: str, rounds: int = 12) -> str:
     return get_password_context(rounds).hash(password)


def verify_password(password: str, hashed: str, rounds: int = 12) -> bool:
     """Compare a plain password with a stored hash (constant time)."""
     return get_password_context(rounds).verify(password, hashed)


class AuthService:
     """Login flows for admins and customers."""

     def __init__(self, db: Session, token_service: TokenService, rounds: int = 12):
          self.db = db
          self.token_service = token_service
          self.rounds = rounds

     def _check(self, password: str, hashed: Optional[str]) -> bool:
          context = get_password_context(self.rounds)
          if hashed is None:
               # Burn comparable time so unknown e-mails are not distinguishable by latency.
               context.dummy_verify()
               return False
          return context.verify(password, hashed)

     def login_admin(self, email: Optional[str], password: Optional[str]) -> Tuple[Admin, str]:
          """
          Authenticate an admin.

          Returns:
               (admin, token) on success

          Raises:
               InvalidCredentials: missing field, unknown e-mail or wrong password
          """
          if not email or not password:
               raise InvalidCredentials()

          admin = self.db.query(Admin).filter(Admin.email == email).first()
          if admin is None:
               self._check(password, None)
               logger.warning("Admin login failed: unknown e-mail")
               raise InvalidCredentials()

          if not self._check(password, admin.password):
               AuditLogSink(self.db).failed_login(admin.id, admin.name)
               logger.warning("Admin login failed: wrong password for admin %s", admin.id)
               raise InvalidCredentials()

          token = self.token_service.issue(
               AdminPrincipal(id=admin.id, name=admin.name, level=admin.level)
          )
          logger.info("Admin %s logged in", admin.id)
          return admin, token

     def login_customer(self, email: Optional[str], password: Optional[str]) -> Tuple[Customer, str]:
          """Authenticate a customer; same generic failure policy as admins."""
          if not email or not password:
               raise InvalidCredentials()

          customer = self.db.query(Customer).filter(Customer.email == email).first()
          if not self._check(password, customer.password if customer else None):
               logger.warning("Customer login failed")
               raise InvalidCredentials()

          token = self.token_service.issue(CustomerPrincipal(id=customer.id, name=customer.name))
          logger.info("Customer %s logged in", customer.id)
          return customer, token
