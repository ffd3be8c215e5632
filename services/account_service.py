# services/account_service.py
"""
Account Service - admin and customer account management.
"""
import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from errors import Conflict, NotFound, ValidationFailed
from models import Admin, Customer
from services.auth_service import hash_password
from services.password_policy import validate_password

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "E-mail já cadastrado"


class AccountService:
     """Service class for principal accounts."""

     def __init__(self, db: Session, rounds: int = 12):
          self.db = db
          self.rounds = rounds

     def _insert(self, record):
          """Flush inside a savepoint so a duplicate e-mail leaves the session usable."""
          try:
               with self.db.begin_nested():
                    self.db.add(record)
          except IntegrityError as exc:
               raise Conflict(DUPLICATE_EMAIL) from exc
          return record

     # Admins

     def list_admins(self) -> List[Admin]:
          return self.db.query(Admin).order_by(Admin.created_at).all()

     def get_admin(self, admin_id: str) -> Admin:
          admin = self.db.get(Admin, admin_id)
          if admin is None:
               raise NotFound("Admin não encontrado")
          return admin

     def create_admin(self, name: str, email: str, password: str, level: int) -> Admin:
          """
          Create an admin after enforcing the password policy.

          Raises:
               ValidationFailed: password violates one or more rules
               Conflict: e-mail already registered
          """
          violations = validate_password(password)
          if violations:
               raise ValidationFailed("; ".join(violations))

          if self.db.query(Admin.id).filter(Admin.email == email).first():
               raise Conflict(DUPLICATE_EMAIL)

          admin = Admin(
               name=name,
               email=email,
               password=hash_password(password, self.rounds),
               level=level,
          )
          self._insert(admin)
          logger.info("Admin %s created (level %s)", admin.id, level)
          return admin

     # Customers

     def list_customers(self) -> List[Customer]:
          return self.db.query(Customer).order_by(Customer.name).all()

     def get_customer(self, customer_id: str) -> Customer:
          customer = self.db.get(Customer, customer_id)
          if customer is None:
               raise NotFound("Cliente não encontrado")
          return customer

     def register_customer(self, name: str, email: str, password: str, phone=None, city=None) -> Customer:
          if self.db.query(Customer.id).filter(Customer.email == email).first():
               raise Conflict(DUPLICATE_EMAIL)

          customer = Customer(
               name=name,
               email=email,
               password=hash_password(password, self.rounds),
               phone=phone,
               city=city,
          )
          self._insert(customer)
          logger.info("Customer %s registered", customer.id)
          return customer
