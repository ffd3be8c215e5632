# seed.py
"""
Seed the database with the default admin and its landlord record.

Usage:
     python seed.py

Safe to run repeatedly: existing rows are left untouched.
"""
import logging

from sqlalchemy.orm import Session

from config import get_settings
from database import get_session_context, init_db
from models import Admin
from services.auth_service import hash_password
from services.property_service import PropertyService

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_NAME = "Administrador Sistema"
DEFAULT_ADMIN_EMAIL = "admin@alugaaqui.com"
DEFAULT_ADMIN_PASSWORD = "Admin@123"  # change after first login
DEFAULT_LANDLORD_PHONE = "(53) 99999-9999"
DEFAULT_LANDLORD_CITY = "Pelotas"


def seed(db: Session, rounds: int = 12) -> Admin:
     admin = db.query(Admin).filter(Admin.email == DEFAULT_ADMIN_EMAIL).first()
     if admin is None:
          admin = Admin(
               name=DEFAULT_ADMIN_NAME,
               email=DEFAULT_ADMIN_EMAIL,
               password=hash_password(DEFAULT_ADMIN_PASSWORD, rounds),
               level=1,
          )
          db.add(admin)
          db.flush()
          logger.info("Default admin created")
     else:
          logger.info("Default admin already exists")

     landlord = PropertyService(db).get_or_create_landlord(admin)
     if landlord.phone is None:
          landlord.phone = DEFAULT_LANDLORD_PHONE
     if landlord.city is None:
          landlord.city = DEFAULT_LANDLORD_CITY
     db.flush()
     return admin


def main() -> None:
     settings = get_settings()
     logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")
     init_db()
     with get_session_context() as db:
          seed(db, rounds=settings.BCRYPT_ROUNDS)
     logger.info("Seed finished")


if __name__ == "__main__":
     main()
