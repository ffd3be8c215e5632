import os

# Keep the module-level engine away from any real database during tests.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from config import Settings, get_settings
from database import build_engine, get_session
from main import app
from models import Admin, Base, Customer
from services.auth_service import hash_password
from services.token_service import AdminPrincipal, CustomerPrincipal, TokenService

from tests.helpers import ADMIN_PASSWORD, TEST_ROUNDS


@pytest.fixture
def settings():
    return Settings(
        JWT_SECRET="test-secret",
        BCRYPT_ROUNDS=TEST_ROUNDS,
        DATABASE_URL="sqlite:///:memory:",
    )


@pytest.fixture
def engine():
    engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    """Session for service-level tests. Do not hold it open across HTTP calls."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory, settings):
    def override_get_session():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def token_service(settings):
    return TokenService(settings.JWT_SECRET)


@pytest.fixture
def make_admin(session_factory):
    def _make(email="admin@alugaaqui.com", name="Administrador Sistema", password=ADMIN_PASSWORD, level=1):
        with session_factory() as session:
            admin = Admin(
                name=name,
                email=email,
                password=hash_password(password, TEST_ROUNDS),
                level=level,
            )
            session.add(admin)
            session.commit()
            return admin

    return _make


@pytest.fixture
def make_customer(session_factory):
    def _make(email="cliente@example.com", name="Maria Cliente", password="Cliente@1"):
        with session_factory() as session:
            customer = Customer(
                name=name,
                email=email,
                password=hash_password(password, TEST_ROUNDS),
            )
            session.add(customer)
            session.commit()
            return customer

    return _make


@pytest.fixture
def admin(make_admin):
    return make_admin()


@pytest.fixture
def admin_headers(admin, token_service):
    token = token_service.issue(AdminPrincipal(id=admin.id, name=admin.name, level=admin.level))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def customer(make_customer):
    return make_customer()


@pytest.fixture
def customer_headers(customer, token_service):
    token = token_service.issue(CustomerPrincipal(id=customer.id, name=customer.name))
    return {"Authorization": f"Bearer {token}"}
