from models import Admin, Landlord
from seed import DEFAULT_ADMIN_EMAIL, seed
from services.auth_service import verify_password
from tests.helpers import ADMIN_PASSWORD, TEST_ROUNDS


def test_seed_creates_admin_and_landlord(db):
    admin = seed(db, rounds=TEST_ROUNDS)
    db.commit()

    assert admin.email == DEFAULT_ADMIN_EMAIL
    assert admin.level == 1
    assert verify_password(ADMIN_PASSWORD, admin.password)

    landlord = db.query(Landlord).one()
    assert landlord.email == DEFAULT_ADMIN_EMAIL
    assert landlord.phone == "(53) 99999-9999"
    assert landlord.city == "Pelotas"


def test_seed_is_idempotent(db):
    seed(db, rounds=TEST_ROUNDS)
    seed(db, rounds=TEST_ROUNDS)
    db.commit()

    assert db.query(Admin).count() == 1
    assert db.query(Landlord).count() == 1
