from models import AuditLog
from services.token_service import PrincipalKind
from tests.helpers import ADMIN_PASSWORD

GENERIC = {"erro": "Login ou senha incorretos"}


def test_login_returns_public_data_and_admin_token(client, admin, token_service):
    response = client.post("/admins/login", json={"email": admin.email, "senha": ADMIN_PASSWORD})
    assert response.status_code == 200

    body = response.json()
    assert body["id"] == admin.id
    assert body["nome"] == admin.name
    assert body["email"] == admin.email
    assert body["nivel"] == admin.level
    assert "senha" not in body and "password" not in body

    principal = token_service.verify(body["token"])
    assert principal.kind == PrincipalKind.ADMIN
    assert principal.id == admin.id


def test_wrong_password_is_generic_and_audited(client, admin, session_factory):
    response = client.post("/admins/login", json={"email": admin.email, "senha": "Wrong@123"})
    assert response.status_code == 400
    assert response.json() == GENERIC

    with session_factory() as session:
        logs = session.query(AuditLog).all()
        assert len(logs) == 1
        assert logs[0].admin_id == admin.id
        assert logs[0].description == "Tentativa de acesso ao sistema"
        assert logs[0].detail == f"Admin: {admin.id} - {admin.name}"


def test_unknown_email_gets_same_answer_without_audit(client, admin, session_factory):
    response = client.post("/admins/login", json={"email": "ghost@example.com", "senha": "Wrong@123"})
    assert response.status_code == 400
    assert response.json() == GENERIC

    with session_factory() as session:
        assert session.query(AuditLog).count() == 0


def test_missing_fields_get_generic_answer(client):
    response = client.post("/admins/login", json={"email": "admin@alugaaqui.com"})
    assert response.status_code == 400
    assert response.json() == GENERIC
