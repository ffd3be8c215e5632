from datetime import timedelta

import pytest

from dependencies import extract_bearer
from errors import InvalidToken, MissingToken
from services.token_service import AdminPrincipal, TokenService
from tests.helpers import property_payload


def test_extract_bearer_requires_header():
    with pytest.raises(MissingToken):
        extract_bearer(None)


def test_extract_bearer_rejects_header_without_token():
    with pytest.raises(InvalidToken):
        extract_bearer("Bearer")


def test_extract_bearer_returns_second_part():
    assert extract_bearer("Bearer abc.def.ghi") == "abc.def.ghi"


def test_missing_header_is_rejected_before_verification(client):
    response = client.post("/imoveis", json=property_payload())
    assert response.status_code == 401
    assert response.json() == {"error": "Token não informado"}


def test_garbage_token_is_rejected(client):
    response = client.delete("/imoveis/1", headers={"Authorization": "Bearer nope"})
    assert response.status_code == 401
    assert response.json() == {"error": "Token inválido"}


def test_expired_and_forged_tokens_look_the_same(client, admin, token_service):
    expired = token_service.issue(
        AdminPrincipal(admin.id, admin.name, admin.level), expires_delta=timedelta(seconds=-1)
    )
    forged = TokenService("someone-else").issue(AdminPrincipal(admin.id, admin.name, admin.level))

    responses = [
        client.delete("/imoveis/1", headers={"Authorization": f"Bearer {token}"})
        for token in (expired, forged)
    ]
    assert [r.status_code for r in responses] == [401, 401]
    assert responses[0].json() == responses[1].json() == {"error": "Token inválido"}


def test_gate_runs_before_the_handler(client, admin_headers):
    created = client.post("/imoveis", json=property_payload(), headers=admin_headers).json()

    response = client.delete(f"/imoveis/{created['id']}")
    assert response.status_code == 401

    # The listing is untouched.
    assert client.get(f"/imoveis/{created['id']}").json()["disponivel"] is True


def test_customer_token_cannot_create_listing(client, customer_headers):
    response = client.post("/imoveis", json=property_payload(), headers=customer_headers)
    assert response.status_code == 401
    assert response.json() == {"erro": "Admin não encontrado"}
