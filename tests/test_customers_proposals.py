import pytest

from services.token_service import PrincipalKind
from tests.helpers import property_payload

REGISTRATION = {
    "nome": "Pedro Locatário",
    "email": "pedro@alugaaqui.com",
    "senha": "segredo",
    "telefone": "(53) 98888-7777",
    "cidade": "Pelotas",
}


def test_register_and_login_customer(client, token_service):
    created = client.post("/clientes", json=REGISTRATION)
    assert created.status_code == 201
    assert created.json()["nome"] == "Pedro Locatário"
    assert "senha" not in created.json()

    login = client.post("/clientes/login", json={"email": "pedro@alugaaqui.com", "senha": "segredo"})
    assert login.status_code == 200

    principal = token_service.verify(login.json()["token"])
    assert principal.kind == PrincipalKind.CUSTOMER
    assert principal.id == created.json()["id"]
    assert principal.level == 0


def test_customer_login_failure_is_generic(client, customer):
    response = client.post("/clientes/login", json={"email": customer.email, "senha": "errada"})
    assert response.status_code == 400
    assert response.json() == {"erro": "Login ou senha incorretos"}


def test_duplicate_registration_is_rejected(client, customer):
    response = client.post("/clientes", json={**REGISTRATION, "email": customer.email})
    assert response.status_code == 400
    assert response.json() == {"erro": "E-mail já cadastrado"}


def test_customer_lookup_requires_token(client, customer, customer_headers):
    assert client.get("/clientes").status_code == 401
    listed = client.get("/clientes", headers=customer_headers).json()
    assert [item["id"] for item in listed] == [customer.id]
    assert client.get(f"/clientes/{customer.id}", headers=customer_headers).json()["email"] == customer.email
    assert client.get("/clientes/nobody", headers=customer_headers).status_code == 404


@pytest.fixture
def listing(client, admin_headers):
    return client.post("/imoveis", json=property_payload(), headers=admin_headers).json()


def test_proposal_lifecycle(client, customer, listing, admin_headers):
    created = client.post(
        "/propostas",
        json={"clienteId": customer.id, "imovelId": listing["id"], "descricao": "Posso pagar 1100 por mês?"},
    )
    assert created.status_code == 201
    proposal = created.json()
    assert proposal["resposta"] is None

    mine = client.get(f"/propostas/{customer.id}").json()
    assert [item["id"] for item in mine] == [proposal["id"]]
    assert mine[0]["imovel"]["titulo"] == listing["titulo"]
    assert mine[0]["cliente"]["nome"] == customer.name

    answered = client.patch(
        f"/propostas/{proposal['id']}", json={"resposta": "Aceito a proposta"}, headers=admin_headers
    )
    assert answered.status_code == 200
    assert answered.json()["resposta"] == "Aceito a proposta"
    assert client.get("/propostas").json()[0]["resposta"] == "Aceito a proposta"


def test_proposal_needs_existing_customer_and_listing(client, customer, listing):
    unknown_customer = client.post(
        "/propostas", json={"clienteId": "ghost", "imovelId": listing["id"], "descricao": "Tenho interesse no imóvel"}
    )
    assert unknown_customer.status_code == 404

    unknown_listing = client.post(
        "/propostas", json={"clienteId": customer.id, "imovelId": 999, "descricao": "Tenho interesse no imóvel"}
    )
    assert unknown_listing.status_code == 404


def test_short_proposal_description_is_rejected(client, customer, listing):
    response = client.post(
        "/propostas", json={"clienteId": customer.id, "imovelId": listing["id"], "descricao": "Oi"}
    )
    assert response.status_code == 400


def test_answer_must_be_given(client, customer, listing, admin_headers):
    created = client.post(
        "/propostas",
        json={"clienteId": customer.id, "imovelId": listing["id"], "descricao": "Aceita animais de estimação?"},
    ).json()
    response = client.patch(f"/propostas/{created['id']}", json={}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json() == {"erro": "Informe a resposta desta proposta"}
