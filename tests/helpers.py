TEST_ROUNDS = 4
ADMIN_PASSWORD = "Admin@123"


def property_payload(**overrides):
    payload = {
        "titulo": "Casa com pátio",
        "endereco": "Rua XV de Novembro, 100",
        "cidade": "Pelotas",
        "bairro": "Centro",
        "tipo": "CASA",
        "aluguelMensal": 1200,
    }
    payload.update(overrides)
    return payload
