"""Store and salesperson endpoints."""
import pytest
from sqlalchemy.exc import SQLAlchemyError

from storefront.models import Salesperson, Store
from storefront.services.store_repository import SalespersonRepository, StoreRepository
from tests.conftest import BASE_TIME


@pytest.fixture
def stores(db_session):
    db_session.add_all([
        Store(id=1, nome="Loja Centro", endereco="Av. Getúlio Vargas, 100", horario_funcionamento="8h-18h",
              status="ativa", ordem=2, telefones=["(65) 3333-0001", "(65) 3333-0002"], created_at=BASE_TIME),
        Store(id=2, nome="Loja CPA", endereco="Av. Historiador Rubens de Mendonça, 2000",
              horario_funcionamento="8h-18h", status="ativa", ordem=1, telefones=None, created_at=BASE_TIME),
        Store(id=3, nome="Loja Fechada", endereco="Rua Sem Saída, 1", horario_funcionamento="-",
              status="inativa", ordem=0, created_at=BASE_TIME),
    ])
    db_session.add_all([
        Salesperson(id=1, nome="Pedro", whatsapp="65999990001", loja_id=1, ativo=True, created_at=BASE_TIME),
        Salesperson(id=2, nome="Beatriz", whatsapp="65999990002", loja_id=1, ativo=True, created_at=BASE_TIME),
        Salesperson(id=3, nome="Rafael", whatsapp="65999990003", loja_id=2, ativo=True, created_at=BASE_TIME),
        Salesperson(id=4, nome="Amanda", whatsapp="65999990004", loja_id=1, ativo=False, created_at=BASE_TIME),
    ])
    db_session.commit()
    return db_session


def test_list_active_stores(api, stores) -> None:
    lojas = api.get("/api/lojas").json()["lojas"]

    assert [loja["id"] for loja in lojas] == [2, 1]
    assert lojas[0]["telefones"] == []
    assert lojas[1]["telefones"] == ["(65) 3333-0001", "(65) 3333-0002"]


def test_store_query_failure(api, stores, monkeypatch) -> None:
    def broken(db):
        raise SQLAlchemyError("password authentication failed for user storefront")

    monkeypatch.setattr(StoreRepository, "get_active", staticmethod(broken))

    response = api.get("/api/lojas")

    assert response.status_code == 500
    assert response.json() == {"error": "Erro interno do servidor"}
    assert "password" not in response.text


def test_salespeople_of_store_sorted_by_name(api, stores) -> None:
    body = api.get("/api/vendedores", params={"loja_id": 1}).json()

    assert [v["nome"] for v in body["vendedores"]] == ["Beatriz", "Pedro"]
    assert "fallback" not in body


def test_all_active_salespeople(api, stores) -> None:
    body = api.get("/api/vendedores").json()

    assert [v["id"] for v in body["vendedores"]] == [2, 1, 3]


def test_salespeople_fall_back_to_placeholders(api, stores, monkeypatch) -> None:
    def broken(db, loja_id=None):
        raise SQLAlchemyError("relation vendedores does not exist")

    monkeypatch.setattr(SalespersonRepository, "get_active", staticmethod(broken))

    response = api.get("/api/vendedores", params={"loja_id": 2})

    assert response.status_code == 200
    body = response.json()
    assert body["fallback"] is True
    assert [v["nome"] for v in body["vendedores"]] == [
        "João Silva", "Maria Santos", "Carlos Oliveira", "Ana Costa",
    ]
    assert {v["loja_id"] for v in body["vendedores"]} == {2}
    assert body["vendedores"][0]["whatsapp"] == "65999887766"
