"""Product listing and detail endpoints."""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from storefront.models import Category, Subcategory
from storefront.schemas.common import Pagination
from storefront.services.catalog_repository import ProductRepository, contains_pattern, parse_id_list
from tests.conftest import BASE_TIME, add_product


def _ids(response) -> list[int]:
    return [p["id"] for p in response.json()["produtos"]]


def test_list_defaults_to_active_products_newest_first(api, catalog) -> None:
    response = api.get("/api/produtos")

    assert response.status_code == 200
    assert _ids(response) == [4, 3, 2, 1]
    assert response.json()["pagination"] == {
        "page": 1,
        "limit": 12,
        "total": 4,
        "totalPages": 1,
        "hasNext": False,
        "hasPrev": False,
    }


def test_display_order_comes_before_recency(api, catalog) -> None:
    add_product(catalog, 6, 20, nome="Primeiro", ordem=1)
    add_product(catalog, 7, 20, nome="Segundo", ordem=2)
    catalog.commit()

    assert _ids(api.get("/api/produtos"))[:2] == [6, 7]


def test_second_page_of_fourteen(api, db_session) -> None:
    db_session.add(Category(id=1, nome="Ferramentas", ativo=True, created_at=BASE_TIME))
    db_session.add(Subcategory(id=1, nome="Martelos", categoria_id=1, ativo=True, created_at=BASE_TIME))
    for i in range(1, 15):
        add_product(db_session, i, 1)
    db_session.commit()

    response = api.get("/api/produtos", params={"page": 2, "limit": 12})
    body = response.json()

    assert len(body["produtos"]) == 2
    assert body["pagination"]["total"] == 14
    assert body["pagination"]["totalPages"] == 2
    assert body["pagination"]["hasNext"] is False
    assert body["pagination"]["hasPrev"] is True


def test_category_is_resolved_to_active_subcategories(api, catalog) -> None:
    response = api.get("/api/produtos", params={"categoria": 1})

    # product 3 sits in an inactive subcategory of category 1
    assert _ids(response) == [2, 1]
    assert response.json()["pagination"]["total"] == 2


def test_category_without_active_subcategories_has_no_products(api, catalog) -> None:
    response = api.get("/api/produtos", params={"categoria": 3})

    assert response.status_code == 200
    assert _ids(response) == []
    assert response.json()["pagination"]["total"] == 0


def test_subcategory_filter_wins_over_category(api, catalog) -> None:
    response = api.get("/api/produtos", params={"categoria": 1, "subcategoria": 12})

    assert _ids(response) == [3]


def test_subcategory_list_ignores_bad_entries(api, catalog) -> None:
    response = api.get("/api/produtos", params={"subcategorias": "10, abc,20"})

    assert _ids(response) == [4, 1]


def test_flag_filters(api, catalog) -> None:
    assert _ids(api.get("/api/produtos", params={"promocao": "true"})) == [2]
    assert _ids(api.get("/api/produtos", params={"novidade": "true"})) == [4]
    assert _ids(api.get("/api/produtos", params={"tipo_eletrico": "true"})) == [4]
    assert _ids(api.get("/api/produtos", params={"tipo_tinta": "true"})) == [3, 2, 1]
    assert _ids(api.get("/api/produtos", params={"tipo_tinta": "false"})) == [4, 3, 2, 1]


def test_search_matches_name_or_description_ignoring_case(api, catalog) -> None:
    assert _ids(api.get("/api/produtos", params={"busca": "ESMALTE"})) == [2]
    assert _ids(api.get("/api/produtos", params={"busca": "rende"})) == [1]


def test_search_wildcards_are_literal(api, catalog) -> None:
    add_product(catalog, 6, 20, nome="Desconto 50% Tinta")
    add_product(catalog, 7, 20, nome="Massa Corrida 50 Kg")
    add_product(catalog, 8, 20, nome="Cabo_PP 3x1,5")
    catalog.commit()

    assert _ids(api.get("/api/produtos", params={"busca": "50%"})) == [6]
    assert _ids(api.get("/api/produtos", params={"busca": "_"})) == [8]
    assert _ids(api.get("/api/produtos", params={"busca": "\\"})) == []


def test_contains_pattern() -> None:
    assert contains_pattern("tinta") == "%tinta%"
    assert contains_pattern("50%_a\\b") == "%50\\%\\_a\\\\b%"


def test_status_parameter(api, catalog) -> None:
    assert _ids(api.get("/api/produtos", params={"status": "inativo"})) == [5]


def test_products_carry_subcategory_and_category(api, catalog) -> None:
    product = api.get("/api/produtos", params={"subcategoria": 11}).json()["produtos"][0]

    assert product["preco"] == 100
    assert product["preco_promocao"] == 80
    assert product["subcategoria"]["nome"] == "Esmaltes"
    assert product["subcategoria"]["categoria"] == {"id": 1, "nome": "Tintas", "descricao": None}


def test_invalid_paging_is_rejected(api, catalog) -> None:
    response = api.get("/api/produtos", params={"limit": 0})

    assert response.status_code == 422
    assert response.json()["error"] == "Parâmetros inválidos"


def test_get_product(api, catalog) -> None:
    response = api.get("/api/produtos/4")

    assert response.status_code == 200
    produto = response.json()["produto"]
    assert produto["nome"] == "Fio Flexível 2,5mm"
    assert produto["voltagem"] == "750V"
    assert produto["subcategoria"]["categoria"]["nome"] == "Elétrica"


def test_get_inactive_or_missing_product_is_404(api, catalog) -> None:
    for produto_id in (5, 999):
        response = api.get(f"/api/produtos/{produto_id}")
        assert response.status_code == 404
        assert response.json() == {"error": "Produto não encontrado"}


def test_get_product_with_bad_id(api, catalog) -> None:
    response = api.get("/api/produtos/abc")

    assert response.status_code == 400
    assert response.json() == {"error": "ID do produto inválido"}


def test_database_failure_is_a_generic_500(api, catalog, monkeypatch) -> None:
    def broken(*args, **kwargs):
        raise SQLAlchemyError("connection refused to db.internal:5432")

    monkeypatch.setattr(ProductRepository, "get_all", staticmethod(broken))

    response = api.get("/api/produtos")

    assert response.status_code == 500
    assert response.json() == {"error": "Erro interno do servidor"}
    assert "db.internal" not in response.text


def test_responses_are_not_cacheable(api, catalog) -> None:
    assert api.get("/api/produtos").headers["cache-control"] == "no-store"


def test_pagination_block() -> None:
    assert Pagination.build(page=1, limit=12, total=0).model_dump() == {
        "page": 1, "limit": 12, "total": 0, "totalPages": 0, "hasNext": False, "hasPrev": False,
    }
    assert Pagination.build(page=1, limit=12, total=13).hasNext is True


def test_parse_id_list() -> None:
    assert parse_id_list(None) == []
    assert parse_id_list("1, 2,x,,3") == [1, 2, 3]
