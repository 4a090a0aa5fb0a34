"""Category and subcategory endpoints."""
from sqlalchemy.exc import SQLAlchemyError

from storefront.models import Category
from storefront.services.catalog_repository import CategoryRepository
from tests.conftest import BASE_TIME


def test_list_categories(api, catalog) -> None:
    response = api.get("/api/categorias")

    assert response.status_code == 200
    categorias = response.json()["categorias"]
    assert [c["id"] for c in categorias] == [1, 2]
    assert all("subcategorias" not in c for c in categorias)


def test_list_categories_with_subcategories(api, catalog) -> None:
    response = api.get("/api/categorias", params={"include_subcategorias": "true"})

    categorias = response.json()["categorias"]
    assert [s["nome"] for s in categorias[0]["subcategorias"]] == ["Esmaltes", "Acrílicas"]
    assert [s["id"] for s in categorias[1]["subcategorias"]] == [20]


def test_category_without_subcategories_lists_empty(api, catalog) -> None:
    catalog.add(Category(id=4, nome="Hidráulica", ativo=True, ordem=4, created_at=BASE_TIME))
    catalog.commit()

    categorias = api.get("/api/categorias", params={"include_subcategorias": "true"}).json()["categorias"]

    assert categorias[-1]["id"] == 4
    assert categorias[-1]["subcategorias"] == []


def test_get_category(api, catalog) -> None:
    response = api.get("/api/categorias/2")

    assert response.status_code == 200
    assert response.json()["categoria"]["nome"] == "Elétrica"


def test_get_inactive_category_is_404(api, catalog) -> None:
    response = api.get("/api/categorias/3")

    assert response.status_code == 404
    assert response.json() == {"error": "Categoria não encontrada"}


def test_get_category_bad_id(api, catalog) -> None:
    response = api.get("/api/categorias/tintas")

    assert response.status_code == 400
    assert response.json() == {"error": "ID da categoria inválido"}


def test_category_query_failure(api, catalog, monkeypatch) -> None:
    def broken(db):
        raise SQLAlchemyError("relation categorias does not exist")

    monkeypatch.setattr(CategoryRepository, "get_all", staticmethod(broken))

    response = api.get("/api/categorias")

    assert response.status_code == 500
    assert response.json() == {"error": "Erro interno do servidor"}


def test_list_subcategories(api, catalog) -> None:
    body = api.get("/api/subcategorias").json()

    assert [s["id"] for s in body["subcategorias"]] == [11, 20, 10]
    assert body["total"] == 3
    assert body["subcategorias"][0]["categoria"]["nome"] == "Tintas"


def test_list_subcategories_of_category(api, catalog) -> None:
    body = api.get("/api/subcategorias", params={"categoria": 1}).json()

    assert [s["id"] for s in body["subcategorias"]] == [11, 10]
    assert body["total"] == 2


def test_get_subcategory(api, catalog) -> None:
    response = api.get("/api/subcategorias/20")

    assert response.status_code == 200
    subcategoria = response.json()["subcategoria"]
    assert subcategoria["nome"] == "Fios"
    assert subcategoria["categoria"]["id"] == 2


def test_get_subcategory_errors(api, catalog) -> None:
    assert api.get("/api/subcategorias/12").json() == {"error": "Subcategoria não encontrada"}
    assert api.get("/api/subcategorias/1.5").json() == {"error": "ID da subcategoria inválido"}
