"""CatalogClient and SearchSuggester against a mocked HTTP transport."""
import asyncio

import httpx

from storefront.client.catalog_client import CatalogClient, _query_params, gather_settled
from storefront.client.search import SearchSuggester
from storefront.schemas.catalog import ProductListResponse

BASE_URL = "http://catalogo.test/api"


def product_json(id: int, **fields) -> dict:
    data = {"id": id, "nome": f"Produto {id}", "preco": 100.0}
    data.update(fields)
    return data


def page_json(products: list, total: int = None) -> dict:
    total = len(products) if total is None else total
    return {
        "produtos": products,
        "pagination": {
            "page": 1, "limit": 12, "total": total, "totalPages": 1, "hasNext": False, "hasPrev": False,
        },
    }


def make_client(handler) -> CatalogClient:
    return CatalogClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))


def run(coro):
    return asyncio.run(coro)


def test_query_params() -> None:
    assert _query_params({
        "categoria": 3, "promocao": True, "novidade": False, "busca": None, "subcategorias": [1, 2], "vazio": [],
    }) == {"categoria": "3", "promocao": "true", "subcategorias": "1,2"}


def test_list_products_sends_filters() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=page_json([product_json(1, preco_promocao=80.0, promocao_mes=True)]))

    async def scenario():
        async with make_client(handler) as client:
            return await client.list_products(categoria=1, promocao=True, limit=20)

    page = run(scenario())

    assert page.produtos[0].on_sale
    assert seen[0].url.path == "/api/produtos"
    assert dict(seen[0].url.params) == {"categoria": "1", "promocao": "true", "limit": "20"}
    assert seen[0].headers["cache-control"] == "no-cache"


def test_failures_become_empty_results() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/produtos":
            return httpx.Response(500, json={"error": "Erro interno do servidor"})
        if request.url.path == "/api/categorias":
            return httpx.Response(200, text="<html>gateway</html>")
        if request.url.path == "/api/lojas":
            return httpx.Response(200, json={"lojas": [{"id": "x"}]})
        raise httpx.ConnectError("connection refused", request=request)

    async def scenario():
        async with make_client(handler) as client:
            return (
                await client.list_products(),
                await client.list_categories(),
                await client.list_stores(),
                await client.list_banners(),
                await client.get_product(1),
            )

    products, categories, stores, banners, product = run(scenario())

    assert products is None
    assert categories == []
    assert stores == []
    assert banners == []
    assert product is None


def test_detail_404_is_none() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"error": "Produto não encontrado"})

    async def scenario():
        async with make_client(handler) as client:
            return await client.get_product(99), await client.get_category(99), await client.get_subcategory(99)

    assert run(scenario()) == (None, None, None)


def test_catalog_lookups() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path == "/api/categorias":
            assert request.url.params["include_subcategorias"] == "true"
            return httpx.Response(200, json={"categorias": [
                {"id": 1, "nome": "Tintas", "subcategorias": [{"id": 11, "nome": "Esmaltes"}]},
            ]})
        if path == "/api/subcategorias":
            return httpx.Response(200, json={"subcategorias": [
                {"id": 11, "nome": "Esmaltes", "categoria": {"id": 1, "nome": "Tintas"}},
            ], "total": 1})
        if path == "/api/redes-sociais":
            return httpx.Response(200, json={"redesSociais": [
                {"id": 1, "nome": "Instagram", "link": "https://instagram.com/x", "icone": "instagram"},
            ]})
        if path == "/api/logos":
            assert dict(request.url.params) == {"tipo": "azul", "posicao": "cabecalho"}
            return httpx.Response(200, json={"logos": [
                {"id": 1, "nome": "Logo", "tipo": "azul", "posicao": "cabecalho", "url": "logos/azul.svg"},
            ]})
        if path == "/api/banners":
            assert request.url.params.get("ativo") == "false"
            return httpx.Response(200, json={"banners": []})
        return httpx.Response(404)

    async def scenario():
        async with make_client(handler) as client:
            return (
                await client.list_categories(include_subcategorias=True),
                await client.list_subcategories(categoria=1),
                await client.list_social_links(),
                await client.list_logos(tipo="azul", posicao="cabecalho"),
                await client.list_banners(ativo=False),
            )

    categories, subcategories, links, logos, banners = run(scenario())

    assert categories[0].subcategorias[0].nome == "Esmaltes"
    assert subcategories[0].categoria.nome == "Tintas"
    assert links[0].icone == "instagram"
    assert logos[0].url == "logos/azul.svg"
    assert banners == []


def test_salespeople() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"vendedores": [
            {"id": 7, "nome": "Pedro", "whatsapp": "65999990001", "loja_id": 2},
        ]})

    async def scenario():
        async with make_client(handler) as client:
            return await client.list_salespeople(loja_id=2)

    people, fallback = run(scenario())

    assert [p.nome for p in people] == ["Pedro"]
    assert fallback is False


def test_salespeople_server_fallback_is_reported() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"vendedores": [
            {"id": 1, "nome": "João Silva", "whatsapp": "65999887766", "loja_id": 2},
        ], "fallback": True})

    async def scenario():
        async with make_client(handler) as client:
            return await client.list_salespeople(loja_id=2)

    _, fallback = run(scenario())

    assert fallback is True


def test_salespeople_fall_back_when_unreachable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async def scenario():
        async with make_client(handler) as client:
            return await client.list_salespeople(loja_id=5)

    people, fallback = run(scenario())

    assert fallback is True
    assert len(people) == 4
    assert people[0].nome == "João Silva"
    assert {p.loja_id for p in people} == {5}


def test_gather_settled_keeps_other_results() -> None:
    async def ok(value):
        return value

    async def boom():
        raise RuntimeError("down")

    assert run(gather_settled(ok(1), boom(), ok(3))) == [1, None, 3]


class SlowClient:
    """Answers each search after a per-query delay."""

    def __init__(self, delays: dict):
        self.delays = delays
        self.calls = []

    async def list_products(self, busca=None, limit=None, **kwargs):
        self.calls.append(busca)
        await asyncio.sleep(self.delays.get(busca, 0))
        return ProductListResponse.model_validate(page_json([product_json(len(self.calls), nome=busca)]))


def test_short_query_clears_suggestions_without_fetching() -> None:
    client = SlowClient({})
    suggester = SearchSuggester(client, debounce=0)

    assert run(suggester.update("t")) == []
    assert client.calls == []


def test_debounce_only_fetches_last_keystroke() -> None:
    client = SlowClient({})
    suggester = SearchSuggester(client, debounce=0.05)

    async def scenario():
        return await asyncio.gather(
            suggester.update("ti"), suggester.update("tin"), suggester.update("tinta"),
        )

    results = run(scenario())

    assert results[0] is None and results[1] is None
    assert [p.nome for p in results[2]] == ["tinta"]
    assert client.calls == ["tinta"]


def test_stale_response_is_discarded() -> None:
    client = SlowClient({"tin": 0.2, "tinta": 0.0})
    suggester = SearchSuggester(client, debounce=0)

    async def scenario():
        slow = asyncio.create_task(suggester.update("tin"))
        await asyncio.sleep(0.05)
        fast = await suggester.update("tinta")
        return await slow, fast

    slow, fast = run(scenario())

    assert slow is None
    assert [p.nome for p in fast] == ["tinta"]
    assert [p.nome for p in suggester.results] == ["tinta"]
