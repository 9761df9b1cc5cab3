"""Tests for the async Google Books client."""
import asyncio

import httpx

from bookcatalog.async_client import AsyncGoogleBooksClient


def run(coro_factory, handler, **kwargs):
    async def go():
        async with AsyncGoogleBooksClient(transport=httpx.MockTransport(handler), **kwargs) as client:
            return await coro_factory(client)

    return asyncio.run(go())


def test_search_sends_query_params():
    """Test query, capped maxResults and API key parameters."""
    seen = {}

    def handler(request):
        seen.update(request.url.params)
        return httpx.Response(200, json={"items": []})

    result = run(lambda client: client.search("python", max_results=100), handler, api_key="secret")

    assert result == {"items": []}
    assert seen == {"q": "python", "maxResults": "40", "key": "secret"}


def test_search_omits_key_when_not_configured():
    seen = {}

    def handler(request):
        seen.update(request.url.params)
        return httpx.Response(200, json={})

    run(lambda client: client.search("python"), handler)

    assert "key" not in seen


def test_search_returns_none_on_error_status():
    result = run(lambda client: client.search("python"), lambda request: httpx.Response(404))
    assert result is None


def test_search_returns_none_on_invalid_json():
    def handler(request):
        return httpx.Response(200, content=b"<html>not json</html>")

    assert run(lambda client: client.search("python"), handler) is None


def test_search_returns_none_on_transport_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    assert run(lambda client: client.search("python"), handler) is None


def test_search_multiple_keeps_query_order_and_failures():
    """Test that results line up with queries and failures stay as None."""
    def handler(request):
        query = request.url.params["q"]
        if query == "bad":
            return httpx.Response(500)
        return httpx.Response(200, json={"query": query})

    results = run(lambda client: client.search_multiple(["a", "bad", "c"]), handler)

    assert results == [{"query": "a"}, None, {"query": "c"}]
