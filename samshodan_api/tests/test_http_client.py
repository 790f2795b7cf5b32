"""Tests for the shared HTTP client helpers."""

import httpx

import samshodan_api.services.http_client as http_mod
from samshodan_api.services.http_client import (
    close_shared_client,
    fetch_json,
    get_shared_client,
)


def _install(handler) -> None:
    http_mod._client = httpx.AsyncClient(transport=httpx.MockTransport(handler))


def test_shared_client_is_reused():
    assert get_shared_client() is get_shared_client()


async def test_close_shared_client_recreates_on_next_use():
    first = get_shared_client()
    await close_shared_client()

    assert first.is_closed
    assert get_shared_client() is not first


async def test_fetch_json_returns_object():
    _install(lambda request: httpx.Response(200, json={"success": True}))

    assert await fetch_json("http://test/api/blog") == {"success": True}


async def test_fetch_json_passes_params():
    seen = {}

    def handler(request):
        seen["query"] = dict(request.url.params)
        return httpx.Response(200, json={})

    _install(handler)
    await fetch_json("http://test/api/blog", params={"tag": "AI"})

    assert seen["query"] == {"tag": "AI"}


async def test_fetch_json_non_200_returns_none():
    _install(lambda request: httpx.Response(500, json={"success": False}))

    assert await fetch_json("http://test/api/blog", context="listing") is None


async def test_fetch_json_network_error_returns_none():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    _install(handler)

    assert await fetch_json("http://test/api/blog") is None


async def test_fetch_json_non_object_returns_none():
    _install(lambda request: httpx.Response(200, json=["not", "a", "dict"]))

    assert await fetch_json("http://test/api/blog") is None


async def test_fetch_json_invalid_json_returns_none():
    _install(lambda request: httpx.Response(200, text="<html>oops</html>"))

    assert await fetch_json("http://test/api/blog") is None
