"""Shared fixtures: sample payloads and a local PokeAPI-compatible server."""

import asyncio
import json

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

SLOW_RESPONSE_SECONDS = 1.0

FRONT_PNG = b"\x89PNG\r\n\x1a\nfront-sprite"
BACK_PNG = b"\x89PNG\r\n\x1a\nback-sprite"


def make_payload(base_url: str = "https://sprites.example", **overrides) -> dict:
    payload = {
        "name": "bulbasaur",
        "base_experience": 64,
        "height": 7,
        "id": 1,
        "order": 1,
        "sprites": {
            "front_default": f"{base_url}/sprites/front.png",
            "back_default": f"{base_url}/sprites/back.png",
            "other": {"home": {"front_default": None}},
        },
        "stats": [
            {
                "base_stat": 45,
                "effort": 0,
                "stat": {"name": "hp", "url": "https://pokeapi.co/api/v2/stat/1/"},
            },
            {
                "base_stat": 49,
                "effort": 0,
                "stat": {"name": "attack", "url": "https://pokeapi.co/api/v2/stat/2/"},
            },
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def payload() -> dict:
    return make_payload()


async def _truncated_response(
    request: web.Request, body: bytes
) -> web.StreamResponse:
    """Announces more bytes than it sends, then drops the connection."""
    response = web.StreamResponse(headers={"Content-Length": str(len(body) * 10)})
    await response.prepare(request)
    await response.write(body)
    request.transport.close()
    return response


async def _pokemon_handler(request: web.Request) -> web.StreamResponse:
    origin = str(request.url.origin())
    ident = request.match_info["ident"]

    if ident in ("1", "bulbasaur"):
        return web.json_response(make_payload(origin))
    if ident == "ditto":
        return web.json_response(
            make_payload(
                origin,
                name="ditto",
                id=132,
                sprites={
                    "front_default": f"{origin}/sprites/front.png",
                    "back_default": f"{origin}/sprites/gone.png",
                },
            )
        )
    if ident == "unown":
        return web.json_response(
            make_payload(
                origin,
                name="unown",
                id=201,
                sprites={"front_default": None, "back_default": ""},
            )
        )
    if ident == "broken":
        return web.Response(text="<html>not json</html>", content_type="text/html")
    if ident == "slowpoke":
        await asyncio.sleep(SLOW_RESPONSE_SECONDS)
        return web.json_response(make_payload(origin, name="slowpoke"))
    if ident == "truncated":
        return await _truncated_response(request, b'{"name": "bulba')
    if ident == "teapot":
        return web.Response(status=418)
    return web.json_response({"detail": "Not found."}, status=404)


async def _sprite_handler(request: web.Request) -> web.StreamResponse:
    filename = request.match_info["filename"]
    if filename == "slow.png":
        await asyncio.sleep(SLOW_RESPONSE_SECONDS)
    if filename == "truncated.png":
        return await _truncated_response(request, FRONT_PNG)

    sprites = {"front.png": FRONT_PNG, "back.png": BACK_PNG}
    data = sprites.get(filename)
    if data is None:
        return web.Response(status=404)
    return web.Response(body=data, content_type="image/png")


@pytest_asyncio.fixture
async def pokeapi_server():
    app = web.Application()
    app.router.add_get("/api/pokemon/{ident}/", _pokemon_handler)
    app.router.add_get("/sprites/{filename}", _sprite_handler)
    server = TestServer(app)
    await server.start_server()
    yield server
    await server.close()


@pytest.fixture
def api_base_url(pokeapi_server) -> str:
    return str(pokeapi_server.make_url("/api"))


def payload_bytes(payload: dict) -> bytes:
    return json.dumps(payload).encode("utf-8")
