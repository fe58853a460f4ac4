import pytest
from aiohttp import ClientSession, web
from aiohttp.test_utils import TestServer

from paxboard.proxy import (
    LargeModelProxy,
    LargeModelProxyResourceStatus,
    StatusFormatError,
    parse_status,
)


def _sample():
    return {
        "services": [
            {
                "name": "llama",
                "listen_port": "8001",
                "is_running": True,
                "active_connections": 2,
                "last_used": "2024-01-01T00:00:00Z",
                "service_url": "http://localhost:8001",
                "resource_requirements": {"vram": 8, "cpu": 1},
                "extra": "ignored",
            }
        ],
        "resources": {"vram": {"total_available": 24, "total_in_use": 8},
                      "cpu": {"total_available": 4, "total_in_use": 1}},
    }


def test_parse_status_reads_fields():
    status = parse_status(_sample())
    service = status.services[0]
    assert service.name == "llama"
    assert service.is_running is True
    assert service.active_connections == 2
    assert status.resources["vram"] == LargeModelProxyResourceStatus(24, 8)


def test_parse_status_sorts_keys():
    status = parse_status(_sample())
    assert list(status.resources) == sorted(status.resources)
    reqs = status.services[0].resource_requirements
    assert list(reqs) == sorted(reqs)


def test_missing_last_used_is_none():
    data = _sample()
    del data["services"][0]["last_used"]
    assert parse_status(data).services[0].last_used is None


def test_missing_field_raises():
    data = _sample()
    del data["services"][0]["service_url"]
    with pytest.raises(StatusFormatError):
        parse_status(data)


@pytest.mark.parametrize("value", [-1, True, "3", 2**32])
def test_bad_counter_raises(value):
    data = _sample()
    data["resources"]["vram"]["total_in_use"] = value
    with pytest.raises(StatusFormatError):
        parse_status(data)


def test_non_object_raises():
    with pytest.raises(ValueError):
        parse_status([])


@pytest.mark.asyncio
async def test_get_status_fetches_status_endpoint():
    async def handler(request):
        return web.json_response(_sample())

    app = web.Application()
    app.router.add_get("/status", handler)
    async with TestServer(app) as server:
        proxy = LargeModelProxy(str(server.make_url("")).rstrip("/"))
        async with ClientSession() as session:
            status = await proxy.get_status(session)
    assert status == parse_status(_sample())


@pytest.mark.asyncio
async def test_get_status_non_json_raises():
    app = web.Application()
    async with TestServer(app) as server:
        proxy = LargeModelProxy(str(server.make_url("")).rstrip("/"))
        async with ClientSession() as session:
            with pytest.raises(ValueError):
                await proxy.get_status(session)