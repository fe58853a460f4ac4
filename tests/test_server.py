import pytest
from aiohttp import web
from aiohttp.test_utils import TestClient, TestServer

from paxboard.server import Config, create_app, load_config, main
from paxboard.services import LargeModelProxyService, LocalService


def test_load_config(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('port = 8080\nbase_url = "http://h"\n')
    assert load_config(path) == Config(port=8080, base_url="http://h")


def test_load_config_missing_key(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("port = 8080\n")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize("port", ["70000", "-1", '"80"', "true"])
def test_load_config_bad_port(tmp_path, port):
    path = tmp_path / "config.toml"
    path.write_text(f'port = {port}\nbase_url = "http://h"\n')
    with pytest.raises(ValueError):
        load_config(path)


def test_main_requires_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["--config", str(tmp_path / "absent.toml")])


def _app(tmp_path, services):
    static = tmp_path / "static"
    static.mkdir()
    (static / "hello.txt").write_text("hi there")
    (tmp_path / "secret.txt").write_text("hidden")
    return create_app(Config(0, "http://h"), ".tw {}", services, static)


@pytest.mark.asyncio
async def test_index_and_styles(tmp_path):
    app = _app(tmp_path, {"plex": LocalService(32400)})
    async with TestClient(TestServer(app)) as client:
        resp = await client.get("/")
        page = await resp.text()
        assert resp.status == 200
        assert "http://h:32400/" in page
        css_resp = await client.get("/styles.css")
        assert css_resp.content_type == "text/css"
        assert (await css_resp.text()).endswith(".tw {}")


@pytest.mark.asyncio
async def test_index_with_unreachable_proxy(tmp_path):
    services = {"lmp": LargeModelProxyService.from_url("http://127.0.0.1:1")}
    app = _app(tmp_path, services)
    async with TestClient(TestServer(app)) as client:
        page = await (await client.get("/")).text()
    assert page.count("Status unavailable") == 2


@pytest.mark.asyncio
async def test_index_with_live_proxy(tmp_path):
    async def status(request):
        return web.json_response(
            {"services": [], "resources": {"vram": {"total_available": 8, "total_in_use": 2}}}
        )

    proxy_app = web.Application()
    proxy_app.router.add_get("/status", status)
    async with TestServer(proxy_app) as proxy_server:
        url = str(proxy_server.make_url("")).rstrip("/")
        app = _app(tmp_path, {"lmp": LargeModelProxyService.from_url(url)})
        async with TestClient(TestServer(app)) as client:
            page = await (await client.get("/")).text()
    assert "Total Resources:" in page
    assert "2/8" in page


@pytest.mark.asyncio
async def test_static_files(tmp_path):
    app = _app(tmp_path, {})
    async with TestClient(TestServer(app)) as client:
        ok = await client.get("/hello.txt")
        assert await ok.text() == "hi there"
        missing = await client.get("/nope.txt")
        assert missing.status == 404
        escape = await client.get("/%2E%2E/secret.txt")
        assert escape.status == 404