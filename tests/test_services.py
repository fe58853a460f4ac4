from paxboard.proxy import LargeModelProxy
from paxboard.services import LargeModelProxyService, LocalService, default_services


def test_local_url_uses_base_and_port():
    assert LocalService(8096).get_url("http://media") == "http://media:8096/"


def test_proxy_url_ignores_base():
    service = LargeModelProxyService(LargeModelProxy("http://redline:7071"))
    assert service.get_url("http://media") == "http://redline:7071"


def test_default_services_sorted():
    names = list(default_services())
    assert names == sorted(names)
    assert set(names) == {"plex", "jellyfin", "navidrome", "redlib", "large-model-proxy"}


def test_default_services_contents():
    services = default_services()
    assert services["plex"] == LocalService(32400)
    assert services["large-model-proxy"].get_url("x") == "http://redline:7071"