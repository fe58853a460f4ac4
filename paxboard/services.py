"""Services shown on the dashboard."""

from __future__ import annotations

from dataclasses import dataclass

from paxboard.proxy import LargeModelProxy


@dataclass(frozen=True)
class LocalService:
    """A service on the dashboard host, reached by port."""

    port: int

    def get_url(self, base_url: str) -> str:
        return f"{base_url}:{self.port}/"


@dataclass(frozen=True)
class LargeModelProxyService:
    """A large-model-proxy with its own URL."""

    proxy: LargeModelProxy

    @classmethod
    def from_url(cls, url: str) -> LargeModelProxyService:
        return cls(LargeModelProxy(url))

    def get_url(self, base_url: str) -> str:
        return self.proxy.url


Service = LocalService | LargeModelProxyService


def default_services() -> dict[str, Service]:
    """The built-in service table, keyed by name in sorted order."""
    services: dict[str, Service] = {
        "plex": LocalService(32400),
        "jellyfin": LocalService(8096),
        "navidrome": LocalService(4533),
        "redlib": LocalService(10000),
        "large-model-proxy": LargeModelProxyService.from_url("http://redline:7071"),
    }
    return dict(sorted(services.items()))