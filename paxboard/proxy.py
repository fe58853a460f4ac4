"""Client and status model for a large-model-proxy instance."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import aiohttp

_U32_MAX = 2**32 - 1


class StatusFormatError(ValueError):
    """Raised when a status document does not have the expected shape."""


@dataclass(frozen=True)
class LargeModelProxyResourceStatus:
    """Availability of one resource across the proxy."""

    total_available: int
    total_in_use: int


@dataclass(frozen=True)
class LargeModelProxyServiceStatus:
    """State of one service managed by the proxy."""

    name: str
    listen_port: str
    is_running: bool
    active_connections: int
    last_used: str | None
    service_url: str
    resource_requirements: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class LargeModelProxyStatus:
    """Full status report of the proxy; resources are keyed in sorted order."""

    services: list[LargeModelProxyServiceStatus]
    resources: dict[str, LargeModelProxyResourceStatus]


@dataclass(frozen=True)
class LargeModelProxy:
    """A large-model-proxy reachable at a base URL."""

    url: str

    async def get_status(self, session: aiohttp.ClientSession) -> LargeModelProxyStatus:
        """Fetch and parse ``<url>/status``."""
        async with session.get(f"{self.url}/status") as response:
            data = await response.json(content_type=None)
        return parse_status(data)


def _field(data: dict[str, Any], key: str, where: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise StatusFormatError(f"{where}: missing field {key!r}") from None


def _mapping(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise StatusFormatError(f"{where}: expected an object")
    return value


def _string(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise StatusFormatError(f"{where}: expected a string")
    return value


def _u32(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U32_MAX:
        raise StatusFormatError(f"{where}: expected an unsigned 32-bit integer")
    return value


def _boolean(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise StatusFormatError(f"{where}: expected a boolean")
    return value


def _parse_resource(name: str, data: Any) -> LargeModelProxyResourceStatus:
    where = f"resource {name!r}"
    data = _mapping(data, where)
    return LargeModelProxyResourceStatus(
        total_available=_u32(_field(data, "total_available", where), where),
        total_in_use=_u32(_field(data, "total_in_use", where), where),
    )


def _parse_service(data: Any) -> LargeModelProxyServiceStatus:
    data = _mapping(data, "service")
    where = "service"
    last_used = data.get("last_used")
    requirements = _mapping(
        _field(data, "resource_requirements", where), "resource_requirements"
    )
    return LargeModelProxyServiceStatus(
        name=_string(_field(data, "name", where), "name"),
        listen_port=_string(_field(data, "listen_port", where), "listen_port"),
        is_running=_boolean(_field(data, "is_running", where), "is_running"),
        active_connections=_u32(
            _field(data, "active_connections", where), "active_connections"
        ),
        last_used=None if last_used is None else _string(last_used, "last_used"),
        service_url=_string(_field(data, "service_url", where), "service_url"),
        resource_requirements={
            key: _u32(value, f"requirement {key!r}")
            for key, value in sorted(requirements.items())
        },
    )


def parse_status(data: Any) -> LargeModelProxyStatus:
    """Build a status object from a decoded JSON document."""
    data = _mapping(data, "status")
    services = _field(data, "services", "status")
    if not isinstance(services, list):
        raise StatusFormatError("services: expected a list")
    resources = _mapping(_field(data, "resources", "status"), "resources")
    return LargeModelProxyStatus(
        services=[_parse_service(item) for item in services],
        resources={
            name: _parse_resource(name, value)
            for name, value in sorted(resources.items())
        },
    )