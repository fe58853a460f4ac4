"""Web server for the dashboard."""

from __future__ import annotations

import argparse
import asyncio
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import aiohttp
from aiohttp import web

from paxboard.proxy import LargeModelProxyStatus
from paxboard.render import render_index, render_styles
from paxboard.services import LargeModelProxyService, Service, default_services


@dataclass(frozen=True)
class Config:
    """Server settings read from the configuration file."""

    port: int
    base_url: str


def load_config(path: str | Path) -> Config:
    """Read a TOML configuration file; raises ValueError when it is malformed."""
    data = tomllib.loads(Path(path).read_text(encoding="utf-8"))
    try:
        port = data["port"]
        base_url = data["base_url"]
    except KeyError as exc:
        raise ValueError(f"missing configuration key {exc.args[0]!r}") from None
    if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= 65535:
        raise ValueError("port must be an integer between 0 and 65535")
    if not isinstance(base_url, str):
        raise ValueError("base_url must be a string")
    return Config(port=port, base_url=base_url)


def _find_proxy(services: Mapping[str, Service]) -> LargeModelProxyService | None:
    found = None
    for _, service in sorted(services.items()):
        if isinstance(service, LargeModelProxyService):
            found = service
    return found


async def _fetch_status(service: LargeModelProxyService | None) -> LargeModelProxyStatus | None:
    if service is None:
        return None
    try:
        async with aiohttp.ClientSession() as session:
            return await service.proxy.get_status(session)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError):
        return None


def create_app(
    config: Config,
    tailwind_css: str,
    services: Mapping[str, Service],
    static_dir: str | Path,
) -> web.Application:
    """Build the application: the index page, the stylesheet, and static files."""
    root = Path(static_dir).resolve()
    stylesheet = render_styles(tailwind_css)

    async def index(request: web.Request) -> web.Response:
        status = await _fetch_status(_find_proxy(services))
        return web.Response(
            text=render_index(services, config.base_url, status), content_type="text/html"
        )

    async def styles(request: web.Request) -> web.Response:
        return web.Response(text=stylesheet, content_type="text/css")

    async def static(request: web.Request) -> web.StreamResponse:
        target = (root / request.match_info["tail"]).resolve()
        if not target.is_relative_to(root):
            raise web.HTTPNotFound()
        if target.is_dir():
            target = target / "index.html"
        if not target.is_file():
            raise web.HTTPNotFound()
        return web.FileResponse(target)

    app = web.Application()
    app.router.add_get("/", index)
    app.router.add_get("/styles.css", styles)
    app.router.add_get("/{tail:.*}", static)
    return app


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="paxboard", description="Serve the dashboard.")
    parser.add_argument("--config", default="config.toml", help="configuration file")
    parser.add_argument("--css", help="pre-built Tailwind stylesheet to append")
    parser.add_argument("--static", default="static", help="directory of static files")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    tailwind_css = Path(args.css).read_text(encoding="utf-8") if args.css else ""
    app = create_app(config, tailwind_css, default_services(), args.static)
    print(f"About to serve on port {config.port}")
    web.run_app(app, host="0.0.0.0", port=config.port, print=None)