"""HTML and CSS rendering for the dashboard."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal
from html import escape

from paxboard.proxy import LargeModelProxyServiceStatus, LargeModelProxyStatus
from paxboard.services import LargeModelProxyService, LocalService

_VOID = frozenset({"meta", "link"})
_TILE = (
    "block p-6 bg-[var(--background-color-secondary)] rounded-lg hover:bg-opacity-80 "
    "transition-all duration-200 transform hover:scale-[1.02] shadow-lg"
)
_SECTION_HEADING = "text-2xl font-semibold mb-4 text-center"
_LINK = {"target": "_blank", "rel": "noopener noreferrer"}


def _el(tag: str, attrs: Mapping[str, str] | None = None, *children: str) -> str:
    rendered = "".join(
        f' {name}="{escape(value, quote=True)}"' for name, value in (attrs or {}).items()
    )
    if tag in _VOID:
        return f"<{tag}{rendered}>"
    return f"<{tag}{rendered}>{''.join(children)}</{tag}>"


def _text(value: str) -> str:
    return escape(value, quote=False)


def _number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def _percentage(part: int, whole: int) -> float:
    return (part / whole) * 100.0 if whole > 0 else 0.0


def _bar(colour: str, percentage: float) -> str:
    return _el(
        "div",
        {"class": "w-full bg-black bg-opacity-30 rounded-full h-2 border border-gray-600"},
        _el(
            "div",
            {
                "class": f"{colour} h-2 rounded-full transition-all duration-300",
                "style": f"width: {_number(percentage)}%",
            },
        ),
    )


def _usage_row(resource: str, numerator: int, denominator: int) -> str:
    return _el(
        "div",
        {"class": "flex justify-between mb-1"},
        _el("span", None, _text(resource)),
        _el("span", None, f"{numerator}/{denominator}"),
    )


def _unavailable(extra: str = "") -> str:
    cls = "text-sm text-[var(--color-secondary)]" + (f" {extra}" if extra else "")
    return _el("div", {"class": cls}, "Status unavailable")


def render_lmp_service_tile(
    service_status: LargeModelProxyServiceStatus,
    proxy_status: LargeModelProxyStatus,
) -> str:
    """Render the tile for one service managed by the proxy."""
    background = (
        "bg-[var(--background-color-secondary)]"
        if service_status.is_running
        else "bg-[var(--stopped-service-bg)]"
    )
    header = _el(
        "div",
        {"class": "mb-2"},
        _el("div", {"class": "font-mono font-medium text-sm"}, _text(service_status.name)),
        _el(
            "div",
            {"class": "text-xs text-[var(--color-secondary)] mt-1"},
            _text(service_status.service_url),
        ),
    )
    requirements = ""
    if service_status.resource_requirements:
        rows = []
        for resource, required in service_status.resource_requirements.items():
            resource_status = proxy_status.resources.get(resource)
            total = resource_status.total_available if resource_status else 0
            bar = (
                _bar("bg-green-400", _percentage(required, total))
                if service_status.is_running
                else ""
            )
            rows.append(_el("div", {"class": "text-xs"}, _usage_row(resource, required, total), bar))
        requirements = _el("div", {"class": "space-y-1"}, *rows)
    return _el(
        "a",
        {
            "href": service_status.service_url,
            **_LINK,
            "class": "block p-4 rounded-lg hover:bg-opacity-80 transition-all duration-200 "
            f"transform hover:scale-[1.02] shadow-lg {background}",
        },
        header,
        requirements,
    )


def _resource_summary(status: LargeModelProxyStatus) -> str:
    rows = (
        _el(
            "div",
            {"class": "text-xs mb-2"},
            _usage_row(name, res.total_in_use, res.total_available),
            _bar("bg-blue-400", _percentage(res.total_in_use, res.total_available)),
        )
        for name, res in status.resources.items()
    )
    return _el(
        "div",
        {"class": "text-sm"},
        _el("div", {"class": "font-medium mb-2"}, "Total Resources:"),
        *rows,
    )


def render_large_model_proxy_section(
    large_model_proxy: tuple[str, LargeModelProxyService] | None,
    proxy_status: LargeModelProxyStatus | None,
    base_url: str,
) -> str:
    """Render the AI services section, or an empty div when there is no proxy."""
    if large_model_proxy is None:
        return _el("div")
    name, service = large_model_proxy
    url = service.get_url(base_url)
    main_tile = _el(
        "a",
        {"href": url, **_LINK, "class": _TILE},
        _el("div", {"class": "text-xl font-semibold mb-2"}, _text(name)),
        _el("div", {"class": "text-[var(--color-secondary)] text-sm mb-4"}, _text(url)),
        _resource_summary(proxy_status) if proxy_status else _unavailable(),
    )
    if proxy_status:
        tiles = _el(
            "div",
            {"class": "grid grid-cols-1 md:grid-cols-2 gap-4"},
            *(render_lmp_service_tile(s, proxy_status) for s in proxy_status.services),
        )
    else:
        tiles = _unavailable("text-center")
    return _el(
        "section",
        None,
        _el("h2", {"class": _SECTION_HEADING}, "ai services"),
        _el("div", {"class": "space-y-4"}, main_tile, tiles),
    )


def _local_tiles(local: Iterable[tuple[str, LocalService]], base_url: str) -> Iterable[str]:
    for name, service in local:
        url = service.get_url(base_url)
        yield _el(
            "a",
            {"href": url, **_LINK, "class": _TILE},
            _el("div", {"class": "text-xl font-semibold mb-2"}, _text(name)),
            _el("div", {"class": "text-[var(--color-secondary)] text-sm"}, _text(url)),
        )


def render_index(
    services: Mapping[str, LocalService | LargeModelProxyService],
    base_url: str,
    proxy_status: LargeModelProxyStatus | None,
) -> str:
    """Render the whole dashboard page."""
    local: list[tuple[str, LocalService]] = []
    large_model_proxy: tuple[str, LargeModelProxyService] | None = None
    for name, service in sorted(services.items()):
        if isinstance(service, LocalService):
            local.append((name, service))
        else:
            large_model_proxy = (name, service)

    head = _el(
        "head",
        None,
        _el("title", None, "paxboard"),
        _el("meta", {"charset": "utf-8"}),
        _el("meta", {"name": "viewport", "content": "width=device-width, initial-scale=1"}),
        _el("link", {"rel": "stylesheet", "href": "/styles.css"}),
    )
    header = _el(
        "header",
        {"class": "w-full"},
        _el(
            "h1",
            {"class": "text-3xl font-bold mx-auto text-center border-b border-white "
             "border-dotted pb-4 italic"},
            "paxboard",
        ),
    )
    local_section = _el(
        "section",
        None,
        _el("h2", {"class": _SECTION_HEADING}, "local services"),
        _el("div", {"class": "grid grid-cols-1 md:grid-cols-2 gap-4"}, *_local_tiles(local, base_url)),
    )
    main = _el(
        "main",
        {"class": "mt-4 space-y-8"},
        local_section,
        render_large_model_proxy_section(large_model_proxy, proxy_status, base_url),
    )
    body = _el(
        "body",
        {"class": "max-w-[860px] mx-auto text-[var(--color)] bg-[var(--background-color)] "
         "p-4 transition-all duration-200 font-['Literata',serif]"},
        header,
        main,
    )
    return "<!DOCTYPE html>" + _el("html", {"lang": "en-AU"}, head, body)


_STYLES = """
:root {
--color: #ffffff;
--color-secondary: #cccccc;
--background-color: #3c2954;
--background-color-secondary: #6f4c9a;
--stopped-service-bg: #374151;
}

/* Fonts */
@font-face {
  font-family: "Literata";
  src: url("/fonts/Literata.woff2") format("woff2");
  font-weight: normal;
  font-style: normal;
}

@font-face {
  font-family: "Literata";
  src: url("/fonts/Literata-Italic.woff2") format("woff2");
  font-weight: normal;
  font-style: italic;
}

/* Monospace font fallback */
font-mono {
  font-family: "SF Mono", Monaco, "Cascadia Code", "Roboto Mono", Consolas, "Courier New", monospace;
}

"""


def render_styles(tailwind_css: str) -> str:
    """The site stylesheet: theme variables and fonts followed by the Tailwind output."""
    return (_STYLES + tailwind_css + "\n").strip()