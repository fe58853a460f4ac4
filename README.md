# paxboard

A small dashboard for a home server. The page has a tile for each local
service (jellyfin, navidrome, plex, redlib) and an "ai services" section
for a large-model-proxy, showing its total resource usage and a tile for
each model service behind it.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Configuration

`paxboard` reads a TOML file, `config.toml` in the current directory by
default:

```toml
port = 8080
base_url = "http://myserver"
```

- `port` is the port the dashboard listens on, on all interfaces. It must
  be an integer from 0 to 65535.
- `base_url` is the base for local service links; each local service is
  linked as `<base_url>:<service port>/`.

A missing key or a value of the wrong type raises `ValueError`.

## Running

```
paxboard [--config config.toml] [--css tailwind.css] [--static static]
```

- `--config` names the configuration file (default `config.toml`).
- `--css` names a pre-built Tailwind stylesheet, appended to the site's
  own theme variables and font rules in `/styles.css`. Without it, only
  those built-in rules are served.
- `--static` names the directory of static files (default `static`),
  such as `fonts/Literata.woff2`. Any path other than `/` and
  `/styles.css` is looked up there; a directory serves its `index.html`,
  and paths outside the directory or not found give 404.

The page is at `/`. On each request it fetches `<proxy url>/status`; if
that fails or the reply is malformed, the page still renders and shows
"Status unavailable".

## Using it as a library

- `paxboard.services.default_services()` returns the built-in service
  map, sorted by name: `LocalService(port)` entries and one
  `LargeModelProxyService` for `http://redline:7071`. Each has
  `get_url(base_url)`.
- `paxboard.proxy.LargeModelProxy(url).get_status(session)` fetches
  `<url>/status` with an `aiohttp.ClientSession` and returns a
  `LargeModelProxyStatus`. `paxboard.proxy.parse_status(data)` builds one
  from already decoded JSON, raising `StatusFormatError` (a `ValueError`)
  when the shape is wrong.
- `paxboard.render.render_index(services, base_url, proxy_status)` returns
  the dashboard HTML; `render_large_model_proxy_section`,
  `render_lmp_service_tile` and `render_styles(tailwind_css)` render its
  parts and the stylesheet.
- `paxboard.server.load_config(path)` reads a `Config`, and
  `paxboard.server.create_app(config, tailwind_css, services, static_dir)`
  builds the `aiohttp.web.Application`.

## What it does not do

- It does not build Tailwind CSS itself; pass a stylesheet built
  elsewhere with `--css`.
- The service list is fixed in `default_services()`; the configuration
  file does not change it. Use `create_app` with your own mapping to show
  other services.