"""A home dashboard for local services and a large-model-proxy, served with aiohttp."""

__version__ = "0.1.0"