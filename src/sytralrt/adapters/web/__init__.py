"""Web adapters - read API and its server."""

from sytralrt.adapters.web.api import create_app
from sytralrt.adapters.web.server import WebServer

__all__ = ["WebServer", "create_app"]
