"""Uvicorn server running the read API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import uvicorn

if TYPE_CHECKING:
    from starlette.applications import Starlette

    from sytralrt.adapters.config.app_config import AppConfig

logger = logging.getLogger(__name__)


class WebServer:
    """Serves the read API until stopped."""

    def __init__(self, app: Starlette, config: AppConfig) -> None:
        self.app = app
        self.config = config
        self._server: uvicorn.Server | None = None

    async def start(self) -> None:
        """Start serving; returns when the server exits."""
        server_config = uvicorn.Config(
            self.app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level,
            log_config=None,  # Keep the process-wide logging configuration
        )
        self._server = uvicorn.Server(server_config)
        logger.info(f"Serving feeds on {self.config.host}:{self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        """Ask the server to exit."""
        if self._server:
            self._server.should_exit = True
