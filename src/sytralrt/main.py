"""Main entry point for the sytralrt feed service."""

import asyncio
import json
import logging
import sys

from pydantic import ValidationError

from sytralrt.adapters.config import AppConfig
from sytralrt.adapters.metrics import PrometheusMetricsSink
from sytralrt.adapters.refresh import RefreshPolicy, build_feed_refreshers
from sytralrt.adapters.retrieval import UriByteRetriever
from sytralrt.adapters.store import SnapshotStore
from sytralrt.adapters.web import WebServer, create_app
from sytralrt.application import FeedRefreshService
from sytralrt.domain.errors import ConfigError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


class JsonLogFormatter(logging.Formatter):
    """Formats each record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record, LOG_DATE_FORMAT),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def configure_logging(json_log: bool, log_level: str) -> None:
    """Configure the root logger to write to stdout."""
    handler = logging.StreamHandler(sys.stdout)
    if json_log:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logging.basicConfig(level=log_level.upper(), handlers=[handler], force=True)


async def main() -> None:
    """Main application entry point."""
    try:
        config = AppConfig()
    except ValidationError as e:
        configure_logging(json_log=False, log_level="error")
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(config.json_log, config.log_level)

    try:
        sources = config.feed_sources()
    except ConfigError as e:
        logger.error(f"Impossible to load data at startup: {e}")
        sys.exit(1)

    store = SnapshotStore()
    metrics_sink = PrometheusMetricsSink()
    refreshers = build_feed_refreshers(
        sources,
        store=store,
        retriever=UriByteRetriever(),
        metrics_sink=metrics_sink,
        tz=config.tz,
        policy=RefreshPolicy(
            retrieval_timeout_seconds=config.retrieval_timeout_seconds,
            min_refresh_interval_seconds=config.min_refresh_interval_seconds,
        ),
    )
    refresh_service = FeedRefreshService(refreshers)

    # Serving starts only once every feed had its first load attempt
    await refresh_service.load_all()
    await refresh_service.start()

    server = WebServer(create_app(store, metrics_sink.registry), config)
    try:
        await server.start()
    finally:
        logger.info("Shutting down...")
        await refresh_service.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
