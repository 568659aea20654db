"""Read-only HTTP API over the feed snapshots."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import TypeAdapter
from starlette.applications import Starlette
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from sytralrt.domain.models import Departure, EquipmentDetail, Feed, Parking

if TYPE_CHECKING:
    from prometheus_client import CollectorRegistry
    from starlette.requests import Request

    from sytralrt.adapters.store.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)

_departures_adapter = TypeAdapter(list[Departure])
_parkings_adapter = TypeAdapter(list[Parking])
_equipments_adapter = TypeAdapter(list[EquipmentDetail])


def _feed_status(store: SnapshotStore, feed: Feed) -> dict[str, Any]:
    snapshot = store.get(feed)
    return {
        "loaded": snapshot.is_loaded,
        "loaded_at": snapshot.loaded_at.isoformat() if snapshot.loaded_at else None,
        "count": len(snapshot),
    }


def create_app(store: SnapshotStore, registry: CollectorRegistry | None = None) -> Starlette:
    """Build the Starlette application serving the current snapshots.

    Args:
        store: Store holding the snapshots to serve.
        registry: Metrics registry exposed at /metrics, if any.
    """

    async def status(_request: Request) -> Response:
        return JSONResponse(
            {"status": "ok", "feeds": {feed.value: _feed_status(store, feed) for feed in Feed}}
        )

    async def departures(request: Request) -> Response:
        stop_id = request.query_params.get("stop_id")
        records = store.departures_for_stop(stop_id) if stop_id else list(store.departures())
        return JSONResponse({"departures": _departures_adapter.dump_python(records, mode="json")})

    async def parkings(_request: Request) -> Response:
        records = list(store.parkings())
        return JSONResponse({"parkings": _parkings_adapter.dump_python(records, mode="json")})

    async def equipments(_request: Request) -> Response:
        records = list(store.equipments())
        return JSONResponse(
            {"equipments": _equipments_adapter.dump_python(records, mode="json")}
        )

    async def metrics(_request: Request) -> Response:
        return Response(content=generate_latest(registry), media_type=CONTENT_TYPE_LATEST)

    routes = [
        Route("/status", status, methods=["GET"]),
        Route("/departures", departures, methods=["GET"]),
        Route("/parkings", parkings, methods=["GET"]),
        Route("/equipments", equipments, methods=["GET"]),
    ]
    if registry is not None:
        routes.append(Route("/metrics", metrics, methods=["GET"]))

    return Starlette(routes=routes)
