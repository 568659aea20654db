"""Per-feed parsing pipelines: raw bytes in, finalized records out."""

from collections.abc import Callable
from datetime import tzinfo
from typing import Any

from sytralrt.adapters.loaders.consumers import (
    DEPARTURE_FIELD_COUNT,
    DepartureLineConsumer,
    ParkingLineConsumer,
)
from sytralrt.adapters.loaders.delimited_loader import DelimitedLoadOptions, load_delimited
from sytralrt.adapters.loaders.xml_loader import load_equipments
from sytralrt.domain.models.departure import Departure
from sytralrt.domain.models.feed import Feed
from sytralrt.domain.models.parking import Parking

FeedPipeline = Callable[[bytes], tuple[Any, ...]]

DEPARTURE_OPTIONS = DelimitedLoadOptions(
    delimiter=";",
    expected_field_count=DEPARTURE_FIELD_COUNT,
    skip_first_line=False,
)

PARKING_OPTIONS = DelimitedLoadOptions(
    delimiter=";",
    expected_field_count=None,  # Lines may omit trailing counts
    skip_first_line=True,  # First line is a header
)


def load_departures(data: bytes, tz: tzinfo) -> tuple[Departure, ...]:
    return load_delimited(data, DepartureLineConsumer(tz), DEPARTURE_OPTIONS)


def load_parkings(data: bytes, tz: tzinfo) -> tuple[Parking, ...]:
    return load_delimited(data, ParkingLineConsumer(tz), PARKING_OPTIONS)


def pipeline_for(feed: Feed, tz: tzinfo) -> FeedPipeline:
    """Return the parsing pipeline of feed bound to timezone tz."""
    loaders = {
        Feed.DEPARTURES: load_departures,
        Feed.PARKINGS: load_parkings,
        Feed.EQUIPMENTS: load_equipments,
    }
    loader = loaders[feed]
    return lambda data: loader(data, tz)
