"""Feed loaders: delimited text, equipment XML and their record consumers."""

from sytralrt.adapters.loaders.consumers import DepartureLineConsumer, ParkingLineConsumer
from sytralrt.adapters.loaders.delimited_loader import DelimitedLoadOptions, load_delimited
from sytralrt.adapters.loaders.pipelines import (
    FeedPipeline,
    load_departures,
    load_parkings,
    pipeline_for,
)
from sytralrt.adapters.loaders.xml_loader import load_equipments

__all__ = [
    "DelimitedLoadOptions",
    "DepartureLineConsumer",
    "FeedPipeline",
    "ParkingLineConsumer",
    "load_delimited",
    "load_departures",
    "load_equipments",
    "load_parkings",
    "pipeline_for",
]
