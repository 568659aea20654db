"""Transit operational feed refresher for departures, parkings and equipments."""

__version__ = "0.1.0"
