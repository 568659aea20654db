"""Record consumers turning delimited lines into departures and parkings."""

from datetime import tzinfo

from sytralrt.adapters.loaders.time_parsing import combine_date_and_hour, parse_datetime
from sytralrt.domain.errors import FormatError
from sytralrt.domain.models.departure import Departure
from sytralrt.domain.models.parking import Parking

DEPARTURE_FIELD_COUNT = 8
PARKING_MIN_FIELD_COUNT = 4


class DepartureLineConsumer:
    """Builds departures from 8-field lines.

    Fields: line, station, stop point, destination, direction, date, hour, flag.
    """

    def __init__(self, tz: tzinfo) -> None:
        self.tz = tz
        self.departures: list[Departure] = []

    def consume(self, fields: list[str], line_number: int) -> None:
        if len(fields) != DEPARTURE_FIELD_COUNT:
            raise FormatError(
                f"departure needs exactly {DEPARTURE_FIELD_COUNT} fields, got {len(fields)}",
                line_number=line_number,
            )
        line, station, stop_point, destination, direction, day, hour, flag = fields
        self.departures.append(
            Departure(
                line=line,
                station=station,
                stop_point=stop_point,
                destination=destination,
                direction=direction,
                time=combine_date_and_hour(day, hour, self.tz),
                flag=flag,
            )
        )

    def finalize(self) -> tuple[Departure, ...]:
        """Return the departures ordered by station, then departure time."""
        return tuple(sorted(self.departures, key=lambda d: (d.station, d.time)))


def _parse_count(value: str, name: str, line_number: int) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise FormatError(f"{name} is not an integer: {value!r}", line_number=line_number) from e


def _parse_optional_count(fields: list[str], index: int, name: str, line_number: int) -> int | None:
    if index >= len(fields) or not fields[index].strip():
        return None
    return _parse_count(fields[index], name, line_number)


class ParkingLineConsumer:
    """Builds parkings from lines of variable length.

    The first four fields (id, name, update time, available spaces) are
    required; accessible and total counts may be missing or empty.
    """

    def __init__(self, tz: tzinfo) -> None:
        self.tz = tz
        self.parkings: list[Parking] = []

    def consume(self, fields: list[str], line_number: int) -> None:
        if len(fields) < PARKING_MIN_FIELD_COUNT:
            raise FormatError(
                f"parking needs at least {PARKING_MIN_FIELD_COUNT} fields, got {len(fields)}",
                line_number=line_number,
            )
        self.parkings.append(
            Parking(
                id=fields[0],
                name=fields[1],
                updated_at=parse_datetime(fields[2], self.tz),
                available_spaces=_parse_count(fields[3], "available spaces", line_number),
                available_accessible_spaces=_parse_optional_count(
                    fields, 4, "available accessible spaces", line_number
                ),
                total_spaces=_parse_optional_count(fields, 5, "total spaces", line_number),
                total_accessible_spaces=_parse_optional_count(
                    fields, 6, "total accessible spaces", line_number
                ),
            )
        )

    def finalize(self) -> tuple[Parking, ...]:
        return tuple(self.parkings)
