"""Line-oriented loader for delimited text feeds."""

import csv
import io
import logging
from dataclasses import dataclass
from typing import TypeVar

from sytralrt.domain.contracts.record_consumer import RecordConsumerProtocol
from sytralrt.domain.errors import FormatError

logger = logging.getLogger(__name__)

R = TypeVar("R")


@dataclass(frozen=True)
class DelimitedLoadOptions:
    """How to split a delimited feed into records."""

    delimiter: str = ";"
    expected_field_count: int | None = 8  # None accepts any field count
    skip_first_line: bool = False  # First line is a header
    encoding: str = "utf-8"


DEFAULT_OPTIONS = DelimitedLoadOptions()


def load_delimited(
    data: bytes,
    consumer: RecordConsumerProtocol[R],
    options: DelimitedLoadOptions = DEFAULT_OPTIONS,
) -> tuple[R, ...]:
    """Feed every record of data to consumer and return its finalized records.

    Empty lines are ignored. When a field count is expected, a single record
    with another count fails the whole load: no records are returned.

    Raises:
        FormatError: On a wrong field count, an undecodable byte sequence or
            malformed quoting. Errors raised by the consumer propagate unchanged.
    """
    try:
        text = data.decode(options.encoding)
    except UnicodeDecodeError as e:
        raise FormatError(f"content is not valid {options.encoding}: {e}") from e

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=options.delimiter, strict=True)
    skip_first_line = options.skip_first_line

    try:
        for fields in reader:
            if not fields:
                continue

            if skip_first_line:
                skip_first_line = False
                continue

            if (
                options.expected_field_count is not None
                and len(fields) != options.expected_field_count
            ):
                raise FormatError(
                    f"wrong number of fields: got {len(fields)}, "
                    f"expected {options.expected_field_count}",
                    line_number=reader.line_num,
                )

            consumer.consume(fields, reader.line_num)
    except csv.Error as e:
        raise FormatError(str(e), line_number=reader.line_num) from e

    records = consumer.finalize()
    logger.debug(f"Loaded {len(records)} record(s) from {reader.line_num} line(s)")
    return records
