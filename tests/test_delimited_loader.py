"""Tests for the delimited text loader."""

import pytest

from sytralrt.adapters.loaders.delimited_loader import DelimitedLoadOptions, load_delimited
from sytralrt.domain.errors import FormatError


class RecordingConsumer:
    """Consumer keeping the raw fields it receives."""

    def __init__(self) -> None:
        self.lines: list[list[str]] = []
        self.line_numbers: list[int] = []
        self.finalize_calls = 0

    def consume(self, fields: list[str], line_number: int) -> None:
        self.lines.append(fields)
        self.line_numbers.append(line_number)

    def finalize(self) -> tuple[tuple[str, ...], ...]:
        self.finalize_calls += 1
        return tuple(tuple(fields) for fields in self.lines)


def _line(n: int, field_count: int = 8) -> str:
    return ";".join(f"f{n}.{i}" for i in range(field_count))


def test_when_all_lines_match_field_count_then_every_record_is_consumed() -> None:
    """Given well-formed 8-field lines, when loading, then all records are returned in order."""
    data = "\n".join(_line(n) for n in range(3)).encode()
    consumer = RecordingConsumer()

    records = load_delimited(data, consumer)

    assert len(records) == 3
    assert records[0][0] == "f0.0"
    assert records[2][7] == "f2.7"
    assert consumer.finalize_calls == 1


def test_when_one_line_has_wrong_field_count_then_whole_load_fails() -> None:
    """Given one 7-field line among 8-field lines, when loading, then the batch is rejected."""
    lines = [_line(0), _line(1), _line(2, field_count=7), _line(3)]
    consumer = RecordingConsumer()

    with pytest.raises(FormatError, match="wrong number of fields") as exc_info:
        load_delimited("\n".join(lines).encode(), consumer)

    assert exc_info.value.line_number == 3
    assert consumer.finalize_calls == 0


def test_when_skip_first_line_then_header_is_never_consumed() -> None:
    """Given 4 lines and skip_first_line, when loading, then 3 records are consumed."""
    data = "id;name\nP1;a\nP2;b\nP3;c\n".encode()
    consumer = RecordingConsumer()
    options = DelimitedLoadOptions(expected_field_count=None, skip_first_line=True)

    records = load_delimited(data, consumer, options)

    assert len(records) == 3
    assert ["id", "name"] not in consumer.lines
    assert consumer.line_numbers == [2, 3, 4]


def test_when_field_count_unconstrained_then_variable_lines_are_accepted() -> None:
    """Given lines of different lengths and no expected count, when loading, then all pass."""
    data = "a;b;c\nd\ne;f;g;h;i\n".encode()
    consumer = RecordingConsumer()

    records = load_delimited(data, consumer, DelimitedLoadOptions(expected_field_count=None))

    assert [len(r) for r in records] == [3, 1, 5]


def test_when_blank_lines_present_then_they_are_ignored() -> None:
    """Given blank lines and CRLF endings, when loading, then only real records are consumed."""
    data = f"{_line(0)}\r\n\r\n{_line(1)}\r\n".encode()
    consumer = RecordingConsumer()

    records = load_delimited(data, consumer)

    assert len(records) == 2
    assert records[1][7] == "f1.7"


def test_when_custom_delimiter_then_lines_are_split_on_it() -> None:
    """Given a comma delimiter, when loading, then fields are split on commas."""
    consumer = RecordingConsumer()

    records = load_delimited(
        b"a,b\nc,d\n", consumer, DelimitedLoadOptions(delimiter=",", expected_field_count=2)
    )

    assert records == (("a", "b"), ("c", "d"))


def test_when_content_is_not_valid_encoding_then_format_error() -> None:
    """Given bytes that are not UTF-8, when loading, then a FormatError is raised."""
    consumer = RecordingConsumer()

    with pytest.raises(FormatError, match="not valid utf-8"):
        load_delimited(b"\xff\xfe;\x00", consumer, DelimitedLoadOptions(expected_field_count=None))


def test_when_input_is_empty_then_finalize_still_runs_once() -> None:
    """Given no content, when loading, then an empty snapshot is produced."""
    consumer = RecordingConsumer()

    records = load_delimited(b"", consumer)

    assert records == ()
    assert consumer.finalize_calls == 1
