"""Tests for the snapshot store."""

import threading
from datetime import UTC, datetime

from sytralrt.adapters.store import SnapshotStore
from sytralrt.domain.models import Departure, Feed


def _departure(station: str, stop_point: str, line: str = "C3") -> Departure:
    return Departure(
        line=line,
        station=station,
        stop_point=stop_point,
        destination="Laurent Bonnevay",
        direction="A",
        time=datetime(2024, 3, 10, 7, 15, tzinfo=UTC),
        flag="T",
    )


def test_when_nothing_loaded_then_every_feed_has_empty_snapshot() -> None:
    """Given a new store, when reading, then each feed has an empty, unloaded snapshot."""
    store = SnapshotStore()

    for feed in Feed:
        snapshot = store.get(feed)
        assert snapshot.feed == feed
        assert snapshot.records == ()
        assert snapshot.is_loaded is False


def test_when_replaced_then_new_records_are_visible() -> None:
    """Given a replace call, when reading, then the new snapshot is returned."""
    store = SnapshotStore()
    loaded_at = datetime(2024, 3, 10, 6, 15, tzinfo=UTC)

    returned = store.replace(Feed.PARKINGS, ["p1", "p2"], loaded_at=loaded_at)

    snapshot = store.get(Feed.PARKINGS)
    assert snapshot is returned
    assert snapshot.records == ("p1", "p2")
    assert snapshot.loaded_at == loaded_at
    assert len(snapshot) == 2


def test_when_one_feed_replaced_then_other_feeds_unchanged() -> None:
    """Given a departures refresh, when reading other feeds, then they keep their snapshot."""
    store = SnapshotStore()
    store.replace(Feed.EQUIPMENTS, ["e1"])

    store.replace(Feed.DEPARTURES, [_departure("30101", "30101-1")])

    assert store.equipments() == ("e1",)
    assert store.parkings() == ()
    assert len(store.departures()) == 1


def test_when_records_source_mutated_after_replace_then_snapshot_unchanged() -> None:
    """Given a list handed to replace, when the list changes later, then the snapshot does not."""
    store = SnapshotStore()
    records = ["p1"]

    store.replace(Feed.PARKINGS, records)
    records.append("p2")

    assert store.parkings() == ("p1",)


def test_departures_for_stop_matches_station_or_stop_point() -> None:
    """Given departures of several stops, when filtering, then station and stop point match."""
    store = SnapshotStore()
    store.replace(
        Feed.DEPARTURES,
        [
            _departure("30101", "30101-1"),
            _departure("30101", "30101-2", line="86"),
            _departure("30200", "30200-1"),
        ],
    )

    assert [d.stop_point for d in store.departures_for_stop("30101")] == ["30101-1", "30101-2"]
    assert [d.line for d in store.departures_for_stop("30101-2")] == ["86"]
    assert store.departures_for_stop("unknown") == []


def test_when_writer_replaces_concurrently_then_reader_never_sees_mixed_batches() -> None:
    """Given a writer swapping tagged batches, when a reader polls, then each read is one batch."""
    store = SnapshotStore()
    store.replace(Feed.DEPARTURES, [(0, i) for i in range(50)])
    stop = threading.Event()
    mixed_reads: list[set[int]] = []
    reads = 0

    def writer() -> None:
        for batch in range(1, 2000):
            store.replace(Feed.DEPARTURES, [(batch, i) for i in range(50)])
        stop.set()

    def reader() -> None:
        nonlocal reads
        while True:
            done = stop.is_set()
            records = store.get(Feed.DEPARTURES).records
            tags = {tag for tag, _ in records}
            if len(tags) != 1 or len(records) != 50:
                mixed_reads.append(tags)
            reads += 1
            if done:
                break

    threads = [threading.Thread(target=reader), threading.Thread(target=writer)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)

    assert mixed_reads == []
    assert reads > 0
    assert store.get(Feed.DEPARTURES).records[0] == (1999, 0)
