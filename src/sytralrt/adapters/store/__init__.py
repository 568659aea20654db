"""Snapshot storage adapters."""

from sytralrt.adapters.store.snapshot_store import SnapshotStore

__all__ = ["SnapshotStore"]
