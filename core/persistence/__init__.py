"""Persistence for completed-game records and the paused-session snapshot."""

from core.persistence.records import GameRecord, RecordLedger, RecordStore
from core.persistence.snapshots import SnapshotLoad, SnapshotStatus, SnapshotStore

__all__ = [
    "GameRecord",
    "RecordLedger",
    "RecordStore",
    "SnapshotLoad",
    "SnapshotStatus",
    "SnapshotStore",
]
