"""
Core change-detection functionality.

This package contains the record model, the diff engine, the snapshot store
and the check/scheduling loop.
"""

from .check_cycle import CheckCycle, CycleResult
from .diff_engine import ChangeSet, detect_changes
from .records import DNSRecord, Zone
from .scheduler import Scheduler
from .snapshot_store import SnapshotStore

__all__ = [
    "ChangeSet",
    "CheckCycle",
    "CycleResult",
    "DNSRecord",
    "Scheduler",
    "SnapshotStore",
    "Zone",
    "detect_changes",
]
