"""
cf-notice - DNS change notifier

Polls a DNS hosting provider for the records of a zone, compares them with
the last snapshot stored on disk and reports added, removed and unchanged
records.
"""

__version__ = "1.0.0"
__author__ = "cf-notice Team"
__description__ = "Detect and report DNS record changes for Cloudflare zones"

from .core.check_cycle import CheckCycle
from .core.diff_engine import ChangeSet, detect_changes
from .core.scheduler import Scheduler
from .core.snapshot_store import SnapshotStore
from .providers.dns_client import DNSClient

__all__ = [
    "ChangeSet",
    "CheckCycle",
    "DNSClient",
    "Scheduler",
    "SnapshotStore",
    "detect_changes",
]
