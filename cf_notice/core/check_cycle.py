"""
Check Cycle - One fetch, diff, report and persist pass

This module ties the API client, the snapshot store, the diff engine and the
reporter together for a single check of the configured zone.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..exceptions import APIError, SnapshotError
from .config import CheckerConfig
from .diff_engine import ChangeSet, detect_changes
from .reporter import Reporter
from .snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)

STATUS_FAILED = "failed"
STATUS_NOOP = "noop"
STATUS_REPORTED = "reported"


@dataclass
class CycleResult:
    """Outcome of one check cycle."""

    status: str
    changes: ChangeSet = field(default_factory=ChangeSet)
    saved: bool = False
    error: Optional[Exception] = None


class CheckCycle:
    """Runs one check of the configured zone."""

    def __init__(
        self,
        config: CheckerConfig,
        client,
        store: Optional[SnapshotStore] = None,
        reporter: Optional[Reporter] = None,
    ):
        """
        Initialize the check cycle.

        Args:
            config: Checker configuration, bound to a zone
            client: Object exposing ``list_dns_records(zone_id)``
            store: Snapshot store, defaults to one at ``config.storage_path``
            reporter: Reporter used for operator output
        """
        if not config.zone_id:
            raise ValueError("CheckCycle requires a configuration bound to a zone")

        self.config = config
        self.client = client
        self.store = store or SnapshotStore(config.storage_path)
        self.reporter = reporter or Reporter()

    def run(self) -> CycleResult:
        """Fetch the zone's records, report the changes and persist the snapshot."""
        zone_id = self.config.zone_id
        self.reporter.checking()

        try:
            current = self.client.list_dns_records(zone_id)
        except APIError as e:
            logger.error(f"Failed to fetch DNS records for zone {zone_id}: {e}")
            self.reporter.error(f"Failed to fetch DNS records: {e}")
            return CycleResult(status=STATUS_FAILED, error=e)

        logger.debug(f"Fetched {len(current)} records for zone {zone_id}")

        try:
            previous = self.store.load(zone_id)
        except SnapshotError as e:
            logger.warning(f"Load previous record error, create a new one: {e}")
            self.reporter.warning(f"Could not load previous snapshot: {e}")
            previous = []

        changes = detect_changes(current, previous)

        if changes.is_empty():
            logger.info(f"No records for zone {zone_id}, nothing to report")
            return CycleResult(status=STATUS_NOOP, changes=changes)

        self.reporter.report(changes, self.config.report_filter)

        try:
            self.store.save(zone_id, current)
        except SnapshotError as e:
            logger.error(f"Failed to save snapshot for zone {zone_id}: {e}")
            self.reporter.error(f"Failed to save snapshot: {e}")
            return CycleResult(status=STATUS_REPORTED, changes=changes, error=e)

        return CycleResult(status=STATUS_REPORTED, changes=changes, saved=True)
