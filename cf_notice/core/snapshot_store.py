"""
Snapshot Store - Persistence of the last observed records per zone

The snapshot file is a JSON object mapping zone ids to the list of records
seen during the last successful check of that zone. Several zones can share
one file; saving a zone only replaces that zone's entry.
"""

import json
import logging
import os
import tempfile
from typing import Any, Dict, List, Sequence

from ..exceptions import SnapshotError
from .records import DNSRecord

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Loads and saves record snapshots keyed by zone id."""

    def __init__(self, storage_path: str):
        """Initialize the store for the given snapshot file."""
        self.storage_path = os.path.expanduser(storage_path)

    def load(self, zone_id: str) -> List[DNSRecord]:
        """
        Load the previous snapshot for a zone.

        Only the requested zone's entry is validated; malformed entries of
        other zones do not affect it.

        Args:
            zone_id: Zone whose snapshot is requested

        Returns:
            Records of the last snapshot, or an empty list when the file does
            not exist or holds nothing for the zone

        Raises:
            SnapshotError: If the file cannot be read, is not a JSON object,
                or the zone's entry is malformed
        """
        raw = self._read_raw()
        if zone_id not in raw:
            logger.debug(f"No snapshot for zone {zone_id} in {self.storage_path}")
            return []

        records = self._parse_entry(zone_id, raw[zone_id])
        logger.debug(f"Loaded {len(records)} records for zone {zone_id}")
        return records

    def load_all(self) -> Dict[str, List[DNSRecord]]:
        """Load every zone snapshot stored in the file."""
        raw = self._read_raw()
        return {zone_id: self._parse_entry(zone_id, entries) for zone_id, entries in raw.items()}

    def zones(self) -> List[str]:
        """Return the zone ids present in the snapshot file."""
        return list(self._read_raw().keys())

    def save(self, zone_id: str, records: Sequence[DNSRecord]):
        """
        Save the snapshot for a zone, keeping the entries of other zones.

        Entries of other zones are written back as they were read, even when
        they are malformed.

        Raises:
            SnapshotError: If the file cannot be written
        """
        try:
            raw = self._read_raw()
        except SnapshotError as e:
            logger.warning(f"{e}; rewriting it with zone {zone_id} only")
            raw = {}

        raw[zone_id] = [record.to_dict() for record in records]
        self._write(raw)
        logger.info(
            f"Saved {len(records)} records for zone {zone_id} to {self.storage_path}"
        )

    def _read_raw(self) -> Dict[str, Any]:
        """Read the file as a JSON object without validating zone entries."""
        try:
            with open(self.storage_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError:
            logger.debug(f"The {self.storage_path} file does not exist")
            return {}
        except json.JSONDecodeError as e:
            raise SnapshotError(
                f"Malformed snapshot file {self.storage_path}: {e}"
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise SnapshotError(
                f"Cannot read snapshot file {self.storage_path}: {e}"
            ) from e

        if not isinstance(raw, dict):
            raise SnapshotError(
                f"Malformed snapshot file {self.storage_path}: expected an object"
            )
        return raw

    def _parse_entry(self, zone_id: str, entries: Any) -> List[DNSRecord]:
        """Convert one zone's decoded entry into records."""
        if entries is None:
            return []
        if not isinstance(entries, list):
            raise SnapshotError(
                f"Malformed snapshot for zone {zone_id}: expected a list"
            )
        try:
            return [DNSRecord.from_dict(entry) for entry in entries]
        except ValueError as e:
            raise SnapshotError(
                f"Malformed snapshot for zone {zone_id}: {e}"
            ) from e

    def _write(self, data: Dict[str, Any]):
        """Write the full mapping atomically through a temporary file."""
        directory = os.path.dirname(os.path.abspath(self.storage_path))

        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=".cf-notice-", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
                f.write("\n")
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, self.storage_path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise SnapshotError(
                f"Cannot write snapshot file {self.storage_path}: {e}"
            ) from e
