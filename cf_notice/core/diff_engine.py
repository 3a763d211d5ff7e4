"""
Diff Engine - Change detection between two observations of a zone

This module classifies the records of the current fetch against the previous
snapshot into unchanged, added and removed records, matching records by id.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence, Tuple

from .records import DNSRecord

logger = logging.getLogger(__name__)


@dataclass
class ChangeSet:
    """
    Result of comparing the current records with the previous snapshot.

    Unpacks as ``(unchanged, added, removed)``. ``modified`` lists the
    ``(previous, current)`` pairs of unchanged records whose name, type or
    content differ; those records stay in ``unchanged``.
    """

    unchanged: List[DNSRecord] = field(default_factory=list)
    added: List[DNSRecord] = field(default_factory=list)
    removed: List[DNSRecord] = field(default_factory=list)
    modified: List[Tuple[DNSRecord, DNSRecord]] = field(default_factory=list)

    def __iter__(self) -> Iterator[List[DNSRecord]]:
        return iter((self.unchanged, self.added, self.removed))

    def is_empty(self) -> bool:
        return not (self.unchanged or self.added or self.removed)

    def has_changes(self) -> bool:
        return bool(self.added or self.removed)

    def counts(self) -> Dict[str, int]:
        return {
            "unchanged": len(self.unchanged),
            "added": len(self.added),
            "removed": len(self.removed),
            "modified": len(self.modified),
        }


def detect_changes(
    current: Sequence[DNSRecord], previous: Sequence[DNSRecord]
) -> ChangeSet:
    """
    Compare the current records of a zone against the previous snapshot.

    Args:
        current: Records returned by the latest fetch
        previous: Records from the last stored snapshot

    Returns:
        ChangeSet where ``unchanged`` and ``added`` keep the order of
        ``current`` and ``removed`` keeps the order of ``previous``
    """
    previous_by_id: Dict[str, DNSRecord] = {}
    for record in previous:
        previous_by_id[record.key] = record

    changes = ChangeSet()

    for record in current:
        old = previous_by_id.pop(record.key, None)
        if old is None:
            changes.added.append(record)
            continue

        changes.unchanged.append(record)
        if old != record:
            changes.modified.append((old, record))

    changes.removed.extend(previous_by_id.values())

    logger.debug(
        f"Change analysis complete: {len(changes.added)} added, "
        f"{len(changes.removed)} removed, {len(changes.unchanged)} unchanged "
        f"({len(changes.modified)} modified)"
    )

    return changes
