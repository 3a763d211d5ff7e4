"""
Reporter - Operator-facing output of check results

Renders change sets, zone listings and failures on a rich console.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .diff_engine import ChangeSet
from .records import DNSRecord, Zone

logger = logging.getLogger(__name__)


class ReportFilter(Enum):
    """Which record categories a report prints."""

    NO_CHANGE = "no-change"
    CHANGES = "changes"
    ALL = "all"

    @classmethod
    def from_name(cls, name: str) -> "ReportFilter":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown report filter '{name}' (choose from {choices})")


class Reporter:
    """Prints reports about DNS changes."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def checking(self):
        self.console.print("Checking for DNS changes...")

    def report(self, changes: ChangeSet, report_filter: ReportFilter = ReportFilter.ALL):
        """Print the summary line and the records selected by the filter."""
        summary = (
            f"Changes detected! Added: {len(changes.added)}, "
            f"Removed: {len(changes.removed)}"
        )
        if changes.modified:
            summary += f", Modified: {len(changes.modified)}"
        self.console.print(Text(summary, style="bold"))

        rows = self._select_rows(changes, report_filter)
        if not rows:
            logger.debug(f"Nothing to print for filter '{report_filter.value}'")
            return

        table = Table(title="DNS Changes")
        table.add_column("Status", style="cyan")
        table.add_column("Name", style="white")
        table.add_column("Type", style="magenta")
        table.add_column("Content", style="white")

        for status, style, record in rows:
            table.add_row(
                Text(status, style=style),
                Text(record.name),
                Text(record.type),
                Text(record.content),
            )

        self.console.print(table)

    def _select_rows(self, changes: ChangeSet, report_filter: ReportFilter):
        modified_ids = {current.key for _, current in changes.modified}
        rows = []

        if report_filter in (ReportFilter.NO_CHANGE, ReportFilter.ALL):
            for record in changes.unchanged:
                if record.key in modified_ids:
                    rows.append(("Modified", "yellow", record))
                else:
                    rows.append(("Not Change", "dim", record))

        if report_filter in (ReportFilter.CHANGES, ReportFilter.ALL):
            for record in changes.added:
                rows.append(("Added", "green", record))
            for record in changes.removed:
                rows.append(("Removed", "red", record))

        return rows

    def show_zones(self, zones: List[Zone], picked: Zone):
        """Print all available zones and the one that was picked."""
        self.console.print("All available zones:")
        for zone in zones:
            self.console.print(Text(f"[{zone.id}] {zone.name}"))
        self.console.print(Text(f"Picked the zone: [{picked.id}]{picked.name}", style="green"))

    def show_snapshots(self, snapshots: Dict[str, List[DNSRecord]]):
        """Print the zones stored in a snapshot file with their record counts."""
        if not snapshots:
            self.console.print("No snapshots stored")
            return

        table = Table(title="Stored Snapshots")
        table.add_column("Zone", style="cyan")
        table.add_column("Records", style="magenta")
        for zone_id, records in snapshots.items():
            table.add_row(Text(zone_id), str(len(records)))
        self.console.print(table)

    def warning(self, message: str):
        self.console.print(Text(f"Warning: {message}", style="yellow"))

    def error(self, message: str):
        self.console.print(Text(f"Error: {message}", style="red"))
