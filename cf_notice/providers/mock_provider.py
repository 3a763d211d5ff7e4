"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that keeps zones and records in
memory for safe testing and demonstration purposes.
"""

import logging
from typing import Dict, List, Optional

from .base_provider import DNSProvider
from ..core.records import DNSRecord, Zone
from ..exceptions import APIError

logger = logging.getLogger(__name__)


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes."""

    def __init__(self):
        """Initialize mock provider."""
        self.zones: List[Zone] = []
        self.records: Dict[str, List[DNSRecord]] = {}
        self.failure: Optional[APIError] = None
        self.calls = 0
        logger.info("Mock DNS provider initialized")

    def add_zone(self, zone_id: str, name: str = "", records: Optional[List[DNSRecord]] = None):
        """Register a zone, optionally with its initial records."""
        self.zones.append(Zone(id=zone_id, name=name))
        self.records[zone_id] = list(records or [])

    def set_records(self, zone_id: str, records: List[DNSRecord]):
        """Replace the records of a zone."""
        if zone_id not in self.records:
            self.add_zone(zone_id)
        self.records[zone_id] = list(records)

    def fail_with(self, message: str, status_code: Optional[int] = None):
        """Make every following call raise APIError until ``recover`` is called."""
        self.failure = APIError(message, status_code=status_code)

    def recover(self):
        self.failure = None

    def list_zones(self) -> List[Zone]:
        """List the registered zones."""
        self._check_failure()
        logger.info(f"Mock: Retrieved {len(self.zones)} zones")
        return list(self.zones)

    def list_dns_records(self, zone_id: str) -> List[DNSRecord]:
        """Get all DNS records for a zone."""
        self._check_failure()
        if zone_id not in self.records:
            raise APIError(f"failed to fetch DNS records: 404 zone {zone_id} not found", status_code=404)

        records = self.records[zone_id]
        logger.info(f"Mock: Retrieved {len(records)} records")
        return list(records)

    def _check_failure(self):
        self.calls += 1
        if self.failure is not None:
            raise self.failure
