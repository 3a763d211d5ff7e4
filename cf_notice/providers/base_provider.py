"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must implement.
"""

from abc import ABC, abstractmethod
from typing import List

from ..core.records import DNSRecord, Zone


class DNSProvider(ABC):
    """Abstract base class for read-only DNS providers."""

    @abstractmethod
    def list_zones(self) -> List[Zone]:
        """List the zones visible to the configured credential."""
        pass

    @abstractmethod
    def list_dns_records(self, zone_id: str) -> List[DNSRecord]:
        """Get all DNS records of a zone."""
        pass
