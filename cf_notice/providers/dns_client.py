"""
DNS Client - Unified interface for DNS provider APIs

This module provides a common read-only interface over the supported DNS
providers, currently Cloudflare and the in-memory mock provider.
"""

import logging
from typing import List

from .base_provider import DNSProvider
from .cloudflare_provider import CloudflareProvider
from .mock_provider import MockDNSProvider
from ..core.config import CheckerConfig
from ..core.records import DNSRecord, Zone
from ..exceptions import ConfigError

logger = logging.getLogger(__name__)


class DNSClient:
    """Unified DNS client that supports multiple providers."""

    def __init__(self, config: CheckerConfig):
        """Initialize DNS client with configuration."""
        self.config = config
        self.provider = self._get_provider()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.provider
        logger.debug(f"Using DNS provider '{provider_name}'")

        if provider_name == "cloudflare":
            return CloudflareProvider(
                api_key=self.config.api_key,
                cookie=self.config.cookie,
                timeout=self.config.request_timeout,
            )
        if provider_name == "mock":
            return MockDNSProvider()
        raise ConfigError(f"Unknown provider '{provider_name}'")

    def list_zones(self) -> List[Zone]:
        """List the zones visible to the configured credential."""
        return self.provider.list_zones()

    def list_dns_records(self, zone_id: str) -> List[DNSRecord]:
        """Get all DNS records for a zone."""
        return self.provider.list_dns_records(zone_id)
