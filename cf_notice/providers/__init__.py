"""
DNS provider implementations.

This package contains the API clients the change detector reads records
from: Cloudflare and an in-memory mock provider.
"""

from .base_provider import DNSProvider
from .cloudflare_provider import CloudflareProvider
from .dns_client import DNSClient
from .mock_provider import MockDNSProvider

__all__ = ["DNSClient", "DNSProvider", "CloudflareProvider", "MockDNSProvider"]
