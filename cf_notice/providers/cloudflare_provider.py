"""
Cloudflare DNS provider implementation.

This module reads zones and DNS records from the Cloudflare v4 API using the
requests library. It authenticates either with an API token or with a
dashboard session cookie.
"""

import logging
from typing import Dict, List, Optional

import requests

from .base_provider import DNSProvider
from ..core.records import DNSRecord, Zone
from ..exceptions import APIError

logger = logging.getLogger(__name__)

API_URL = "https://api.cloudflare.com/client/v4"
DASH_URL = "https://dash.cloudflare.com/api/v4"
PER_PAGE = 100


class CloudflareProvider(DNSProvider):
    """Cloudflare DNS provider using the v4 REST API."""

    def __init__(
        self,
        api_key: str = "",
        cookie: str = "",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize Cloudflare provider.

        A cookie selects the dashboard API; otherwise the API key is sent as
        a bearer token to the public API.
        """
        if not api_key and not cookie:
            raise ValueError("Cloudflare provider needs an API key or a cookie")

        self.timeout = timeout
        self.session = session or requests.Session()

        if cookie:
            self.base_url = DASH_URL
            self.session.headers["Cookie"] = cookie
            auth_mode = "cookie"
        else:
            self.base_url = API_URL
            self.session.headers["Authorization"] = f"Bearer {api_key}"
            auth_mode = "API token"

        logger.info(f"Cloudflare provider initialized for {self.base_url} ({auth_mode})")

    def list_zones(self) -> List[Zone]:
        """List the zones visible to the credential."""
        results = self._get_all_pages("/zones", "zones")
        try:
            zones = [Zone.from_dict(item) for item in results]
        except ValueError as e:
            raise APIError(f"failed to fetch zones: {e}")

        logger.info(f"Retrieved {len(zones)} zones from Cloudflare")
        return zones

    def list_dns_records(self, zone_id: str) -> List[DNSRecord]:
        """Get all DNS records for a zone."""
        results = self._get_all_pages(f"/zones/{zone_id}/dns_records", "DNS records")
        try:
            records = [DNSRecord.from_dict(item) for item in results]
        except ValueError as e:
            raise APIError(f"failed to fetch DNS records: {e}")

        logger.info(f"Retrieved {len(records)} DNS records for zone {zone_id}")
        return records

    def _get_all_pages(self, path: str, what: str) -> List[Dict]:
        """Collect ``result`` items across all pages of a list endpoint."""
        items = []
        page = 1

        while True:
            payload = self._get(path, what, params={"page": page, "per_page": PER_PAGE})

            result = payload.get("result")
            if not isinstance(result, list):
                raise APIError(f"failed to fetch {what}: response has no result list")
            items.extend(result)

            result_info = payload.get("result_info") or {}
            total_pages = result_info.get("total_pages") or 1
            if page >= total_pages:
                break
            page += 1
            logger.debug(f"Fetching page {page}/{total_pages} of {what}")

        return items

    def _get(self, path: str, what: str, params: Optional[Dict] = None) -> Dict:
        """Perform a GET request and decode the Cloudflare envelope."""
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url} {params or ''}")

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise APIError(f"failed to fetch {what}: {e}") from e

        if response.status_code != 200:
            raise APIError(
                f"failed to fetch {what}: {response.status_code} {response.reason}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise APIError(f"failed to fetch {what}: invalid JSON response") from e

        if not isinstance(payload, dict):
            raise APIError(f"failed to fetch {what}: unexpected response")

        if payload.get("success") is False:
            messages = "; ".join(
                str(error.get("message", error)) if isinstance(error, dict) else str(error)
                for error in payload.get("errors") or []
            )
            raise APIError(
                f"failed to fetch {what}: {messages or 'API reported failure'}",
                status_code=response.status_code,
            )

        return payload
