"""
Validators - Input validation for configuration values and DNS records

This module provides validation helpers used when loading configuration,
reading snapshots and decoding provider responses.
"""

import logging
import os
import re
from typing import Any, List

logger = logging.getLogger(__name__)

ZONE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def validate_zone_id(zone_id: str) -> bool:
    """
    Validate a provider zone identifier.

    Zone ids end up in API URL paths, so only URL-safe identifier
    characters are accepted.

    Args:
        zone_id: The zone identifier to validate

    Returns:
        True if valid, False otherwise
    """
    if not zone_id or not isinstance(zone_id, str):
        return False

    if not ZONE_ID_PATTERN.match(zone_id):
        logger.warning(f"Invalid zone id: {zone_id}")
        return False

    return True


def validate_interval(interval: Any) -> bool:
    """Validate a polling interval in seconds (0 or negative disables polling)."""
    if isinstance(interval, bool):
        return False
    return isinstance(interval, int)


def validate_record_dict(data: Any) -> List[str]:
    """
    Validate a DNS record mapping.

    Args:
        data: Mapping decoded from JSON

    Returns:
        List of validation errors, empty if the record is usable
    """
    if not isinstance(data, dict):
        return ["record must be an object"]

    errors = []

    record_id = data.get("id")
    if not isinstance(record_id, str) or not record_id:
        errors.append("missing or empty 'id'")

    for field in ("name", "type", "content"):
        value = data.get(field)
        if value is not None and not isinstance(value, str):
            errors.append(f"'{field}' must be a string")

    return errors


def resolve_cookie(cookie: str) -> str:
    """
    Resolve a cookie option that may be either the literal cookie or a path.

    When ``cookie`` names an existing file, the file's content (stripped) is
    returned; otherwise the value is returned unchanged.
    """
    if not cookie:
        return ""

    if os.path.isfile(cookie):
        logger.debug(f"Loading cookie from file {cookie}")
        with open(cookie, "r", encoding="utf-8") as f:
            return f.read().strip()

    return cookie
