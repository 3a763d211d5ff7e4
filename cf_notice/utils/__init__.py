"""
Utility functions and helpers.

This package contains utility functions for validation of configuration
values and DNS records.
"""

from .validators import resolve_cookie, validate_interval, validate_record_dict, validate_zone_id

__all__ = ["resolve_cookie", "validate_interval", "validate_record_dict", "validate_zone_id"]
