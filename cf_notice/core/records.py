"""
Record model for DNS records and zones as returned by the provider.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ..utils.validators import validate_record_dict

RECORD_FIELDS = ("id", "name", "type", "content")


@dataclass(frozen=True)
class DNSRecord:
    """A single DNS record. Identity is the provider-assigned ``id``."""

    id: str
    name: str = ""
    type: str = ""
    content: str = ""

    @property
    def key(self) -> str:
        return self.id

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DNSRecord":
        """Build a record from a provider or snapshot mapping, ignoring extra keys."""
        errors = validate_record_dict(data)
        if errors:
            raise ValueError(f"Invalid DNS record {data!r}: {'; '.join(errors)}")

        return cls(
            id=data["id"],
            name=data.get("name") or "",
            type=data.get("type") or "",
            content=data.get("content") or "",
        )

    def to_dict(self) -> Dict[str, str]:
        return {field: getattr(self, field) for field in RECORD_FIELDS}


@dataclass(frozen=True)
class Zone:
    """A provider zone (usually one per registered domain)."""

    id: str
    name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Zone":
        if not isinstance(data, dict) or not isinstance(data.get("id"), str) or not data["id"]:
            raise ValueError(f"Invalid zone {data!r}: missing 'id'")
        return cls(id=data["id"], name=str(data.get("name") or ""))
