"""
Data schemas for GitLab builds API payloads.
"""

from dataclasses import dataclass
from typing import Any


@dataclass
class BuildInfo:
    """Build detail as returned by ``GET builds/<id>``."""

    ref: str | None
    name: str | None
    status: str | None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "BuildInfo":
        """Create from a decoded JSON object, tolerating missing keys."""
        return cls(
            ref=payload.get("ref"),
            name=payload.get("name"),
            status=payload.get("status"),
        )

    @property
    def complete(self) -> bool:
        """Whether ref, name and status are all present."""
        return None not in (self.ref, self.name, self.status)
