"""Data models for wraparound tracing.

Events are plain data so observers can log, count or serialize them to JSON.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from time import time
from typing import Any


class WraparoundKind(Enum):
    """Which capacity limit was crossed."""

    COUNTER = "counter"
    """A generator minted its last identifier and its counter reset to 0."""

    SALT = "salt"
    """A registry handed out every salt and its cursor reset to 1."""


@dataclass(slots=True)
class WraparoundEvent:
    """Record of a single wraparound.

    Attributes:
        kind: Counter or salt wraparound.
        salt: Salt of the wrapping generator, or the salt the registry will
            hand out next (always 1) for a salt wraparound.
        limit: The capacity that was reached (per-generator capacity or
            ``max_salts``).
        cycle: How many times this generator or registry has wrapped,
            including this event.
        timestamp: Unix timestamp of the event.

    Example:
        event = WraparoundEvent(kind=WraparoundKind.COUNTER, salt=3, limit=2, cycle=1)
    """

    kind: WraparoundKind
    salt: int
    limit: int
    cycle: int
    timestamp: float = field(default_factory=time)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "kind": self.kind.value,
            "salt": self.salt,
            "limit": self.limit,
            "cycle": self.cycle,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WraparoundEvent:
        """Create from dictionary (for deserialization)."""
        return cls(
            kind=WraparoundKind(data["kind"]),
            salt=data["salt"],
            limit=data["limit"],
            cycle=data["cycle"],
            timestamp=data["timestamp"],
        )
