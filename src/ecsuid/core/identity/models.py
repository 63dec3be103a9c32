"""Identifier space models.

Usage:
    space = SaltSpace(max_salts=10)
    capacity = space.max_entity_per_generator
"""

from __future__ import annotations

from dataclasses import dataclass

MAX_SALTS = 10000
"""Maximum number of partitions that can mint identifiers concurrently."""

MAX_SAFE_VALUE = 2**63 - 1
"""Largest identifier value. Identifiers must fit a signed 64-bit integer."""

MAX_ENTITY_PER_GENERATOR = MAX_SAFE_VALUE // MAX_SALTS - 1
"""Identifiers one generator mints before its counter wraps."""

JS_MAX_SAFE_INTEGER = 2**53 - 1
"""Largest integer a double-precision float represents exactly."""


class InvalidSaltError(ValueError):
    """Raised when strict validation rejects a salt outside the partition space."""

    pass


@dataclass(frozen=True, slots=True)
class SaltSpace:
    """Partitioning of the identifier range into salted sequences.

    An identifier is ``salt + counter * max_salts``, so its residue modulo
    ``max_salts`` always names the salt that produced it.

    Args:
        max_salts: Number of distinct salts (partitions).
        max_safe_value: Largest identifier the numeric substrate holds exactly.

    Raises:
        ValueError: If fewer than two salts are requested or the derived
            per-generator capacity is below one.
    """

    max_salts: int = MAX_SALTS
    max_safe_value: int = MAX_SAFE_VALUE

    def __post_init__(self) -> None:
        # salt 0 is reserved for the default partition, the registry needs one more
        if self.max_salts < 2:
            raise ValueError(f"max_salts must be at least 2, got {self.max_salts}")
        if self.max_entity_per_generator < 1:
            raise ValueError(
                f"max_safe_value {self.max_safe_value} leaves no capacity "
                f"for {self.max_salts} salts"
            )

    @property
    def max_entity_per_generator(self) -> int:
        """Counter limit at which a generator wraps back to zero."""
        return self.max_safe_value // self.max_salts - 1

    def contains(self, salt: int) -> bool:
        """Check if salt is a valid partition in this space.

        Args:
            salt: Salt to check.

        Returns:
            True if ``0 <= salt < max_salts``.
        """
        return 0 <= salt < self.max_salts


DEFAULT_SPACE = SaltSpace()

JS_SAFE_SPACE = SaltSpace(max_safe_value=JS_MAX_SAFE_INTEGER)
"""Space for peers that carry identifiers as IEEE-754 doubles."""
