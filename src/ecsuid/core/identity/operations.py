"""Pure operations on salted identifiers."""

from __future__ import annotations

from ecsuid.core.identity.models import (
    DEFAULT_SPACE,
    MAX_SALTS,
    InvalidSaltError,
    SaltSpace,
)


def is_salted_by(identifier: int, salt: int, max_salts: int = MAX_SALTS) -> bool:
    """Check if identifier was minted by a generator using salt.

    Args:
        identifier: Identifier to test.
        salt: Candidate salt.
        max_salts: Partition count of the space the identifier belongs to.

    Returns:
        True if ``identifier % max_salts == salt``.
    """
    return identifier % max_salts == salt


def salt_of(identifier: int, max_salts: int = MAX_SALTS) -> int:
    """Return the salt of the partition that produced identifier.

    Used to route an identifier back to the instance that minted it.
    """
    return identifier % max_salts


def validate_salt(salt: int, space: SaltSpace = DEFAULT_SPACE) -> int:
    """Check that salt lies inside the space.

    Args:
        salt: Salt to validate.
        space: Space defining the valid range.

    Returns:
        The salt, unchanged.

    Raises:
        InvalidSaltError: If salt is outside ``[0, space.max_salts - 1]``.
    """
    if not space.contains(salt):
        raise InvalidSaltError(f"Salt {salt} is outside [0, {space.max_salts - 1}]")
    return salt
