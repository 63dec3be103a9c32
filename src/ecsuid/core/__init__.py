"""Core functionalities: stateless primitives of the salted identifier scheme.

Architecture Note:
    core/ contains pure, stateless functionality with no runtime state mutation.
    For the stateful generator and salt registry, see allocation/.
"""

from ecsuid.core.identity import (
    DEFAULT_SPACE,
    JS_MAX_SAFE_INTEGER,
    JS_SAFE_SPACE,
    MAX_ENTITY_PER_GENERATOR,
    MAX_SAFE_VALUE,
    MAX_SALTS,
    InvalidSaltError,
    SaltSpace,
    is_salted_by,
    salt_of,
    validate_salt,
)

__all__ = [
    # Constants
    "MAX_SALTS",
    "MAX_SAFE_VALUE",
    "MAX_ENTITY_PER_GENERATOR",
    "JS_MAX_SAFE_INTEGER",
    # Space
    "DEFAULT_SPACE",
    "JS_SAFE_SPACE",
    "SaltSpace",
    "InvalidSaltError",
    # Operations
    "is_salted_by",
    "salt_of",
    "validate_salt",
]
