"""Identifier space: constants, salted partitions and membership tests."""

from ecsuid.core.identity.models import (
    DEFAULT_SPACE,
    JS_MAX_SAFE_INTEGER,
    JS_SAFE_SPACE,
    MAX_ENTITY_PER_GENERATOR,
    MAX_SAFE_VALUE,
    MAX_SALTS,
    InvalidSaltError,
    SaltSpace,
)
from ecsuid.core.identity.operations import is_salted_by, salt_of, validate_salt

__all__ = [
    "MAX_SALTS",
    "MAX_SAFE_VALUE",
    "MAX_ENTITY_PER_GENERATOR",
    "JS_MAX_SAFE_INTEGER",
    "DEFAULT_SPACE",
    "JS_SAFE_SPACE",
    "SaltSpace",
    "InvalidSaltError",
    "is_salted_by",
    "salt_of",
    "validate_salt",
]
