"""ecsuid: salted numeric identifiers for multi-instance Entity Component Systems.

Usage:
    from ecsuid import DEFAULT_GENERATOR, is_salted_by, next_generator

    # One generator per simulation instance, each with its own salt
    generator = next_generator()
    entity_id = generator.next()

    assert is_salted_by(entity_id, generator.salt)

    # Entities created without a dedicated generator
    other_id = DEFAULT_GENERATOR.next()
"""

__version__ = "0.1.0"

# Allocation services
from ecsuid.allocation import (
    DEFAULT_GENERATOR,
    SaltRegistry,
    SynchronizedGenerator,
    UIDGenerator,
    default_registry,
    next_generator,
    next_salt,
)

# Configuration
from ecsuid.config import UIDSettings

# Core primitives
from ecsuid.core import (
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

# Tracing (optional)
from ecsuid.tracing import (
    LoggingObserver,
    WraparoundEvent,
    WraparoundKind,
    WraparoundObserver,
)

__all__ = [
    # Version
    "__version__",
    # Core
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
    # Allocation
    "UIDGenerator",
    "SynchronizedGenerator",
    "SaltRegistry",
    "DEFAULT_GENERATOR",
    "default_registry",
    "next_salt",
    "next_generator",
    # Config
    "UIDSettings",
    # Tracing
    "WraparoundObserver",
    "WraparoundEvent",
    "WraparoundKind",
    "LoggingObserver",
]
