"""Stateful allocation services: salted generators and the salt registry."""

from ecsuid.allocation.generator import SynchronizedGenerator, UIDGenerator
from ecsuid.allocation.registry import (
    DEFAULT_GENERATOR,
    SaltRegistry,
    default_registry,
    next_generator,
    next_salt,
)

__all__ = [
    "UIDGenerator",
    "SynchronizedGenerator",
    "SaltRegistry",
    "DEFAULT_GENERATOR",
    "default_registry",
    "next_salt",
    "next_generator",
]
