"""Opt-in tracing of counter and salt wraparounds.

Usage:
    from ecsuid.tracing import LoggingObserver

    registry = SaltRegistry(observer=LoggingObserver())
    generator = registry.next_generator()  # inherits the observer
"""

from ecsuid.tracing.logging_observer import LoggingObserver
from ecsuid.tracing.models import WraparoundEvent, WraparoundKind
from ecsuid.tracing.protocol import WraparoundObserver

__all__ = [
    "WraparoundObserver",
    "WraparoundEvent",
    "WraparoundKind",
    "LoggingObserver",
]
