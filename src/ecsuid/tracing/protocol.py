"""Protocols for wraparound tracing.

Observers are strictly additive: generators and registries behave the same
with or without one attached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ecsuid.tracing.models import WraparoundEvent


@runtime_checkable
class WraparoundObserver(Protocol):
    """Protocol for receiving wraparound notifications.

    Usage:
        class Counter:
            def __init__(self) -> None:
                self.events = []

            def on_wraparound(self, event: WraparoundEvent) -> None:
                self.events.append(event)

        registry = SaltRegistry(observer=Counter())

    Thread Safety:
        Called synchronously on the thread that triggered the wraparound.
        Salt wraparounds are reported while the registry lock is held, so
        implementations must not call back into the same registry.
    """

    def on_wraparound(self, event: WraparoundEvent) -> None:
        """Handle a wraparound event.

        Args:
            event: The wraparound that just happened.
        """
        ...
