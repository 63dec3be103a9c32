"""Salt assignment.

SaltRegistry hands out salts to generators within one process. A process-wide
registry and the default generator (salt 0) are created on first import.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from ecsuid.allocation.generator import UIDGenerator
from ecsuid.config.settings import UIDSettings
from ecsuid.core.identity import DEFAULT_SPACE, SaltSpace
from ecsuid.tracing.logging_observer import LoggingObserver
from ecsuid.tracing.models import WraparoundEvent, WraparoundKind

if TYPE_CHECKING:
    from ecsuid.tracing.protocol import WraparoundObserver


class SaltRegistry:
    """Hand out salts so that no two live generators share one.

    The cursor starts at 0 and advances on every request. Once every salt of
    the space has been handed out the cursor restarts at 1, never 0, which
    stays reserved for the default generator. From then on salts are reused
    silently: two generators sharing a salt can collide if both keep minting.

    Salts are only unique within one registry. Keeping salt ranges disjoint
    across processes is up to whatever launches them.

    Args:
        space: Partition space salts are drawn from.
        strict: Passed on to generators created by next_generator().
        observer: Notified of salt wraparounds and passed on to generators.
    """

    def __init__(
        self,
        space: SaltSpace = DEFAULT_SPACE,
        *,
        strict: bool = False,
        observer: WraparoundObserver | None = None,
    ) -> None:
        self._space = space
        self._strict = strict
        self._observer = observer
        self._cursor = 0
        self._cycles = 0
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: UIDSettings, space: SaltSpace = DEFAULT_SPACE) -> SaltRegistry:
        """Build a registry configured from UIDSettings.

        Args:
            settings: Loaded settings.
            space: Partition space salts are drawn from.

        Returns:
            Registry with strictness and wraparound logging applied.
        """
        observer = None
        if settings.log_wraparound:
            observer = LoggingObserver(level=settings.log_level_number)
        return cls(space, strict=settings.strict_salts, observer=observer)

    @property
    def space(self) -> SaltSpace:
        return self._space

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def observer(self) -> WraparoundObserver | None:
        return self._observer

    @property
    def cursor(self) -> int:
        """Salt the next call to next_salt() returns."""
        return self._cursor

    @property
    def cycles(self) -> int:
        """Number of times every salt has been handed out."""
        return self._cycles

    def next_salt(self) -> int:
        """Return the next unique salt.

        Returns:
            A salt in ``[0, max_salts - 1]``. 0 is only returned by the first call.
        """
        with self._lock:
            salt = self._cursor
            self._cursor += 1
            # 0 always belongs to the default generator
            if self._cursor > self._space.max_salts - 1:
                self._cursor = 1
                self._cycles += 1
                if self._observer is not None:
                    self._observer.on_wraparound(
                        WraparoundEvent(
                            kind=WraparoundKind.SALT,
                            salt=self._cursor,
                            limit=self._space.max_salts,
                            cycle=self._cycles,
                        )
                    )
            return salt

    def next_generator(self) -> UIDGenerator:
        """Create a new generator with a unique salt.

        Returns:
            UIDGenerator sharing this registry's space, strictness and observer.
        """
        return UIDGenerator(
            self.next_salt(),
            space=self._space,
            strict=self._strict,
            observer=self._observer,
        )


_registry: SaltRegistry | None = None
_registry_lock = threading.Lock()


def default_registry() -> SaltRegistry:
    """Get the process-wide registry, creating it from UIDSettings if necessary."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = SaltRegistry.from_settings(UIDSettings())
    return _registry


def next_salt() -> int:
    """Return the next unique salt from the process-wide registry."""
    return default_registry().next_salt()


def next_generator() -> UIDGenerator:
    """Create a generator with a unique salt from the process-wide registry."""
    return default_registry().next_generator()


DEFAULT_GENERATOR = next_generator()
"""Generator used when an entity is created without an id or generator.

Created on first import with the first salt of the process-wide registry
(always 0) and shared for the lifetime of the process.
"""
