"""Salted identifier generation.

UIDGenerator is a stateful service that mints identifiers for one partition.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from ecsuid.core.identity import DEFAULT_SPACE, SaltSpace, is_salted_by, validate_salt
from ecsuid.tracing.models import WraparoundEvent, WraparoundKind

if TYPE_CHECKING:
    from ecsuid.tracing.protocol import WraparoundObserver


class UIDGenerator:
    """Generate a unique sequence of integers for one salt.

    An Entity Component System needs a unique id per entity, and comparing
    plain integers keeps that cheap. A single incrementing counter breaks as
    soon as several instances create entities concurrently (e.g. in a
    networked multiplayer game). Salting fixes that: identifiers are
    ``salt + counter * max_salts``, so two generators with different salts
    never produce the same identifier.

    Once ``space.max_entity_per_generator`` identifiers have been minted the
    counter silently restarts at 0 and earlier identifiers are produced again.

    Not safe for concurrent ``next()`` calls on one instance; use
    SynchronizedGenerator for a generator shared between threads.

    Args:
        salt: Salt for this generator (default 0, the default partition).
        space: Partition space the salt belongs to.
        strict: Reject salts outside the space instead of accepting them.
        observer: Optional observer notified when the counter wraps.

    Raises:
        InvalidSaltError: If strict is set and salt is outside the space.
    """

    def __init__(
        self,
        salt: int = 0,
        *,
        space: SaltSpace = DEFAULT_SPACE,
        strict: bool = False,
        observer: WraparoundObserver | None = None,
    ) -> None:
        if strict:
            validate_salt(salt, space)
        self._salt = salt
        self._counter = 0
        self._space = space
        self._step = space.max_salts
        self._capacity = space.max_entity_per_generator
        self._observer = observer
        self._cycles = 0

    @property
    def salt(self) -> int:
        """The salt of this generator."""
        return self._salt

    @property
    def counter(self) -> int:
        """Counter used for the next identifier."""
        return self._counter

    @property
    def space(self) -> SaltSpace:
        return self._space

    def next(self) -> int:
        """Mint a new identifier.

        Returns:
            ``salt + counter * max_salts`` for the current counter.
        """
        uid = self._salt + self._counter * self._step

        self._counter += 1
        # exceeding the (very high) capacity restarts the sequence
        if self._counter >= self._capacity:
            self._counter = 0
            self._wrapped()

        return uid

    def owns(self, identifier: int) -> bool:
        """Check if identifier belongs to this generator's partition."""
        return is_salted_by(identifier, self._salt, self._step)

    def _wrapped(self) -> None:
        self._cycles += 1
        if self._observer is not None:
            self._observer.on_wraparound(
                WraparoundEvent(
                    kind=WraparoundKind.COUNTER,
                    salt=self._salt,
                    limit=self._capacity,
                    cycle=self._cycles,
                )
            )

    def __iter__(self) -> UIDGenerator:
        return self

    def __next__(self) -> int:
        return self.next()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(salt={self._salt}, counter={self._counter})"


class SynchronizedGenerator(UIDGenerator):
    """UIDGenerator whose ``next()`` may be called from several threads."""

    def __init__(
        self,
        salt: int = 0,
        *,
        space: SaltSpace = DEFAULT_SPACE,
        strict: bool = False,
        observer: WraparoundObserver | None = None,
    ) -> None:
        super().__init__(salt, space=space, strict=strict, observer=observer)
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            return super().next()
