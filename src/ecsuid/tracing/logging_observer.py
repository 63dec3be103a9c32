"""Observer that reports wraparounds through the standard logging module."""

from __future__ import annotations

import logging

from ecsuid.tracing.models import WraparoundEvent, WraparoundKind

logger = logging.getLogger(__name__)


class LoggingObserver:
    """Log every wraparound event.

    Args:
        log: Logger to write to (default: this module's logger).
        level: Logging level for the records (default WARNING).
    """

    def __init__(self, log: logging.Logger | None = None, level: int = logging.WARNING) -> None:
        self._log = log or logger
        self._level = level

    @property
    def level(self) -> int:
        return self._level

    def on_wraparound(self, event: WraparoundEvent) -> None:
        if event.kind is WraparoundKind.COUNTER:
            self._log.log(
                self._level,
                "Generator with salt %d reached %d identifiers and restarted at 0 (cycle %d); "
                "previously issued identifiers can be minted again",
                event.salt,
                event.limit,
                event.cycle,
            )
        else:
            self._log.log(
                self._level,
                "Salt registry handed out all %d salts and restarted at %d (cycle %d); "
                "salts are now shared with earlier generators",
                event.limit,
                event.salt,
                event.cycle,
            )
