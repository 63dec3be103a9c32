"""Tests for wraparound tracing models and the logging observer.

Why these tests exist:
- Events must serialize for external sinks
- Observers are duck-typed through a runtime-checkable protocol
- Logging output is the built-in observability path
"""

import logging

from ecsuid import SaltRegistry, SaltSpace, UIDGenerator
from ecsuid.tracing import LoggingObserver, WraparoundEvent, WraparoundKind, WraparoundObserver


def test_event_round_trip():
    event = WraparoundEvent(kind=WraparoundKind.SALT, salt=1, limit=10, cycle=3, timestamp=5.0)

    data = event.to_dict()

    assert data == {"kind": "salt", "salt": 1, "limit": 10, "cycle": 3, "timestamp": 5.0}
    assert WraparoundEvent.from_dict(data) == event


def test_event_timestamp_defaults_to_now():
    event = WraparoundEvent(kind=WraparoundKind.COUNTER, salt=0, limit=2, cycle=1)
    assert event.timestamp > 0


def test_observers_satisfy_protocol(recorder):
    assert isinstance(LoggingObserver(), WraparoundObserver)
    assert isinstance(recorder, WraparoundObserver)
    assert not isinstance(object(), WraparoundObserver)


def test_logging_observer_reports_counter_wrap(caplog):
    space = SaltSpace(max_salts=10, max_safe_value=39)
    generator = UIDGenerator(6, space=space, observer=LoggingObserver())

    with caplog.at_level(logging.WARNING, logger="ecsuid.tracing.logging_observer"):
        generator.next()
        generator.next()

    assert len(caplog.records) == 1
    assert "salt 6 reached 2 identifiers" in caplog.records[0].getMessage()


def test_logging_observer_reports_salt_wrap(caplog):
    logger = logging.getLogger("ecsuid.test")
    registry = SaltRegistry(
        SaltSpace(max_salts=3), observer=LoggingObserver(logger, level=logging.INFO)
    )

    with caplog.at_level(logging.INFO, logger="ecsuid.test"):
        for _ in range(3):
            registry.next_salt()

    assert [record.levelno for record in caplog.records] == [logging.INFO]
    assert "handed out all 3 salts" in caplog.records[0].getMessage()


def test_no_logging_without_observer(caplog):
    generator = UIDGenerator(1, space=SaltSpace(max_salts=10, max_safe_value=39))

    with caplog.at_level(logging.DEBUG):
        for _ in range(6):
            generator.next()

    assert caplog.records == []
