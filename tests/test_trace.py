import logging

from turing_engine import LoggingObserver, Movement, RecordingObserver, TransitionRecord
from turing_engine.catalog import busy_beaver_2


def test_record_format():
    record = TransitionRecord(
        step=3,
        old_state="A",
        old_symbol="1",
        new_state="H",
        new_symbol="1",
        movement=Movement.LEFT,
        head=0,
    )
    assert record.format() == "Paso 0003: 'A' '1' => 'H' '1' Left"


def test_recording_observer_lines():
    observer = RecordingObserver()
    busy_beaver_2(observer=observer).run()
    assert len(observer) == 3
    assert observer.lines()[0] == "Paso 0001: 'A' '0' => 'B' '1' Right"


def test_default_observer_logs_each_transition(caplog):
    caplog.set_level(logging.DEBUG, logger="turing_engine.trace")
    busy_beaver_2().run()
    lines = [r.getMessage() for r in caplog.records if r.name == "turing_engine.trace"]
    assert lines == [
        "Paso 0001: 'A' '0' => 'B' '1' Right",
        "Paso 0002: 'B' '0' => 'A' '1' Left",
        "Paso 0003: 'A' '1' => 'H' '1' Left",
    ]


def test_logging_observer_respects_level(caplog):
    logger = logging.getLogger("tests.trace")
    caplog.set_level(logging.WARNING, logger="tests.trace")
    busy_beaver_2(observer=LoggingObserver(logger, logging.INFO)).run()
    assert not [r for r in caplog.records if r.name == "tests.trace"]


def test_logging_observer_custom_level(caplog):
    logger = logging.getLogger("tests.trace.info")
    caplog.set_level(logging.INFO, logger="tests.trace.info")
    busy_beaver_2(observer=LoggingObserver(logger, logging.INFO)).run()
    records = [r for r in caplog.records if r.name == "tests.trace.info"]
    assert len(records) == 3
    assert all(r.levelno == logging.INFO for r in records)
