from __future__ import annotations

import pytest

from blueprint_fsm.adapters.logger.console import ConsoleLoggerAdapter
from blueprint_fsm.adapters.logger.noop import NoopLoggerAdapter
from blueprint_fsm.domain.models import TransitionEvent
from blueprint_fsm.domain.ports import LoggerPort


def _event(*, accepted: bool = True) -> TransitionEvent:
    return TransitionEvent(machine_id="m-1", from_state="A", to_state="B", accepted=accepted)


@pytest.mark.unit
def test_console_logger_disabled_is_noop(capsys: pytest.CaptureFixture[str]) -> None:
    logger = ConsoleLoggerAdapter(enabled=False)
    logger.log_transition(_event())

    assert capsys.readouterr().out == ""


@pytest.mark.unit
def test_console_logger_enabled_prints_outcome(capsys: pytest.CaptureFixture[str]) -> None:
    logger = ConsoleLoggerAdapter()
    logger.log_transition(_event())
    logger.log_transition(_event(accepted=False))

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "[FSM] machine=m-1 A -> B accepted",
        "[FSM] machine=m-1 A -> B rejected",
    ]


@pytest.mark.unit
def test_console_logger_validates_enabled_flag_type() -> None:
    with pytest.raises(ValueError, match="enabled"):
        ConsoleLoggerAdapter(enabled="yes")  # type: ignore[arg-type]


@pytest.mark.unit
def test_noop_logger_accepts_calls() -> None:
    logger = NoopLoggerAdapter()
    logger.log_transition(_event())

    assert isinstance(logger, LoggerPort)
    assert isinstance(ConsoleLoggerAdapter(), LoggerPort)
