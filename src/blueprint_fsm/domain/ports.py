from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from blueprint_fsm.domain.models import TransitionEvent


@runtime_checkable
class LoggerPort(Protocol):
    """Port for recording accepted and rejected transition attempts."""

    def log_transition(self, event: TransitionEvent, /) -> None: ...


class ClockPort(Protocol):
    """Port for time measurement (injectable for deterministic tests)."""

    def now(self) -> float: ...


class IdGeneratorPort(Protocol):
    """Port for generating machine IDs (injectable for deterministic tests)."""

    def new_id(self) -> str: ...
