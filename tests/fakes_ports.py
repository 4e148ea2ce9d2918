from __future__ import annotations

from dataclasses import dataclass, field

from blueprint_fsm.domain.models import TransitionEvent


@dataclass
class RecordingLogger:
    events: list[TransitionEvent] = field(default_factory=list)

    def log_transition(self, event: TransitionEvent, /) -> None:
        self.events.append(event)


@dataclass
class FakeClock:
    start: float = 100.0
    step: float = 0.5
    _calls: int = 0

    def now(self) -> float:
        value = self.start + self._calls * self.step
        self._calls += 1
        return value


@dataclass
class SequentialIds:
    prefix: str = "m"
    _next: int = 0

    def new_id(self) -> str:
        self._next += 1
        return f"{self.prefix}-{self._next}"
