from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blueprint_fsm.domain.models import TransitionEvent


class NoopLoggerAdapter:
    """Logger that discards every event."""

    def log_transition(self, event: TransitionEvent, /) -> None:
        return None
