from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blueprint_fsm.domain.models import TransitionEvent


class ConsoleLoggerAdapter:
    """Prints one `[FSM] ...` line per transition attempt to stdout."""

    def __init__(self, *, enabled: bool = True) -> None:
        if not isinstance(enabled, bool):
            raise ValueError("ConsoleLoggerAdapter requires 'enabled' to be a bool")
        self.enabled = enabled

    def log_transition(self, event: TransitionEvent, /) -> None:
        if not self.enabled:
            return
        outcome = "accepted" if event.accepted else "rejected"
        print(  # noqa: T201
            f"[FSM] machine={event.machine_id} {event.from_state} -> {event.to_state} {outcome}"
        )
