from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class TransitionEvent:
    """One attempted move of a machine, as seen by a `LoggerPort`."""

    machine_id: str
    from_state: object
    to_state: object
    accepted: bool
    timestamp: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "machine_id": self.machine_id,
            "from_state": _jsonable_state(self.from_state),
            "to_state": _jsonable_state(self.to_state),
            "accepted": self.accepted,
            "timestamp": self.timestamp,
        }


def _jsonable_state(state: object) -> str | int | float | bool | None:
    if state is None or isinstance(state, str | int | float | bool):
        return state
    return str(state)
