from __future__ import annotations

from blueprint_fsm.domain.models.events import TransitionEvent
from blueprint_fsm.domain.models.result import Err, Ok, Result, try_call

__all__ = ["Err", "Ok", "Result", "TransitionEvent", "try_call"]
