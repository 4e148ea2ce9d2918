from __future__ import annotations

from blueprint_fsm.domain.fsm.blueprint import Blueprint
from blueprint_fsm.domain.fsm.describe import EMPTY_TRANSITIONS, format_transitions
from blueprint_fsm.domain.fsm.machine import Machine
from blueprint_fsm.domain.fsm.table import (
    Handler,
    TransitionEdge,
    TransitionKey,
    TransitionTable,
    transition_key,
)
from blueprint_fsm.domain.fsm.transition import EdgeSink, TransitionBuilder

__all__ = [
    "EMPTY_TRANSITIONS",
    "Blueprint",
    "EdgeSink",
    "Handler",
    "Machine",
    "TransitionBuilder",
    "TransitionEdge",
    "TransitionKey",
    "TransitionTable",
    "format_transitions",
    "transition_key",
]
