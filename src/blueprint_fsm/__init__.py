"""
blueprint_fsm

Declare the legal transitions of a finite state machine on a `Blueprint`, then
drive `Machine` instances built from it one move at a time.
"""

from __future__ import annotations

from blueprint_fsm._meta import __version__
from blueprint_fsm.domain.errors import (
    BlueprintDefinitionError,
    DuplicateTransitionError,
    FsmError,
    IllegalTransitionError,
    IncompleteTransitionError,
    TransitionCommittedError,
    ValidationError,
)
from blueprint_fsm.domain.fsm import (
    Blueprint,
    Machine,
    TransitionBuilder,
    TransitionEdge,
    TransitionTable,
)

__all__ = [
    "Blueprint",
    "BlueprintDefinitionError",
    "DuplicateTransitionError",
    "FsmError",
    "IllegalTransitionError",
    "IncompleteTransitionError",
    "Machine",
    "TransitionBuilder",
    "TransitionCommittedError",
    "TransitionEdge",
    "TransitionTable",
    "ValidationError",
    "__version__",
]
