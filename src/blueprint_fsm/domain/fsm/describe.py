"""Human-readable dump of a transition list (diagnostics only, never parsed)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from blueprint_fsm.domain.fsm.table import TransitionEdge

EMPTY_TRANSITIONS = "<-"


def format_transitions(edges: Iterable[TransitionEdge]) -> str:
    """Render edges as `(A -> B) -> (B -> C)`, or `<-` when there are none."""
    rendered = [f"({edge.from_state} -> {edge.to_state})" for edge in edges]
    if not rendered:
        return EMPTY_TRANSITIONS
    return " -> ".join(rendered)
