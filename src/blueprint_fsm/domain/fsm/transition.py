from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from blueprint_fsm.domain.errors import (
    IncompleteTransitionError,
    TransitionCommittedError,
    ValidationError,
)
from blueprint_fsm.domain.fsm.table import TransitionEdge

if TYPE_CHECKING:
    from blueprint_fsm.domain.fsm.table import Handler


class EdgeSink(Protocol):
    """Where a completed transition gets committed (a `Blueprint` in practice)."""

    def add(self, edge: TransitionEdge, /) -> object: ...

    def replace(self, edge: TransitionEdge, /) -> object: ...


class TransitionBuilder:
    """
    Two-phase handle for one transition.

    The edge is committed to the sink by whichever of `from_`/`to` completes the
    pair. After that the endpoints are fixed; `then` may still attach or swap the
    handler, which replaces the committed edge.
    If the sink rejects the edge, the completing endpoint is rolled back so the
    handle stays pending.
    """

    __slots__ = ("_edge", "_from_state", "_handler", "_has_from", "_has_to", "_sink", "_to_state")

    def __init__(self, sink: EdgeSink) -> None:
        self._sink = sink
        self._from_state: object = None
        self._to_state: object = None
        self._has_from = False
        self._has_to = False
        self._handler: Handler | None = None
        self._edge: TransitionEdge | None = None

    @property
    def from_state(self) -> object:
        return self._from_state

    @property
    def to_state(self) -> object:
        return self._to_state

    @property
    def handler(self) -> Handler | None:
        return self._handler

    @property
    def is_complete(self) -> bool:
        return self._has_from and self._has_to

    @property
    def edge(self) -> TransitionEdge | None:
        """The committed edge, or None while an endpoint is missing."""
        return self._edge

    def from_(self, state: object) -> TransitionBuilder:
        self._ensure_open()
        previous = (self._from_state, self._has_from)
        self._from_state, self._has_from = state, True
        try:
            self._commit_if_complete()
        except ValidationError:
            self._from_state, self._has_from = previous
            raise
        return self

    def to(self, state: object) -> TransitionBuilder:
        self._ensure_open()
        previous = (self._to_state, self._has_to)
        self._to_state, self._has_to = state, True
        try:
            self._commit_if_complete()
        except ValidationError:
            self._to_state, self._has_to = previous
            raise
        return self

    def then(self, handler: Handler) -> TransitionBuilder:
        self._handler = handler
        if self._edge is not None:
            self._edge = self._edge.with_handler(handler)
            self._sink.replace(self._edge)
        return self

    def build(self) -> TransitionEdge:
        if not self.is_complete:
            raise IncompleteTransitionError(
                self._from_state if self._has_from else None,
                self._to_state if self._has_to else None,
            )
        return TransitionEdge(self._from_state, self._to_state, self._handler)

    def __repr__(self) -> str:
        src = repr(self._from_state) if self._has_from else "?"
        dst = repr(self._to_state) if self._has_to else "?"
        status = "committed" if self._edge is not None else "pending"
        return f"TransitionBuilder({src} -> {dst}, {status})"

    def _ensure_open(self) -> None:
        if self._edge is not None:
            raise TransitionCommittedError(self._edge.from_state, self._edge.to_state)

    def _commit_if_complete(self) -> None:
        if not self.is_complete:
            return
        edge = self.build()
        self._sink.add(edge)
        self._edge = edge
