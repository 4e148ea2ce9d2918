from __future__ import annotations

import sys
from collections import deque
from typing import TYPE_CHECKING, TextIO

from blueprint_fsm.domain.errors import BlueprintDefinitionError, IncompleteTransitionError
from blueprint_fsm.domain.fsm.describe import format_transitions
from blueprint_fsm.domain.fsm.machine import Machine
from blueprint_fsm.domain.fsm.table import TransitionEdge, TransitionTable
from blueprint_fsm.domain.fsm.transition import TransitionBuilder

if TYPE_CHECKING:
    from collections.abc import Iterable

    from blueprint_fsm.domain.ports import ClockPort, IdGeneratorPort, LoggerPort

_UNSET = object()


class Blueprint:
    """
    Mutable description of a state machine: its transitions and start state.

    Declare transitions with `bp.from_(a).to(b).then(handler)`; each one is
    committed as soon as both endpoints are known. `machine()` snapshots the
    table, so later declarations never leak into machines already built.
    """

    def __init__(
        self,
        *,
        logger: LoggerPort | None = None,
        clock: ClockPort | None = None,
        id_generator: IdGeneratorPort | None = None,
    ) -> None:
        self._table = TransitionTable()
        self._snapshot: TransitionTable | None = None
        self._start: object = _UNSET
        self._pending: list[TransitionBuilder] = []
        self._logger = logger
        self._clock = clock
        self._id_generator = id_generator

    @property
    def has_start_state(self) -> bool:
        return self._start is not _UNSET

    @property
    def start_state(self) -> object | None:
        return None if self._start is _UNSET else self._start

    @property
    def table(self) -> TransitionTable:
        """Frozen snapshot of the committed transitions."""
        if self._snapshot is None:
            self._snapshot = self._table.freeze()
        return self._snapshot

    @property
    def transitions(self) -> tuple[TransitionEdge, ...]:
        return self._table.edges

    @property
    def states(self) -> tuple[object, ...]:
        states = self._table.states
        if self.has_start_state and self._start not in states:
            return (self._start, *states)
        return states

    def start(self, state: object) -> Blueprint:
        self._start = state
        return self

    def from_(self, state: object) -> TransitionBuilder:
        return self._new_handle().from_(state)

    def to(self, state: object) -> TransitionBuilder:
        return self._new_handle().to(state)

    def add(self, edge: TransitionEdge, /) -> Blueprint:
        self._table.insert(edge)
        self._snapshot = None
        return self

    def replace(self, edge: TransitionEdge, /) -> Blueprint:
        self._table.replace(edge)
        self._snapshot = None
        return self

    def add_transitions(self, pairs: Iterable[tuple[object, object]], /) -> Blueprint:
        for from_state, to_state in pairs:
            self.add(TransitionEdge(from_state, to_state))
        return self

    def machine(self) -> Machine:
        incomplete = self._incomplete_handles()
        if incomplete:
            first = incomplete[0]
            raise IncompleteTransitionError(first.from_state, first.to_state)
        return Machine(
            self.table,
            self.start_state,
            logger=self._logger,
            clock=self._clock,
            machine_id=self._id_generator.new_id() if self._id_generator is not None else None,
        )

    def describe(self) -> str:
        return format_transitions(self._table)

    def print_transitions(self, file: TextIO | None = None) -> None:
        print(self.describe(), file=file or sys.stdout)  # noqa: T201

    def validate(self) -> None:
        errors: list[str] = []

        if not self.has_start_state:
            errors.append("Blueprint must define a start state.")
        errors.extend(
            str(IncompleteTransitionError(handle.from_state, handle.to_state))
            for handle in self._incomplete_handles()
        )
        if not len(self._table):
            errors.append("Blueprint must declare at least one transition.")
        elif self.has_start_state:
            if self._start not in self._table.states:
                errors.append(f"Start state {self._start!r} is not part of any transition.")
            else:
                unreachable = self._unreachable_states()
                if unreachable:
                    errors.append(f"Unreachable states: {list(unreachable)}")

        if errors:
            raise BlueprintDefinitionError(tuple(errors))

    def __repr__(self) -> str:
        start = repr(self._start) if self.has_start_state else "unset"
        return f"Blueprint(start={start}, transitions={len(self._table)})"

    def _new_handle(self) -> TransitionBuilder:
        handle = TransitionBuilder(self)
        self._pending = self._incomplete_handles()
        self._pending.append(handle)
        return handle

    def _incomplete_handles(self) -> list[TransitionBuilder]:
        return [handle for handle in self._pending if not handle.is_complete]

    def _unreachable_states(self) -> tuple[object, ...]:
        visited: set[object] = {self._start}
        queue: deque[object] = deque([self._start])
        while queue:
            current = queue.popleft()
            for edge in self._table.outgoing(current):
                if edge.to_state not in visited:
                    visited.add(edge.to_state)
                    queue.append(edge.to_state)
        return tuple(state for state in self._table.states if state not in visited)
