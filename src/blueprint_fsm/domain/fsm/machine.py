from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

from blueprint_fsm.domain.errors import IllegalTransitionError
from blueprint_fsm.domain.models.events import TransitionEvent
from blueprint_fsm.domain.models.result import Err, Ok, Result

if TYPE_CHECKING:
    from blueprint_fsm.domain.fsm.table import TransitionTable
    from blueprint_fsm.domain.ports import ClockPort, LoggerPort


class Machine:
    """
    A running finite state machine.

    Machines are normally obtained from `Blueprint.machine()`. The transition
    table is a frozen snapshot that may be shared with other machines; the
    current state is private to this instance. A machine is not thread-safe.
    """

    __slots__ = ("_clock", "_logger", "_machine_id", "_state", "_table")

    def __init__(
        self,
        table: TransitionTable,
        state: object,
        *,
        logger: LoggerPort | None = None,
        clock: ClockPort | None = None,
        machine_id: str | None = None,
    ) -> None:
        self._table = table.freeze()
        self._state = state
        self._logger = logger
        self._clock = clock
        self._machine_id = machine_id or uuid4().hex

    @property
    def state(self) -> object:
        return self._state

    @property
    def machine_id(self) -> str:
        return self._machine_id

    @property
    def table(self) -> TransitionTable:
        return self._table

    def current_state(self) -> object:
        return self._state

    def can_goto(self, target: object) -> bool:
        return self._table.lookup_exact(self._state, target) is not None

    def cannot_goto(self, target: object) -> bool:
        return not self.can_goto(target)

    def has_next(self) -> bool:
        """True when at least one transition leaves the current state."""
        return self._table.lookup_prefix(self._state) is not None

    def next_states(self) -> tuple[object, ...]:
        return tuple(edge.to_state for edge in self._table.outgoing(self._state))

    def goto(self, target: object) -> None:
        """
        Move to `target`, then run the edge handler (if any) with this machine.

        Raises `IllegalTransitionError` without touching the state when the move
        is not declared. Handlers may call `goto` again; exceptions they raise
        propagate after the state change has happened.
        """
        edge = self._table.lookup_exact(self._state, target)
        if edge is None:
            self._emit(self._state, target, accepted=False)
            raise IllegalTransitionError(self._state, target)

        previous = self._state
        self._state = target
        self._emit(previous, target, accepted=True)
        if edge.handler is not None:
            edge.handler(self)

    def try_goto(self, target: object) -> Result[object, IllegalTransitionError]:
        if self.cannot_goto(target):
            self._emit(self._state, target, accepted=False)
            return Err(IllegalTransitionError(self._state, target))
        self.goto(target)
        return Ok(target)

    def __repr__(self) -> str:
        return f"Machine(state={self._state!r}, id={self._machine_id!r})"

    def _emit(self, from_state: object, to_state: object, *, accepted: bool) -> None:
        if self._logger is None:
            return
        self._logger.log_transition(
            TransitionEvent(
                machine_id=self._machine_id,
                from_state=from_state,
                to_state=to_state,
                accepted=accepted,
                timestamp=self._clock.now() if self._clock is not None else None,
            )
        )
