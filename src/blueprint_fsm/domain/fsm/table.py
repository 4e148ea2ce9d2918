from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field, replace
from operator import itemgetter
from typing import TYPE_CHECKING

from blueprint_fsm.domain.errors import DuplicateTransitionError, ValidationError

if TYPE_CHECKING:
    from blueprint_fsm.domain.fsm.machine import Machine


type Handler = Callable[[Machine], None]
type TransitionKey = tuple[object, object]

_source = itemgetter(0)


def transition_key(from_state: object, to_state: object) -> TransitionKey:
    """
    Composite sort/lookup key for an edge.

    Tuples order by `from_state` first, so every edge leaving a state sits in one
    contiguous run of the table and the source can be searched on its own.
    """
    return (from_state, to_state)


@dataclass(frozen=True, slots=True)
class TransitionEdge:
    from_state: object
    to_state: object
    handler: Handler | None = field(default=None, compare=False)

    @property
    def key(self) -> TransitionKey:
        return transition_key(self.from_state, self.to_state)

    def with_handler(self, handler: Handler | None) -> TransitionEdge:
        return replace(self, handler=handler)

    def __str__(self) -> str:
        return f"({self.from_state} -> {self.to_state})"


class TransitionTable:
    """
    Edges kept sorted by `transition_key`, answering exact and by-source lookups
    with binary search.

    Insertion shifts the tail of the list (O(n)); tables are built once and read
    many times. A frozen table rejects inserts and is what machines hold.
    """

    __slots__ = ("_edges", "_frozen", "_keys")

    def __init__(self, edges: Iterable[TransitionEdge] = ()) -> None:
        self._edges: list[TransitionEdge] = []
        self._keys: list[TransitionKey] = []
        self._frozen = False
        for edge in edges:
            self.insert(edge)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def edges(self) -> tuple[TransitionEdge, ...]:
        return tuple(self._edges)

    @property
    def keys(self) -> tuple[TransitionKey, ...]:
        return tuple(self._keys)

    @property
    def states(self) -> tuple[object, ...]:
        seen: dict[object, None] = {}
        for edge in self._edges:
            seen.setdefault(edge.from_state)
            seen.setdefault(edge.to_state)
        return tuple(seen)

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[TransitionEdge]:
        return iter(self._edges)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        return self.lookup_exact(key[0], key[1]) is not None

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"TransitionTable({len(self._edges)} edges, {state})"

    def insert(self, edge: TransitionEdge) -> None:
        self._ensure_mutable()
        key = edge.key
        try:
            idx = bisect_left(self._keys, key)
        except TypeError as e:
            raise ValidationError(
                f"State {edge.from_state!r} or {edge.to_state!r} cannot be ordered "
                "against the states already in the table."
            ) from e
        if idx < len(self._keys) and self._keys[idx] == key:
            raise DuplicateTransitionError(edge.from_state, edge.to_state)
        self._keys.insert(idx, key)
        self._edges.insert(idx, edge)

    def replace(self, edge: TransitionEdge) -> None:
        self._ensure_mutable()
        idx = self._index_of(edge.key)
        if idx is None:
            raise ValidationError(f"Transition {edge} is not in the table.")
        self._edges[idx] = edge

    def lookup_exact(self, from_state: object, to_state: object) -> TransitionEdge | None:
        idx = self._index_of(transition_key(from_state, to_state))
        return None if idx is None else self._edges[idx]

    def lookup_prefix(self, from_state: object) -> TransitionEdge | None:
        try:
            idx = bisect_left(self._keys, from_state, key=_source)
        except TypeError:
            return None
        if idx < len(self._keys) and self._keys[idx][0] == from_state:
            return self._edges[idx]
        return None

    def outgoing(self, from_state: object) -> tuple[TransitionEdge, ...]:
        try:
            lo = bisect_left(self._keys, from_state, key=_source)
            hi = bisect_right(self._keys, from_state, lo=lo, key=_source)
        except TypeError:
            return ()
        return tuple(self._edges[lo:hi])

    def freeze(self) -> TransitionTable:
        """Return a read-only copy (or `self` when already frozen)."""
        if self._frozen:
            return self
        frozen = TransitionTable()
        frozen._edges = list(self._edges)
        frozen._keys = list(self._keys)
        frozen._frozen = True
        return frozen

    def _index_of(self, key: TransitionKey) -> int | None:
        try:
            idx = bisect_left(self._keys, key)
        except TypeError:
            return None
        if idx < len(self._keys) and self._keys[idx] == key:
            return idx
        return None

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise ValidationError("Transition table is frozen; declare transitions on the blueprint.")
