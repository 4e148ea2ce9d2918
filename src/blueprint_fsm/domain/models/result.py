"""
Minimal `Result[T, E]` for boundaries that prefer values over exceptions.

`Machine.try_goto` returns one of these so callers can branch with `match`
instead of `try`/`except`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Never


@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: object, /) -> T:
        return self.value

    def map[U](self, fn: Callable[[T], U], /) -> Ok[U]:
        return Ok(fn(self.value))


@dataclass(frozen=True, slots=True)
class Err[E: BaseException]:
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Never:
        raise self.error

    def unwrap_or[D](self, default: D, /) -> D:
        return default

    def map(self, fn: Callable[[object], object], /) -> Err[E]:
        return self


type Result[T, E: BaseException] = Ok[T] | Err[E]


def try_call[T](
    fn: Callable[[], T],
    error_type: type[Exception] | tuple[type[Exception], ...] = Exception,
    /,
) -> Result[T, Exception]:
    """Run `fn`, returning `Ok(value)` or `Err(exc)` for exceptions matching `error_type`."""
    try:
        return Ok(fn())
    except error_type as exc:
        return Err(exc)
