from __future__ import annotations


class FsmError(Exception):
    """Base class for every error raised by blueprint_fsm."""


class ValidationError(FsmError):
    """Raised when a caller hands the library an invalid value or misuses a builder."""


class IllegalTransitionError(FsmError):
    """
    Raised by `Machine.goto` when no edge exists for (current state, target).

    The machine state is left untouched, so callers may retry with another target.
    """

    def __init__(self, from_state: object, to_state: object) -> None:
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(from_state, to_state)

    @property
    def message(self) -> str:
        return f"can't transition from state {self.from_state} to {self.to_state}"

    def __str__(self) -> str:
        return self.message


class DuplicateTransitionError(ValidationError):
    def __init__(self, from_state: object, to_state: object) -> None:
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(f"Transition {from_state} -> {to_state} is already declared.")


class IncompleteTransitionError(ValidationError):
    """A transition handle was left with only one endpoint set."""

    def __init__(self, from_state: object | None, to_state: object | None) -> None:
        self.from_state = from_state
        self.to_state = to_state
        known = f"from {from_state}" if to_state is None else f"to {to_state}"
        super().__init__(f"Transition declared {known} was never completed.")


class TransitionCommittedError(ValidationError):
    def __init__(self, from_state: object, to_state: object) -> None:
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Transition {from_state} -> {to_state} is already committed; "
            "declare a new transition instead of changing its endpoints."
        )


class BlueprintDefinitionError(FsmError):
    def __init__(self, errors: tuple[str, ...]) -> None:
        self.errors = errors
        super().__init__("\n".join(errors))
