from __future__ import annotations

import io

import pytest

from blueprint_fsm import (
    Blueprint,
    BlueprintDefinitionError,
    DuplicateTransitionError,
    IncompleteTransitionError,
    TransitionEdge,
)

A, B, C, D = "A", "B", "C", "D"


@pytest.mark.unit
def test_describe_empty_blueprint_prints_sentinel() -> None:
    assert Blueprint().describe() == "<-"


@pytest.mark.unit
def test_describe_lists_edges_in_table_order() -> None:
    bp = Blueprint()
    bp.start(A)
    bp.from_(A).to(B)
    assert bp.describe() == "(A -> B)"

    bp.from_(B).to(C)
    bp.from_(B).to(D)
    bp.from_(D).to(B)
    assert bp.describe() == "(A -> B) -> (B -> C) -> (B -> D) -> (D -> B)"


@pytest.mark.unit
def test_describe_is_idempotent() -> None:
    bp = Blueprint()
    bp.from_(C).to(D)
    bp.from_(A).to(B)

    first = bp.describe()
    assert bp.describe() == first
    assert first == "(A -> B) -> (C -> D)"


@pytest.mark.unit
def test_print_transitions_writes_describe_output(capsys: pytest.CaptureFixture[str]) -> None:
    bp = Blueprint()
    bp.print_transitions()
    bp.from_(A).to(B)
    bp.print_transitions()

    assert capsys.readouterr().out == "<-\n(A -> B)\n"

    buffer = io.StringIO()
    bp.print_transitions(buffer)
    assert buffer.getvalue() == "(A -> B)\n"


@pytest.mark.unit
def test_duplicate_declaration_is_rejected() -> None:
    bp = Blueprint()
    bp.from_(A).to(B)

    with pytest.raises(DuplicateTransitionError):
        bp.from_(A).to(B)
    assert len(bp.transitions) == 1


@pytest.mark.unit
def test_machine_without_start_state_begins_at_none() -> None:
    bp = Blueprint()
    bp.from_(A).to(B)

    machine = bp.machine()

    assert machine.state is None
    assert not machine.has_next()
    assert machine.cannot_goto(B)
    with pytest.raises(BlueprintDefinitionError, match="start state"):
        bp.validate()


@pytest.mark.unit
def test_machine_rejects_incomplete_transition() -> None:
    bp = Blueprint().start(A)
    bp.from_(A).to(B)
    bp.from_(B).then(lambda _m: None)

    with pytest.raises(IncompleteTransitionError, match="from B"):
        bp.machine()


@pytest.mark.unit
def test_start_state_is_accepted_as_given() -> None:
    bp = Blueprint().start("nowhere")
    bp.from_(A).to(B)

    machine = bp.machine()

    assert machine.state == "nowhere"
    assert not machine.has_next()


@pytest.mark.unit
def test_machine_snapshot_ignores_later_declarations() -> None:
    bp = Blueprint().start(A)
    bp.from_(A).to(B)
    early = bp.machine()

    bp.from_(A).to(C)
    late = bp.machine()

    assert early.cannot_goto(C)
    assert late.can_goto(C)


@pytest.mark.unit
def test_machines_share_one_frozen_table_until_mutation() -> None:
    bp = Blueprint().start(A)
    bp.from_(A).to(B)

    first = bp.machine()
    second = bp.machine()

    assert first.table is second.table
    assert first.table.is_frozen
    bp.from_(B).to(C)
    assert bp.machine().table is not first.table


@pytest.mark.unit
def test_add_and_add_transitions_accept_complete_edges() -> None:
    bp = Blueprint().start(A)
    bp.add(TransitionEdge(A, B)).add_transitions([(B, C), (C, D)])

    assert bp.describe() == "(A -> B) -> (B -> C) -> (C -> D)"
    assert bp.states == (A, B, C, D)


@pytest.mark.unit
def test_to_first_declaration() -> None:
    bp = Blueprint().start(A)
    bp.to(B).from_(A)

    assert bp.machine().can_goto(B)


@pytest.mark.unit
def test_states_include_start_state() -> None:
    bp = Blueprint().start("idle")
    bp.from_("busy").to("done")

    assert bp.states == ("idle", "busy", "done")
    assert bp.start_state == "idle"
    assert Blueprint().start_state is None
    assert not Blueprint().has_start_state


@pytest.mark.unit
def test_validate_passes_for_connected_blueprint() -> None:
    bp = Blueprint().start(A)
    bp.from_(A).to(B)
    bp.from_(B).to(C)

    bp.validate()


@pytest.mark.unit
def test_validate_collects_all_problems() -> None:
    bp = Blueprint()
    bp.from_(A)

    with pytest.raises(BlueprintDefinitionError) as excinfo:
        bp.validate()

    errors = excinfo.value.errors
    assert any("start state" in e for e in errors)
    assert any("never completed" in e for e in errors)
    assert any("at least one transition" in e for e in errors)


@pytest.mark.unit
def test_validate_reports_unknown_start_and_unreachable_states() -> None:
    bp = Blueprint().start("X")
    bp.from_(A).to(B)
    with pytest.raises(BlueprintDefinitionError, match="not part of any transition"):
        bp.validate()

    bp.start(A)
    bp.from_(C).to(D)
    with pytest.raises(BlueprintDefinitionError, match=r"Unreachable states: \['C', 'D'\]"):
        bp.validate()


@pytest.mark.unit
def test_repr() -> None:
    bp = Blueprint()
    assert repr(bp) == "Blueprint(start=unset, transitions=0)"
    bp.start(A).from_(A).to(B)
    assert repr(bp) == "Blueprint(start='A', transitions=1)"
