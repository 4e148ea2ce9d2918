from __future__ import annotations

from blueprint_fsm import Blueprint, IllegalTransitionError
from blueprint_fsm.adapters.logger import ConsoleLoggerAdapter

coins: list[int] = []

bp = Blueprint(logger=ConsoleLoggerAdapter())
bp.start("locked")
bp.from_("locked").to("unlocked").then(lambda _machine: coins.append(1))
bp.from_("unlocked").to("locked")
bp.print_transitions()

gate = bp.machine()
gate.goto("unlocked")
gate.goto("locked")

try:
    gate.goto("locked")
except IllegalTransitionError as exc:
    print(f"rejected: {exc}")

print(f"state={gate.state} coins={len(coins)}")
