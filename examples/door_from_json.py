from __future__ import annotations

from blueprint_fsm.api import blueprint_config_from_json, create_machine, has_pydantic

if not has_pydantic():
    raise SystemExit("Pydantic is required. Install with `blueprint-fsm[pydantic]`.")

CONFIG = """
{
  "start": "closed",
  "transitions": [
    {"from_state": "closed", "to_state": "open", "handler": "announce"},
    {"from_state": "open", "to_state": "closed", "handler": "announce"},
    {"from_state": "closed", "to_state": "locked"},
    {"from_state": "locked", "to_state": "closed"}
  ],
  "logger": {"logger": "console"}
}
"""

door = create_machine(
    blueprint_config_from_json(CONFIG),
    handlers={"announce": lambda machine: print(f"door is now {machine.state}")},
)

door.goto("open")
door.goto("closed")
door.goto("locked")

result = door.try_goto("open")
if result.is_err():
    print(result.error)

print(f"next from {door.state}: {door.next_states()}")
