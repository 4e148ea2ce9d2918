from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blueprint_fsm.domain.models import TransitionEvent


class JsonlLoggerAdapter:
    """
    Append transition events to `<log_dir>/<file_name>.jsonl`, one JSON object
    per line.

    The file is opened per write, so several machines (or processes) may share
    one log without holding a handle open.
    """

    def __init__(
        self,
        *,
        log_dir: str | Path,
        file_name: str = "fsm",
        schema_version: int = 1,
    ) -> None:
        if not isinstance(file_name, str) or not file_name.strip():
            raise ValueError("JsonlLoggerAdapter requires a non-empty 'file_name'")
        if isinstance(schema_version, bool) or not isinstance(schema_version, int):
            raise ValueError("JsonlLoggerAdapter requires an integer 'schema_version'")
        if schema_version < 1:
            raise ValueError("JsonlLoggerAdapter requires 'schema_version' >= 1")

        self._log_dir = Path(log_dir)
        self._file_name = file_name.strip()
        self._schema_version = schema_version

    @property
    def log_file_path(self) -> Path:
        return self._log_dir / f"{self._file_name}.jsonl"

    def log_transition(self, event: TransitionEvent, /) -> None:
        record = {
            "type": "transition",
            "schema_version": self._schema_version,
            **event.to_dict(),
        }
        self._log_dir.mkdir(parents=True, exist_ok=True)
        with self.log_file_path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record) + "\n")
