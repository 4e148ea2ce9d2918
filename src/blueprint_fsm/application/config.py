from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

LoggerName = Literal["none", "console", "jsonl"]
_LOGGERS: tuple[str, ...] = ("none", "console", "jsonl")


@dataclass(frozen=True, slots=True)
class LoggerConfig:
    """
    Which `LoggerPort` adapter machines should report to.

    - logger='none': no logging
    - logger='console': `[FSM] ...` lines on stdout (`enabled` kwarg)
    - logger='jsonl': JSON lines file (requires `log_dir`, optional `file_name`)
    """

    logger: LoggerName = "none"
    logger_kwargs: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.logger not in _LOGGERS:
            raise ValueError(
                f"LoggerConfig.logger must be one of {list(_LOGGERS)}, got {self.logger!r}"
            )
        if not isinstance(self.logger_kwargs, dict):
            raise ValueError("LoggerConfig.logger_kwargs must be a dict")


@dataclass(frozen=True, slots=True)
class TransitionConfig:
    """
    One declared edge; `handler` names a callable in a `HandlerRegistry`.

    States are taken as given, `None` included, exactly as `Blueprint.from_`
    and `Blueprint.to` accept them.
    """

    from_state: Any
    to_state: Any
    handler: str | None = None

    def __post_init__(self) -> None:
        if self.handler is not None and (
            not isinstance(self.handler, str) or not self.handler.strip()
        ):
            raise ValueError("TransitionConfig.handler must be a non-empty string when set")


@dataclass(frozen=True, slots=True)
class BlueprintConfig:
    start: Any
    transitions: tuple[TransitionConfig, ...] = ()
    logger: LoggerConfig = field(default_factory=LoggerConfig)

    def __post_init__(self) -> None:
        if not isinstance(self.transitions, list | tuple):
            raise ValueError("BlueprintConfig.transitions must be a list or tuple")
        if not all(isinstance(item, TransitionConfig) for item in self.transitions):
            raise ValueError("BlueprintConfig.transitions must contain only TransitionConfig")
        if not isinstance(self.logger, LoggerConfig):
            raise ValueError("BlueprintConfig.logger must be a LoggerConfig")
        object.__setattr__(self, "transitions", tuple(self.transitions))
