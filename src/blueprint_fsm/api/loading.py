"""
Load a `BlueprintConfig` from plain data (e.g. parsed JSON or YAML).

Validation uses pydantic's `TypeAdapter`, which is an optional dependency:
install `blueprint-fsm[pydantic]`.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Protocol, cast

from blueprint_fsm.application.config import BlueprintConfig
from blueprint_fsm.domain.errors import ValidationError


class _TypeAdapterProtocol(Protocol):
    def __init__(self, python_type: type[object]) -> None: ...

    def validate_python(self, value: object, /) -> object: ...


_PYDANTIC_CHECKED: bool = False
_TYPE_ADAPTER: type[_TypeAdapterProtocol] | None = None


def _get_pydantic_type_adapter() -> type[_TypeAdapterProtocol] | None:
    global _PYDANTIC_CHECKED, _TYPE_ADAPTER  # noqa: PLW0603

    if not _PYDANTIC_CHECKED:
        try:
            from pydantic import TypeAdapter  # noqa: PLC0415 - optional dep

            _TYPE_ADAPTER = cast("type[_TypeAdapterProtocol]", TypeAdapter)
        except ImportError:
            _TYPE_ADAPTER = None
        _PYDANTIC_CHECKED = True

    return _TYPE_ADAPTER


def has_pydantic() -> bool:
    return _get_pydantic_type_adapter() is not None


def blueprint_config_from_dict(data: Mapping[str, Any], /) -> BlueprintConfig:
    type_adapter_cls = _get_pydantic_type_adapter()
    if type_adapter_cls is None:
        raise ValidationError(
            "Pydantic is required to load blueprint configs. Install blueprint-fsm[pydantic]."
        )
    if not isinstance(data, Mapping):
        raise ValidationError(f"Blueprint config must be a mapping, got {type(data).__name__}.")

    try:
        validated = type_adapter_cls(BlueprintConfig).validate_python(dict(data))
    except Exception as exc:  # noqa: BLE001 - surface as domain ValidationError
        raise ValidationError(f"Blueprint config failed validation: {exc}") from exc
    return cast("BlueprintConfig", validated)


def blueprint_config_from_json(text: str, /) -> BlueprintConfig:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Blueprint config is not valid JSON: {exc}") from exc
    return blueprint_config_from_dict(data)
