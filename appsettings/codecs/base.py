"""
RESPONSIBILITIES
- Define the codec contract used by document stores.
- Convert records (dataclasses or pydantic models) to plain data and back via pydantic.
PROCESS OVERVIEW
1. encode -> unstructure() dumps the record in JSON mode, optionally excluding defaults.
2. The concrete codec dumps the plain payload to text (YAML, JSON, ...).
3. decode -> the codec parses text into plain data, then structure() validates it.
4. Permissive structuring lets absent fields fall back to the record defaults.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Mapping, TypeVar

import pydantic_core
from pydantic import BaseModel, PydanticSchemaGenerationError, TypeAdapter, ValidationError

from appsettings.core.errors import DecodeError, RecordTypeError

T = TypeVar("T")


def _is_record_type(record_type: Any) -> bool:
    if not isinstance(record_type, type):
        return False
    return dataclasses.is_dataclass(record_type) or issubclass(record_type, BaseModel)


def _field_names(record_type: type) -> list[str]:
    if issubclass(record_type, BaseModel):
        return list(record_type.model_fields)
    return [field.name for field in dataclasses.fields(record_type) if field.init]


@lru_cache(maxsize=None)
def record_adapter(record_type: type) -> TypeAdapter:
    """Return the (cached) pydantic adapter for a record type."""

    if not _is_record_type(record_type):
        raise RecordTypeError(f"{record_type!r} is not a dataclass or pydantic model type")
    try:
        return TypeAdapter(record_type)
    except PydanticSchemaGenerationError as exc:
        raise RecordTypeError(f"{record_type.__name__} has unsupported field types: {exc}") from exc


def default_record(record_type: type[T]) -> T:
    """Return the default value of a record type (every field at its default)."""

    if not _is_record_type(record_type):
        raise RecordTypeError(f"{record_type!r} is not a dataclass or pydantic model type")
    try:
        return record_type()
    except (TypeError, ValidationError) as exc:
        raise RecordTypeError(
            f"{record_type.__name__} cannot be default-constructed; give every field a default"
        ) from exc


def unstructure(record: Any, *, omit_defaults: bool = False) -> Any:
    """Dump ``record`` to YAML/JSON friendly data.

    With ``omit_defaults`` every field equal to its declared default is left
    out, at each nesting level.
    """

    adapter = record_adapter(type(record))
    return adapter.dump_python(record, mode="json", exclude_defaults=omit_defaults)


def structure(data: Any, record_type: type[T], *, permissive: bool = True) -> T:
    """Build a record of ``record_type`` from plain decoded data.

    Values are validated in strict JSON mode: strings are not coerced to
    numbers or booleans, while ISO dates and enum values are accepted.

    Args:
        data: Parsed document content; must be a mapping at the top level.
        record_type: Dataclass or pydantic model type to build.
        permissive: When True, absent fields take their defaults. When False,
            every top-level field must be present.

    Raises:
        RecordTypeError: If ``record_type`` is not a record type.
        DecodeError: If the data does not fit the record type.
    """

    adapter = record_adapter(record_type)
    if not isinstance(data, Mapping):
        raise DecodeError(f"{record_type.__name__}: expected a mapping, got {type(data).__name__}")
    if not permissive:
        missing = [name for name in _field_names(record_type) if name not in data]
        if missing:
            raise DecodeError(f"{record_type.__name__}.{missing[0]}: missing field")
    try:
        return adapter.validate_json(pydantic_core.to_json(data), strict=True)
    except ValidationError as exc:
        raise DecodeError(_describe(record_type, exc)) from exc


def _describe(record_type: type, exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in (record_type.__name__, *error["loc"]))
        problems.append(f"{location}: {error['msg']}")
    return "; ".join(problems)


class Codec(ABC):
    """Text serialization format for records."""

    name: str
    extensions: tuple[str, ...]

    def encode(self, record: Any, *, omit_defaults: bool = False) -> str:
        """Encode ``record``; with ``omit_defaults`` fields equal to the default are dropped."""

        return self.dumps(unstructure(record, omit_defaults=omit_defaults))

    def decode(self, text: str, record_type: type[T], *, permissive: bool = True) -> T:
        """Decode ``text`` into a ``record_type`` instance."""

        data = self.loads(text)
        if data is None:
            data = {}
        return structure(data, record_type, permissive=permissive)

    @abstractmethod
    def dumps(self, payload: Any) -> str:
        """Serialize plain data to text."""

    @abstractmethod
    def loads(self, text: str) -> Any:
        """Parse text into plain data, raising DecodeError on malformed input."""
