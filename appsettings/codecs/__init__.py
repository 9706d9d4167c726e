"""Serialization formats available to document stores."""

from __future__ import annotations

from appsettings.core.errors import UnknownFormatError

from .base import Codec, default_record, record_adapter, structure, unstructure
from .json_codec import JsonCodec
from .yaml_codec import YamlCodec

_REGISTRY: dict[str, Codec] = {}


def register_codec(codec: Codec) -> Codec:
    """Register ``codec`` under its (case-insensitive) name, replacing any previous one."""

    _REGISTRY[codec.name.lower()] = codec
    return codec


def get_codec(name: str) -> Codec:
    """Return the codec registered for ``name``."""

    try:
        return _REGISTRY[name.lower()]
    except KeyError as exc:
        raise UnknownFormatError(
            f"Unknown serialization format {name!r}; available: {', '.join(available_formats())}"
        ) from exc


def available_formats() -> tuple[str, ...]:
    return tuple(_REGISTRY)


register_codec(YamlCodec())
register_codec(JsonCodec())

__all__ = [
    "Codec",
    "JsonCodec",
    "YamlCodec",
    "available_formats",
    "default_record",
    "get_codec",
    "record_adapter",
    "register_codec",
    "structure",
    "unstructure",
]
