"""YAML codec backed by PyYAML's safe loader and dumper."""

from __future__ import annotations

from typing import Any

import yaml

from appsettings.core.errors import DecodeError

from .base import Codec


class YamlCodec(Codec):
    name = "yaml"
    extensions = (".yaml", ".yml")

    def dumps(self, payload: Any) -> str:
        return yaml.safe_dump(
            payload,
            allow_unicode=True,
            sort_keys=False,
            default_flow_style=False,
        )

    def loads(self, text: str) -> Any:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DecodeError(f"Invalid YAML document: {exc}") from exc
