"""JSON codec."""

from __future__ import annotations

import json
from typing import Any

from appsettings.core.errors import DecodeError

from .base import Codec


class JsonCodec(Codec):
    name = "json"
    extensions = (".json",)

    def dumps(self, payload: Any) -> str:
        return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"

    def loads(self, text: str) -> Any:
        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"Invalid JSON document: {exc}") from exc
