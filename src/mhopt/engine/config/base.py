"""Base utilities for algorithm configuration."""

from __future__ import annotations

import json
from dataclasses import asdict, fields
from typing import Any, Dict, Mapping


class _SerializableConfig:
    """Mixin to serialize dataclass configs."""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)  # type: ignore[call-overload]

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


def _known_fields(cls: type, data: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep only keys that name a field of dataclass ``cls`` (dashes accepted for underscores)."""
    names = {f.name for f in fields(cls)}
    out: Dict[str, Any] = {}
    for key, value in data.items():
        norm = str(key).replace("-", "_")
        if norm in names:
            out[norm] = value
    return out
