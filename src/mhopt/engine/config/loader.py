"""
Config loading utilities shared by CLI and programmatic entrypoints.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml

from mhopt.foundation.exceptions import ConfigurationError


def _malformed(spec_path: Path, reason: str) -> ConfigurationError:
    return ConfigurationError(
        f"Config file '{spec_path}' is malformed: {reason}",
        suggestion="Use a YAML/JSON mapping such as 'algorithm: grasp' with one key per RunConfig field",
        details={"path": str(spec_path)},
    )


def load_run_spec(path: str | Path) -> Dict[str, Any]:
    """
    Load a YAML or JSON run specification.

    The top-level value must be a mapping; an empty YAML file yields ``{}``.
    """
    spec_path = Path(path).expanduser().resolve()
    if not spec_path.exists():
        raise FileNotFoundError(f"Config file '{spec_path}' does not exist.")
    suffix = spec_path.suffix.lower()
    try:
        with spec_path.open("r", encoding="utf-8") as fh:
            if suffix in {".yaml", ".yml"}:
                data = yaml.safe_load(fh) or {}
            else:
                data = json.load(fh)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise _malformed(spec_path, str(exc)) from exc
    if not isinstance(data, dict):
        raise _malformed(spec_path, f"expected a mapping at the top level; got {type(data).__name__}.")
    return data


__all__ = ["load_run_spec"]
