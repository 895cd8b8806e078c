"""YAML config file helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Union

import yaml


def read_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a YAML file and return parsed contents."""
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
