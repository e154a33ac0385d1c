from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict

import yaml

from src.models.configs import GitRepository


def _load_structured_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    ext = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if ext in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
    elif ext == ".toml":
        data = tomllib.loads(text)
    elif ext == ".json":
        data = json.loads(text)
    else:
        raise ValueError(f"Unsupported config format '{ext}' for {path}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")
    return data


def load_repository_config(path: Path | str) -> GitRepository:
    path = Path(path)
    raw = _load_structured_file(path)
    config = GitRepository.model_validate(raw)
    if "clone_path" in raw:
        config = config.resolve_paths(path.parent)
    return config


__all__ = ["load_repository_config"]
