from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import TextIO

import yaml

from src.models.standards import StandardsTree


def dump_tree(tree: StandardsTree) -> str:
    """Render *tree* as YAML text; identical trees render identically."""

    return yaml.safe_dump(
        tree.to_dict(),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def write_tree(tree: StandardsTree, target: str | Path | TextIO) -> None:
    """Write *tree* to a path or an open text stream.

    The YAML is rendered before anything is written. Paths are replaced
    atomically through a temporary sibling file so a failure never leaves a
    partial artifact behind.
    """

    text = dump_tree(tree)
    if hasattr(target, "write"):
        target.write(text)
        return

    destination = Path(target)
    destination.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{destination.name}.", dir=destination.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, destination)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def load_tree(path: str | Path) -> StandardsTree:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if data is None:
        return StandardsTree()
    if not isinstance(data, dict):
        raise ValueError(f"Standards tree {path} must contain a mapping at the top level")
    try:
        return StandardsTree.from_dict(data)
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Standards tree {path} has a malformed node ({exc!r})") from exc


__all__ = ["dump_tree", "load_tree", "write_tree"]
