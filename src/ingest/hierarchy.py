from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from src.models.standards import StandardsFile, StandardsNode, StandardsTree, sort_nodes


logger = logging.getLogger(__name__)


def build_hierarchy(files: Iterable[StandardsFile]) -> StandardsTree:
    """Build a nested, title-ordered forest from a flat list of standards files.

    Files without a parent become roots. Files whose parent matches the path
    of another file are nested under it. Files whose parent matches nothing
    are dropped from the tree, together with anything nested below them.
    """

    nodes: Dict[str, StandardsNode] = {}
    for file in files:
        if file.path in nodes:
            logger.warning("duplicate standards path %s, keeping the last one", file.path)
        nodes[file.path] = StandardsNode.from_file(file)

    roots: List[StandardsNode] = []
    for node in nodes.values():
        if node.parent_path is None:
            roots.append(node)
            continue

        parent = nodes.get(node.parent_path)
        if parent is None:
            logger.warning(
                "found node with parent that does not exist, skipping: path=%s parent=%s",
                node.path,
                node.parent_path,
            )
            continue
        parent.add_child(node)

    return StandardsTree(nodes=sort_nodes(roots))


__all__ = ["build_hierarchy"]
