from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from src.ingest.collector import collect_documents
from src.ingest.hierarchy import build_hierarchy
from src.ingest.serialization import write_tree
from src.models.standards import StandardsTree


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class IndexingResult:
    """Summarizes the artifact produced by an indexing run."""

    documents_indexed: int
    nodes_written: int
    output_path: Path | None
    tree: StandardsTree


class IndexingPipeline:
    """Coordinates collection, hierarchy building, and writing of the standards tree."""

    def __init__(self, output: str | Path | TextIO) -> None:
        self.output = output

    def run(self, root: str | Path) -> IndexingResult:
        logger.debug("parsing standards files in %s", root)
        files = collect_documents(root)

        logger.debug("creating standards tree from %d documents", len(files))
        tree = build_hierarchy(files)

        write_tree(tree, self.output)
        output_path = None if hasattr(self.output, "write") else Path(self.output)

        return IndexingResult(
            documents_indexed=len(files),
            nodes_written=tree.node_count(),
            output_path=output_path,
            tree=tree,
        )


__all__ = ["IndexingPipeline", "IndexingResult"]
