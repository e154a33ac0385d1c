"""Ingestion utilities for indexing a standards library into a tree."""

from .header import DocumentReadError, extract_header, parse_header
from .collector import collect_documents, normalize_parent
from .hierarchy import build_hierarchy
from .serialization import dump_tree, load_tree, write_tree
from .pipeline import IndexingPipeline, IndexingResult

__all__ = [
    "DocumentReadError",
    "IndexingPipeline",
    "IndexingResult",
    "build_hierarchy",
    "collect_documents",
    "dump_tree",
    "extract_header",
    "load_tree",
    "normalize_parent",
    "parse_header",
    "write_tree",
]
