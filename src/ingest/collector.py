from __future__ import annotations

import logging
import os
import posixpath
from pathlib import Path
from typing import Iterator, List

from src.ingest.header import DocumentReadError, extract_header
from src.models.standards import StandardsFile


logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


def normalize_root(root: str | Path) -> str:
    return os.path.normpath(os.fspath(root))


def normalize_parent(root: str | Path, parent: str) -> str:
    """Anchor a declared parent reference at the walked root.

    Parents are authored relative to the root of the standards library, so
    ``"golang/GENERAL.md"`` under root ``".stdidx"`` becomes
    ``".stdidx/golang/GENERAL.md"``. A leading slash is treated as
    root-relative and ``.``/``..`` segments are cleaned, matching the paths
    produced by the traversal.
    """

    relative = parent.replace("\\", "/").lstrip("/")
    joined = posixpath.join(normalize_root(root).replace(os.sep, "/"), relative)
    return os.path.normpath(posixpath.normpath(joined))


def iter_markdown_paths(root: str | Path) -> Iterator[str]:
    """Yield every markdown file below *root* in a stable, sorted order."""

    def _raise(exc: OSError) -> None:
        raise DocumentReadError(exc.filename or root, exc.strerror or str(exc)) from exc

    for dirpath, dirnames, filenames in os.walk(normalize_root(root), onerror=_raise):
        dirnames.sort()
        for name in sorted(filenames):
            if name.endswith(MARKDOWN_SUFFIX):
                yield os.path.normpath(os.path.join(dirpath, name))


def collect_documents(root: str | Path) -> List[StandardsFile]:
    """Collect every markdown document under *root* that carries a valid header.

    Read failures abort the collection with DocumentReadError; documents
    without a usable header are skipped with a warning.
    """

    base = normalize_root(root)
    files: List[StandardsFile] = []

    for path in iter_markdown_paths(base):
        header = extract_header(path)
        if header is None:
            logger.warning("found markdown file without valid header, skipping: %s", path)
            continue
        files.append(StandardsFile(path=path, header=header))

    for file in files:
        if file.header.parent is not None:
            file.header = file.header.model_copy(
                update={"parent": normalize_parent(base, file.header.parent)}
            )

    logger.debug("collected %d standards documents from %s", len(files), base)
    return files


__all__ = ["MARKDOWN_SUFFIX", "collect_documents", "iter_markdown_paths", "normalize_parent"]
