from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import frontmatter
import yaml
from frontmatter.default_handlers import YAMLHandler
from pydantic import ValidationError

from src.models.standards import StandardsHeader


logger = logging.getLogger(__name__)

_YAML_HANDLER = YAMLHandler()


class DocumentReadError(RuntimeError):
    """Raised when a document or directory in the standards tree cannot be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to read {self.path}: {reason}")


def read_document(path: str | Path) -> str:
    """Return the decoded text of *path*, raising DocumentReadError on failure."""

    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise DocumentReadError(path, exc.strerror or str(exc)) from exc
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise DocumentReadError(path, f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc


def load_front_matter(text: str) -> Dict[str, Any] | None:
    """Return the YAML front matter mapping of *text*, or None if there is none usable."""

    if not _YAML_HANDLER.detect(text.lstrip()):
        return None
    try:
        metadata, _ = frontmatter.parse(text, handler=_YAML_HANDLER)
    except yaml.YAMLError as exc:
        logger.debug("front matter is not valid YAML: %s", exc)
        return None
    return metadata or None


def parse_header(text: str) -> StandardsHeader | None:
    """Parse and validate the header of a document's text.

    Returns None both when the document has no front matter and when the
    front matter lacks one of the required fields; neither is an error.
    """

    metadata = load_front_matter(text)
    if metadata is None:
        return None
    try:
        return StandardsHeader.model_validate(metadata)
    except ValidationError as exc:
        logger.debug("front matter failed validation: %s", exc)
        return None


def extract_header(path: str | Path) -> StandardsHeader | None:
    """Read *path* and return its validated header, or None if it has none."""

    logger.debug("extracting md header from %s", path)
    header = parse_header(read_document(path))
    if header is None:
        logger.debug("no valid header in %s", path)
    return header


__all__ = [
    "DocumentReadError",
    "extract_header",
    "load_front_matter",
    "parse_header",
    "read_document",
]
