from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator


DEFAULT_CLONE_PATH = Path(".stdidx")
DEFAULT_OUTPUT_PATH = Path("standards-tree.yaml")


class GitRepository(BaseModel):
    """Location of a remote standards library and where to clone it."""

    repository: str = Field(min_length=1)
    branch: str | None = None
    tag: str | None = None
    clone_path: Path = Field(default=DEFAULT_CLONE_PATH)

    @field_validator("branch", "tag", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _single_ref(self) -> "GitRepository":
        if self.branch and self.tag:
            raise ValueError("only one of branch or tag can be specified, not both")
        return self

    @property
    def ref(self) -> str | None:
        return self.branch or self.tag

    def resolve_paths(self, base_path: Path) -> "GitRepository":
        if self.clone_path.is_absolute():
            return self
        return self.model_copy(update={"clone_path": (base_path / self.clone_path).resolve()})


class IndexSettings(BaseModel):
    """Runtime defaults for the command line, read from the environment."""

    clone_path: Path = Field(
        default_factory=lambda: Path(os.getenv("STD_INDEX_CLONE_PATH", str(DEFAULT_CLONE_PATH)))
    )
    output_path: Path = Field(
        default_factory=lambda: Path(os.getenv("STD_INDEX_OUTPUT", str(DEFAULT_OUTPUT_PATH)))
    )
    log_level: str = Field(default_factory=lambda: os.getenv("STD_INDEX_LOG_LEVEL", "INFO"))

    model_config = {
        "frozen": True,
        "validate_default": True,
    }

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level '{value}'")
        return level


__all__ = [
    "DEFAULT_CLONE_PATH",
    "DEFAULT_OUTPUT_PATH",
    "GitRepository",
    "IndexSettings",
]
