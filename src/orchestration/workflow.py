from __future__ import annotations

import logging
import shutil
from pathlib import Path

from src.ingest import IndexingPipeline, IndexingResult
from src.models.configs import DEFAULT_CLONE_PATH, DEFAULT_OUTPUT_PATH, GitRepository
from src.orchestration.git import GitCloner, SubprocessGitCloner


logger = logging.getLogger(__name__)


class StandardsWorkflow:
    """High-level orchestration for syncing and indexing a standards library."""

    def __init__(
        self,
        *,
        clone_path: Path | str = DEFAULT_CLONE_PATH,
        output_path: Path | str = DEFAULT_OUTPUT_PATH,
        cloner: GitCloner | None = None,
    ) -> None:
        self.clone_path = Path(clone_path)
        self.output_path = Path(output_path)
        self.cloner = cloner or SubprocessGitCloner()

    # ---- Source acquisition -------------------------------------------------

    def remove_clone(self) -> None:
        if self.clone_path.exists():
            logger.info("removing existing standards library at %s", self.clone_path)
            shutil.rmtree(self.clone_path)

    def sync(self, repository: GitRepository) -> IndexingResult:
        """Re-clone *repository* into the clone path and index it."""

        logger.info(
            "syncing standards library %s (branch=%s tag=%s)",
            repository.repository,
            repository.branch,
            repository.tag,
        )
        if repository.clone_path != self.clone_path:
            repository = repository.model_copy(update={"clone_path": self.clone_path})

        try:
            self.remove_clone()
        except OSError:
            logger.exception("failed to remove existing standards library")
            raise

        try:
            self.cloner.clone(repository)
        except Exception:
            logger.exception("failed to clone standards repository")
            raise

        result = self.index()
        logger.info("successfully synced standards library")
        return result

    # ---- Indexing -----------------------------------------------------------

    def index(self) -> IndexingResult:
        """Index the existing clone path into the output file."""

        logger.info("generating standards index from %s", self.clone_path)
        if not self.clone_path.exists():
            raise FileNotFoundError(
                f"Standards library not found at {self.clone_path}. Run sync first."
            )

        try:
            result = IndexingPipeline(self.output_path).run(self.clone_path)
        except Exception:
            logger.exception("failed to generate standards index")
            raise

        logger.info(
            "successfully generated standards index %s (%d documents, %d nodes)",
            self.output_path,
            result.documents_indexed,
            result.nodes_written,
        )
        return result


__all__ = ["StandardsWorkflow"]
