from __future__ import annotations

import logging
import subprocess
from typing import List, Protocol

from src.models.configs import GitRepository


logger = logging.getLogger(__name__)


class GitCloneError(RuntimeError):
    """Raised when a standards repository could not be cloned."""


class GitCloner(Protocol):
    def clone(self, repository: GitRepository) -> None:
        """Populate ``repository.clone_path`` with the repository contents."""


class SubprocessGitCloner:
    """Clones repositories by shelling out to the ``git`` executable."""

    def __init__(self, git_executable: str = "git") -> None:
        self.git_executable = git_executable

    def build_command(self, repository: GitRepository) -> List[str]:
        command = [self.git_executable, "clone", repository.repository, str(repository.clone_path)]
        # git clone --branch accepts tag names as well as branches
        if repository.ref:
            command.extend(["--branch", repository.ref])
        return command

    def clone(self, repository: GitRepository) -> None:
        logger.info(
            "cloning git repository %s into %s (branch=%s tag=%s)",
            repository.repository,
            repository.clone_path,
            repository.branch,
            repository.tag,
        )
        command = self.build_command(repository)
        try:
            subprocess.run(command, check=True)
        except FileNotFoundError as exc:
            raise GitCloneError(f"git executable not found: {self.git_executable}") from exc
        except subprocess.CalledProcessError as exc:
            raise GitCloneError(
                f"git clone of {repository.repository} failed with exit code {exc.returncode}"
            ) from exc


__all__ = ["GitCloneError", "GitCloner", "SubprocessGitCloner"]
