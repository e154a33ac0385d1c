"""Source acquisition and indexing orchestration."""

from .git import GitCloneError, GitCloner, SubprocessGitCloner
from .workflow import StandardsWorkflow
from .config_loader import load_repository_config

__all__ = [
    "GitCloneError",
    "GitCloner",
    "StandardsWorkflow",
    "SubprocessGitCloner",
    "load_repository_config",
]
