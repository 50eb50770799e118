"""Git Operations Package"""

from rmit.git.base import GitError, GitEnvironmentError, NoChangesError, CommitError
from rmit.git.collector import DiffCollector, DiffSnapshot, DiffScope
from rmit.git.committer import CommitExecutor

__all__ = [
    "GitError",
    "GitEnvironmentError",
    "NoChangesError",
    "CommitError",
    "DiffCollector",
    "DiffSnapshot",
    "DiffScope",
    "CommitExecutor",
]
