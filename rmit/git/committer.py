"""Commit Executor - Stage everything and commit with the chosen message."""

from rmit.git import base
from rmit.git.base import CommitError


class CommitExecutor:
    """Runs ``git add -A`` followed by ``git commit -m``. No rollback on failure.

    ``-A`` stages the whole working tree, not just the current directory,
    matching the repository-wide diff the message was generated from.
    """

    def commit(self, message: str) -> str:
        """Create the commit and return git's summary output."""
        if not message.strip():
            raise CommitError("Refusing to commit with an empty message")
        base.run_git('add', '-A', error_cls=CommitError)
        return base.run_git('commit', '-m', message, error_cls=CommitError)
