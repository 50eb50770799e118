"""Diff Collector - Capture the changes a commit message should describe."""

from dataclasses import dataclass
from enum import Enum

from rmit.git import base
from rmit.git.base import GitError, GitEnvironmentError, NoChangesError
from rmit.output import print_warning


class DiffScope(Enum):
    STAGED = "staged"
    UNSTAGED = "unstaged"


@dataclass(frozen=True)
class DiffSnapshot:
    """The diff a session describes. Fixed once captured."""
    raw_text: str
    changed_files: tuple[str, ...] = ()
    scope: DiffScope = DiffScope.STAGED

    def __post_init__(self):
        if not self.raw_text:
            raise ValueError("DiffSnapshot requires non-empty diff text")


class DiffCollector:
    """Reads staged changes, falling back to the working tree.

    Staged changes always take priority; the two are never merged.
    """

    def __init__(self):
        self._verify_git_available()
        self._verify_in_repo()

    def _verify_git_available(self) -> None:
        """Fail fast if git isn't available."""
        try:
            base.run_git('--version')
        except GitError:
            raise GitEnvironmentError("Git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not inside a working tree."""
        try:
            base.run_git('rev-parse', '--is-inside-work-tree')
        except GitError:
            raise GitEnvironmentError("Current directory is not a git repository")

    def collect(self) -> DiffSnapshot:
        staged = base.run_git('diff', '--staged')
        if staged:
            raw_text, scope = staged, DiffScope.STAGED
        else:
            unstaged = base.run_git('diff')
            if not unstaged:
                raise NoChangesError("No changes detected in the repository")
            raw_text, scope = unstaged, DiffScope.UNSTAGED

        # Only enriches the prompt, so a failure here is not fatal
        try:
            files = self.changed_files()
        except GitError as e:
            print_warning(f"Couldn't get changed files: {e}")
            files = []

        return DiffSnapshot(raw_text=raw_text, changed_files=tuple(files), scope=scope)

    def changed_files(self) -> list[str]:
        """Names of changed files, under the same staged-first precedence.

        Queried separately from the diff text, so the two can disagree for
        renames or mode-only changes.
        """
        output = base.run_git('diff', '--staged', '--name-only')
        if not output.strip():
            output = base.run_git('diff', '--name-only')
            if not output.strip():
                raise NoChangesError("No changed files detected in the repository")
        return [line for line in output.strip().split('\n') if line.strip()]
