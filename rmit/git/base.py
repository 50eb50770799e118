"""Git process helpers and the git error hierarchy."""

import subprocess


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class GitEnvironmentError(GitError):
    """Git is missing or the working directory is not a repository."""
    pass


class NoChangesError(GitError):
    """Neither staged nor unstaged changes exist."""
    pass


class CommitError(GitError):
    """Staging or committing failed."""
    pass


def run_git(*args: str, error_cls: type[GitError] = GitError) -> str:
    """Run a git command and return stdout."""
    try:
        result = subprocess.run(
            ['git', *args],
            capture_output=True,
            text=True,
            check=True,
            encoding='utf-8',
            errors='replace'
        )
        return result.stdout
    except subprocess.CalledProcessError as e:
        raise error_cls(f"Git command failed: git {' '.join(args)}\n{e.stderr.strip()}")
    except FileNotFoundError:
        raise GitEnvironmentError("Git is not installed or not in PATH")
