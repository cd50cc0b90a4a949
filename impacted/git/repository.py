"""Git repository abstraction.

Only the operation the detector needs: listing files changed between two refs.

Usage:
    repo = Repository(Path("."))
    match repo.changed_files("origin/main", "HEAD"):
        case Ok(files):
            print(f"{len(files)} changed")
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from impacted.core.result import Err, Ok, Result

_GIT_TIMEOUT_SECONDS = 30.0

__all__ = ["GitError", "Repository"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code (-1 when git could not run)
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """Git repository rooted at ``path``.

    Attributes:
        path: Path to the repository root
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def changed_files(self, base_ref: str, head_ref: str) -> Result[list[str], GitError]:
        """List files changed on ``head_ref`` since it diverged from ``base_ref``.

        Runs ``git diff --name-only base...head`` (three dots: merge-base diff).
        Paths are relative to the repository root, in git's order.

        Returns:
            Ok(paths) on success (possibly empty)
            Err(GitError) on failure (unknown ref, not a repository, ...)
        """
        result = self._run(["diff", "--name-only", f"{base_ref}...{head_ref}"])
        match result:
            case Err(e):
                return Err(e)
            case Ok(stdout):
                return Ok(parse_name_only(stdout))

    def _run(self, args: list[str]) -> Result[str, GitError]:
        """Run a git command in this repository and capture its stdout."""
        command = " ".join(args)
        try:
            proc = subprocess.run(
                ["git", "-C", str(self.path), *args],
                cwd=str(self.path),
                capture_output=True,
                text=True,
                timeout=_GIT_TIMEOUT_SECONDS,
                check=False,
            )
        except subprocess.TimeoutExpired:
            return Err(
                GitError(
                    command=command,
                    message=f"git {args[0]} timed out after {_GIT_TIMEOUT_SECONDS:g}s",
                    returncode=-1,
                )
            )
        except OSError as e:
            return Err(GitError(command=command, message=f"cannot run git: {e}", returncode=-1))

        if proc.returncode != 0:
            return Err(
                GitError(
                    command=command,
                    message=proc.stderr.strip() or f"git {args[0]} failed",
                    returncode=proc.returncode,
                )
            )
        return Ok(proc.stdout)


def parse_name_only(output: str) -> list[str]:
    """Parse ``git diff --name-only`` output into a list of paths."""
    return [line for line in output.strip().splitlines() if line]
