"""Query git for the head commit of a working tree."""

import subprocess
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

from .errors import (
    InvalidCommitTimestamp,
    NoCommitsYet,
    NotARepository,
    VcsCommandFailed,
    VcsToolMissing,
)

log = structlog.get_logger()

# stderr fragments git prints when HEAD does not resolve to a commit
_NO_COMMIT_MARKERS = (
    "does not have any commits yet",
    "unknown revision",
    "ambiguous argument 'head'",
    "bad default revision",
)


@runtime_checkable
class VcsQuery(Protocol):
    """The two version-control questions mkver needs answered."""

    def head_commit_sha(self, path: Path) -> str:
        """Return the full SHA of the head commit at ``path``."""
        ...

    def head_commit_timestamp(self, path: Path) -> int:
        """Return the head commit's committer date as unix seconds."""
        ...


class GitClient:
    """VcsQuery backed by the git command line."""

    def __init__(self, binary: str = "git", timeout: float = 10.0) -> None:
        """Initialize the client.

        Args:
            binary: Name or path of the git executable.
            timeout: Seconds to wait for each git command.
        """
        self._binary = binary
        self._timeout = timeout

    def head_commit_sha(self, path: Path) -> str:
        return self._run(path, "rev-parse", "--verify", "-q", "HEAD").strip()

    def head_commit_timestamp(self, path: Path) -> int:
        raw = self._run(path, "log", "-1", "--pretty=format:%ct").strip()
        try:
            return int(raw)
        except ValueError as e:
            raise InvalidCommitTimestamp(raw) from e

    def _run(self, path: Path, *args: str) -> str:
        """Run a git command in ``path`` and return its stdout.

        Raises:
            VcsToolMissing: If the git binary cannot be executed.
            NotARepository: If ``path`` is outside any git work tree.
            NoCommitsYet: If HEAD does not point at a commit.
            VcsCommandFailed: For timeouts and any other failure.
        """
        cmd = [self._binary, *args]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                cwd=path,
            )
        except FileNotFoundError as e:
            if not Path(path).is_dir():
                raise NotARepository(Path(path)) from e
            raise VcsToolMissing(self._binary) from e
        except PermissionError as e:
            raise VcsToolMissing(self._binary) from e
        except subprocess.TimeoutExpired as e:
            raise VcsCommandFailed(f"{' '.join(args)} timed out after {self._timeout:g}s") from e

        if result.returncode == 0:
            return result.stdout

        stderr = result.stderr.strip()
        log.debug("git_command_failed", args=list(args), code=result.returncode, stderr=stderr)
        lowered = stderr.lower()
        if "not a git repository" in lowered:
            raise NotARepository(Path(path))
        if any(marker in lowered for marker in _NO_COMMIT_MARKERS):
            raise NoCommitsYet(Path(path))
        # rev-parse --verify -q exits 1 silently when HEAD is unborn
        if not stderr and args[:2] == ("rev-parse", "--verify"):
            raise NoCommitsYet(Path(path))

        first_line = stderr.splitlines()[0] if stderr else f"exit status {result.returncode}"
        raise VcsCommandFailed(f"{' '.join(args)}: {first_line}")
