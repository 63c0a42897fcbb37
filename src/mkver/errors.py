"""Exception types raised while generating a version file."""

from pathlib import Path


class MkverError(Exception):
    """Base class for all mkver failures."""


class ManifestError(MkverError):
    """Raised when no usable version declaration can be located."""


class ManifestNotFound(ManifestError):
    """Raised when no manifest exists in the start directory or any parent."""

    def __init__(self, start_dir: Path, manifest_name: str = "package.json"):
        self.start_dir = start_dir
        self.manifest_name = manifest_name
        super().__init__(f"No {manifest_name} found in {start_dir} or parent directories")


class ManifestMissingVersion(ManifestError):
    """Raised when a manifest exists but declares no usable version."""

    def __init__(self, manifest_path: Path):
        self.manifest_path = manifest_path
        super().__init__(f"No version field found in {manifest_path}")


class VcsError(MkverError):
    """Base class for failures while querying version control."""


class VcsToolMissing(VcsError):
    def __init__(self, binary: str = "git"):
        self.binary = binary
        super().__init__(f"{binary!r} was not found; install git or set MKVER_GIT_BINARY")


class NotARepository(VcsError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path} is not inside a git repository")


class NoCommitsYet(VcsError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"The git repository at {path} has no commits yet")


class VcsCommandFailed(VcsError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"git command failed: {detail}")


class InvalidCommitSha(MkverError):
    def __init__(self, sha: str):
        self.sha = sha
        super().__init__(f"Invalid git SHA: {sha!r}")


class InvalidCommitTimestamp(MkverError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid commit timestamp: {value!r}")


class UnsupportedOutputFormat(MkverError):
    """Raised when the output path's extension selects no known format."""

    def __init__(self, path: Path, accepted: tuple[str, ...]):
        self.path = path
        self.accepted = accepted
        super().__init__(
            f"Unsupported file extension: expected {str(path)!r} to end in "
            f"{', '.join(accepted[:-1])}, or {accepted[-1]}"
        )


class GenerationFailed(MkverError):
    """Wraps any failure with the output path that was being generated."""

    def __init__(self, output_path: Path, cause: BaseException):
        self.output_path = output_path
        self.cause = cause
        super().__init__(f"Could not generate {output_path}: {cause}")
