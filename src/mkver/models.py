"""Data types shared by the resolver, composer and renderer."""

import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .errors import InvalidCommitSha

GIT_SHA_RE = re.compile(r"^[0-9a-f]{40}$")


@dataclass(frozen=True)
class ManifestVersion:
    """A version string and the directory whose manifest declared it."""

    version: str
    declaring_dir: Path


@dataclass(frozen=True)
class VersionInfo:
    """Version and release metadata for one generated file.

    The semver component fields are ``None`` when ``version`` does not
    parse as a semantic version. ``version_prerelease`` is an empty tuple
    for a valid version without prerelease identifiers.
    """

    output_path: Path
    version: str
    release: str
    git_sha: str
    git_date: datetime
    version_major: int | None = None
    version_minor: int | None = None
    version_patch: int | None = None
    version_prerelease: tuple[str | int, ...] | None = None

    def __post_init__(self) -> None:
        if not GIT_SHA_RE.match(self.git_sha):
            raise InvalidCommitSha(self.git_sha)
