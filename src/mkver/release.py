"""Compose release metadata from a version string and the head commit."""

import re
from datetime import datetime
from pathlib import Path

import semver
import structlog

from .errors import InvalidCommitSha, InvalidCommitTimestamp
from .models import VersionInfo
from .vcs import VcsQuery

log = structlog.get_logger()

_SHA_RE = re.compile(r"^[0-9a-fA-F]{40}$")

# Commits older than this are treated as bogus (unborn HEAD, clock skew)
EARLIEST_COMMIT = datetime(2000, 1, 1)

# Largest integer a JavaScript number holds exactly
MAX_SAFE_INTEGER = 2**53 - 1


def fmt_ymdhms(d: datetime) -> str:
    """Format ``d`` as ``YYYYMMDDHHMMSS`` in local wall-clock time.

    Naive datetimes are taken to be local already. The result sorts
    lexically in chronological order, which makes it suitable for
    filenames and release tags.
    """
    if d.tzinfo is not None:
        d = d.astimezone()
    return f"{d.year}{d.month:02d}{d.day:02d}{d.hour:02d}{d.minute:02d}{d.second:02d}"


def parse_semver(version: str) -> tuple[int, int, int, tuple[str | int, ...]] | None:
    """Split a semantic version into major, minor, patch and prerelease.

    A single leading ``v`` is accepted, as npm does. Numeric prerelease
    identifiers come back as ints when they fit in a JavaScript
    number and stay strings otherwise. Versions whose major, minor or
    patch exceed that range are treated as unparseable.

    Returns:
        The parsed components, or None if ``version`` is not valid semver.
    """
    candidate = version.strip()
    if candidate.startswith("v"):
        candidate = candidate[1:]
    try:
        parsed = semver.Version.parse(candidate)
    except (ValueError, TypeError):
        return None
    if max(parsed.major, parsed.minor, parsed.patch) > MAX_SAFE_INTEGER:
        return None

    prerelease: tuple[str | int, ...] = ()
    if parsed.prerelease:
        prerelease = tuple(
            _prerelease_identifier(ident) for ident in parsed.prerelease.split(".")
        )
    return parsed.major, parsed.minor, parsed.patch, prerelease


def _prerelease_identifier(ident: str) -> str | int:
    if ident.isdigit() and int(ident) <= MAX_SAFE_INTEGER:
        return int(ident)
    return ident


def commit_date(timestamp: int, now: datetime | None = None) -> datetime:
    """Convert a commit's unix timestamp into an aware local datetime.

    Raises:
        InvalidCommitTimestamp: If the instant is before 2000-01-01 local
            time, after ``now``, or not representable.
    """
    now = datetime.now().astimezone() if now is None else now.astimezone()
    try:
        date = datetime.fromtimestamp(timestamp).astimezone()
    except (OverflowError, OSError, ValueError, TypeError) as e:
        raise InvalidCommitTimestamp(timestamp) from e
    if date < EARLIEST_COMMIT.astimezone() or date > now:
        raise InvalidCommitTimestamp(timestamp)
    return date


def compose(
    output_path: Path,
    version: str,
    declaring_dir: Path,
    vcs: VcsQuery,
    now: datetime | None = None,
) -> VersionInfo:
    """Build the VersionInfo for ``version`` at the head commit of ``declaring_dir``.

    Args:
        output_path: File the metadata will be rendered into.
        version: Version string exactly as declared by the manifest.
        declaring_dir: Directory whose repository supplies the commit.
        vcs: Source of the head commit SHA and timestamp.
        now: Upper bound for the commit date. Defaults to the current time.

    Returns:
        The composed, validated VersionInfo.

    Raises:
        InvalidCommitSha: If the SHA is not exactly 40 hex characters.
        InvalidCommitTimestamp: If the commit date is out of range.
        VcsError: If either VCS query fails.
    """
    sha = vcs.head_commit_sha(declaring_dir).strip()
    if not _SHA_RE.match(sha):
        raise InvalidCommitSha(sha)

    git_date = commit_date(vcs.head_commit_timestamp(declaring_dir), now)
    release = f"{version}+{fmt_ymdhms(git_date)}"

    fields: dict = {}
    parsed = parse_semver(version)
    if parsed is None:
        log.info("version_not_semver", version=version)
    else:
        major, minor, patch, prerelease = parsed
        fields.update(
            version_major=major,
            version_minor=minor,
            version_patch=patch,
            version_prerelease=prerelease,
        )

    return VersionInfo(
        output_path=output_path,
        version=version,
        release=release,
        git_sha=sha.lower(),
        git_date=git_date,
        **fields,
    )
