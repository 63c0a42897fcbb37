"""Locate the manifest file that declares the project version."""

from pathlib import Path

import orjson
import structlog

from .errors import ManifestMissingVersion, ManifestNotFound
from .models import ManifestVersion

log = structlog.get_logger()

DEFAULT_MANIFEST = "package.json"


def resolve_version(start_dir: Path, manifest_name: str = DEFAULT_MANIFEST) -> ManifestVersion:
    """Find the nearest manifest at or above ``start_dir``.

    A manifest that cannot be read or parsed is treated as absent and the
    search moves to the parent directory. A manifest that parses but has
    no usable ``version`` stops the search.

    Args:
        start_dir: Directory to start searching from.
        manifest_name: File name of the manifest.

    Returns:
        The declared version and the directory containing the manifest.

    Raises:
        ManifestMissingVersion: If the nearest manifest has a blank,
            absent or non-string ``version``.
        ManifestNotFound: If the filesystem root is reached.
    """
    start_dir = Path(start_dir).resolve()
    current = start_dir
    while True:
        path = current / manifest_name
        data = _read_manifest(path)
        if data is not None:
            version = data.get("version") if isinstance(data, dict) else None
            if not _not_blank(version):
                log.warning("manifest_missing_version", path=str(path))
                raise ManifestMissingVersion(path)
            log.debug("manifest_found", path=str(path), version=version)
            return ManifestVersion(version=version, declaring_dir=current)

        parent = current.parent
        if parent == current:
            raise ManifestNotFound(start_dir, manifest_name)
        current = parent


def _read_manifest(path: Path) -> object | None:
    """Parse the manifest at ``path``, or return None if it is unusable."""
    try:
        return orjson.loads(path.read_bytes())
    except FileNotFoundError:
        return None
    except (OSError, orjson.JSONDecodeError) as e:
        log.debug("manifest_unreadable", path=str(path), error=str(e))
        return None


def _not_blank(value: object) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0
