"""Generate a version file for the project enclosing an output path."""

from pathlib import Path

import structlog

from .config import Config, get_config
from .errors import GenerationFailed
from .manifest import resolve_version
from .models import VersionInfo
from .release import compose
from .render import output_format, render
from .vcs import GitClient, VcsQuery

log = structlog.get_logger()


def mkver(
    output: str | Path | None = None,
    *,
    vcs: VcsQuery | None = None,
    config: Config | None = None,
) -> VersionInfo:
    """Write version and release metadata to ``output``.

    The file format follows the extension: ``.ts``, ``.mjs``, ``.js`` or
    ``.cjs``. The version comes from the nearest manifest at or above the
    output's directory, and the release tag from that repository's head
    commit. An existing file is overwritten.

    Progress is logged through structlog. Library callers that need a
    clean stdout should call ``configure_logging`` first; the CLI does.

    Args:
        output: File to write. Defaults to ``config.default_output``.
        vcs: Version control backend. Defaults to a GitClient built from config.
        config: Settings to use. Defaults to the global configuration.

    Returns:
        The metadata written to the file.

    Raises:
        GenerationFailed: Wrapping whatever went wrong.
    """
    if config is None:
        config = get_config()
    if output is None or not str(output).strip():
        output = config.default_output

    path = Path(output)
    try:
        path = path.resolve()
        output_format(path)
        manifest = resolve_version(path.parent, config.manifest_name)
        if vcs is None:
            vcs = GitClient(binary=config.git_binary, timeout=config.git_timeout)
        info = compose(path, manifest.version, manifest.declaring_dir, vcs)
        text = render(info)

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except Exception as e:
        log.error("version_file_failed", path=str(path), error=str(e))
        raise GenerationFailed(path, e) from e

    log.info(
        "version_file_written",
        path=str(path),
        version=info.version,
        release=info.release,
        git_sha=info.git_sha,
    )
    return info
