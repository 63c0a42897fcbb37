"""Render VersionInfo as a JavaScript or TypeScript module."""

from datetime import datetime
from enum import Enum
from pathlib import Path

import orjson

from .errors import UnsupportedOutputFormat
from .models import VersionInfo


class OutputFormat(Enum):
    """Module flavors mkver can emit."""

    COMMON_MODULE = "commonjs"
    ES_MODULE = "esm"
    TYPED_SOURCE = "typescript"

    @property
    def has_default_export(self) -> bool:
        return self is not OutputFormat.COMMON_MODULE


EXTENSIONS: dict[str, OutputFormat] = {
    ".ts": OutputFormat.TYPED_SOURCE,
    ".mjs": OutputFormat.ES_MODULE,
    # .js stays CommonJS for existing consumers; .cjs is explicit
    ".js": OutputFormat.COMMON_MODULE,
    ".cjs": OutputFormat.COMMON_MODULE,
}

# Binding name in the generated module -> VersionInfo attribute, in output order
BINDINGS: list[tuple[str, str]] = [
    ("version", "version"),
    ("versionMajor", "version_major"),
    ("versionMinor", "version_minor"),
    ("versionPatch", "version_patch"),
    ("versionPrerelease", "version_prerelease"),
    ("release", "release"),
    ("gitSha", "git_sha"),
    ("gitDate", "git_date"),
]

_COMMONJS_PREAMBLE = [
    '"use strict";',
    'Object.defineProperty(exports, "__esModule", { value: true });',
]


def output_format(path: Path) -> OutputFormat:
    """Select the output format from the extension of ``path``.

    Raises:
        UnsupportedOutputFormat: If the extension is not in EXTENSIONS.
    """
    fmt = EXTENSIONS.get(Path(path).suffix.lower())
    if fmt is None:
        raise UnsupportedOutputFormat(Path(path), tuple(EXTENSIONS))
    return fmt


def render_value(value: object) -> str:
    """Render a Python value as a JavaScript expression."""
    if isinstance(value, datetime):
        return f"new Date({round(value.timestamp() * 1000)})"
    if isinstance(value, tuple):
        value = list(value)
    return orjson.dumps(value).decode()


def render(info: VersionInfo) -> str:
    """Render ``info`` in the format implied by its output path.

    Fields that are None are left out. ES and TypeScript modules also get
    a default export aggregating every emitted binding.

    Returns:
        Module source text ending in a newline.

    Raises:
        UnsupportedOutputFormat: If the output path has an unknown extension.
    """
    fmt = output_format(info.output_path)
    lines = list(_COMMONJS_PREAMBLE) if fmt is OutputFormat.COMMON_MODULE else []

    names = []
    for name, attr in BINDINGS:
        value = getattr(info, attr)
        if value is None:
            continue
        names.append(name)
        binding = f"{name} = {render_value(value)}"
        if fmt is OutputFormat.COMMON_MODULE:
            lines.append(f"exports.{binding};")
        else:
            lines.append(f"export const {binding};")

    if fmt.has_default_export:
        lines.append(f"export default {{{','.join(names)}}};")
    return "\n".join(lines) + "\n"
