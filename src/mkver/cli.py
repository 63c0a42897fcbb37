"""Command-line entry point."""

import sys

import click

from . import __version__
from .config import get_config
from .errors import GenerationFailed
from .generator import mkver
from .logging import configure_logging, get_logger

HELP = """Write your app's version and release metadata to FILE.

With no FILE, the default output is "./Version.ts". The format follows
the extension: .ts (TypeScript), .mjs (ES module), .js or .cjs (CommonJS).
"""


@click.command(help=HELP, context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("file", required=False, default="")
@click.version_option(__version__, prog_name="mkver")
def main(file: str) -> None:
    config = get_config()
    configure_logging(json_output=config.json_logging, level=config.log_level, stream=sys.stderr)
    log = get_logger().bind(output=file or config.default_output)

    try:
        info = mkver(file, config=config)
    except GenerationFailed as e:
        log.debug("mkver_failed", cause=type(e.cause).__name__)
        click.echo(f"Failed: {e}", err=True)
        sys.exit(1)

    log.debug("mkver_done", release=info.release)
