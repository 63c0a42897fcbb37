"""Generate a source file embedding a project's version and git provenance."""

__version__ = "0.1.0"

from .errors import GenerationFailed, MkverError  # noqa: E402
from .generator import mkver  # noqa: E402
from .models import VersionInfo  # noqa: E402

__all__ = ["GenerationFailed", "MkverError", "VersionInfo", "mkver", "__version__"]
