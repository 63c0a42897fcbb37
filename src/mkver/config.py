"""Configuration management."""

import os

# Global singleton instance
_config_instance: "Config | None" = None

DEFAULT_GIT_TIMEOUT = 10.0


class Config:
    """mkver configuration, read from MKVER_* environment variables."""

    def __init__(self) -> None:
        """Initialize configuration with defaults and env overrides."""
        # Log level
        self._log_level = os.environ.get("MKVER_LOG_LEVEL", "INFO").upper()

        # JSON logging
        json_logging_env = os.environ.get("MKVER_JSON_LOGGING", "false")
        self._json_logging = json_logging_env.lower() in ("true", "1", "yes")

        # Version control
        self._git_binary = os.environ.get("MKVER_GIT_BINARY", "git")
        self._git_timeout = _parse_timeout(os.environ.get("MKVER_GIT_TIMEOUT"))

        # Manifest file name searched for in each directory
        self._manifest_name = os.environ.get("MKVER_MANIFEST", "package.json")

        # Output used when none is given on the command line
        self._default_output = os.environ.get("MKVER_DEFAULT_OUTPUT", "./Version.ts")

    @property
    def log_level(self) -> str:
        """Logging level."""
        return self._log_level

    @property
    def json_logging(self) -> bool:
        """Whether to use JSON logging format."""
        return self._json_logging

    @property
    def git_binary(self) -> str:
        """Name or path of the git executable."""
        return self._git_binary

    @property
    def git_timeout(self) -> float:
        """Seconds to wait for each git command."""
        return self._git_timeout

    @property
    def manifest_name(self) -> str:
        """File name of the manifest declaring the version."""
        return self._manifest_name

    @property
    def default_output(self) -> str:
        """Output path used when none is given."""
        return self._default_output


def _parse_timeout(raw: str | None) -> float:
    if raw is None:
        return DEFAULT_GIT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_GIT_TIMEOUT
    return value if value > 0 else DEFAULT_GIT_TIMEOUT


def get_config() -> Config:
    """Get the global configuration instance.

    Returns:
        The singleton Config instance.
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance
