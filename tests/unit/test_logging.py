"""Tests for logging.py - structlog configuration."""

import io
import logging

import structlog


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def setup_method(self):
        """Reset structlog before each test."""
        structlog.reset_defaults()

    def teardown_method(self):
        structlog.reset_defaults()

    def test_configure_logging_json_output(self):
        """Test configure_logging sets up JSON output."""
        from mkver.logging import configure_logging

        configure_logging(json_output=True, stream=io.TextIOWrapper(io.BytesIO()))

        processors = structlog.get_config()["processors"]
        assert "JSONRenderer" in [p.__class__.__name__ for p in processors]

    def test_configure_logging_console_output(self):
        """Test console output uses the ConsoleRenderer."""
        from mkver.logging import configure_logging

        configure_logging(json_output=False, stream=io.StringIO())

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_logging_has_timestamp_and_callsite(self):
        """Test shared processors are installed."""
        from mkver.logging import configure_logging

        configure_logging(stream=io.StringIO())
        processors = structlog.get_config()["processors"]

        assert any(isinstance(p, structlog.processors.TimeStamper) for p in processors)
        assert any(
            isinstance(p, structlog.processors.CallsiteParameterAdder) for p in processors
        )

    def test_get_logger_returns_bound_logger(self):
        """Test get_logger returns a structlog bound logger."""
        from mkver.logging import configure_logging, get_logger

        configure_logging(stream=io.StringIO())
        log = get_logger("mkver")

        assert hasattr(log, "bind")
        assert hasattr(log, "info")


class TestLogOutput:
    """Tests for actual log output."""

    def setup_method(self):
        structlog.reset_defaults()

    def teardown_method(self):
        structlog.reset_defaults()

    def test_console_output_goes_to_stream(self):
        """Test console logs are written to the given stream."""
        from mkver.logging import configure_logging, get_logger

        stream = io.StringIO()
        configure_logging(json_output=False, stream=stream)
        get_logger().info("version_file_written", path="Version.ts")

        assert "version_file_written" in stream.getvalue()
        assert "Version.ts" in stream.getvalue()

    def test_json_output_is_json(self):
        """Test JSON logs carry event and level."""
        import orjson

        from mkver.logging import configure_logging, get_logger

        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw)
        configure_logging(json_output=True, stream=stream)
        get_logger().warning("manifest_missing_version", path="package.json")

        record = orjson.loads(raw.getvalue().splitlines()[0])
        assert record["event"] == "manifest_missing_version"
        assert record["level"] == "warning"
        assert "timestamp" in record

    def test_level_filters_lower_levels(self):
        """Test messages below the configured level are dropped."""
        from mkver.logging import configure_logging, get_logger

        stream = io.StringIO()
        configure_logging(level="WARNING", stream=stream)
        get_logger().info("quiet")
        get_logger().error("loud")

        assert "quiet" not in stream.getvalue()
        assert "loud" in stream.getvalue()

    def test_unknown_level_defaults_to_info(self):
        """Test an unknown level name falls back to INFO."""
        from mkver.logging import _level_number

        assert _level_number("chatty") == logging.INFO
        assert _level_number("debug") == logging.DEBUG
