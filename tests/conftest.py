"""Shared pytest fixtures."""

import re
from datetime import datetime
from pathlib import Path

import orjson
import pytest

HEAD_SHA = "0123456789abcdef0123456789abcdef01234567"
# 2021-02-16T18:51:48Z
HEAD_TIMESTAMP = 1613501508

_BINDING_RE = re.compile(r"^(?:export const |exports\.)(\w+) = (.*);$")
_DEFAULT_RE = re.compile(r"^export default \{(.*)\};$")
_DATE_RE = re.compile(r"^new Date\((-?\d+)\)$")


class FakeVcs:
    """VcsQuery returning canned answers, or raising a given error."""

    def __init__(self, sha=HEAD_SHA, timestamp=HEAD_TIMESTAMP, error=None):
        self.sha = sha
        self.timestamp = timestamp
        self.error = error
        self.calls: list[tuple[str, Path]] = []

    def head_commit_sha(self, path):
        self.calls.append(("sha", path))
        if self.error is not None:
            raise self.error
        return self.sha

    def head_commit_timestamp(self, path):
        self.calls.append(("timestamp", path))
        if self.error is not None:
            raise self.error
        return self.timestamp


def parse_module(text: str) -> dict:
    """Read back the bindings of a generated module.

    Returns a dict of binding name -> value; dates come back as epoch
    milliseconds. The default export's names, if any, are under "default".
    """
    result: dict = {}
    for line in text.splitlines():
        if m := _BINDING_RE.match(line):
            name, expr = m.groups()
            if d := _DATE_RE.match(expr):
                result[name] = int(d.group(1))
            else:
                result[name] = orjson.loads(expr)
        elif m := _DEFAULT_RE.match(line):
            result["default"] = m.group(1).split(",") if m.group(1) else []
    return result


@pytest.fixture
def fake_vcs():
    """Create a FakeVcs with a valid SHA and timestamp."""
    return FakeVcs()


@pytest.fixture
def write_manifest():
    """Return a helper writing package.json into a directory."""

    def _write(directory: Path, content) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "package.json"
        if isinstance(content, (str, bytes)):
            path.write_bytes(content.encode() if isinstance(content, str) else content)
        else:
            path.write_bytes(orjson.dumps(content))
        return path

    return _write


@pytest.fixture
def sample_info(tmp_path):
    """Create a VersionInfo with every field populated."""
    from mkver.models import VersionInfo

    return VersionInfo(
        output_path=tmp_path / "Version.ts",
        version="2.5.9-rc.1",
        release="2.5.9-rc.1+20210216185148",
        git_sha=HEAD_SHA,
        git_date=datetime.fromtimestamp(HEAD_TIMESTAMP).astimezone(),
        version_major=2,
        version_minor=5,
        version_patch=9,
        version_prerelease=("rc", 1),
    )


@pytest.fixture
def make_vcs():
    """Return the FakeVcs class for tests needing custom answers."""
    return FakeVcs


@pytest.fixture
def parse_generated():
    """Return a parser for generated module text."""
    return parse_module


@pytest.fixture(autouse=True)
def _fresh_state(monkeypatch):
    """Give each test its own config singleton and default structlog setup."""
    import structlog

    from mkver import config

    monkeypatch.setattr(config, "_config_instance", None)
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
