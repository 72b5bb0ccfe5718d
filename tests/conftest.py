import json
import pytest
from click.testing import CliRunner
from pathlib import Path

from mcp_helperton.services.stores import ConfigStores


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture(autouse=True)
def fake_home(tmp_path, monkeypatch):
    """Point the home directory at a temp dir so no test touches real config."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.delenv("MCP_HELPERTON_CLAUDE_CONFIG", raising=False)
    monkeypatch.delenv("MCP_HELPERTON_STORE", raising=False)
    return home


@pytest.fixture
def active_path(tmp_path):
    """Location of a Claude config file for the test."""
    return tmp_path / "claude" / ".claude.json"


@pytest.fixture
def disabled_path(tmp_path):
    """Location of a helpy storage file for the test."""
    return tmp_path / "helperton" / "helpy.json"


@pytest.fixture
def stores(active_path, disabled_path):
    """Stores backed by the temp paths."""
    return ConfigStores.from_paths(active_path, disabled_path)


@pytest.fixture
def write_json():
    """Write a JSON document, creating parent directories."""
    def _write(path: Path, data) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2))
        return path
    return _write


@pytest.fixture
def read_json():
    """Read a JSON document back from disk."""
    def _read(path: Path):
        return json.loads(path.read_text())
    return _read
