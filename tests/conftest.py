"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from agentlink.api.link.LinkTarget import LinkTarget


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single API unit")
    config.addinivalue_line("markers", "smoke: tests of the installed console script")
    config.addinivalue_line("markers", "link: link installer tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Command Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Point HOME and AGENTLINK_HOME at a temporary directory.

    Returns:
        Path to the fake user home directory
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("AGENTLINK_HOME", str(home / ".agentlink"))
    return home


@pytest.fixture
def agentlink_home(isolated_home: Path) -> Path:
    """Create the agentlink home directory and return it."""
    path = isolated_home / ".agentlink"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def write_config(agentlink_home: Path):
    """Write a config dict to AGENTLINK_HOME/config.json."""

    def _write(config: dict) -> Path:
        config_path = agentlink_home / "config.json"
        config_path.write_text(json.dumps(config))
        return config_path

    return _write


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """An AGENT.md source document with known content."""
    agent_dir = tmp_path / "agent"
    agent_dir.mkdir()
    source = agent_dir / "AGENT.md"
    source.write_text("# Agent instructions\n")
    return source


@pytest.fixture
def targets(tmp_path: Path) -> list[LinkTarget]:
    """Two targets under a temporary directory; parent directories do not exist yet."""
    base = tmp_path / "targets"
    return [
        LinkTarget(name="Claude Code", path=base / ".claude" / "CLAUDE.md"),
        LinkTarget(name="Gemini CLI", path=base / ".gemini" / "GEMINI.md"),
    ]
