"""Unit tests for agentlink.api.link.cmd_uninstall module."""

from pathlib import Path

import pytest

from agentlink.api.link import cmd_install, cmd_uninstall
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.link


def test_cmd_uninstall_after_install_removes_links(source_file, targets):
    run_cmd(cmd_install.cmd_install, source=str(source_file), targets=targets)

    result = run_cmd(cmd_uninstall.cmd_uninstall, targets=targets)

    assert result.success is True
    assert result.output["removed"] == 2
    assert "Uninstall complete" in result.result
    for target in targets:
        assert not target.path.exists()
        assert not target.path.is_symlink()
    assert source_file.exists()


def test_cmd_uninstall_leaves_regular_file(targets):
    target = targets[0]
    target.path.parent.mkdir(parents=True)
    target.path.write_text("user data")

    result = run_cmd(cmd_uninstall.cmd_uninstall, targets=targets)

    assert result.success is True
    assert target.path.read_text() == "user data"
    assert result.output["targets"][0]["status"] == "skipped"
    assert result.output["warnings"] == [f"Claude Code exists but is not a symlink: {target.path} (skipped)"]


def test_cmd_uninstall_nothing_to_remove(targets):
    result = cmd_uninstall.cmd_uninstall(targets=targets)
    messages = [message for _, message in result.progress_callback(result)]

    assert result.success is True
    assert result.output["removed"] == 0
    assert [entry["status"] for entry in result.output["targets"]] == ["missing", "missing"]
    assert f"Gemini CLI symlink not found: {targets[1].path} (nothing to remove)" in messages


def test_cmd_uninstall_removes_dangling_symlink(targets, tmp_path):
    target = targets[0]
    target.path.parent.mkdir(parents=True)
    target.path.symlink_to(tmp_path / "gone.md")

    result = run_cmd(cmd_uninstall.cmd_uninstall, targets=targets)

    assert result.success is True
    assert not target.path.is_symlink()
    assert result.output["targets"][0]["status"] == "removed"


def test_cmd_uninstall_reports_unlink_failure(source_file, targets, monkeypatch):
    run_cmd(cmd_install.cmd_install, source=str(source_file), targets=targets)
    real_unlink = Path.unlink

    def guarded_unlink(self, *args, **kwargs):
        if self == targets[0].path:
            raise PermissionError("Permission denied")
        return real_unlink(self, *args, **kwargs)

    monkeypatch.setattr(Path, "unlink", guarded_unlink)

    result = run_cmd(cmd_uninstall.cmd_uninstall, targets=targets)

    assert result.success is False
    assert result.output["removed"] == 1
    assert "Permission denied" in result.output["errors"][0]
    assert targets[0].path.is_symlink()
    assert not targets[1].path.is_symlink()


def test_cmd_uninstall_continues_when_state_cannot_be_read(source_file, targets, monkeypatch):
    run_cmd(cmd_install.cmd_install, source=str(source_file), targets=targets)
    real_is_symlink = Path.is_symlink

    def guarded_is_symlink(self):
        if self == targets[0].path:
            raise PermissionError(13, "Permission denied", str(self))
        return real_is_symlink(self)

    monkeypatch.setattr(Path, "is_symlink", guarded_is_symlink)

    result = run_cmd(cmd_uninstall.cmd_uninstall, targets=targets)

    assert result.success is False
    assert [entry["status"] for entry in result.output["targets"]] == ["failed", "removed"]
    assert "Claude Code" in result.output["errors"][0]
    assert "Permission denied" in result.output["errors"][0]
    assert not real_is_symlink(targets[1].path)
