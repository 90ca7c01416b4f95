"""Unit tests for the private link helpers: backup naming, atomic replace, verification."""

import os
from datetime import datetime

import pytest

from agentlink.api.link import LinkCreationError, LinkTarget, SourceNotFoundError
from agentlink.api.link._backup_path import _backup_path
from agentlink.api.link._replace_with_symlink import _replace_with_symlink
from agentlink.api.link._resolve_source import _resolve_source
from agentlink.api.link._verify_link import _verify_link

pytestmark = pytest.mark.link

NOW = datetime(2026, 10, 18, 9, 5, 7)


def test_backup_path_format(tmp_path):
    target = tmp_path / "CLAUDE.md"
    assert _backup_path(target, now=NOW) == tmp_path / "CLAUDE.md.backup.20261018_090507"


def test_backup_path_never_reuses_a_name(tmp_path):
    target = tmp_path / "CLAUDE.md"
    (tmp_path / "CLAUDE.md.backup.20261018_090507").write_text("first")
    (tmp_path / "CLAUDE.md.backup.20261018_090507_1").write_text("second")

    assert _backup_path(target, now=NOW) == tmp_path / "CLAUDE.md.backup.20261018_090507_2"


def test_replace_with_symlink_creates_link(tmp_path):
    work = tmp_path / "work"
    work.mkdir()
    source = work / "AGENT.md"
    source.write_text("x")
    target = work / "CLAUDE.md"

    _replace_with_symlink(source, target)

    assert os.readlink(target) == str(source)
    assert sorted(p.name for p in work.iterdir()) == ["AGENT.md", "CLAUDE.md"]


def test_replace_with_symlink_swaps_existing_link(tmp_path):
    old = tmp_path / "old.md"
    old.write_text("old")
    new = tmp_path / "new.md"
    new.write_text("new")
    target = tmp_path / "CLAUDE.md"
    target.symlink_to(old)

    _replace_with_symlink(new, target)

    assert target.read_text() == "new"
    assert old.read_text() == "old"


def test_replace_with_symlink_cleans_up_on_failure(tmp_path):
    work = tmp_path / "work"
    work.mkdir()
    source = work / "AGENT.md"
    source.write_text("x")
    target = work / "CLAUDE.md"
    target.mkdir()
    (target / "child").write_text("keeps the directory non-empty")

    with pytest.raises(OSError):
        _replace_with_symlink(source, target)

    assert sorted(p.name for p in work.iterdir()) == ["AGENT.md", "CLAUDE.md"]


def test_resolve_source(tmp_path):
    source = tmp_path / "AGENT.md"
    source.write_text("x")
    assert _resolve_source(str(source)) == source.resolve()
    with pytest.raises(SourceNotFoundError, match="Source file not found"):
        _resolve_source(tmp_path / "missing.md")


def test_verify_link_checks_destination(tmp_path):
    source = tmp_path / "AGENT.md"
    source.write_text("x")
    other = tmp_path / "OTHER.md"
    other.write_text("y")
    target = LinkTarget(name="Claude Code", path=tmp_path / "CLAUDE.md")

    with pytest.raises(LinkCreationError, match="is not a symlink"):
        _verify_link(source, target)

    target.path.symlink_to(other)
    with pytest.raises(LinkCreationError, match="expected"):
        _verify_link(source, target)

    target.path.unlink()
    target.path.symlink_to(source)
    _verify_link(source, target)


def test_error_types():
    error = LinkCreationError("Gemini CLI", "boom")
    assert isinstance(error, OSError)
    assert str(error) == "Failed to create symlink for Gemini CLI: boom"
    assert error.target_name == "Gemini CLI"

    missing = SourceNotFoundError("./AGENT.md")
    assert isinstance(missing, FileNotFoundError)
    assert str(missing) == "Source file not found: ./AGENT.md"
