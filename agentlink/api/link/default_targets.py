"""The fixed pair of per-user configuration paths."""

from pathlib import Path

from .LinkTarget import LinkTarget


def default_targets(home: Path | None = None) -> list[LinkTarget]:
    """Return the Claude Code and Gemini CLI instruction file locations.

    Args:
        home: User home directory, defaults to the current user's home
    """
    base = home if home is not None else Path.home()
    return [
        LinkTarget(name="Claude Code", path=base / ".claude" / "CLAUDE.md"),
        LinkTarget(name="Gemini CLI", path=base / ".gemini" / "GEMINI.md"),
    ]
