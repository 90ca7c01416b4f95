"""Observe the state of a target path without following it."""

from pathlib import Path

from .LinkState import LinkState


def get_link_state(path: Path) -> LinkState:
    """Classify path as absent, symlink, or file.

    A dangling symlink is a symlink. Directories count as files: anything
    that is not a link is user data.
    """
    if path.is_symlink():
        return LinkState.SYMLINK
    if path.exists():
        return LinkState.FILE
    return LinkState.ABSENT
