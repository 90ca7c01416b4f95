"""Observed state of a target path."""

from enum import Enum


class LinkState(str, Enum):
    """Exactly one of these holds for a target path at any time."""

    ABSENT = "absent"
    SYMLINK = "symlink"
    FILE = "file"
