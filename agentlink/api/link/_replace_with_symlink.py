"""Atomically point a path at a source file."""

import os
import secrets
from contextlib import suppress
from pathlib import Path


def _replace_with_symlink(source: Path, target: Path) -> None:
    """Create a symlink next to target, then rename it over target.

    The rename is atomic, so an existing link is swapped without the
    target ever being missing.
    """
    temp = target.with_name(f".{target.name}.agentlink-{secrets.token_hex(4)}.tmp")
    os.symlink(source, temp)
    try:
        os.replace(temp, target)
    except OSError:
        with suppress(OSError):
            temp.unlink()
        raise
