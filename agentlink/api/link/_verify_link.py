"""Post-condition check after linking a target."""

import os
from pathlib import Path

from .LinkCreationError import LinkCreationError
from .LinkTarget import LinkTarget


def _verify_link(source: Path, target: LinkTarget) -> None:
    """Raise LinkCreationError unless target is a readable symlink to source."""
    path = target.path
    if not path.is_symlink():
        raise LinkCreationError(target.name, f"{path} is not a symlink")
    link_text = os.readlink(path)
    if Path(link_text) != source:
        raise LinkCreationError(target.name, f"{path} points to {link_text}, expected {source}")
    if not os.access(path, os.R_OK):
        raise LinkCreationError(target.name, f"{path} is not readable")
