"""Converge one target to a symlink pointing at the source."""

import logging
from collections.abc import Generator
from pathlib import Path

from ._backup_path import _backup_path
from ._replace_with_symlink import _replace_with_symlink
from ._verify_link import _verify_link
from .get_link_state import get_link_state
from .LinkCreationError import LinkCreationError
from .LinkState import LinkState
from .LinkTarget import LinkTarget
from .TargetResult import TargetResult

logger = logging.getLogger(__name__)


def _link_target(source: Path, target: LinkTarget, progress: float) -> Generator[tuple[float, str], None, TargetResult]:
    """Back up or replace whatever is at target, then link it to source.

    Yields progress tuples; returns the TargetResult. Filesystem errors are
    folded into a "failed" result, never raised.
    """
    path = target.path
    result = TargetResult(name=target.name, path=str(path), status="linked", link_to=str(source))

    try:
        if not path.parent.is_dir():
            yield (progress, f"Creating directory: {path.parent}")
            path.parent.mkdir(parents=True, exist_ok=True)
            logger.info("Created directory %s", path.parent)

        state = get_link_state(path)
        if state is LinkState.FILE:
            backup = _backup_path(path)
            path.rename(backup)
            logger.warning("Backed up %s to %s", path, backup)
            result.backup = str(backup)
            result.status = "backed_up"
        elif state is LinkState.SYMLINK:
            yield (progress, f"Replacing existing symlink: {path}")
            result.status = "relinked"

        _replace_with_symlink(source, path)
        _verify_link(source, target)
    except OSError as exc:
        error = exc if isinstance(exc, LinkCreationError) else LinkCreationError(target.name, str(exc))
        logger.error("%s", error)
        result.status = "failed"
        result.message = str(error)
        return result

    logger.info("Linked %s -> %s", path, source)
    result.message = f"{target.name}: {path} -> {source}"
    return result
