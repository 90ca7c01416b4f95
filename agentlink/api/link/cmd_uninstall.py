"""Uninstall command - remove symlinks from every target."""

import logging
from collections.abc import Iterator

from .._output_schemas.link import LinkUninstallOutput
from ..StageResult import StageResult
from .default_targets import default_targets
from .get_link_state import get_link_state
from .LinkState import LinkState
from .LinkTarget import LinkTarget
from .TargetResult import TargetResult

logger = logging.getLogger(__name__)


def cmd_uninstall(targets: list[LinkTarget] | None = None) -> StageResult:
    """Remove each target that is a symlink; leave everything else alone.

    Args:
        targets: Targets to clear (default: Claude Code and Gemini CLI paths)

    Returns:
        StageResult with per-target removal status
    """
    link_targets = list(targets) if targets is not None else default_targets()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        entries = []
        errors: list[str] = []
        warnings: list[str] = []
        step = 0.9 / max(len(link_targets), 1)

        for index, target in enumerate(link_targets):
            progress = step * (index + 1)
            path = target.path
            try:
                state = get_link_state(path)
                if state is LinkState.SYMLINK:
                    path.unlink()
            except OSError as e:
                message = f"Failed to remove {target.name} symlink: {path} ({e})"
                logger.error("%s", message)
                errors.append(message)
                entries.append(TargetResult(target.name, str(path), "failed", message))
                continue

            if state is LinkState.SYMLINK:
                logger.info("Removed symlink %s", path)
                message = f"Removed {target.name} symlink: {path}"
                entries.append(TargetResult(target.name, str(path), "removed", message))
            elif state is LinkState.FILE:
                message = f"{target.name} exists but is not a symlink: {path} (skipped)"
                warnings.append(message)
                entries.append(TargetResult(target.name, str(path), "skipped", message))
            else:
                message = f"{target.name} symlink not found: {path} (nothing to remove)"
                entries.append(TargetResult(target.name, str(path), "missing", message))
                yield (progress, message)

        removed = sum(1 for entry in entries if entry.status == "removed")

        yield (1.0, "Complete")
        if errors:
            result_obj.result = f"Uninstall incomplete: {len(errors)} symlink(s) could not be removed"
        else:
            result_obj.result = f"Uninstall complete: {removed} symlink(s) removed"
        result_obj.output = LinkUninstallOutput(
            errors=errors,
            warnings=warnings,
            targets=[entry.to_dict() for entry in entries],
            removed=removed,
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(
        announce="Removing agent symlinks...",
        progress_callback=do_work,
    )
