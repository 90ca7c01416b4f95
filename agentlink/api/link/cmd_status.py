"""Status command - report what every target currently is."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkStatusOutput
from ..StageResult import StageResult
from .default_targets import default_targets
from .get_link_state import get_link_state
from .LinkState import LinkState
from .LinkTarget import LinkTarget
from .TargetResult import TargetResult

logger = logging.getLogger(__name__)


def cmd_status(source: str | None = None, targets: list[LinkTarget] | None = None) -> StageResult:
    """Report the state of each target without changing anything.

    Args:
        source: Optional source document the links are expected to point at
        targets: Targets to inspect (default: Claude Code and Gemini CLI paths)

    Returns:
        StageResult that succeeds only when every target is a working link
    """
    link_targets = list(targets) if targets is not None else default_targets()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        expected = Path(source).expanduser().resolve() if source else None

        entries = []
        errors: list[str] = []
        warnings: list[str] = []
        step = 0.9 / max(len(link_targets), 1)

        for index, target in enumerate(link_targets):
            path = target.path
            try:
                state = get_link_state(path)
                entry = TargetResult(target.name, str(path), state.value)
                if state is LinkState.SYMLINK:
                    entry.link_to = os.readlink(path)
                    points_to = path.resolve() if path.exists() else None
            except OSError as e:
                message = f"Cannot inspect {target.name}: {path} ({e})"
                logger.error("%s", message)
                errors.append(message)
                entries.append(TargetResult(target.name, str(path), "failed", message))
                yield (step * (index + 1), f"Checked {target.name}: failed")
                continue

            if state is LinkState.SYMLINK:
                if points_to is None:
                    warnings.append(f"{target.name}: broken symlink {path} -> {entry.link_to}")
                elif expected is not None and points_to != expected:
                    warnings.append(f"{target.name}: {path} points to {entry.link_to}, not {expected}")
                else:
                    entry.message = f"{target.name}: {path} -> {entry.link_to}"
            elif state is LinkState.FILE:
                warnings.append(f"{target.name} exists but is not a symlink: {path}")
            else:
                warnings.append(f"{target.name} not installed: {path}")

            entries.append(entry)
            yield (step * (index + 1), f"Checked {target.name}: {state.value}")

        installed = not warnings and not errors

        yield (1.0, "Complete")
        if installed:
            result_obj.result = f"All {len(entries)} target(s) installed"
        else:
            result_obj.result = f"{len(warnings) + len(errors)} of {len(entries)} target(s) not installed"
        result_obj.output = LinkStatusOutput(
            errors=errors,
            warnings=warnings,
            source=str(expected) if expected is not None else "",
            targets=[entry.to_dict() for entry in entries],
            installed=installed,
        ).model_dump(mode="python")
        result_obj.success = installed

    return StageResult(
        announce="Checking agent symlinks...",
        progress_callback=do_work,
    )
