"""Install command - link every target to the source document."""

import logging
from collections.abc import Iterator

from .._output_schemas.link import LinkInstallOutput
from ..config.AgentLinkConfig import AgentLinkConfig
from ..StageResult import StageResult
from ._link_target import _link_target
from ._resolve_source import _resolve_source
from .default_targets import default_targets
from .LinkTarget import LinkTarget
from .SourceNotFoundError import SourceNotFoundError

logger = logging.getLogger(__name__)


def cmd_install(source: str | None = None, targets: list[LinkTarget] | None = None) -> StageResult:
    """Link each target to source, backing up regular files in the way.

    The source is validated once before any target is touched. A target
    that fails does not stop the remaining ones.

    Args:
        source: Path to the source document (default: configured source)
        targets: Targets to link (default: Claude Code and Gemini CLI paths)

    Returns:
        StageResult with per-target install status
    """
    link_targets = list(targets) if targets is not None else default_targets()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        yield (0.1, "Resolving source...")
        requested = source or ""
        try:
            if source is None:
                requested = AgentLinkConfig.load().source
            source_path = _resolve_source(requested)
        except (SourceNotFoundError, ValueError) as e:
            logger.error("%s", e)
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = LinkInstallOutput(
                errors=[str(e)],
                warnings=[],
                source=requested,
                targets=[],
                linked=0,
                failed=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.2, f"Source: {source_path}")

        entries = []
        errors: list[str] = []
        warnings: list[str] = []
        step = 0.7 / max(len(link_targets), 1)
        for index, target in enumerate(link_targets):
            progress = 0.2 + step * (index + 1)
            entry = yield from _link_target(source_path, target, progress)
            if entry.backup:
                warnings.append(f"Backing up existing file: {entry.path} -> {entry.backup}")
            if entry.status == "failed":
                errors.append(entry.message)
            entries.append(entry)

        failed = len(errors)
        linked = len(entries) - failed

        yield (1.0, "Complete")
        if failed:
            result_obj.result = f"Installation incomplete: {linked} of {len(entries)} target(s) linked, {failed} failed"
        else:
            result_obj.result = f"Installation complete: {linked} target(s) linked to {source_path}"
        result_obj.output = LinkInstallOutput(
            errors=errors,
            warnings=warnings,
            source=str(source_path),
            targets=[entry.to_dict() for entry in entries],
            linked=linked,
            failed=failed,
        ).model_dump(mode="python")
        result_obj.success = failed == 0

    return StageResult(
        announce="Installing agent instructions globally...",
        progress_callback=do_work,
    )
