"""Run command once and display result using 4-stage pattern."""

from collections.abc import Callable
from typing import Any, TypeVar

import typer

from agentlink.api.validate_output import validate_output

F = TypeVar("F", bound=Callable)

# Per-target statuses reported as [OK] lines
_SUCCESS_STATUSES = frozenset({"linked", "relinked", "backed_up", "removed", "symlink"})


def _run_single_execution(func: F, args: tuple, kwargs: dict, display: Any, display_format: str) -> None:
    """Run command once and display result.

    Commands must handle all expected failures internally and report them
    through their domain-specific output schema.

    Raises:
        typer.Exit: Always; code 0 on success, 1 otherwise
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    # progress_callback is a generator that yields (progress_percent, message) tuples
    for progress_percent, message in result.progress_callback(result):
        if message != "Complete":
            display.info(f"{message} ({progress_percent:.0%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Validation failure is a programming error - fail loudly
    result.output = validate_output(func, result.output)

    # Stage 3: Result
    for entry in result.output.get("targets", []):
        if entry.get("status") in _SUCCESS_STATUSES and entry.get("message"):
            display.success(entry["message"])
    for warning in result.output.get("warnings", []):
        display.warning(warning)
    for error in result.output.get("errors", []):
        if error != result.result:
            display.error(error)
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output - JSON or YAML based on --display flag
    display.json_output(result.output, format=display_format)

    raise typer.Exit(0 if result.success else 1)
