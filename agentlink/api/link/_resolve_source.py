"""Resolve the source document to the absolute path links will point at."""

from pathlib import Path

from .SourceNotFoundError import SourceNotFoundError


def _resolve_source(source: str | Path) -> Path:
    """Return the resolved absolute path of source.

    Raises:
        SourceNotFoundError: If source is not an existing regular file
    """
    path = Path(source).expanduser()
    if not path.is_file():
        raise SourceNotFoundError(str(source))
    return path.resolve()
