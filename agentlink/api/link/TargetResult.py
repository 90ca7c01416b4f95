"""Outcome of one command for a single target."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class TargetResult:
    """Status for a single target."""

    name: str
    path: str
    status: str
    message: str = ""
    backup: str = ""
    link_to: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the fields as a plain dict for the output schema."""
        return asdict(self)
