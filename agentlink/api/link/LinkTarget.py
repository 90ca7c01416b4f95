"""A named filesystem location that should link to the source document."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LinkTarget(BaseModel):
    """One destination managed by the link installer."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Label used in messages (e.g. 'Claude Code')")
    path: Path = Field(..., description="Location of the symlink")

    @field_validator("path")
    @classmethod
    def _normalize_path(cls, v: Path) -> Path:
        from agentlink.utils.normalize_path import normalize_path

        return normalize_path(v)
