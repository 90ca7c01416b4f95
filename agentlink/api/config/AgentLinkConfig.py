"""Top-level agentlink configuration."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import DEFAULT_SOURCE
from .get_config_path import get_config_path
from .LogConfig import LogConfig


class AgentLinkConfig(BaseModel):
    """Top-level configuration for agentlink.

    Target paths are deliberately absent: they are fixed per tool.
    """

    model_config = ConfigDict(extra="forbid")

    source: str = Field(DEFAULT_SOURCE, description="Default source document path")
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on AGENTLINK_HOME or default to ~/.agentlink."""
        return get_config_path()

    @classmethod
    def load(cls) -> "AgentLinkConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: config file {path} must hold a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
