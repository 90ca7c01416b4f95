"""Get agentlink home directory path or path under it."""

import os
from pathlib import Path

from ...constants import AGENTLINK_HOME_ENV, AGENTLINK_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get agentlink home directory path or path under it.

    Checks AGENTLINK_HOME environment variable first, defaults to ~/.agentlink if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to agentlink home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.agentlink")
        >>> get_home_dir("config.json")
        Path("/Users/user/.agentlink/config.json")
    """
    home_env = os.environ.get(AGENTLINK_HOME_ENV)
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        home = Path(user_home) / AGENTLINK_HOME_EXT if user_home else Path.home() / AGENTLINK_HOME_EXT

    return home / Path(*parts) if parts else home
