"""Configuration management API."""

from .AgentLinkConfig import AgentLinkConfig
from .get_config_path import get_config_path
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig

__all__ = ["AgentLinkConfig", "LogConfig", "get_config_path", "get_home_dir"]
