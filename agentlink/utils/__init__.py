"""agentlink utility functions.

Each file in this package exports exactly one function, following
the single file == function rule. ``logger`` holds the logging setup.
"""

from .logger import configure_logging
from .normalize_path import normalize_path

__all__ = [
    "configure_logging",
    "normalize_path",
]
