"""Link installer API: converge target paths to symlinks and back."""

from .default_targets import default_targets
from .get_link_state import get_link_state
from .LinkCreationError import LinkCreationError
from .LinkState import LinkState
from .LinkTarget import LinkTarget
from .SourceNotFoundError import SourceNotFoundError
from .TargetResult import TargetResult

__all__ = [
    "LinkCreationError",
    "LinkState",
    "LinkTarget",
    "SourceNotFoundError",
    "TargetResult",
    "default_targets",
    "get_link_state",
]
