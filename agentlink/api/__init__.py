"""agentlink API layer.

Every command is a ``cmd_*`` function returning a StageResult; the CLI only
renders what the API reports.
"""

from .StageResult import StageResult

__all__ = ["StageResult"]
