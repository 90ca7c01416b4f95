"""Raised when a single target could not be linked."""


class LinkCreationError(OSError):
    """Linking one target failed; other targets are unaffected."""

    def __init__(self, target_name: str, reason: str):
        super().__init__(f"Failed to create symlink for {target_name}: {reason}")
        self.target_name = target_name
        self.reason = reason
