"""Raised when the source document is missing at install time."""


class SourceNotFoundError(FileNotFoundError):
    """The source document does not exist or is not a regular file."""

    def __init__(self, source: str):
        super().__init__(f"Source file not found: {source}")
        self.source = source
