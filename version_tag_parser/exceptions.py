"""Custom exceptions for Version Tag Parser."""


class GitOperationError(Exception):
    """Raised when the repository cannot be opened or queried for tags."""


class OutputError(Exception):
    """Raised when action outputs cannot be written."""

    def __init__(self, message: str, output_path: str = None):
        self.output_path = output_path
        super().__init__(message)
