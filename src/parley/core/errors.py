# src/parley/core/errors.py
"""
Errors raised while loading agent resources.
"""


class ResourceNotFoundError(FileNotFoundError):
    """A dictionary or stopword file is missing or unreadable."""

    def __init__(self, kind: str, path: str, reason: str = ""):
        self.kind = kind
        self.path = path
        message = f"Error opening {kind} file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
