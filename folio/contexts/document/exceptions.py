"""Custom exceptions for the document context."""

from pathlib import Path
from typing import Optional


class InvalidDocumentError(ValueError):
    """
    Exception raised when a stored document cannot be read as a resume.

    Attributes:
        message: Error description
        path: Path of the offending file, if any
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path

        if path is not None:
            message = f"{message}\nDocument: {path}"

        super().__init__(message)
