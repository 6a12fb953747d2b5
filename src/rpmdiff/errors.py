"""Exceptions raised by rpmdiff operations."""

import os


class RpmDiffError(Exception):
    """Base class for errors that abort a comparison run."""


class UsageError(RpmDiffError):
    """Command-line arguments do not form a valid invocation."""


class FileOpenError(RpmDiffError):
    """A package list could not be opened or the report file could not be created.

    Attributes:
        path: The path that failed to open
    """

    def __init__(self, message: str, path: str | os.PathLike):
        super().__init__(message)
        self.path = path
