"""
Exceptions raised while reading or writing a word list.
"""


class DictFixerError(Exception):
    """Base class for word list I/O failures."""


class ReadError(DictFixerError):
    """
    Raised when a word list cannot be opened, read or decoded.

    Args:
        path (str): The source that failed.
        reason (str): A short description of the failure.
    """

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"Failed to read in file {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class WriteError(DictFixerError):
    """
    Raised when a word list cannot be written to its destination.

    Args:
        path (str): The destination that failed.
        reason (str): A short description of the failure.
    """

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"Did not write to {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
