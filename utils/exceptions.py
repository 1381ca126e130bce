"""
Exception types raised by the polysum hashing core.

Every fatal condition derives from PolysumError so the CLI can report it in one place.
A digest mismatch in verify mode is not an exception; it is reported as data.
"""
import errno as errno_codes
from typing import Optional


class PolysumError(Exception):
    """Base class for all fatal polysum errors."""


class UnknownAlgorithmError(PolysumError):
    """Raised when an algorithm name does not match any registered algorithm."""

    def __init__(self, name: str):
        super().__init__(f"unknown algorithm: {name!r}")
        self.name = name


class HashFileFormatError(PolysumError):
    """Raised when a line of a hash listing cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class DigestIOError(PolysumError):
    """
    Raised when a file cannot be opened or read while hashing or parsing.

    Attributes:
        path (str): The path that failed.
        errno (Optional[int]): OS error code, if any.
        strerror (Optional[str]): OS error description, if any.
    """

    def __init__(self, path: str, errno: Optional[int] = None, strerror: Optional[str] = None):
        super().__init__(f"{path}: {strerror or 'I/O error'}")
        self.path = path
        self.errno = errno
        self.strerror = strerror

    @classmethod
    def from_os_error(cls, path: str, exc: OSError) -> "DigestIOError":
        return cls(str(path), exc.errno, exc.strerror)

    @property
    def is_directory(self) -> bool:
        """True when the failure came from trying to read a directory as a file."""
        return self.errno == errno_codes.EISDIR


class ConfigurationError(PolysumError):
    """Raised when configuration values are missing or invalid."""
