"""
Error types and validation helpers for FB-01 bank data.
"""

from pathlib import Path
from typing import Optional, Union

from fb2sci.models.bank import BankRole

# Exact size of an FB-01 48-voice bank dump
BANK_FILE_SIZE = 6363

# Header length checked against the bank signature
HEADER_SIZE = 7


class FB2SCIError(Exception):
    """Base class for all conversion failures."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class NotFoundError(FB2SCIError, FileNotFoundError):
    """Raised when an input file does not exist."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(f"file {path} not found", path)


class InvalidFormatError(FB2SCIError):
    """Raised when a bank file does not start with the expected sysex header."""

    pass


class SizeMismatchError(FB2SCIError):
    """Raised when a bank file is not exactly the expected size."""

    def __init__(self, path: Union[str, Path], expected: int, actual: int):
        super().__init__(
            f"{path} is not the expected size ({expected} bytes). "
            f"Not a valid FB-01 sysex bank file. Actual size: {actual}",
            path,
        )
        self.expected = expected
        self.actual = actual


class LengthMismatchError(FB2SCIError):
    """Raised when the two raw bank buffers differ in length."""

    def __init__(self, length_a: int, length_b: int):
        super().__init__(
            f"bank buffers have different sizes (bank A = {length_a}, bank B = {length_b})"
        )
        self.length_a = length_a
        self.length_b = length_b


class DataIntegrityError(FB2SCIError):
    """Raised when a buffer is not the fixed size the pipeline guarantees."""

    pass


class IOFailureError(FB2SCIError):
    """Raised when reading or writing a file fails."""

    pass


class UserAbortedError(FB2SCIError):
    """Raised when the user declines to overwrite an existing output file."""

    pass


def validate_bank_header(data: bytes, role: BankRole) -> bool:
    """
    Validate FB-01 bank dump header.

    Args:
        data: File data (at least 7 bytes)
        role: Which bank the data is expected to hold

    Returns:
        True if the first 7 bytes match the role's signature
    """
    if len(data) < HEADER_SIZE:
        return False

    return data[:HEADER_SIZE] == role.signature


def validate_bank_size(data: bytes) -> bool:
    """Check that data is exactly one bank dump long."""
    return len(data) == BANK_FILE_SIZE


def check_bank(data: bytes, role: BankRole, path: Union[str, Path] = "<bytes>") -> None:
    """
    Check bank dump structure, raising on the first problem found.

    The header is checked before the size.

    Args:
        data: Complete file contents
        role: Expected bank role
        path: Source name used in error messages

    Raises:
        InvalidFormatError: If the header does not match the role's signature
        SizeMismatchError: If the data is not exactly BANK_FILE_SIZE bytes
    """
    if not validate_bank_header(data, role):
        raise InvalidFormatError(
            f"{path} is not a valid FB-01 sysex bank file "
            f"(missing expected {role.display_name} sysex header).",
            path,
        )

    if not validate_bank_size(data):
        raise SizeMismatchError(path, BANK_FILE_SIZE, len(data))
