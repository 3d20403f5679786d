"""Utility functions for FB2SCI."""

from fb2sci.utils.nibble import merge_nibbles, denibblize, nibblize
from fb2sci.utils.validation import (
    FB2SCIError,
    NotFoundError,
    InvalidFormatError,
    SizeMismatchError,
    LengthMismatchError,
    DataIntegrityError,
    IOFailureError,
    UserAbortedError,
)

__all__ = [
    "merge_nibbles",
    "denibblize",
    "nibblize",
    "FB2SCIError",
    "NotFoundError",
    "InvalidFormatError",
    "SizeMismatchError",
    "LengthMismatchError",
    "DataIntegrityError",
    "IOFailureError",
    "UserAbortedError",
]
