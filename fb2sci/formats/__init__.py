"""Format handlers for FB-01 bank dumps and SCI patch resources."""

from fb2sci.formats.fb01 import FB01BankReader
from fb2sci.formats.sci import SCIPatchWriter

__all__ = ["FB01BankReader", "SCIPatchWriter"]
