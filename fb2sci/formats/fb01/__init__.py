"""FB-01 format handlers."""

from fb2sci.formats.fb01.reader import FB01BankReader

__all__ = ["FB01BankReader"]
