"""Data models for FB-01 banks and SCI patch resources."""

from fb2sci.models.bank import Bank, BankRole, InstrumentPacket
from fb2sci.models.patch import PatchResource

__all__ = [
    "Bank",
    "BankRole",
    "InstrumentPacket",
    "PatchResource",
]
