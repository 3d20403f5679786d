"""
FB2SCI - Converter from Yamaha FB-01 voice banks to Sierra SCI patch resources.

This library provides tools to:
- Read and validate FB-01 voice bank sysex dumps (.syx)
- Denibblize the voice data of both banks
- Write the SCI0 FB-01 patch resource (patch.002)

Example usage:
    from fb2sci import FB01BankReader, BankRole
    from fb2sci.converters import convert_fb01_to_sci

    # Inspect a bank
    bank = FB01BankReader.read("bank_a.syx", BankRole.A)

    # Convert both banks to a patch resource
    convert_fb01_to_sci("bank_a.syx", "bank_b.syx", "patch.002")
"""

__version__ = "1.00"
__author__ = "FB2SCI Contributors"

from fb2sci.formats.fb01.reader import FB01BankReader
from fb2sci.formats.sci.writer import SCIPatchWriter
from fb2sci.models.bank import Bank, BankRole, InstrumentPacket
from fb2sci.models.patch import PatchResource

__all__ = [
    "FB01BankReader",
    "SCIPatchWriter",
    "Bank",
    "BankRole",
    "InstrumentPacket",
    "PatchResource",
]
