"""
Bank data model for FB-01 voice bank dumps.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class BankRole(Enum):
    """
    Which of the two FB-01 voice banks a dump holds.

    The FB-01 sends bank A and bank B with headers that differ only
    in their final byte.
    """

    A = "a"
    B = "b"

    @classmethod
    def from_signature(cls, header: bytes) -> Optional["BankRole"]:
        """
        Detect the bank role from a dump header.

        Args:
            header: At least the first 7 bytes of a dump

        Returns:
            Matching BankRole, or None if the header matches neither bank
        """
        for role in cls:
            if header[: len(role.signature)] == role.signature:
                return role
        return None

    @property
    def signature(self) -> bytes:
        """7-byte sysex header sent by the FB-01 for this bank."""
        bank_byte = 0x00 if self is BankRole.A else 0x01
        return bytes([0xF0, 0x43, 0x75, 0x00, 0x00, 0x00, bank_byte])

    @property
    def display_name(self) -> str:
        return f"Bank {self.name}"


@dataclass
class InstrumentPacket:
    """
    One voice packet from a bank dump.

    On the wire each packet is a 2-byte size identifier, 128 bytes of
    nibblized voice data and a checksum byte. Only the data and the
    checksum are kept here.

    Attributes:
        index: Voice number within the bank (0-47)
        offset: Absolute file offset of the first data byte
        data: 128 bytes of nibblized voice data
        checksum: Checksum byte following the data
    """

    index: int
    offset: int
    data: bytes
    checksum: int = 0

    @property
    def calculated_checksum(self) -> int:
        """7-bit two's complement of the sum of the data bytes."""
        return (-sum(self.data)) & 0x7F

    @property
    def checksum_valid(self) -> bool:
        return self.calculated_checksum == self.checksum


@dataclass
class Bank:
    """
    A validated FB-01 voice bank.

    Attributes:
        role: Bank A or bank B
        packets: The 48 voice packets in file order
        source: Path or name the bank was read from
    """

    role: BankRole
    packets: List[InstrumentPacket] = field(default_factory=list)
    source: str = ""

    @property
    def raw_data(self) -> bytes:
        """All packet payloads concatenated (the raw, still nibblized bank)."""
        return b"".join(packet.data for packet in self.packets)

    @property
    def bad_checksums(self) -> List[int]:
        """Indices of packets whose checksum does not match their data."""
        return [packet.index for packet in self.packets if not packet.checksum_valid]

    def __len__(self) -> int:
        return len(self.packets)
