"""
Sierra SCI0 FB-01 patch resource model.
"""

from dataclasses import dataclass
from typing import List

from fb2sci.models.bank import BankRole


@dataclass
class PatchResource:
    """
    Denibblized voice data for both banks, ready to be written.

    Layout of the resource file (6148 bytes):

        0x0000  89 00         resource type identifier
        0x0002  bank A data   48 voices x 64 bytes
        0x0C02  AB CD         bank separator
        0x0C04  bank B data   48 voices x 64 bytes

    Attributes:
        bank_a: 3072 bytes of denibblized bank A voice data
        bank_b: 3072 bytes of denibblized bank B voice data
    """

    RESOURCE_HEADER = b"\x89\x00"
    BANK_SEPARATOR = b"\xab\xcd"
    VOICES_PER_BANK = 48
    VOICE_SIZE = 64
    VOICE_NAME_LENGTH = 7

    bank_a: bytes
    bank_b: bytes

    @property
    def size(self) -> int:
        return (
            len(self.RESOURCE_HEADER)
            + len(self.bank_a)
            + len(self.BANK_SEPARATOR)
            + len(self.bank_b)
        )

    def to_bytes(self) -> bytes:
        """Assemble the complete resource file contents."""
        return self.RESOURCE_HEADER + self.bank_a + self.BANK_SEPARATOR + self.bank_b

    def bank_data(self, role: BankRole) -> bytes:
        return self.bank_a if role is BankRole.A else self.bank_b

    def voice(self, role: BankRole, index: int) -> bytes:
        """
        Get the 64 bytes of one voice.

        Args:
            role: Bank to read from
            index: Voice number (0-47)

        Returns:
            Voice data
        """
        if not 0 <= index < self.VOICES_PER_BANK:
            raise IndexError(f"Voice index must be 0-{self.VOICES_PER_BANK - 1}, got {index}")

        start = index * self.VOICE_SIZE
        return self.bank_data(role)[start : start + self.VOICE_SIZE]

    def voice_names(self, role: BankRole) -> List[str]:
        """Get the names of all voices in a bank."""
        return self.names_in(self.bank_data(role))

    @classmethod
    def names_in(cls, bank_data: bytes) -> List[str]:
        """
        Extract voice names from denibblized bank data.

        The FB-01 stores each voice name in the first 7 bytes of its data.
        Non-printable bytes are shown as spaces.
        """
        names = []
        for start in range(0, len(bank_data), cls.VOICE_SIZE):
            raw = bank_data[start : start + cls.VOICE_NAME_LENGTH]
            names.append("".join(chr(b) if 32 <= b < 127 else " " for b in raw).rstrip())
        return names
