"""
FB-01 voice bank sysex reader.

Reads .syx bank dumps sent by the FB-01 and extracts the 48 voice
packets they contain.
"""

from pathlib import Path
from typing import List, Optional, Union

from fb2sci.models.bank import Bank, BankRole, InstrumentPacket
from fb2sci.utils.validation import (
    BANK_FILE_SIZE,
    HEADER_SIZE,
    IOFailureError,
    NotFoundError,
    check_bank,
)


class FB01BankReader:
    """
    Reader for FB-01 voice bank dumps.

    A bank dump is exactly 6363 bytes. The first voice's data starts at
    0x4C; each following voice starts 131 bytes later, skipping the
    previous packet's checksum and the next packet's 2-byte size
    identifier.

    File layout:
        0x00   F0 43 75 00 00 00 0n   sysex header (n = 0 bank A, 1 bank B)
        0x4C   voice 0 data           128 bytes + checksum
        0x4F   ...                    size identifier of voice 1
        0xCF   voice 1 data           ...

    Example:
        bank = FB01BankReader.read("bank_a.syx", BankRole.A)
        print(f"{bank.role.display_name}: {len(bank)} voices")
    """

    # File constants
    FILE_SIZE = BANK_FILE_SIZE
    FIRST_PACKET_OFFSET = 0x4C
    PACKET_SIZE = 128
    PACKET_STRIDE = 131  # data + checksum + next packet's size identifier
    PACKET_COUNT = 48
    RAW_BANK_SIZE = PACKET_SIZE * PACKET_COUNT  # 6144

    def __init__(self):
        self._data: bytes = b""

    @classmethod
    def read(cls, filepath: Union[str, Path], role: BankRole) -> Bank:
        """
        Read an FB-01 bank dump and return a Bank.

        Args:
            filepath: Path to .syx file
            role: Which bank the file is expected to hold

        Returns:
            Validated Bank with 48 packets
        """
        reader = cls()
        return reader.parse_file(filepath, role)

    def parse_file(self, filepath: Union[str, Path], role: BankRole) -> Bank:
        """
        Parse a bank dump file.

        Args:
            filepath: Path to .syx file
            role: Expected bank role

        Returns:
            Validated Bank

        Raises:
            NotFoundError: If the file does not exist
            IOFailureError: If the file cannot be read
            InvalidFormatError: If the header does not match the role
            SizeMismatchError: If the file is not 6363 bytes
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise NotFoundError(filepath)

        try:
            with open(filepath, "rb") as f:
                data = f.read()
        except OSError as e:
            raise IOFailureError(f"cannot read {filepath}: {e.strerror or e}", filepath) from e

        return self.parse_bytes(data, role, str(filepath))

    def parse_bytes(self, data: bytes, role: BankRole, source: str = "<bytes>") -> Bank:
        """
        Validate and parse bank dump data.

        Args:
            data: Complete file contents
            role: Expected bank role
            source: Name used in error messages

        Returns:
            Validated Bank
        """
        check_bank(data, role, source)

        self._data = bytes(data)

        return Bank(role=role, packets=self._extract_packets(), source=source)

    def _extract_packets(self) -> List[InstrumentPacket]:
        """Slice the 48 voice packets out of the validated data."""
        packets = []

        for index in range(self.PACKET_COUNT):
            start = self.packet_offset(index)
            end = start + self.PACKET_SIZE
            packets.append(
                InstrumentPacket(
                    index=index,
                    offset=start,
                    data=self._data[start:end],
                    checksum=self._data[end] if end < len(self._data) else 0,
                )
            )

        return packets

    @classmethod
    def packet_offset(cls, index: int) -> int:
        """
        Get the absolute offset of a voice packet's data.

        Args:
            index: Voice number (0-47)

        Returns:
            File offset of the packet's first data byte
        """
        if not 0 <= index < cls.PACKET_COUNT:
            raise IndexError(f"Packet index must be 0-{cls.PACKET_COUNT - 1}, got {index}")

        return cls.FIRST_PACKET_OFFSET + index * cls.PACKET_STRIDE

    @classmethod
    def detect_role(cls, filepath: Union[str, Path]) -> Optional[BankRole]:
        """
        Detect which bank a dump holds from its header.

        Args:
            filepath: Path to check

        Returns:
            BankRole, or None if the header matches neither bank
        """
        filepath = Path(filepath)

        try:
            with open(filepath, "rb") as f:
                header = f.read(HEADER_SIZE)
        except OSError:
            return None

        return BankRole.from_signature(header)

    @classmethod
    def can_read(cls, filepath: Union[str, Path], role: BankRole) -> bool:
        """
        Check if a file is a valid bank dump for the given role.

        Args:
            filepath: Path to check
            role: Expected bank role

        Returns:
            True if the header and size are valid
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        try:
            with open(filepath, "rb") as f:
                header = f.read(HEADER_SIZE)
        except OSError:
            return False

        return header == role.signature and filepath.stat().st_size == cls.FILE_SIZE
