"""
FB-01 to SCI format converter.

Converts a pair of FB-01 voice bank dumps (.syx) into a Sierra SCI0
FB-01 patch resource.

The conversion process:
1. Validate both bank dumps (header and exact size)
2. Extract the 48 voice packets of each bank
3. Denibblize both banks (6144 -> 3072 bytes each)
4. Write resource header, bank A, separator, bank B
"""

from pathlib import Path
from typing import Optional, Tuple, Union

from fb2sci.formats.fb01.reader import FB01BankReader
from fb2sci.formats.sci.writer import SCIPatchWriter
from fb2sci.models.bank import Bank, BankRole
from fb2sci.models.patch import PatchResource
from fb2sci.utils.nibble import denibblize
from fb2sci.utils.validation import DataIntegrityError, LengthMismatchError


def reorganize_banks(raw_a: bytes, raw_b: bytes) -> Tuple[bytes, bytes]:
    """
    Denibblize both raw banks.

    Both buffers are checked before either is transformed, so a failure
    never produces partial output.

    Args:
        raw_a: Raw bank A data (48 packets x 128 bytes)
        raw_b: Raw bank B data (48 packets x 128 bytes)

    Returns:
        Tuple of denibblized (bank A, bank B) data, 3072 bytes each

    Raises:
        LengthMismatchError: If the buffers differ in length
        DataIntegrityError: If the buffers are not 6144 bytes
    """
    if len(raw_a) != len(raw_b):
        raise LengthMismatchError(len(raw_a), len(raw_b))

    if len(raw_a) != FB01BankReader.RAW_BANK_SIZE:
        raise DataIntegrityError(
            f"bank buffers are {len(raw_a)} bytes, expected {FB01BankReader.RAW_BANK_SIZE}"
        )

    return denibblize(raw_a), denibblize(raw_b)


class FB01ToSCIConverter:
    """
    Converter from FB-01 bank dumps to an SCI patch resource.

    Attributes:
        bank_a: Bank A as loaded by the last conversion
        bank_b: Bank B as loaded by the last conversion
        resource: Patch resource built by the last conversion
    """

    def __init__(self):
        self.reader = FB01BankReader()
        self.writer = SCIPatchWriter()
        self.bank_a: Optional[Bank] = None
        self.bank_b: Optional[Bank] = None
        self.resource: Optional[PatchResource] = None

    def convert(self, bank_a_path: Union[str, Path], bank_b_path: Union[str, Path]) -> bytes:
        """
        Convert two bank dumps to patch resource data.

        Args:
            bank_a_path: Path to the bank A dump
            bank_b_path: Path to the bank B dump

        Returns:
            Patch resource file data (6148 bytes)
        """
        self.bank_a = self.reader.parse_file(bank_a_path, BankRole.A)
        self.bank_b = self.reader.parse_file(bank_b_path, BankRole.B)

        return self.convert_banks(self.bank_a, self.bank_b)

    def convert_banks(self, bank_a: Bank, bank_b: Bank) -> bytes:
        """
        Convert already loaded banks to patch resource data.

        Args:
            bank_a: Validated bank A
            bank_b: Validated bank B

        Returns:
            Patch resource file data
        """
        data_a, data_b = reorganize_banks(bank_a.raw_data, bank_b.raw_data)
        self.resource = self.writer.build_resource(data_a, data_b)

        return self.resource.to_bytes()

    def convert_file(
        self,
        bank_a_path: Union[str, Path],
        bank_b_path: Union[str, Path],
        output_path: Union[str, Path],
    ) -> PatchResource:
        """
        Convert two bank dumps and write the patch resource.

        Nothing is written unless both banks convert successfully.

        Args:
            bank_a_path: Path to the bank A dump
            bank_b_path: Path to the bank B dump
            output_path: Output file path (truncated if it exists)

        Returns:
            The written PatchResource
        """
        data = self.convert(bank_a_path, bank_b_path)
        self.writer.write_bytes(data, output_path)

        return self.resource


def convert_fb01_to_sci(
    bank_a_path: Union[str, Path],
    bank_b_path: Union[str, Path],
    output_path: Union[str, Path],
) -> PatchResource:
    """
    Convenience function to convert FB-01 bank dumps to an SCI patch file.

    Args:
        bank_a_path: Path to the bank A dump
        bank_b_path: Path to the bank B dump
        output_path: Output patch file path

    Returns:
        The written PatchResource
    """
    converter = FB01ToSCIConverter()
    return converter.convert_file(bank_a_path, bank_b_path, output_path)
