"""
SCI0 FB-01 patch resource writer.

Writes denibblized bank data in the patch format Sierra's SCI0
interpreter loads for the IBM Music Feature / FB-01 driver.
"""

from pathlib import Path
from typing import Union

from fb2sci.models.patch import PatchResource
from fb2sci.utils.validation import DataIntegrityError, IOFailureError


class SCIPatchWriter:
    """
    Writer for SCI FB-01 patch resources.

    Example:
        SCIPatchWriter.write(bank_a_data, bank_b_data, "patch.002")
    """

    # File constants
    BANK_SIZE = PatchResource.VOICES_PER_BANK * PatchResource.VOICE_SIZE  # 3072
    FILE_SIZE = (
        len(PatchResource.RESOURCE_HEADER) + BANK_SIZE + len(PatchResource.BANK_SEPARATOR) + BANK_SIZE
    )  # 6148

    @classmethod
    def write(cls, bank_a: bytes, bank_b: bytes, filepath: Union[str, Path]) -> None:
        """
        Write a patch resource file, replacing any existing content.

        Args:
            bank_a: 3072 bytes of denibblized bank A data
            bank_b: 3072 bytes of denibblized bank B data
            filepath: Output file path

        Raises:
            DataIntegrityError: If either bank is not 3072 bytes
            IOFailureError: If the file cannot be written
        """
        writer = cls()
        data = writer.to_bytes(bank_a, bank_b)
        writer.write_bytes(data, filepath)

    def to_bytes(self, bank_a: bytes, bank_b: bytes) -> bytes:
        """
        Assemble the patch resource.

        Args:
            bank_a: Denibblized bank A data
            bank_b: Denibblized bank B data

        Returns:
            Complete resource file data (6148 bytes)
        """
        return self.build_resource(bank_a, bank_b).to_bytes()

    def build_resource(self, bank_a: bytes, bank_b: bytes) -> PatchResource:
        for name, data in (("bank A", bank_a), ("bank B", bank_b)):
            if len(data) != self.BANK_SIZE:
                raise DataIntegrityError(
                    f"{name} data is {len(data)} bytes, expected {self.BANK_SIZE}"
                )

        return PatchResource(bank_a=bytes(bank_a), bank_b=bytes(bank_b))

    def write_bytes(self, data: bytes, filepath: Union[str, Path]) -> None:
        """Write resource bytes to disk, truncating the destination."""
        filepath = Path(filepath)

        try:
            with open(filepath, "wb") as f:
                f.write(data)
        except OSError as e:
            raise IOFailureError(f"cannot write {filepath}: {e.strerror or e}", filepath) from e
