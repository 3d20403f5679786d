"""Tests for FB-01 to SCI conversion."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from conftest import build_bank
from fb2sci.converters.fb01_to_sci import (
    FB01ToSCIConverter,
    convert_fb01_to_sci,
    reorganize_banks,
)
from fb2sci.models.bank import BankRole
from fb2sci.utils.nibble import merge_nibbles, nibblize
from fb2sci.utils.validation import (
    DataIntegrityError,
    InvalidFormatError,
    LengthMismatchError,
    NotFoundError,
    SizeMismatchError,
)


class TestReorganizeBanks:
    """Test cases for the bank reorganization step."""

    def test_halves_both_banks(self):
        a, b = reorganize_banks(b"\x11" * 6144, b"\x22" * 6144)

        assert a == b"\x11" * 3072
        assert b == b"\x22" * 3072

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError) as excinfo:
            reorganize_banks(bytes(6144), bytes(6016))

        assert excinfo.value.length_a == 6144
        assert excinfo.value.length_b == 6016

    def test_unexpected_size(self):
        with pytest.raises(DataIntegrityError):
            reorganize_banks(bytes(6016), bytes(6016))

    def test_banks_independent(self):
        """One bank's result does not depend on the other bank's data."""
        raw_a = bytes(i & 0x0F for i in range(6144))
        first, _ = reorganize_banks(raw_a, bytes(6144))
        second, _ = reorganize_banks(raw_a, b"\x0f" * 6144)

        assert first == second

    def test_byte_order_matters(self):
        a, _ = reorganize_banks(b"\x01\x02" * 3072, bytes(6144))
        swapped, _ = reorganize_banks(b"\x02\x01" * 3072, bytes(6144))

        assert a[0] == merge_nibbles(0x01, 0x02) == 0x21
        assert swapped[0] == 0x12


class TestFB01ToSCIConverter:
    """Test cases for the full pipeline."""

    def test_end_to_end(self, bank_a_file, bank_b_file, output_file):
        """Bank A filled with 0x11 and bank B with 0x22 produce the expected resource."""
        convert_fb01_to_sci(bank_a_file, bank_b_file, output_file)

        data = output_file.read_bytes()
        assert len(data) == 6148
        assert data[0:2] == b"\x89\x00"
        assert data[2] == merge_nibbles(0x11, 0x11) == 0x11
        assert data[0x0C02:0x0C04] == b"\xab\xcd"
        assert data[0x0C04] == merge_nibbles(0x22, 0x22) == 0x22

    def test_voice_data_recovered(self, tmp_path):
        """Nibblized voice data comes back as the original voices."""
        voices = [bytes([(i * 5 + j) & 0xFF for j in range(64)]) for i in range(48)]

        a_path = tmp_path / "a.syx"
        b_path = tmp_path / "b.syx"
        a_path.write_bytes(build_bank(BankRole.A, packet_data=lambda i: nibblize(voices[i])))
        b_path.write_bytes(build_bank(BankRole.B, fill=0x00))

        converter = FB01ToSCIConverter()
        data = converter.convert(a_path, b_path)

        assert data[2 : 2 + 3072] == b"".join(voices)
        assert converter.resource.voice(BankRole.A, 7) == voices[7]
        assert converter.bank_a.bad_checksums == []

    def test_output_size_always_fixed(self, tmp_path):
        for fill in (0x00, 0x0F, 0x7F):
            a_path = tmp_path / "a.syx"
            b_path = tmp_path / "b.syx"
            a_path.write_bytes(build_bank(BankRole.A, fill=fill))
            b_path.write_bytes(build_bank(BankRole.B, packet_data=lambda i: bytes([i]) * 128))

            assert len(FB01ToSCIConverter().convert(a_path, b_path)) == 6148

    def test_swapped_inputs_rejected(self, bank_a_file, bank_b_file, output_file):
        with pytest.raises(InvalidFormatError):
            convert_fb01_to_sci(bank_b_file, bank_a_file, output_file)

        assert not output_file.exists()

    def test_bad_bank_b_writes_nothing(self, bank_a_file, tmp_path, output_file):
        bad = tmp_path / "bad.syx"
        bad.write_bytes(build_bank(BankRole.B)[:-1])

        with pytest.raises(SizeMismatchError):
            convert_fb01_to_sci(bank_a_file, bad, output_file)

        assert not output_file.exists()

    def test_missing_input(self, bank_a_file, tmp_path, output_file):
        with pytest.raises(NotFoundError):
            convert_fb01_to_sci(bank_a_file, tmp_path / "missing.syx", output_file)
