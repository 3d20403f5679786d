"""Tests for FB-01 nibble codec."""

import pytest
import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fb2sci.utils.nibble import merge_nibbles, split_nibbles, denibblize, nibblize


class TestMergeNibbles:
    """Test cases for merging a single byte pair."""

    def test_merge_formula(self):
        """Second byte's low nibble goes high, first byte's low nibble goes low."""
        assert merge_nibbles(0x0A, 0x05) == 0x5A
        assert merge_nibbles(0x05, 0x0A) == 0xA5

    def test_merge_ignores_upper_nibbles(self):
        """Only the low nibble of each byte contributes."""
        assert merge_nibbles(0x7A, 0x35) == 0x5A
        assert merge_nibbles(0xF0, 0xF0) == 0x00

    def test_merge_same_values(self):
        """Equal pairs produce the repeated nibble."""
        assert merge_nibbles(0x11, 0x11) == 0x11
        assert merge_nibbles(0x22, 0x22) == 0x22

    def test_merge_exhaustive(self):
        """Merge matches the formula for every byte pair."""
        for high in range(256):
            for low in range(0, 256, 17):
                assert merge_nibbles(high, low) == ((low & 0x0F) << 4) | (high & 0x0F)

    def test_split_inverts_merge(self):
        """Splitting a byte gives the pair that merges back to it."""
        for value in range(256):
            assert merge_nibbles(*split_nibbles(value)) == value


class TestDenibblize:
    """Test cases for whole-buffer denibblization."""

    def test_halves_length(self):
        """Output is half the input length."""
        assert len(denibblize(bytes(6144))) == 3072

    def test_pair_order_preserved(self):
        """Pairs are decoded in order."""
        data = bytes([0x01, 0x02, 0x03, 0x04, 0x0F, 0x00])
        assert denibblize(data) == bytes([0x21, 0x43, 0x0F])

    def test_list_input(self):
        """Lists of ints are accepted."""
        assert denibblize([0x0A, 0x05]) == b"\x5a"

    def test_odd_length_rejected(self):
        """Odd-length input cannot be paired."""
        with pytest.raises(ValueError):
            denibblize(bytes(3))

    def test_does_not_mutate_input(self):
        """Input buffer is left untouched."""
        data = bytearray([0x01, 0x02, 0x03, 0x04])
        denibblize(data)
        assert data == bytearray([0x01, 0x02, 0x03, 0x04])

    def test_empty_data(self):
        """Test with empty input."""
        assert denibblize(b"") == b""
        assert nibblize(b"") == b""

    def test_nibblize_inverse(self):
        """Nibblized data decodes to the original."""
        original = bytes(range(256))
        encoded = nibblize(original)

        assert len(encoded) == 512
        assert all(b <= 0x0F for b in encoded)
        assert denibblize(encoded) == original
