"""
FB-01 nibble encoding/decoding utilities.

The FB-01 transmits voice data nibblized so that every sysex byte stays
within the 7-bit MIDI data range: each real data byte is sent as two
bytes, each carrying one nibble in its low 4 bits.

Byte pair order on the wire is (low nibble, high nibble):
- First byte:  low nibble of the data byte
- Second byte: high nibble of the data byte

Example:
    Data byte: 0x5A
    Wire:      [0x0A, 0x05]
"""

from typing import List, Tuple, Union


def merge_nibbles(high_byte: int, low_byte: int) -> int:
    """
    Merge one nibblized byte pair into a data byte.

    The second byte of the pair supplies the upper nibble and the
    first byte supplies the lower nibble.

    Args:
        high_byte: First byte of the pair (carries the lower data nibble)
        low_byte: Second byte of the pair (carries the upper data nibble)

    Returns:
        Merged data byte (0-255)

    Example:
        >>> hex(merge_nibbles(0x0A, 0x05))
        '0x5a'
    """
    return ((low_byte & 0x0F) << 4) | (high_byte & 0x0F)


def split_nibbles(value: int) -> Tuple[int, int]:
    """Split a data byte into its nibblized (first, second) byte pair."""
    return value & 0x0F, (value >> 4) & 0x0F


def denibblize(nibblized_data: Union[bytes, List[int]]) -> bytes:
    """
    Decode nibblized data to raw data.

    For every 2 bytes of input, produces 1 byte of output. The result
    is written to a fresh buffer; pair order is preserved.

    Args:
        nibblized_data: Nibblized voice data (even length)

    Returns:
        Decoded data, half the input length

    Raises:
        ValueError: If the input length is odd
    """
    if isinstance(nibblized_data, list):
        nibblized_data = bytes(nibblized_data)

    if len(nibblized_data) % 2:
        raise ValueError(f"Nibblized data must have even length, got {len(nibblized_data)}")

    result = bytearray(len(nibblized_data) // 2)

    for i in range(0, len(nibblized_data), 2):
        result[i // 2] = merge_nibbles(nibblized_data[i], nibblized_data[i + 1])

    return bytes(result)


def nibblize(raw_data: Union[bytes, List[int]]) -> bytes:
    """
    Encode raw data in FB-01 nibblized form.

    Args:
        raw_data: Raw voice data

    Returns:
        Nibblized data, twice the input length
    """
    if isinstance(raw_data, list):
        raw_data = bytes(raw_data)

    result = bytearray()
    for value in raw_data:
        result.extend(split_nibbles(value))

    return bytes(result)
