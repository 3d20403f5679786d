"""Test configuration and fixtures."""

import sys
from pathlib import Path
from typing import Callable, Optional

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from fb2sci.models.bank import BankRole

BANK_FILE_SIZE = 6363
FIRST_PACKET_OFFSET = 0x4C
PACKET_SIZE = 128
PACKET_STRIDE = 131
PACKET_COUNT = 48


def build_bank(
    role: BankRole,
    fill: Optional[int] = None,
    packet_data: Optional[Callable[[int], bytes]] = None,
) -> bytes:
    """
    Build a synthetic FB-01 bank dump.

    Args:
        role: Bank the dump claims to hold
        fill: Value for every packet data byte
        packet_data: Function returning the 128 data bytes of packet i

    Returns:
        6363 bytes laid out like a real FB-01 bank dump
    """
    data = bytearray(BANK_FILE_SIZE)
    data[:7] = role.signature

    for i in range(PACKET_COUNT):
        start = FIRST_PACKET_OFFSET + i * PACKET_STRIDE
        if packet_data is not None:
            payload = packet_data(i)
        else:
            payload = bytes([fill if fill is not None else i & 0x0F]) * PACKET_SIZE

        data[start - 2 : start] = b"\x01\x00"  # Size identifier: 128 bytes
        data[start : start + PACKET_SIZE] = payload
        data[start + PACKET_SIZE] = (-sum(payload)) & 0x7F

    data[-1] = 0xF7
    return bytes(data)


@pytest.fixture
def bank_a_data():
    """Return a valid bank A dump with all packet bytes set to 0x11."""
    return build_bank(BankRole.A, fill=0x11)


@pytest.fixture
def bank_b_data():
    """Return a valid bank B dump with all packet bytes set to 0x22."""
    return build_bank(BankRole.B, fill=0x22)


@pytest.fixture
def bank_a_file(tmp_path, bank_a_data):
    """Return path to a bank A dump on disk."""
    path = tmp_path / "bank_a.syx"
    path.write_bytes(bank_a_data)
    return path


@pytest.fixture
def bank_b_file(tmp_path, bank_b_data):
    """Return path to a bank B dump on disk."""
    path = tmp_path / "bank_b.syx"
    path.write_bytes(bank_b_data)
    return path


@pytest.fixture
def output_file(tmp_path):
    """Return path for the patch resource (not created)."""
    return tmp_path / "patch.002"
