"""CRC-32 as used for OMCI message integrity (ITU-T I.363.5 polynomial, MSB first)."""

from __future__ import annotations

_POLYNOMIAL = 0x04C11DB7
_MASK = 0xFFFFFFFF


def _build_table() -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte << 24
        for _ in range(8):
            crc = ((crc << 1) ^ _POLYNOMIAL) if crc & 0x80000000 else (crc << 1)
            crc &= _MASK
        table.append(crc)
    return tuple(table)


_TABLE = _build_table()


def omci_crc32(crc: int, data: bytes | bytearray | memoryview) -> int:
    """Update ``crc`` with ``data`` and return the new 32-bit value.

    No initial inversion or final XOR is applied; the caller chooses the seed.
    """
    crc &= _MASK
    for byte in bytes(data):
        crc = ((crc << 8) & _MASK) ^ _TABLE[((crc >> 24) ^ byte) & 0xFF]
    return crc