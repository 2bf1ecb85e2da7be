"""CRC16-CCITT implementation."""
from __future__ import annotations

CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF


def crc16_ccitt(data: bytes | str) -> str:
    """Compute CRC16-CCITT (0x1021, init 0xFFFF) for EMV payload strings.

    ``str`` input is encoded as ASCII; Pix payloads never leave the 7-bit range.
    """

    if isinstance(data, str):
        data = data.encode("ascii")

    checksum = CRC16_INIT
    for byte in data:
        checksum ^= byte << 8
        for _ in range(8):
            if checksum & 0x8000:
                checksum = (checksum << 1) ^ CRC16_POLY
            else:
                checksum <<= 1
            checksum &= 0xFFFF
    return f"{checksum:04X}"
