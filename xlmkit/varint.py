"""Bitcoin-style variable length integers (1, 3, 5 or 9 bytes)."""

from .byteorder import (
    read_u16_le,
    read_u32_le,
    read_u64_le,
    write_u16_le,
    write_u32_le,
    write_u64_le,
)

__all__ = ["VarintError", "varint_size", "varint_read", "varint_write"]

UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF
UINT64_MAX = 0xFFFFFFFFFFFFFFFF

_READERS = {
    0xFD: (2, read_u16_le),
    0xFE: (4, read_u32_le),
    0xFF: (8, read_u64_le),
}


class VarintError(ValueError):
    """Raised when a varint cannot be read or written."""


def _check_range(value: int) -> None:
    if not 0 <= value <= UINT64_MAX:
        raise VarintError(f"value {value} is not an unsigned 64-bit integer")


def varint_size(value: int) -> int:
    """Return the number of bytes needed to encode ``value``."""
    _check_range(value)
    if value <= 0xFC:
        return 1
    if value <= UINT16_MAX:
        return 3
    if value <= UINT32_MAX:
        return 5
    return 9


def varint_read(data: bytes) -> tuple[int, int]:
    """Decode a varint at the start of ``data``; return ``(value, length)``."""
    if len(data) < 1:
        raise VarintError("no data to read a varint from")
    prefix = data[0]
    entry = _READERS.get(prefix)
    if entry is None:
        return prefix, 1
    width, reader = entry
    if len(data) < 1 + width:
        raise VarintError(f"varint with prefix {prefix:#04x} needs {1 + width} bytes")
    return reader(data, 1), 1 + width


def varint_write(value: int) -> bytes:
    """Encode ``value`` as a varint."""
    size = varint_size(value)
    if size == 1:
        return bytes([value])
    if size == 3:
        return b"\xfd" + write_u16_le(value)
    if size == 5:
        return b"\xfe" + write_u32_le(value)
    return b"\xff" + write_u64_le(value)