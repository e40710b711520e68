"""Fixed-width unsigned integer reading and writing in either byte order."""

__all__ = [
    "read_u16_be",
    "read_u32_be",
    "read_u64_be",
    "read_u16_le",
    "read_u32_le",
    "read_u64_le",
    "write_u16_be",
    "write_u32_be",
    "write_u64_be",
    "write_u16_le",
    "write_u32_le",
    "write_u64_le",
]


def _read(data: bytes, offset: int, size: int, order: str) -> int:
    if offset < 0 or offset + size > len(data):
        raise ValueError(
            f"cannot read {size} bytes at offset {offset} from {len(data)} bytes"
        )
    return int.from_bytes(bytes(data[offset : offset + size]), order)


def _write(value: int, size: int, order: str) -> bytes:
    # Values wider than the field are truncated, as an integer cast would do.
    return (value & ((1 << (8 * size)) - 1)).to_bytes(size, order)


def read_u16_be(data: bytes, offset: int = 0) -> int:
    """Read a big-endian 16-bit unsigned integer at ``offset``."""
    return _read(data, offset, 2, "big")


def read_u32_be(data: bytes, offset: int = 0) -> int:
    """Read a big-endian 32-bit unsigned integer at ``offset``."""
    return _read(data, offset, 4, "big")


def read_u64_be(data: bytes, offset: int = 0) -> int:
    """Read a big-endian 64-bit unsigned integer at ``offset``."""
    return _read(data, offset, 8, "big")


def read_u16_le(data: bytes, offset: int = 0) -> int:
    """Read a little-endian 16-bit unsigned integer at ``offset``."""
    return _read(data, offset, 2, "little")


def read_u32_le(data: bytes, offset: int = 0) -> int:
    """Read a little-endian 32-bit unsigned integer at ``offset``."""
    return _read(data, offset, 4, "little")


def read_u64_le(data: bytes, offset: int = 0) -> int:
    """Read a little-endian 64-bit unsigned integer at ``offset``."""
    return _read(data, offset, 8, "little")


def write_u16_be(value: int) -> bytes:
    """Encode ``value`` as 2 big-endian bytes."""
    return _write(value, 2, "big")


def write_u32_be(value: int) -> bytes:
    """Encode ``value`` as 4 big-endian bytes."""
    return _write(value, 4, "big")


def write_u64_be(value: int) -> bytes:
    """Encode ``value`` as 8 big-endian bytes."""
    return _write(value, 8, "big")


def write_u16_le(value: int) -> bytes:
    """Encode ``value`` as 2 little-endian bytes."""
    return _write(value, 2, "little")


def write_u32_le(value: int) -> bytes:
    """Encode ``value`` as 4 little-endian bytes."""
    return _write(value, 4, "little")


def write_u64_le(value: int) -> bytes:
    """Encode ``value`` as 8 little-endian bytes."""
    return _write(value, 8, "little")