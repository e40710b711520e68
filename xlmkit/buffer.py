"""A read cursor over a byte string."""

from enum import Enum

from .bip32 import Bip32Error, bip32_path_read
from .byteorder import (
    read_u16_be,
    read_u16_le,
    read_u32_be,
    read_u32_le,
    read_u64_be,
    read_u64_le,
)
from .varint import VarintError, varint_read

__all__ = ["Endianness", "BufferError", "Buffer"]


class Endianness(Enum):
    """Byte order of a multi-byte integer."""

    BE = "big"
    LE = "little"


class BufferError(ValueError):
    """Raised when a read or seek falls outside the buffer."""


_READERS = {
    (2, Endianness.BE): read_u16_be,
    (2, Endianness.LE): read_u16_le,
    (4, Endianness.BE): read_u32_be,
    (4, Endianness.LE): read_u32_le,
    (8, Endianness.BE): read_u64_be,
    (8, Endianness.LE): read_u64_le,
}


class Buffer:
    """Immutable bytes with a movable read offset.

    Every failed read or seek raises :class:`BufferError` and leaves the
    offset where it was.
    """

    __slots__ = ("_data", "_offset")

    def __init__(self, data: bytes, offset: int = 0) -> None:
        self._data = bytes(data)
        self._offset = 0
        self.seek_set(offset)

    def __repr__(self) -> str:
        return f"Buffer(size={len(self._data)}, offset={self._offset})"

    @property
    def data(self) -> bytes:
        """The whole underlying byte string."""
        return self._data

    @property
    def size(self) -> int:
        """Total number of bytes."""
        return len(self._data)

    @property
    def offset(self) -> int:
        """Current read position."""
        return self._offset

    def remaining(self) -> int:
        """Number of bytes left after the offset."""
        return len(self._data) - self._offset

    def can_read(self, n: int) -> bool:
        """Tell whether ``n`` more bytes can be read."""
        return self.remaining() >= n

    def seek_set(self, offset: int) -> None:
        """Move to an absolute ``offset``."""
        if not 0 <= offset <= len(self._data):
            raise BufferError(f"offset {offset} outside 0..{len(self._data)}")
        self._offset = offset

    def seek_cur(self, offset: int) -> None:
        """Move forward by ``offset`` bytes."""
        target = self._offset + offset
        if offset < 0 or target > len(self._data):
            raise BufferError(
                f"cannot move {offset} bytes from offset {self._offset} "
                f"in {len(self._data)} bytes"
            )
        self._offset = target

    def seek_end(self, offset: int) -> None:
        """Move to ``offset`` bytes before the end."""
        if not 0 <= offset <= len(self._data):
            raise BufferError(f"offset {offset} from end outside 0..{len(self._data)}")
        self._offset = len(self._data) - offset

    def _take(self, n: int) -> bytes:
        if not self.can_read(n):
            raise BufferError(f"cannot read {n} bytes, {self.remaining()} left")
        chunk = self._data[self._offset : self._offset + n]
        self._offset += n
        return chunk

    def _read_int(self, width: int, endianness: Endianness) -> int:
        reader = _READERS[(width, Endianness(endianness))]
        return reader(self._take(width), 0)

    def read_u8(self) -> int:
        """Read one byte."""
        return self._take(1)[0]

    def read_u16(self, endianness: Endianness = Endianness.BE) -> int:
        """Read a 16-bit unsigned integer."""
        return self._read_int(2, endianness)

    def read_u32(self, endianness: Endianness = Endianness.BE) -> int:
        """Read a 32-bit unsigned integer."""
        return self._read_int(4, endianness)

    def read_u64(self, endianness: Endianness = Endianness.BE) -> int:
        """Read a 64-bit unsigned integer."""
        return self._read_int(8, endianness)

    def read_varint(self) -> int:
        """Read a Bitcoin-style varint."""
        try:
            value, length = varint_read(self._data[self._offset :])
        except VarintError as exc:
            raise BufferError(str(exc)) from exc
        self._offset += length
        return value

    def read_bip32_path(self, count: int) -> list[int]:
        """Read a BIP32 path of ``count`` big-endian 32-bit elements."""
        try:
            path = bip32_path_read(self._data[self._offset :], count)
        except Bip32Error as exc:
            raise BufferError(str(exc)) from exc
        self._offset += 4 * count
        return path

    def copy(self, max_length: int | None = None) -> bytes:
        """Return the remaining bytes without moving the offset.

        Raises if more than ``max_length`` bytes remain.
        """
        chunk = self._data[self._offset :]
        if max_length is not None and len(chunk) > max_length:
            raise BufferError(f"{len(chunk)} bytes left, more than {max_length}")
        return chunk

    def move(self, length: int) -> bytes:
        """Return the remaining bytes, which must fit in ``length``.

        The offset advances by ``length`` only when that many bytes remain.
        """
        chunk = self.copy(length)
        if self.can_read(length):
            self._offset += length
        return chunk