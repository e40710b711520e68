"""BIP32 derivation path reading and formatting."""

from .byteorder import read_u32_be

__all__ = ["Bip32Error", "MAX_BIP32_PATH", "HARDENED", "bip32_path_read", "bip32_path_format"]

MAX_BIP32_PATH = 10
"""Maximum number of elements in a BIP32 path."""

HARDENED = 0x80000000
"""Flag bit marking a hardened path element."""

_UINT32_MAX = 0xFFFFFFFF


class Bip32Error(ValueError):
    """Raised on an invalid BIP32 path."""


def _check_count(count: int) -> None:
    if not 1 <= count <= MAX_BIP32_PATH:
        raise Bip32Error(f"path length {count} outside 1..{MAX_BIP32_PATH}")


def bip32_path_read(data: bytes, count: int) -> list[int]:
    """Read ``count`` big-endian 32-bit path elements from ``data``."""
    _check_count(count)
    if len(data) < 4 * count:
        raise Bip32Error(f"{count} path elements need {4 * count} bytes, got {len(data)}")
    return [read_u32_be(data, 4 * index) for index in range(count)]


def bip32_path_format(path: list[int]) -> str:
    """Format ``path`` as text, such as ``44'/148'/0'``."""
    _check_count(len(path))
    parts = []
    for element in path:
        if not 0 <= element <= _UINT32_MAX:
            raise Bip32Error(f"path element {element} is not an unsigned 32-bit integer")
        text = str(element & ~HARDENED & _UINT32_MAX)
        if element & HARDENED:
            text += "'"
        parts.append(text)
    return "/".join(parts)