"""RFC 4648 base32 without padding, with a forgiving decoder."""

__all__ = ["Base32Error", "ALPHABET", "base32_encode", "base32_decode"]

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

MAX_INPUT_LENGTH = 1 << 28

_IGNORED = frozenset(" \t\r\n-")
_MISTYPED = {"0": "O", "1": "L", "8": "B"}


class Base32Error(ValueError):
    """Raised on invalid base32 input."""


def base32_encode(data: bytes, limit: int | None = None) -> str:
    """Encode ``data``; the result is silently cut to ``limit`` characters."""
    if len(data) > MAX_INPUT_LENGTH:
        raise Base32Error(f"input longer than {MAX_INPUT_LENGTH} bytes")
    out = []
    acc = 0
    bits = 0
    for byte in bytes(data):
        acc = (acc << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            out.append(ALPHABET[(acc >> bits) & 0x1F])
        acc &= (1 << bits) - 1
    if bits:
        out.append(ALPHABET[(acc << (5 - bits)) & 0x1F])
    text = "".join(out)
    if limit is not None:
        text = text[: max(limit, 0)]
    return text


def base32_decode(encoded: str | bytes, limit: int | None = None) -> bytes:
    """Decode base32 text, stopping once ``limit`` bytes have been produced.

    Whitespace and hyphens are skipped, letters may be in either case, and the
    digits 0, 1 and 8 are read as O, L and B. Decoding stops at a NUL character.
    """
    if isinstance(encoded, (bytes, bytearray, memoryview)):
        text = bytes(encoded).decode("latin-1")
    else:
        text = encoded
    out = bytearray()
    acc = 0
    bits = 0
    for ch in text:
        if limit is not None and len(out) >= limit:
            break
        if ch == "\0":
            break
        if ch in _IGNORED:
            continue
        ch = _MISTYPED.get(ch, ch)
        if "A" <= ch <= "Z" or "a" <= ch <= "z":
            digit = (ord(ch) & 0x1F) - 1
        elif "2" <= ch <= "7":
            digit = ord(ch) - ord("2") + 26
        else:
            raise Base32Error(f"invalid base32 character {ch!r}")
        acc = (acc << 5) | digit
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((acc >> bits) & 0xFF)
            acc &= (1 << bits) - 1
    return bytes(out)