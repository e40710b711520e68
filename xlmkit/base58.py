"""Base58 encoding with the Bitcoin alphabet."""

__all__ = [
    "Base58Error",
    "ALPHABET",
    "MAX_DEC_INPUT_SIZE",
    "MAX_ENC_INPUT_SIZE",
    "base58_encode",
    "base58_decode",
]

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

MAX_DEC_INPUT_SIZE = 164
"""Maximum number of characters accepted when decoding."""

MIN_DEC_INPUT_SIZE = 2
"""Minimum number of characters accepted when decoding."""

MAX_ENC_INPUT_SIZE = 120
"""Maximum number of bytes accepted when encoding."""

_DIGITS = {ch: index for index, ch in enumerate(ALPHABET)}


class Base58Error(ValueError):
    """Raised on invalid base58 input."""


def base58_encode(data: bytes) -> str:
    """Encode ``data``; each leading zero byte becomes a leading ``1``."""
    data = bytes(data)
    if len(data) > MAX_ENC_INPUT_SIZE:
        raise Base58Error(f"input longer than {MAX_ENC_INPUT_SIZE} bytes")
    stripped = data.lstrip(b"\x00")
    zero_count = len(data) - len(stripped)
    number = int.from_bytes(stripped, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(ALPHABET[remainder])
    return ALPHABET[0] * zero_count + "".join(reversed(digits))


def base58_decode(text: str | bytes) -> bytes:
    """Decode base58 ``text``; each leading ``1`` becomes a leading zero byte."""
    if isinstance(text, (bytes, bytearray, memoryview)):
        text = bytes(text).decode("latin-1")
    if not MIN_DEC_INPUT_SIZE <= len(text) <= MAX_DEC_INPUT_SIZE:
        raise Base58Error(
            f"input length {len(text)} outside "
            f"{MIN_DEC_INPUT_SIZE}..{MAX_DEC_INPUT_SIZE}"
        )
    number = 0
    for ch in text:
        digit = _DIGITS.get(ch)
        if digit is None:
            raise Base58Error(f"invalid base58 character {ch!r}")
        number = number * 58 + digit
    zero_count = len(text) - len(text.lstrip(ALPHABET[0]))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return bytes(zero_count) + body