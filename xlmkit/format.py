"""Text formatting of integers, fixed-point amounts and bytes."""

__all__ = ["FormatError", "format_i64", "format_u64", "format_fpu64", "format_hex"]

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1


class FormatError(ValueError):
    """Raised when a value cannot be formatted within the given limits."""


def _fit(text: str, max_length: int | None) -> str:
    if max_length is not None and len(text) > max_length:
        raise FormatError(f"{text!r} is longer than {max_length} characters")
    return text


def _check_u64(value: int) -> None:
    if not 0 <= value <= _UINT64_MAX:
        raise FormatError(f"{value} is not an unsigned 64-bit integer")


def format_i64(value: int, max_length: int | None = None) -> str:
    """Format a signed 64-bit integer in decimal."""
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise FormatError(f"{value} is not a signed 64-bit integer")
    return _fit(str(value), max_length)


def format_u64(value: int, max_length: int | None = None) -> str:
    """Format an unsigned 64-bit integer in decimal."""
    _check_u64(value)
    return _fit(str(value), max_length)


def format_fpu64(value: int, decimals: int, max_length: int | None = None) -> str:
    """Format ``value`` as a fixed-point number with ``decimals`` fractional digits.

    The integer part is always followed by a dot, even with no decimals.
    """
    _check_u64(value)
    if decimals < 0:
        raise FormatError("decimals must not be negative")
    digits = str(value)
    if len(digits) <= decimals:
        text = "0." + digits.rjust(decimals, "0")
    else:
        shift = len(digits) - decimals
        text = f"{digits[:shift]}.{digits[shift:]}"
    return _fit(text, max_length)


def format_hex(data: bytes, max_length: int | None = None) -> str:
    """Format ``data`` as lowercase hexadecimal."""
    return _fit(bytes(data).hex(), max_length)