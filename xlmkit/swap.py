"""Parameters handed over by an exchange application for a swap."""

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "SwapError",
    "SwapCommand",
    "SwapValues",
    "ENCODED_ED25519_PUBLIC_KEY_LENGTH",
    "MEMO_CAPACITY",
    "swap_str_to_u64",
    "copy_transaction_parameters",
]

ENCODED_ED25519_PUBLIC_KEY_LENGTH = 57
"""Capacity of an encoded account address, terminator included."""

MEMO_CAPACITY = 20
"""Capacity of a swap memo, terminator included."""


class SwapError(ValueError):
    """Raised when swap parameters are invalid."""


class SwapCommand(IntEnum):
    """Command requested by the calling exchange application."""

    SIGN_TRANSACTION = 2
    CHECK_ADDRESS = 3
    GET_PRINTABLE_AMOUNT = 4


@dataclass(frozen=True)
class SwapValues:
    """What a swap transaction must match before it is signed."""

    amount: int
    fees: int
    destination: str
    memo: str = ""


def swap_str_to_u64(data: bytes) -> int:
    """Read up to 8 bytes as a big-endian unsigned integer."""
    data = bytes(data)
    if len(data) > 8:
        raise SwapError(f"{len(data)} bytes do not fit in 64 bits")
    return int.from_bytes(data, "big")


def copy_transaction_parameters(
    destination: str, memo: str, amount: bytes, fee_amount: bytes
) -> SwapValues:
    """Check and collect the parameters of a swap transaction."""
    if len(destination) >= ENCODED_ED25519_PUBLIC_KEY_LENGTH:
        raise SwapError(
            f"destination longer than {ENCODED_ED25519_PUBLIC_KEY_LENGTH - 1} characters"
        )
    if len(memo) >= MEMO_CAPACITY:
        raise SwapError(f"memo longer than {MEMO_CAPACITY - 1} characters")
    return SwapValues(
        amount=swap_str_to_u64(amount),
        fees=swap_str_to_u64(fee_amount),
        destination=destination,
        memo=memo,
    )