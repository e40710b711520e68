"""Protocol constants and enumerations shared by the signing application."""

from enum import IntEnum

__all__ = [
    "CLA",
    "APP_VERSION_SIZE",
    "APP_CONFIGURATION_SIZE",
    "DETAIL_CAPTION_MAX_LENGTH",
    "DETAIL_VALUE_MAX_LENGTH",
    "RAW_TX_MAX_SIZE",
    "RAW_TX_MAX_SIZE_SMALL",
    "SIGNATURE_SIZE",
    "IoState",
    "Instruction",
    "RequestType",
    "ParseState",
]

CLA = 0xE0
"""Instruction class of the application."""

APP_VERSION_SIZE = 3
"""Length of MAJOR || MINOR || PATCH."""

APP_CONFIGURATION_SIZE = 1
"""Length of the configuration flags sent before the version."""

DETAIL_CAPTION_MAX_LENGTH = 20
"""Capacity of a detail caption, terminator included."""

DETAIL_VALUE_MAX_LENGTH = 89
"""Capacity of a detail value, terminator included."""

RAW_TX_MAX_SIZE = 5120
"""Maximum transaction size in bytes."""

RAW_TX_MAX_SIZE_SMALL = 1120
"""Maximum transaction size in bytes on small-memory devices."""

SIGNATURE_SIZE = 64
"""Length of an ed25519 signature in bytes."""


class IoState(IntEnum):
    """State of the APDU exchange."""

    READY = 0
    RECEIVED = 1
    WAITING = 2


class Instruction(IntEnum):
    """INS byte of the supported APDU commands."""

    GET_PUBLIC_KEY = 0x02
    SIGN_TX = 0x04
    GET_APP_CONFIGURATION = 0x06
    SIGN_TX_HASH = 0x08


class RequestType(IntEnum):
    """Kind of user request being processed."""

    CONFIRM_ADDRESS = 0
    CONFIRM_TRANSACTION = 1
    CONFIRM_TRANSACTION_HASH = 2


class ParseState(IntEnum):
    """Progress of a transaction through parsing and approval."""

    NONE = 0
    PARSED = 1
    APPROVED = 2