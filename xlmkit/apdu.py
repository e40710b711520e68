"""APDU command parsing and dispatch to the command handlers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .buffer import Buffer
from .types import APP_CONFIGURATION_SIZE, APP_VERSION_SIZE, CLA, Instruction

__all__ = [
    "ApduError",
    "WrongDataLength",
    "ClaNotSupported",
    "InsNotSupported",
    "WrongP1P2",
    "Command",
    "CommandHandler",
    "MAJOR_VERSION",
    "MINOR_VERSION",
    "PATCH_VERSION",
    "P1_FIRST",
    "P1_MORE",
    "P2_LAST",
    "P2_MORE",
    "parse_apdu",
    "app_configuration",
    "dispatch",
]

MAJOR_VERSION = 5
MINOR_VERSION = 0
PATCH_VERSION = 1

P1_FIRST = 0x00
"""P1 of the first chunk of a transaction."""
P1_MORE = 0x80
"""P1 of a following chunk of a transaction."""
P2_LAST = 0x00
"""P2 of the last chunk of a transaction."""
P2_MORE = 0x80
"""P2 of a chunk that more chunks will follow."""

_OFFSET_CLA = 0
_OFFSET_INS = 1
_OFFSET_P1 = 2
_OFFSET_P2 = 3
_OFFSET_LC = 4
_OFFSET_CDATA = 5


class ApduError(Exception):
    """Base class of the errors reported back for a command."""


class WrongDataLength(ApduError):
    """The command data is missing or its length is wrong."""


class ClaNotSupported(ApduError):
    """The instruction class is not the application's."""


class InsNotSupported(ApduError):
    """The instruction code is unknown."""


class WrongP1P2(ApduError):
    """P1 or P2 has a value the instruction does not accept."""


@dataclass(frozen=True)
class Command:
    """A structured APDU command."""

    cla: int
    ins: int
    p1: int
    p2: int
    data: bytes = b""

    @property
    def lc(self) -> int:
        """Length of the command data."""
        return len(self.data)


def parse_apdu(raw: bytes) -> Command:
    """Parse a raw APDU: CLA, INS, P1, P2, Lc and exactly Lc data bytes."""
    raw = bytes(raw)
    if len(raw) < _OFFSET_CDATA or len(raw) - _OFFSET_CDATA != raw[_OFFSET_LC]:
        raise WrongDataLength(f"malformed APDU of {len(raw)} bytes")
    return Command(
        cla=raw[_OFFSET_CLA],
        ins=raw[_OFFSET_INS],
        p1=raw[_OFFSET_P1],
        p2=raw[_OFFSET_P2],
        data=raw[_OFFSET_CDATA:],
    )


def app_configuration(hash_signing_enabled: bool) -> bytes:
    """Response data of GET_APP_CONFIGURATION: the hash-signing flag then the version."""
    payload = bytes(
        [int(bool(hash_signing_enabled)), MAJOR_VERSION, MINOR_VERSION, PATCH_VERSION]
    )
    assert len(payload) == APP_CONFIGURATION_SIZE + APP_VERSION_SIZE
    return payload


class CommandHandler(ABC):
    """Receiver of the dispatched commands."""

    hash_signing_enabled: bool = False

    def get_app_configuration(self) -> Any:
        """Handle GET_APP_CONFIGURATION."""
        return app_configuration(self.hash_signing_enabled)

    @abstractmethod
    def get_public_key(self, data: Buffer, display: bool) -> Any:
        """Handle GET_PUBLIC_KEY with a BIP32 path in ``data``."""

    @abstractmethod
    def sign_tx_hash(self, data: Buffer) -> Any:
        """Handle SIGN_TX_HASH with a BIP32 path and a hash in ``data``."""

    @abstractmethod
    def sign_tx(self, data: Buffer, is_first_chunk: bool, more: bool) -> Any:
        """Handle one chunk of SIGN_TX."""


def _require_data(command: Command) -> Buffer:
    if not command.data:
        raise WrongDataLength("command data is required")
    return Buffer(command.data)


def dispatch(command: Command, handler: CommandHandler) -> Any:
    """Check ``command`` and pass it to the matching ``handler`` method."""
    if command.cla != CLA:
        raise ClaNotSupported(f"class {command.cla:#04x} not supported")

    if command.ins == Instruction.GET_APP_CONFIGURATION:
        if command.p1 != 0 or command.p2 != 0:
            raise WrongP1P2("P1 and P2 must be 0")
        return handler.get_app_configuration()

    if command.ins == Instruction.GET_PUBLIC_KEY:
        if command.p1 != 0 or command.p2 > 1:
            raise WrongP1P2("P1 must be 0 and P2 0 or 1")
        return handler.get_public_key(_require_data(command), bool(command.p2))

    if command.ins == Instruction.SIGN_TX_HASH:
        if command.p1 != 0 or command.p2 != 0:
            raise WrongP1P2("P1 and P2 must be 0")
        return handler.sign_tx_hash(_require_data(command))

    if command.ins == Instruction.SIGN_TX:
        if command.p1 not in (P1_FIRST, P1_MORE) or command.p2 not in (P2_LAST, P2_MORE):
            raise WrongP1P2("invalid P1 or P2 for a transaction chunk")
        return handler.sign_tx(
            _require_data(command),
            command.p1 == P1_FIRST,
            bool(command.p2 & P2_MORE),
        )

    raise InsNotSupported(f"instruction {command.ins:#04x} not supported")