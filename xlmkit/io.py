"""APDU response framing and the receive/respond cycle of a session."""

from collections.abc import Callable

from .byteorder import write_u16_be
from .types import IoState

__all__ = [
    "SW_OK",
    "SW_WRONG_RESPONSE_LENGTH",
    "IO_APDU_BUFFER_SIZE",
    "MAX_RESPONSE_DATA",
    "ResponseTooLong",
    "frame_response",
    "ApduSession",
]

SW_OK = 0x9000
"""Status word of a successful command."""

SW_WRONG_RESPONSE_LENGTH = 0xB000
"""Status word sent instead of a response that does not fit."""

IO_APDU_BUFFER_SIZE = 260
"""Size of the APDU exchange buffer."""

MAX_RESPONSE_DATA = IO_APDU_BUFFER_SIZE - 2
"""Most response data bytes that fit before the status word."""

Exchange = Callable[[bytes, bool], bytes]
"""Transport callable: ``exchange(data, receive)``.

It transmits ``data`` (possibly empty) and, when ``receive`` is true, waits
for and returns the next command; otherwise it returns ``b""``.
"""


class ResponseTooLong(ValueError):
    """Raised when response data does not fit in the exchange buffer."""


def frame_response(data: bytes, sw: int) -> bytes:
    """Return ``data`` followed by the big-endian status word ``sw``."""
    data = bytes(data)
    if not 0 <= sw <= 0xFFFF:
        raise ValueError(f"status word {sw} is not a 16-bit value")
    if len(data) > MAX_RESPONSE_DATA:
        raise ResponseTooLong(
            f"{len(data)} bytes of response data, at most {MAX_RESPONSE_DATA} fit"
        )
    return data + write_u16_be(sw)


class ApduSession:
    """Tracks whether a command awaits its reply and when replies go out.

    A reply given right after a command is held and sent together with the
    wait for the next command. A reply given later, while the session waits
    asynchronously, is sent at once.
    """

    def __init__(self, exchange: Exchange) -> None:
        self._exchange = exchange
        self.state = IoState.READY
        self.pending = b""
        self.called_from_swap = False
        self.swap_response_ready = False

    def recv_command(self) -> bytes | None:
        """Send any held reply and return the next command.

        Returns ``None`` when the session should stop: when it was waiting
        for an asynchronous reply, or when the single swap reply is sent.
        """
        if self.state is IoState.READY:
            self.state = IoState.RECEIVED
            outgoing, self.pending = self.pending, b""
            if self.called_from_swap and self.swap_response_ready:
                self._exchange(outgoing, False)
                return None
            return self._exchange(outgoing, True)

        if self.state is IoState.RECEIVED:
            self.state = IoState.WAITING
            command = self._exchange(b"", True)
            self.state = IoState.RECEIVED
            return command

        self.state = IoState.READY
        return None

    def send_response(self, data: bytes | None, sw: int) -> None:
        """Reply to the current command with ``data`` and status word ``sw``.

        Data too long to fit is replaced by the wrong-response-length status.
        """
        try:
            framed = frame_response(data or b"", sw)
        except ResponseTooLong:
            framed = frame_response(b"", SW_WRONG_RESPONSE_LENGTH)

        if self.state is IoState.READY:
            raise RuntimeError("no command is waiting for a response")

        if self.state is IoState.RECEIVED:
            self.pending = framed
            self.state = IoState.READY
            return

        self._exchange(framed, False)
        self.pending = b""
        self.state = IoState.READY

    def send_sw(self, sw: int) -> None:
        """Reply with the status word ``sw`` alone."""
        self.send_response(None, sw)