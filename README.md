# xlmkit

Building blocks for the APDU protocol of a Stellar signing device, and for the
small binary and text formats that come with it. Pure Python, no dependencies.

## What is inside

| Module             | Purpose                                                                      |
|--------------------|------------------------------------------------------------------------------|
| `xlmkit.byteorder` | `read_u16_be` … `read_u64_le` and `write_u16_be` … `write_u64_le`            |
| `xlmkit.varint`    | Bitcoin-style variable-length integers: `varint_size`, `varint_read`, `varint_write` |
| `xlmkit.base32`    | RFC 4648 base32 without padding; the decoder skips whitespace and hyphens and reads `0`, `1`, `8` as `O`, `L`, `B` |
| `xlmkit.base58`    | Base58 (Bitcoin alphabet): `base58_encode`, `base58_decode`                  |
| `xlmkit.bip32`     | `bip32_path_read` from bytes and `bip32_path_format` as text (`44'/148'/0'`) |
| `xlmkit.format`    | `format_i64`, `format_u64`, `format_fpu64` (fixed point) and `format_hex`, each with an optional `max_length` |
| `xlmkit.buffer`    | `Buffer`, a read cursor over bytes with seeks and typed reads                |
| `xlmkit.types`     | Protocol constants and the `Instruction`, `RequestType`, `ParseState`, `IoState` enumerations |
| `xlmkit.apdu`      | `parse_apdu`, `dispatch`, `app_configuration` and the `CommandHandler` base class |
| `xlmkit.io`        | `frame_response` and `ApduSession`, which decides when replies are sent     |
| `xlmkit.swap`      | Swap parameters: `swap_str_to_u64`, `copy_transaction_parameters`, `SwapValues` |

Errors are raised, not returned: `VarintError`, `Base32Error`, `Base58Error`,
`Bip32Error`, `FormatError`, `BufferError`, `ApduError` and its subclasses
(`WrongDataLength`, `ClaNotSupported`, `InsNotSupported`, `WrongP1P2`),
`ResponseTooLong` and `SwapError`. All but the `ApduError` family derive from
`ValueError`.

## Examples

Formatting a derivation path:

```python
from xlmkit.bip32 import bip32_path_format

bip32_path_format([0x8000002C, 0x80000094, 0x80000000])
# "44'/148'/0'"
```

Reading fields with a `Buffer`; a failed read raises `BufferError` and leaves
the offset unchanged:

```python
from xlmkit.buffer import Buffer, Endianness

buf = Buffer(b"\x03\x00\x00\x00\x2a")
buf.read_u8()                  # 3
buf.read_u32(Endianness.BE)    # 42
buf.remaining()                # 0
```

Parsing and dispatching a command. `CommandHandler` answers
`GET_APP_CONFIGURATION` itself (the hash-signing flag followed by the version
bytes 5, 0, 1); subclasses implement `get_public_key`, `sign_tx_hash` and
`sign_tx`, which receive the command data as a `Buffer`:

```python
from xlmkit.apdu import CommandHandler, dispatch, parse_apdu

class Device(CommandHandler):
    def get_public_key(self, data, display):
        ...

    def sign_tx_hash(self, data):
        ...

    def sign_tx(self, data, is_first_chunk, more):
        ...

command = parse_apdu(bytes([0xE0, 0x06, 0x00, 0x00, 0x00]))
dispatch(command, Device())    # b"\x00\x05\x00\x01"
```

A class byte other than `0xE0` raises `ClaNotSupported`, an unknown instruction
`InsNotSupported`, unaccepted P1/P2 values `WrongP1P2`, and a length byte that
does not match the data, or missing data where it is required,
`WrongDataLength`.

Running a session over a transport. The transport is a callable
`exchange(data, receive)` that sends `data` and, when `receive` is true,
returns the next command:

```python
from xlmkit.io import SW_OK, ApduSession

def exchange(data, receive):
    ...  # write data to the link; read and return a command if receive

session = ApduSession(exchange)
raw = session.recv_command()               # next command
session.send_response(b"\x01\x02", SW_OK)  # held ...
session.recv_command()                     # ... and sent with the next receive
```

`frame_response(data, sw)` appends the big-endian status word; data longer
than 258 bytes raises `ResponseTooLong`, and `ApduSession.send_response`
replaces such a reply with status `0xB000`.

Collecting swap parameters:

```python
from xlmkit.swap import copy_transaction_parameters

values = copy_transaction_parameters(
    "GDUTHCF37UX32EMANXIL2WOOVEDZ47GHBTT3DYKU6EKM37SOIZXM2FN7",
    "memo",
    b"\x00\x04\xd2",
    b"\x64",
)
values.amount, values.fees     # (1234, 100)
```

## What it does not do

The package holds no keys and performs no cryptography: it does not derive
keys from a BIP32 path, sign transactions or hashes, or encode account
addresses. It does not parse or display Stellar transactions, has no user
interface for approving requests, and does not talk to any device by itself;
the `CommandHandler` methods and the `exchange` transport are for the caller
to supply. There is no command-line tool.

## Tests

The test suite is written for pytest, which the `test` extra installs.