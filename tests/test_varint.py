import struct

import pytest

from xlmkit.varint import VarintError, varint_read, varint_size, varint_write

BOUNDARIES = [
    (0, 1),
    (0xFC, 1),
    (0xFD, 3),
    (0xFFFF, 3),
    (0x10000, 5),
    (0xFFFFFFFF, 5),
    (0x100000000, 9),
    (0xFFFFFFFFFFFFFFFF, 9),
]


@pytest.mark.parametrize("value, size", BOUNDARIES)
def test_size_at_boundaries(value, size):
    assert varint_size(value) == size


@pytest.mark.parametrize("value, size", BOUNDARIES)
def test_write_length_matches_size(value, size):
    assert len(varint_write(value)) == size


@pytest.mark.parametrize("value, size", BOUNDARIES)
def test_round_trip(value, size):
    assert varint_read(varint_write(value)) == (value, size)


def test_single_byte_is_the_value():
    assert varint_write(0xFC) == bytes([0xFC])


@pytest.mark.parametrize(
    "value, prefix, fmt",
    [(0xFD, 0xFD, "<H"), (0x12345, 0xFE, "<I"), (0x123456789, 0xFF, "<Q")],
)
def test_prefix_and_little_endian_payload(value, prefix, fmt):
    encoded = varint_write(value)
    assert encoded[0] == prefix
    assert encoded[1:] == struct.pack(fmt, value)


def test_read_ignores_trailing_bytes():
    encoded = varint_write(0x10000)
    assert varint_read(encoded + b"\x99\x98") == (0x10000, 5)


def test_non_canonical_encoding_is_accepted():
    assert varint_read(b"\xfd" + struct.pack("<H", 5)) == (5, 3)


@pytest.mark.parametrize(
    "data",
    [b"", b"\xfd\x01", b"\xfe\x00\x00\x00", b"\xff" + bytes(7)],
)
def test_truncated_read_raises(data):
    with pytest.raises(VarintError):
        varint_read(data)


@pytest.mark.parametrize("value", [-1, 1 << 64])
def test_out_of_range_raises(value):
    with pytest.raises(VarintError):
        varint_write(value)
    with pytest.raises(VarintError):
        varint_size(value)