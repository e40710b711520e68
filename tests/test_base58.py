import pytest

from xlmkit.base58 import (
    ALPHABET,
    MAX_DEC_INPUT_SIZE,
    MAX_ENC_INPUT_SIZE,
    Base58Error,
    base58_decode,
    base58_encode,
)


def test_encode_documented_example():
    assert base58_encode(b"Hello World!") == "2NEpo7TZRRrLZSi2U"


def test_encode_leading_zeros_documented_example():
    assert base58_encode(bytes.fromhex("0000287fb4cd")) == "11233QC4"


def test_decode_documented_example():
    assert base58_decode("2NEpo7TZRRrLZSi2U") == b"Hello World!"


def test_decode_accepts_bytes():
    assert base58_decode(b"11233QC4") == bytes.fromhex("0000287fb4cd")


@pytest.mark.parametrize(
    "data",
    [
        b"\x00",
        b"\x00\x00\x00",
        b"\x00\x01",
        b"\xff" * 32,
        bytes(range(64)),
        b"\x00" + bytes(range(1, 100)),
        b"\xff" * MAX_ENC_INPUT_SIZE,
    ],
)
def test_round_trip(data):
    encoded = base58_encode(data)
    assert set(encoded) <= set(ALPHABET)
    if len(encoded) >= 2:
        assert base58_decode(encoded) == data


def test_zero_bytes_map_to_ones():
    assert base58_encode(bytes(5)) == ALPHABET[0] * 5
    assert base58_decode(ALPHABET[0] * 5) == bytes(5)


def test_empty_input_encodes_to_empty_string():
    assert base58_encode(b"") == ""


def test_encode_rejects_long_input():
    with pytest.raises(Base58Error):
        base58_encode(bytes(MAX_ENC_INPUT_SIZE + 1))


@pytest.mark.parametrize("text", ["1", ""])
def test_decode_rejects_short_input(text):
    with pytest.raises(Base58Error):
        base58_decode(text)


def test_decode_rejects_long_input():
    with pytest.raises(Base58Error):
        base58_decode("2" * (MAX_DEC_INPUT_SIZE + 1))


def test_decode_accepts_maximum_length():
    text = "2" * MAX_DEC_INPUT_SIZE
    assert base58_encode(base58_decode(text)) == text


@pytest.mark.parametrize("text", ["10", "1O", "1I", "1l", "1+", "1~", "1é"])
def test_decode_rejects_invalid_characters(text):
    with pytest.raises(Base58Error):
        base58_decode(text)