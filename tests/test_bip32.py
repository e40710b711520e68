import pytest

from xlmkit.bip32 import (
    HARDENED,
    MAX_BIP32_PATH,
    Bip32Error,
    bip32_path_format,
    bip32_path_read,
)

ADDRESS_PARAMETERS = b"\x03\x80\x00\x00\x2c\x80\x00\x00\x94\x80\x00\x00\x00"


def test_read_swap_address_parameters():
    count = ADDRESS_PARAMETERS[0]
    assert count == 3
    path = bip32_path_read(ADDRESS_PARAMETERS[1:], count)
    assert path == [0x8000002C, 0x80000094, 0x80000000]


def test_format_swap_path():
    path = bip32_path_read(ADDRESS_PARAMETERS[1:], ADDRESS_PARAMETERS[0])
    assert bip32_path_format(path) == "44'/148'/0'"


def test_format_mixed_hardening():
    assert bip32_path_format([44 | HARDENED, 148 | HARDENED, 0, 1]) == "44'/148'/0/1"


def test_read_ignores_trailing_bytes():
    assert bip32_path_read(ADDRESS_PARAMETERS[1:] + b"\xaa\xbb", 3) == [
        0x8000002C,
        0x80000094,
        0x80000000,
    ]


@pytest.mark.parametrize("count", [0, MAX_BIP32_PATH + 1])
def test_read_rejects_bad_count(count):
    with pytest.raises(Bip32Error):
        bip32_path_read(bytes(4 * (MAX_BIP32_PATH + 1)), count)


def test_read_rejects_short_data():
    with pytest.raises(Bip32Error):
        bip32_path_read(ADDRESS_PARAMETERS[1:12], 3)


def test_read_maximum_length():
    data = b"".join((index | HARDENED).to_bytes(4, "big") for index in range(MAX_BIP32_PATH))
    path = bip32_path_read(data, MAX_BIP32_PATH)
    assert path == [index | HARDENED for index in range(MAX_BIP32_PATH)]
    assert bip32_path_format(path).count("'") == MAX_BIP32_PATH


@pytest.mark.parametrize("path", [[], [0] * (MAX_BIP32_PATH + 1)])
def test_format_rejects_bad_length(path):
    with pytest.raises(Bip32Error):
        bip32_path_format(path)


@pytest.mark.parametrize("element", [-1, 1 << 32])
def test_format_rejects_out_of_range(element):
    with pytest.raises(Bip32Error):
        bip32_path_format([element])