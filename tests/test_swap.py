import pytest

from xlmkit.swap import (
    SwapCommand,
    SwapError,
    SwapValues,
    copy_transaction_parameters,
    swap_str_to_u64,
)

ADDRESS = "GCNCEJIAZ5D3APIF5XWAJ3JSSTHM4HPHE7GK3NAB6R6WWSZDB2A2BQ5B"


def test_swap_str_to_u64_from_source_case():
    assert swap_str_to_u64(b"\x00\x04\xd2") == 1234


def test_swap_str_to_u64_empty_is_zero():
    assert swap_str_to_u64(b"") == 0


def test_swap_str_to_u64_full_width():
    assert swap_str_to_u64(b"\xff" * 8) == 18446744073709551615


def test_swap_str_to_u64_too_long():
    with pytest.raises(SwapError):
        swap_str_to_u64(bytes(9))


def test_swap_command_values():
    assert SwapCommand(3) is SwapCommand.CHECK_ADDRESS
    assert SwapCommand.SIGN_TRANSACTION == 2
    assert SwapCommand.GET_PRINTABLE_AMOUNT == 4


def test_copy_transaction_parameters():
    values = copy_transaction_parameters(ADDRESS, "memo", b"\x00\x04\xd2", b"\x64")
    assert values == SwapValues(amount=1234, fees=100, destination=ADDRESS, memo="memo")


def test_copy_transaction_parameters_longest_memo():
    memo = "m" * 19
    values = copy_transaction_parameters(ADDRESS, memo, b"\x01", b"\x01")
    assert values.memo == memo


def test_copy_transaction_parameters_memo_too_long():
    with pytest.raises(SwapError):
        copy_transaction_parameters(ADDRESS, "m" * 20, b"\x01", b"\x01")


def test_copy_transaction_parameters_destination_too_long():
    with pytest.raises(SwapError):
        copy_transaction_parameters(ADDRESS + "A", "", b"\x01", b"\x01")


def test_copy_transaction_parameters_amount_too_long():
    with pytest.raises(SwapError):
        copy_transaction_parameters(ADDRESS, "", bytes(9), b"\x01")


def test_copy_transaction_parameters_fee_too_long():
    with pytest.raises(SwapError):
        copy_transaction_parameters(ADDRESS, "", b"\x01", bytes(9))