import pytest

from token_wrapper.codec import (
    U64_MAX,
    DepositAndMintWrapperTokensData,
    InitializeWrapperTokenData,
    TokenWrapperInstruction,
    WithdrawAndBurnWrapperTokensData,
    decode_instruction_data,
    decode_u64_le,
    encode_instruction_data,
    encode_u64_le,
)
from token_wrapper.errors import (
    AmountOutOfRangeError,
    EncodingLengthMismatchError,
    InvalidInstructionDataError,
)


def test_encode_u64_is_fixed_width_little_endian():
    assert encode_u64_le(0) == b"\x00" * 8
    assert encode_u64_le(U64_MAX) == b"\xff" * 8
    assert encode_u64_le(1) == b"\x01" + b"\x00" * 7
    assert encode_u64_le(9_900_000_000) == (9_900_000_000).to_bytes(8, "little")


@pytest.mark.parametrize("value", [0, 1, 255, 256, 9_900_000_000, 2**63, U64_MAX])
def test_decode_reverses_encode(value):
    assert decode_u64_le(encode_u64_le(value)) == value


@pytest.mark.parametrize("value", [-1, 2**64, 2**70])
def test_encode_rejects_out_of_range(value):
    with pytest.raises(AmountOutOfRangeError):
        encode_u64_le(value)


@pytest.mark.parametrize("value", [True, 1.0, "5", None])
def test_encode_rejects_non_int(value):
    with pytest.raises(AmountOutOfRangeError):
        encode_u64_le(value)


@pytest.mark.parametrize("buf", [b"", b"\x00" * 7, b"\x00" * 9])
def test_decode_rejects_wrong_length(buf):
    with pytest.raises(EncodingLengthMismatchError):
        decode_u64_le(buf)


def test_amount_error_is_a_value_error():
    with pytest.raises(ValueError):
        encode_u64_le(-5)


def test_instruction_data_layouts():
    assert encode_instruction_data(InitializeWrapperTokenData()) == b"\x00"

    deposit = encode_instruction_data(DepositAndMintWrapperTokensData(amount=42))
    assert deposit == b"\x01" + (42).to_bytes(8, "little")

    withdraw = encode_instruction_data(WithdrawAndBurnWrapperTokensData(amount=U64_MAX))
    assert withdraw == b"\x02" + b"\xff" * 8


def test_instruction_data_rejects_bad_amount():
    with pytest.raises(AmountOutOfRangeError):
        DepositAndMintWrapperTokensData(amount=-1)
    with pytest.raises(AmountOutOfRangeError):
        WithdrawAndBurnWrapperTokensData(amount=2**64)


def test_decode_instruction_data():
    assert decode_instruction_data(b"\x00") == InitializeWrapperTokenData()
    parsed = decode_instruction_data(b"\x02" + encode_u64_le(9_900_000_000))
    assert parsed == WithdrawAndBurnWrapperTokensData(amount=9_900_000_000)
    assert parsed.tag is TokenWrapperInstruction.WithdrawAndBurnWrapperTokens


def test_decode_instruction_data_errors():
    with pytest.raises(InvalidInstructionDataError):
        decode_instruction_data(b"")
    with pytest.raises(InvalidInstructionDataError):
        decode_instruction_data(b"\x07")
    with pytest.raises(EncodingLengthMismatchError):
        decode_instruction_data(b"\x01\x00\x00")
    with pytest.raises(EncodingLengthMismatchError):
        decode_instruction_data(b"\x00\x00")


def test_each_struct_decodes_its_own_payload():
    assert InitializeWrapperTokenData.decode(b"") == InitializeWrapperTokenData()
    assert DepositAndMintWrapperTokensData.decode(encode_u64_le(7)) == DepositAndMintWrapperTokensData(amount=7)
    assert WithdrawAndBurnWrapperTokensData.decode(b"\xff" * 8) == WithdrawAndBurnWrapperTokensData(amount=U64_MAX)
    with pytest.raises(EncodingLengthMismatchError):
        DepositAndMintWrapperTokensData.decode(b"\x01")
