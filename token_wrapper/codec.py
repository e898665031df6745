"""
Fixed-width codecs for the wrapper program's instruction data.

Every variant has one fixed borsh layout: a ``u8`` discriminator, followed by
a little-endian ``u64`` amount for the deposit and withdraw variants.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Type, Union

from borsh_construct import CStruct, U8, U64

from token_wrapper.errors import (
    AmountOutOfRangeError,
    EncodingLengthMismatchError,
    InvalidInstructionDataError,
)

U64_LEN = 8
U64_MAX = 2**64 - 1


class TokenWrapperInstruction(IntEnum):
    InitializeWrapperToken = 0
    DepositAndMintWrapperTokens = 1
    WithdrawAndBurnWrapperTokens = 2


TagOnlyLayout = CStruct("instruction" / U8)
AmountLayout = CStruct("instruction" / U8, "amount" / U64)


def check_u64(value: int, name: str = "amount") -> int:
    # bool is an int subclass; True must not silently become 1 token.
    if isinstance(value, bool) or not isinstance(value, int):
        raise AmountOutOfRangeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > U64_MAX:
        raise AmountOutOfRangeError(f"{name} {value} is outside 0..{U64_MAX}")
    return value


def encode_u64_le(value: int) -> bytes:
    return U64.build(check_u64(value, "value"))


def decode_u64_le(buf: bytes) -> int:
    if len(buf) != U64_LEN:
        raise EncodingLengthMismatchError(f"u64 needs exactly {U64_LEN} bytes, got {len(buf)}")
    return U64.parse(bytes(buf))


@dataclass(frozen=True)
class InitializeWrapperTokenData:
    tag = TokenWrapperInstruction.InitializeWrapperToken
    layout = TagOnlyLayout
    size = 1

    @classmethod
    def decode(cls, payload: bytes) -> "InitializeWrapperTokenData":
        return cls()

    def encode(self) -> bytes:
        return self.layout.build({"instruction": int(self.tag)})


@dataclass(frozen=True)
class DepositAndMintWrapperTokensData:
    amount: int

    tag = TokenWrapperInstruction.DepositAndMintWrapperTokens
    layout = AmountLayout
    size = 1 + U64_LEN

    def __post_init__(self):
        check_u64(self.amount)

    @classmethod
    def decode(cls, payload: bytes) -> "DepositAndMintWrapperTokensData":
        return cls(amount=decode_u64_le(payload))

    def encode(self) -> bytes:
        return self.layout.build({"instruction": int(self.tag), "amount": self.amount})


@dataclass(frozen=True)
class WithdrawAndBurnWrapperTokensData:
    amount: int

    tag = TokenWrapperInstruction.WithdrawAndBurnWrapperTokens
    layout = AmountLayout
    size = 1 + U64_LEN

    def __post_init__(self):
        check_u64(self.amount)

    @classmethod
    def decode(cls, payload: bytes) -> "WithdrawAndBurnWrapperTokensData":
        return cls(amount=decode_u64_le(payload))

    def encode(self) -> bytes:
        return self.layout.build({"instruction": int(self.tag), "amount": self.amount})


InstructionData = Union[
    InitializeWrapperTokenData,
    DepositAndMintWrapperTokensData,
    WithdrawAndBurnWrapperTokensData,
]

INSTRUCTION_DATA: Dict[TokenWrapperInstruction, Type] = {
    TokenWrapperInstruction.InitializeWrapperToken: InitializeWrapperTokenData,
    TokenWrapperInstruction.DepositAndMintWrapperTokens: DepositAndMintWrapperTokensData,
    TokenWrapperInstruction.WithdrawAndBurnWrapperTokens: WithdrawAndBurnWrapperTokensData,
}


def encode_instruction_data(args: InstructionData) -> bytes:
    return args.encode()


def decode_instruction_data(data: bytes) -> InstructionData:
    """Parse instruction data back into its typed struct.

    Raises ``InvalidInstructionDataError`` for an empty buffer or an unknown
    discriminator, and ``EncodingLengthMismatchError`` when the payload length
    does not match the variant's fixed layout.
    """
    if not data:
        raise InvalidInstructionDataError("instruction data is empty")
    try:
        tag = TokenWrapperInstruction(data[0])
    except ValueError as exc:
        raise InvalidInstructionDataError(f"unknown instruction discriminator {data[0]}") from exc
    cls = INSTRUCTION_DATA[tag]
    if len(data) != cls.size:
        raise EncodingLengthMismatchError(
            f"{tag.name} data must be {cls.size} bytes, got {len(data)}"
        )
    return cls.decode(bytes(data[1:]))
