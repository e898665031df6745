from __future__ import annotations

import hashlib
from functools import lru_cache
from typing import NamedTuple, Optional, Sequence, Tuple, Union

from solders.pubkey import Pubkey

from token_wrapper.config import MAX_SEED_LEN, ProgramConfig, get_config
from token_wrapper.errors import (
    AddressDerivationExhaustedError,
    InvalidAddressError,
    InvalidSeedError,
    MissingDerivedAccountError,
)

PDA_MARKER = b"ProgramDerivedAddress"
# The bump occupies the last of the runtime's 16 seed slots.
MAX_SEEDS = 15

AddressLike = Union[Pubkey, str, bytes]


class DerivedAddress(NamedTuple):
    address: Pubkey
    bump: int


def to_pubkey(value: Optional[AddressLike], name: str = "address") -> Pubkey:
    if value is None:
        raise InvalidAddressError(f"{name} is required")
    if isinstance(value, Pubkey):
        return value
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 32:
            raise InvalidAddressError(f"{name} must be 32 bytes, got {len(value)}")
        return Pubkey.from_bytes(bytes(value))
    if isinstance(value, str):
        try:
            return Pubkey.from_string(value)
        except ValueError as exc:
            raise InvalidAddressError(f"{name} is not a valid pubkey: {exc}") from exc
    raise InvalidAddressError(f"{name} has unsupported type {type(value).__name__}")


def _check_seeds(seeds: Sequence[bytes]) -> Tuple[bytes, ...]:
    if isinstance(seeds, (bytes, bytearray, str)):
        raise InvalidSeedError("seeds must be a sequence of byte strings, not a single value")
    checked = tuple(seeds)
    if not checked:
        raise InvalidSeedError("at least one seed is required")
    if len(checked) > MAX_SEEDS:
        raise InvalidSeedError(f"at most {MAX_SEEDS} seeds are allowed, got {len(checked)}")
    for idx, seed in enumerate(checked):
        if not isinstance(seed, (bytes, bytearray)):
            raise InvalidSeedError(f"seed {idx} must be bytes, got {type(seed).__name__}")
        if len(seed) > MAX_SEED_LEN:
            raise InvalidSeedError(f"seed {idx} is {len(seed)} bytes, max is {MAX_SEED_LEN}")
    return tuple(bytes(seed) for seed in checked)


@lru_cache(maxsize=4096)
def _find_program_address(seeds: Tuple[bytes, ...], program_id: Pubkey) -> DerivedAddress:
    prefix = b"".join(seeds)
    suffix = bytes(program_id) + PDA_MARKER
    for bump in range(255, -1, -1):
        digest = hashlib.sha256(prefix + bytes([bump]) + suffix).digest()
        candidate = Pubkey.from_bytes(digest)
        if not candidate.is_on_curve():
            return DerivedAddress(candidate, bump)
    raise AddressDerivationExhaustedError(
        f"no off-curve bump found for program {program_id} and {len(seeds)} seeds"
    )


def derive(seeds: Sequence[bytes], program_id: AddressLike) -> DerivedAddress:
    """Find the canonical program address and bump for ``seeds`` under ``program_id``.

    Walks bumps from 255 down to 0 and keeps the first SHA-256 digest that is
    not an ed25519 point, exactly like ``Pubkey::find_program_address``.
    """
    return _find_program_address(_check_seeds(seeds), to_pubkey(program_id, "program_id"))


def wrapper_token_mint_pda(token_2022_mint: AddressLike, config: Optional[ProgramConfig] = None) -> DerivedAddress:
    config = config or get_config()
    mint = to_pubkey(token_2022_mint, "token_2022_mint")
    return derive([config.seeds.wrapper_mint, bytes(mint)], config.program_id)


def reserve_authority_pda(token_2022_mint: AddressLike, config: Optional[ProgramConfig] = None) -> DerivedAddress:
    config = config or get_config()
    mint = to_pubkey(token_2022_mint, "token_2022_mint")
    return derive([config.seeds.reserve_authority, bytes(mint)], config.program_id)


def reserve_authority_token_account_pda(
    token_2022_mint: AddressLike, config: Optional[ProgramConfig] = None
) -> DerivedAddress:
    config = config or get_config()
    mint = to_pubkey(token_2022_mint, "token_2022_mint")
    reserve_authority = reserve_authority_pda(mint, config).address
    return derive(
        [config.seeds.reserve_token_account, bytes(mint), bytes(reserve_authority)],
        config.program_id,
    )


# The program keys mint and freeze authorities by the wrapper mint it created.
def mint_authority_pda(token_mint: AddressLike, config: Optional[ProgramConfig] = None) -> DerivedAddress:
    config = config or get_config()
    mint = to_pubkey(token_mint, "token_mint")
    return derive([config.seeds.mint_authority, bytes(mint)], config.program_id)


def freeze_authority_pda(token_mint: AddressLike, config: Optional[ProgramConfig] = None) -> DerivedAddress:
    config = config or get_config()
    mint = to_pubkey(token_mint, "token_mint")
    return derive([config.seeds.freeze_authority, bytes(mint)], config.program_id)


def associated_token_address(
    owner: AddressLike,
    mint: AddressLike,
    token_program_id: Optional[Pubkey] = None,
    config: Optional[ProgramConfig] = None,
) -> Pubkey:
    config = config or get_config()
    owner_key = to_pubkey(owner, "owner")
    mint_key = to_pubkey(mint, "mint")
    token_program = token_program_id or config.token_program_id
    try:
        return derive(
            [bytes(owner_key), bytes(token_program), bytes(mint_key)],
            config.associated_token_program_id,
        ).address
    except AddressDerivationExhaustedError as exc:
        raise MissingDerivedAccountError(
            f"associated token account for owner={owner_key} mint={mint_key} could not be resolved"
        ) from exc
