from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings
from solders import system_program, sysvar
from solders.pubkey import Pubkey
from spl.token.constants import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    TOKEN_2022_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)

from token_wrapper.errors import ConfigError

WRAPPER_PROGRAM_ID = "22WrapbNKwPSy3HcGQTTJpgv43tszbZdTEfBEWmGYX2V"
MAX_SEED_LEN = 32


class Settings(BaseSettings):
    program_id: str = WRAPPER_PROGRAM_ID
    token_program_id: str = str(TOKEN_PROGRAM_ID)
    token_2022_program_id: str = str(TOKEN_2022_PROGRAM_ID)
    associated_token_program_id: str = str(ASSOCIATED_TOKEN_PROGRAM_ID)
    system_program_id: str = str(system_program.ID)
    rent_sysvar_id: str = str(sysvar.RENT)
    # Seed tags must match the constants compiled into the on-chain program.
    wrapper_mint_seed: str = "wrapper"
    reserve_authority_seed: str = "reserve_authority"
    reserve_token_account_seed: str = "reserve_authority_token_account"
    mint_authority_seed: str = "mint_authority"
    freeze_authority_seed: str = "freeze_authority"

    class Config:
        env_prefix = "TOKEN_WRAPPER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def load_pubkey(name: str, value: str) -> Pubkey:
    if not value:
        raise ConfigError(f"{name} must be set to a valid pubkey")
    try:
        return Pubkey.from_string(value)
    except ValueError as exc:
        raise ConfigError(f"{name} is not a valid pubkey: {exc}") from exc


def load_seed(name: str, value: str) -> bytes:
    seed = value.encode()
    if not seed or len(seed) > MAX_SEED_LEN:
        raise ConfigError(f"{name} must be 1..{MAX_SEED_LEN} bytes, got {len(seed)}")
    return seed


@dataclass(frozen=True)
class SeedTags:
    wrapper_mint: bytes = b"wrapper"
    reserve_authority: bytes = b"reserve_authority"
    reserve_token_account: bytes = b"reserve_authority_token_account"
    mint_authority: bytes = b"mint_authority"
    freeze_authority: bytes = b"freeze_authority"


@dataclass(frozen=True)
class ProgramConfig:
    """Immutable program ids and seed tags shared by the deriver and the builders."""

    program_id: Pubkey
    token_program_id: Pubkey
    token_2022_program_id: Pubkey
    associated_token_program_id: Pubkey
    system_program_id: Pubkey
    rent_sysvar_id: Pubkey
    seeds: SeedTags = SeedTags()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ProgramConfig":
        settings = settings or Settings()
        return cls(
            program_id=load_pubkey("program_id", settings.program_id),
            token_program_id=load_pubkey("token_program_id", settings.token_program_id),
            token_2022_program_id=load_pubkey("token_2022_program_id", settings.token_2022_program_id),
            associated_token_program_id=load_pubkey(
                "associated_token_program_id", settings.associated_token_program_id
            ),
            system_program_id=load_pubkey("system_program_id", settings.system_program_id),
            rent_sysvar_id=load_pubkey("rent_sysvar_id", settings.rent_sysvar_id),
            seeds=SeedTags(
                wrapper_mint=load_seed("wrapper_mint_seed", settings.wrapper_mint_seed),
                reserve_authority=load_seed("reserve_authority_seed", settings.reserve_authority_seed),
                reserve_token_account=load_seed("reserve_token_account_seed", settings.reserve_token_account_seed),
                mint_authority=load_seed("mint_authority_seed", settings.mint_authority_seed),
                freeze_authority=load_seed("freeze_authority_seed", settings.freeze_authority_seed),
            ),
        )


@lru_cache(maxsize=None)
def get_config() -> ProgramConfig:
    return ProgramConfig.from_settings()
