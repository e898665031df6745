import logging
from typing import Optional

from solders.instruction import AccountMeta, Instruction

from token_wrapper.codec import (
    DepositAndMintWrapperTokensData,
    InitializeWrapperTokenData,
    WithdrawAndBurnWrapperTokensData,
    encode_instruction_data,
)
from token_wrapper.config import ProgramConfig, get_config
from token_wrapper.pda import (
    AddressLike,
    associated_token_address,
    mint_authority_pda,
    reserve_authority_pda,
    reserve_authority_token_account_pda,
    to_pubkey,
    wrapper_token_mint_pda,
)

logger = logging.getLogger("token_wrapper")


def build_initialize_wrapper_token_ix(
    payer: AddressLike,
    token_2022_mint: AddressLike,
    config: Optional[ProgramConfig] = None,
) -> Instruction:
    config = config or get_config()
    payer_key = to_pubkey(payer, "payer")
    mint = to_pubkey(token_2022_mint, "token_2022_mint")
    data = encode_instruction_data(InitializeWrapperTokenData())

    wrapper_token_mint = wrapper_token_mint_pda(mint, config).address
    reserve_authority = reserve_authority_pda(mint, config).address
    reserve_token_account = reserve_authority_token_account_pda(mint, config).address

    accounts = [
        AccountMeta(pubkey=payer_key, is_signer=True, is_writable=True),
        AccountMeta(pubkey=mint, is_signer=False, is_writable=False),
        AccountMeta(pubkey=wrapper_token_mint, is_signer=False, is_writable=True),
        AccountMeta(pubkey=reserve_authority, is_signer=False, is_writable=True),
        AccountMeta(pubkey=reserve_token_account, is_signer=False, is_writable=True),
        AccountMeta(pubkey=config.token_program_id, is_signer=False, is_writable=False),
        AccountMeta(pubkey=config.token_2022_program_id, is_signer=False, is_writable=False),
        AccountMeta(pubkey=config.system_program_id, is_signer=False, is_writable=False),
        AccountMeta(pubkey=config.rent_sysvar_id, is_signer=False, is_writable=False),
    ]
    logger.debug(
        "build_initialize_wrapper_token mint=%s wrapper_mint=%s reserve_authority=%s",
        mint,
        wrapper_token_mint,
        reserve_authority,
    )
    return Instruction(program_id=config.program_id, data=data, accounts=accounts)


def build_deposit_and_mint_wrapper_tokens_ix(
    user_authority: AddressLike,
    user_token_2022_account: AddressLike,
    token_2022_mint: AddressLike,
    amount: int,
    config: Optional[ProgramConfig] = None,
) -> Instruction:
    config = config or get_config()
    # Amount is checked before any address work so nothing is derived for a bad call.
    data = encode_instruction_data(DepositAndMintWrapperTokensData(amount=amount))
    authority = to_pubkey(user_authority, "user_authority")
    user_token_2022 = to_pubkey(user_token_2022_account, "user_token_2022_account")
    mint = to_pubkey(token_2022_mint, "token_2022_mint")

    wrapper_token_mint = wrapper_token_mint_pda(mint, config).address
    reserve_authority = reserve_authority_pda(mint, config).address
    reserve_token_account = reserve_authority_token_account_pda(mint, config).address
    mint_authority = mint_authority_pda(wrapper_token_mint, config).address
    user_wrapper_account = associated_token_address(
        authority, wrapper_token_mint, config.token_program_id, config
    )

    # Order follows the processor's account reads, not the older client builder.
    accounts = [
        AccountMeta(pubkey=authority, is_signer=True, is_writable=True),
        AccountMeta(pubkey=reserve_authority, is_signer=False, is_writable=False),
        AccountMeta(pubkey=mint_authority, is_signer=False, is_writable=False),
        AccountMeta(pubkey=mint, is_signer=False, is_writable=False),
        AccountMeta(pubkey=wrapper_token_mint, is_signer=False, is_writable=True),
        AccountMeta(pubkey=user_wrapper_account, is_signer=False, is_writable=True),
        AccountMeta(pubkey=user_token_2022, is_signer=False, is_writable=True),
        AccountMeta(pubkey=reserve_token_account, is_signer=False, is_writable=True),
        AccountMeta(pubkey=config.token_program_id, is_signer=False, is_writable=False),
        AccountMeta(pubkey=config.token_2022_program_id, is_signer=False, is_writable=False),
        AccountMeta(pubkey=config.system_program_id, is_signer=False, is_writable=False),
        AccountMeta(pubkey=config.associated_token_program_id, is_signer=False, is_writable=False),
        AccountMeta(pubkey=config.rent_sysvar_id, is_signer=False, is_writable=False),
    ]
    logger.debug(
        "build_deposit_and_mint mint=%s authority=%s amount=%s user_wrapper_account=%s",
        mint,
        authority,
        amount,
        user_wrapper_account,
    )
    return Instruction(program_id=config.program_id, data=data, accounts=accounts)


def build_withdraw_and_burn_wrapper_tokens_ix(
    user_authority: AddressLike,
    user_token_2022_account: AddressLike,
    token_2022_mint: AddressLike,
    amount: int,
    config: Optional[ProgramConfig] = None,
) -> Instruction:
    config = config or get_config()
    data = encode_instruction_data(WithdrawAndBurnWrapperTokensData(amount=amount))
    authority = to_pubkey(user_authority, "user_authority")
    user_token_2022 = to_pubkey(user_token_2022_account, "user_token_2022_account")
    mint = to_pubkey(token_2022_mint, "token_2022_mint")

    wrapper_token_mint = wrapper_token_mint_pda(mint, config).address
    reserve_authority = reserve_authority_pda(mint, config).address
    reserve_token_account = reserve_authority_token_account_pda(mint, config).address
    user_wrapper_account = associated_token_address(
        authority, wrapper_token_mint, config.token_program_id, config
    )

    accounts = [
        AccountMeta(pubkey=authority, is_signer=True, is_writable=True),
        AccountMeta(pubkey=reserve_authority, is_signer=False, is_writable=False),
        AccountMeta(pubkey=mint, is_signer=False, is_writable=False),
        AccountMeta(pubkey=wrapper_token_mint, is_signer=False, is_writable=True),
        AccountMeta(pubkey=user_wrapper_account, is_signer=False, is_writable=True),
        AccountMeta(pubkey=user_token_2022, is_signer=False, is_writable=True),
        AccountMeta(pubkey=reserve_token_account, is_signer=False, is_writable=True),
        AccountMeta(pubkey=config.token_program_id, is_signer=False, is_writable=False),
        AccountMeta(pubkey=config.token_2022_program_id, is_signer=False, is_writable=False),
        AccountMeta(pubkey=config.system_program_id, is_signer=False, is_writable=False),
        AccountMeta(pubkey=config.rent_sysvar_id, is_signer=False, is_writable=False),
    ]
    logger.debug(
        "build_withdraw_and_burn mint=%s authority=%s amount=%s user_wrapper_account=%s",
        mint,
        authority,
        amount,
        user_wrapper_account,
    )
    return Instruction(program_id=config.program_id, data=data, accounts=accounts)
