from token_wrapper.codec import (
    DepositAndMintWrapperTokensData,
    InitializeWrapperTokenData,
    TokenWrapperInstruction,
    WithdrawAndBurnWrapperTokensData,
    decode_instruction_data,
    decode_u64_le,
    encode_instruction_data,
    encode_u64_le,
)
from token_wrapper.compute_budget import request_compute_units
from token_wrapper.config import ProgramConfig, SeedTags, Settings, get_config
from token_wrapper.errors import (
    AddressDerivationExhaustedError,
    AmountOutOfRangeError,
    ConfigError,
    EncodingLengthMismatchError,
    InvalidAddressError,
    InvalidInstructionDataError,
    InvalidSeedError,
    MissingDerivedAccountError,
    TokenWrapperError,
)
from token_wrapper.pda import (
    DerivedAddress,
    associated_token_address,
    derive,
    freeze_authority_pda,
    mint_authority_pda,
    reserve_authority_pda,
    reserve_authority_token_account_pda,
    wrapper_token_mint_pda,
)
from token_wrapper.tx_builder import (
    build_deposit_and_mint_wrapper_tokens_ix,
    build_initialize_wrapper_token_ix,
    build_withdraw_and_burn_wrapper_tokens_ix,
)
