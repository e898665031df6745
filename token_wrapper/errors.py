class TokenWrapperError(Exception):
    """Base class for every error raised while encoding or deriving."""


class ConfigError(TokenWrapperError, RuntimeError):
    pass


class InvalidSeedError(TokenWrapperError, ValueError):
    pass


class InvalidAddressError(TokenWrapperError, ValueError):
    pass


class AmountOutOfRangeError(TokenWrapperError, ValueError):
    pass


class EncodingLengthMismatchError(TokenWrapperError, ValueError):
    pass


class InvalidInstructionDataError(TokenWrapperError, ValueError):
    pass


class AddressDerivationExhaustedError(TokenWrapperError):
    """No bump in 255..0 produced an off-curve address."""


class MissingDerivedAccountError(TokenWrapperError):
    """An associated token account address could not be resolved."""
