from enum import Enum


class PairErrorKind(str, Enum):
    """
    The closed set of failures a pair computation can produce.
    """

    INSUFFICIENT_RESERVES = "InsufficientReserves"
    INSUFFICIENT_INPUT_AMOUNT = "InsufficientInputAmount"
    TOKEN_MISMATCH = "TokenMismatch"
    MISSING_K_LAST = "MissingKLast"


class PairError(Exception):
    """
    Base class for all pair math failures.
    """

    kind: PairErrorKind


class InsufficientReservesError(PairError):
    """
    The reserves cannot support the operation: a reserve is empty or the requested
    output is at least the whole reserve.
    """

    kind = PairErrorKind.INSUFFICIENT_RESERVES

    def __init__(self, message: str = "Insufficient reserves."):
        super().__init__(message)


class InsufficientInputAmountError(PairError):
    """
    The input is too small (or too large) to produce a valid output.
    """

    kind = PairErrorKind.INSUFFICIENT_INPUT_AMOUNT

    def __init__(self, message: str = "Insufficient input amount."):
        super().__init__(message)


class TokenMismatchError(PairError, ValueError):
    """
    Raised when a precondition fails, usually because a currency does not
    belong to the pair or an amount is not of the pair's liquidity token.
    """

    kind = PairErrorKind.TOKEN_MISMATCH

    def __init__(self, code: str, message: str | None = None):
        self.code = code
        super().__init__(message or f"Invariant failed: {code}")


class InvalidPairError(TokenMismatchError):
    """
    Two currencies cannot be ordered into a pair: they are the same
    currency or live on different chains.
    """


class MissingKLastError(PairError, ValueError):
    """
    The protocol fee is on but no previous ``kLast`` was given.
    """

    kind = PairErrorKind.MISSING_K_LAST

    def __init__(self, message: str = "Invariant failed: K_LAST"):
        self.code = "K_LAST"
        super().__init__(message)


class UnsupportedChainError(KeyError):
    """
    No factory is registered for the chain.
    """

    def __init__(self, chain_id: int):
        self.chain_id = chain_id
        super().__init__(f"No factory registered for chain '{chain_id}'.")
