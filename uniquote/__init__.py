from uniquote.exceptions import (
    InsufficientInputAmountError,
    InsufficientReservesError,
    InvalidPairError,
    MissingKLastError,
    PairError,
    PairErrorKind,
    TokenMismatchError,
)
from uniquote.model.amount import CurrencyAmount
from uniquote.model.price import Price
from uniquote.model.token import Token
from uniquote.pair import Pair
from uniquote.result import Result

__all__ = [
    "CurrencyAmount",
    "InsufficientInputAmountError",
    "InsufficientReservesError",
    "InvalidPairError",
    "MissingKLastError",
    "Pair",
    "PairError",
    "PairErrorKind",
    "Price",
    "Result",
    "Token",
    "TokenMismatchError",
]
