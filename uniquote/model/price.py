from decimal import Decimal

from uniquote.exceptions import TokenMismatchError
from uniquote.model.amount import CurrencyAmount
from uniquote.model.fraction import Fraction
from uniquote.model.token import Token


class Price:
    """
    How many units of ``quote_currency`` one unit of ``base_currency`` is worth.
    The raw ratio ``numerator / denominator`` is in smallest units; ``scalar``
    converts it to whole units.
    """

    def __init__(self, base_currency: Token, quote_currency: Token, denominator: int, numerator: int):
        self.base_currency = base_currency
        self.quote_currency = quote_currency
        self.raw = Fraction(numerator, denominator)
        self.scalar = Fraction(10**base_currency.decimals, 10**quote_currency.decimals)

    def __repr__(self) -> str:
        return f"<Price {self.raw.numerator}/{self.raw.denominator} {self.base_currency!r} -> {self.quote_currency!r}>"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Price):
            return NotImplemented

        return (
            self.base_currency == other.base_currency
            and self.quote_currency == other.quote_currency
            and self.raw == other.raw
        )

    @property
    def numerator(self) -> int:
        return self.raw.numerator

    @property
    def denominator(self) -> int:
        return self.raw.denominator

    @property
    def adjusted(self) -> Fraction:
        return self.raw.multiply(self.scalar)

    def invert(self) -> "Price":
        return Price(self.quote_currency, self.base_currency, self.numerator, self.denominator)

    def quote(self, amount: CurrencyAmount) -> CurrencyAmount:
        """
        Convert an amount of the base currency into the quote currency.
        """
        if not amount.currency.equals(self.base_currency):
            raise TokenMismatchError("TOKEN", f"{amount.currency!r} is not the base currency.")

        result = self.raw.multiply(amount.quotient)
        return CurrencyAmount.from_raw_amount(self.quote_currency, result.quotient)

    def to_decimal(self) -> Decimal:
        adjusted = self.adjusted
        return Decimal(adjusted.numerator) / Decimal(adjusted.denominator)
