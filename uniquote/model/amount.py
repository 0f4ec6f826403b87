from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from uniquote.exceptions import TokenMismatchError
from uniquote.model.fraction import Fraction
from uniquote.model.token import Token


class CurrencyAmount(BaseModel):
    """
    A fixed-point amount of a currency. ``quotient`` is the raw integer amount in
    the currency's smallest unit, i.e. the value times ``10 ** decimals``.
    """

    model_config = ConfigDict(frozen=True)

    currency: Token
    quotient: int

    @classmethod
    def from_raw_amount(cls, currency: Token, raw_amount: int) -> "CurrencyAmount":
        return cls(currency=currency, quotient=raw_amount)

    def __repr__(self) -> str:
        return f"<CurrencyAmount {self.quotient} {self.currency.symbol or self.currency.address}>"

    def _check_currency(self, other: "CurrencyAmount"):
        if not self.currency.equals(other.currency):
            raise TokenMismatchError(
                "CURRENCY", f"Cannot combine {self.currency!r} with {other.currency!r}."
            )

    def add(self, other: "CurrencyAmount") -> "CurrencyAmount":
        self._check_currency(other)
        return CurrencyAmount.from_raw_amount(self.currency, self.quotient + other.quotient)

    def subtract(self, other: "CurrencyAmount") -> "CurrencyAmount":
        self._check_currency(other)
        return CurrencyAmount.from_raw_amount(self.currency, self.quotient - other.quotient)

    def divide(self, other: "CurrencyAmount | int") -> Fraction:
        """
        The raw ratio of the two quotients. Currencies may differ, e.g. when
        computing a price from two reserves.
        """
        denominator = other.quotient if isinstance(other, CurrencyAmount) else other
        return Fraction(self.quotient, denominator)

    def greater_than(self, other: "CurrencyAmount") -> bool:
        self._check_currency(other)
        return self.quotient > other.quotient

    def less_than(self, other: "CurrencyAmount") -> bool:
        self._check_currency(other)
        return self.quotient < other.quotient

    def less_than_or_equal(self, other: "CurrencyAmount") -> bool:
        self._check_currency(other)
        return self.quotient <= other.quotient

    def equal_to(self, other: "CurrencyAmount") -> bool:
        self._check_currency(other)
        return self.quotient == other.quotient

    def to_exact(self) -> str:
        """
        The amount as a decimal str in whole units, e.g. ``"1.5"``.
        """
        value = Decimal(self.quotient).scaleb(-self.currency.decimals)
        return format(value.normalize(), "f") if value else "0"
