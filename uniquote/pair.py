import logging
from functools import cached_property
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from uniquote.constants import (
    FEE_DENOMINATOR,
    FEE_NUMERATOR,
    LIQUIDITY_TOKEN_DECIMALS,
    LIQUIDITY_TOKEN_NAME,
    LIQUIDITY_TOKEN_SYMBOL,
    PROTOCOL_FEE_MULTIPLIER,
)
from uniquote.exceptions import (
    InsufficientInputAmountError,
    InsufficientReservesError,
    MissingKLastError,
    TokenMismatchError,
)
from uniquote.model.amount import CurrencyAmount
from uniquote.model.config import FactoryConfig
from uniquote.model.price import Price
from uniquote.model.token import Token
from uniquote.model.types import BigintIsh, validate_hex_int
from uniquote.result import Result, attempt
from uniquote.utils.address import compute_pair_address
from uniquote.utils.decimals import normalize_decimals, scale_to_decimals
from uniquote.utils.math import div_trunc, isqrt

logger = logging.getLogger(__name__)


def _sorted_reserves(token_amount_a: CurrencyAmount, token_amount_b: CurrencyAmount) -> dict:
    # Does safety checks.
    if token_amount_a.currency.sorts_before(token_amount_b.currency):
        return {"reserve0": token_amount_a, "reserve1": token_amount_b}

    return {"reserve0": token_amount_b, "reserve1": token_amount_a}


class Pair(BaseModel):
    """
    A snapshot of a two-token pool. The reserves are always stored in
    canonical order (``reserve0.currency`` sorts before ``reserve1.currency``),
    and every swap or deposit returns a new ``Pair`` rather than changing this one.

    Swaps quote directly across decimals: the output is the fee-adjusted input
    rescaled to the output token's decimals, bounded by the output reserve.
    """

    model_config = ConfigDict(frozen=True)

    reserve0: CurrencyAmount
    reserve1: CurrencyAmount
    factory: FactoryConfig | None = None

    def __init__(self, *args, **kwargs):
        # Positional `(token_amount_a, token_amount_b[, factory])`; the amounts may come in either order.
        kwargs.update(zip(("reserve0", "reserve1", "factory"), args))
        if isinstance(kwargs.get("reserve0"), CurrencyAmount) and isinstance(
            kwargs.get("reserve1"), CurrencyAmount
        ):
            # Ordering errors raise as-is, not wrapped in a `ValidationError`.
            kwargs.update(_sorted_reserves(kwargs["reserve0"], kwargs["reserve1"]))

        super().__init__(**kwargs)

    @model_validator(mode="before")
    @classmethod
    def _sort_reserves(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "reserve0" not in data or "reserve1" not in data:
            return data

        return {
            **data,
            **_sorted_reserves(
                CurrencyAmount.model_validate(data["reserve0"]),
                CurrencyAmount.model_validate(data["reserve1"]),
            ),
        }

    def __repr__(self) -> str:
        return f"<Pair {self.reserve0!r} {self.reserve1!r}>"

    @staticmethod
    def get_address(token_a: Token, token_b: Token, factory: FactoryConfig | None = None) -> str:
        """
        The deterministic address of the pair of the two tokens, in either order.

        Args:
            token_a (:class:`~uniquote.model.token.Token`): One of the tokens.
            token_b (:class:`~uniquote.model.token.Token`): The other token.
            factory (:class:`~uniquote.model.config.FactoryConfig` | None): The factory
              deploying the pair. Defaults to the factory registered for the tokens' chain.

        Returns:
            str: The checksummed address.
        """
        factory = factory or FactoryConfig.for_chain(token_a.chain_id)
        return compute_pair_address(
            factory.factory_address, token_a, token_b, factory.init_code_hash
        )

    @cached_property
    def liquidity_token(self) -> Token:
        return Token(
            chain_id=self.chain_id,
            address=Pair.get_address(self.token0, self.token1, self.factory),
            decimals=LIQUIDITY_TOKEN_DECIMALS,
            symbol=LIQUIDITY_TOKEN_SYMBOL,
            name=LIQUIDITY_TOKEN_NAME,
        )

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    @property
    def token0(self) -> Token:
        return self.reserve0.currency

    @property
    def token1(self) -> Token:
        return self.reserve1.currency

    def involves_token(self, token: Token) -> bool:
        """
        Returns true if the token is either token0 or token1.
        """
        return token.equals(self.token0) or token.equals(self.token1)

    def _require_token(self, token: Token):
        if not self.involves_token(token):
            raise TokenMismatchError("TOKEN", f"{token!r} is not part of {self!r}.")

    def _other(self, token: Token) -> Token:
        return self.token1 if token.equals(self.token0) else self.token0

    def reserve_of(self, token: Token) -> CurrencyAmount:
        self._require_token(token)
        return self.reserve0 if token.equals(self.token0) else self.reserve1

    @property
    def token0_price(self) -> Price:
        """
        The current mid price of the pair in terms of token0, i.e. the ratio of reserve1 to reserve0.
        """
        result = self.reserve1.divide(self.reserve0)
        return Price(self.token0, self.token1, result.denominator, result.numerator)

    @property
    def token1_price(self) -> Price:
        """
        The current mid price of the pair in terms of token1, i.e. the ratio of reserve0 to reserve1.
        """
        result = self.reserve0.divide(self.reserve1)
        return Price(self.token1, self.token0, result.denominator, result.numerator)

    def price_of(self, token: Token) -> Price:
        """
        The price of the given token in terms of the other token in the pair.
        """
        self._require_token(token)
        return self.token0_price if token.equals(self.token0) else self.token1_price

    @staticmethod
    def quote(amount: int, decimals_in: int, decimals_out: int) -> int:
        """
        Rescale a raw amount between decimals, truncating when scaling down.
        """
        return normalize_decimals(amount, decimals_in, decimals_out, "down")

    def _has_empty_reserve(self) -> bool:
        return self.reserve0.quotient == 0 or self.reserve1.quotient == 0

    def get_output_amount(self, input_amount: CurrencyAmount) -> tuple[CurrencyAmount, "Pair"]:
        """
        Quote a swap of an exact input amount.

        Args:
            input_amount (:class:`~uniquote.model.amount.CurrencyAmount`): The amount sold.

        Returns:
            tuple[CurrencyAmount, Pair]: The amount bought and the pair after the swap.

        Raises:
            :class:`~uniquote.exceptions.InsufficientReservesError`: A reserve is empty.
            :class:`~uniquote.exceptions.InsufficientInputAmountError`: The output is
              zero or would drain the output reserve.
        """
        self._require_token(input_amount.currency)
        if self._has_empty_reserve():
            raise InsufficientReservesError()

        input_reserve = self.reserve_of(input_amount.currency)
        output_reserve = self.reserve_of(self._other(input_amount.currency))
        input_amount_with_fee = div_trunc(input_amount.quotient * FEE_NUMERATOR, FEE_DENOMINATOR)
        output_amount = CurrencyAmount.from_raw_amount(
            output_reserve.currency,
            self.quote(
                input_amount_with_fee,
                input_reserve.currency.decimals,
                output_reserve.currency.decimals,
            ),
        )
        if output_amount.quotient <= 0:
            raise InsufficientInputAmountError()

        elif not output_amount.less_than(output_reserve):
            raise InsufficientInputAmountError(
                f"Output {output_amount.quotient} is not below reserve {output_reserve.quotient}."
            )

        logger.debug("Swap %r -> %r", input_amount, output_amount)
        return output_amount, Pair(
            input_reserve.add(input_amount), output_reserve.subtract(output_amount), self.factory
        )

    def get_input_amount(self, output_amount: CurrencyAmount) -> tuple[CurrencyAmount, "Pair"]:
        """
        Quote the input needed to buy an exact output amount.

        .. note::
            The fee is inverted with truncating division, same as the on-chain
            pair, so the result can be slightly less than an exact inverse of
            :meth:`get_output_amount`.

        Raises:
            :class:`~uniquote.exceptions.InsufficientReservesError`: A reserve is empty
              or the output is at least the whole output reserve.
        """
        self._require_token(output_amount.currency)
        if (
            self._has_empty_reserve()
            or output_amount.quotient >= self.reserve_of(output_amount.currency).quotient
        ):
            raise InsufficientReservesError()

        output_reserve = self.reserve_of(output_amount.currency)
        input_reserve = self.reserve_of(self._other(output_amount.currency))
        input_amount_after_fee = self.quote(
            output_amount.quotient,
            output_reserve.currency.decimals,
            input_reserve.currency.decimals,
        )
        input_amount = CurrencyAmount.from_raw_amount(
            input_reserve.currency,
            div_trunc(input_amount_after_fee * FEE_DENOMINATOR, FEE_NUMERATOR),
        )

        logger.debug("Swap %r -> %r", input_amount, output_amount)
        return input_amount, Pair(
            input_reserve.add(input_amount), output_reserve.subtract(output_amount), self.factory
        )

    @staticmethod
    def compute_liquidity_unit(reserve0: int, reserve1: int, decimals0: int, decimals1: int) -> int:
        """
        Sum both amounts in the larger of the two decimals. Used only as a
        basis for ratios, not as an exact value.
        """
        if decimals0 > decimals1:
            return reserve0 + scale_to_decimals(reserve1, decimals1, decimals0)

        return reserve1 + scale_to_decimals(reserve0, decimals0, decimals1)

    def get_liquidity_minted(
        self,
        total_supply: CurrencyAmount,
        token_amount_a: CurrencyAmount,
        token_amount_b: CurrencyAmount,
    ) -> CurrencyAmount:
        """
        The liquidity tokens minted for depositing the given amounts.

        Args:
            total_supply (:class:`~uniquote.model.amount.CurrencyAmount`): The current
              supply of the liquidity token.
            token_amount_a (:class:`~uniquote.model.amount.CurrencyAmount`): Deposit of one token.
            token_amount_b (:class:`~uniquote.model.amount.CurrencyAmount`): Deposit of the other.

        Returns:
            :class:`~uniquote.model.amount.CurrencyAmount`: Amount of the liquidity token.
        """
        if not total_supply.currency.equals(self.liquidity_token):
            raise TokenMismatchError("LIQUIDITY")

        # Does safety checks.
        if token_amount_a.currency.sorts_before(token_amount_b.currency):
            token_amounts = (token_amount_a, token_amount_b)
        else:
            token_amounts = (token_amount_b, token_amount_a)

        if not (
            token_amounts[0].currency.equals(self.token0)
            and token_amounts[1].currency.equals(self.token1)
        ):
            raise TokenMismatchError("TOKEN")

        decimals0 = self.token0.decimals
        decimals1 = self.token1.decimals
        added_liquidity_unit = self.compute_liquidity_unit(
            token_amounts[0].quotient, token_amounts[1].quotient, decimals0, decimals1
        )
        if total_supply.quotient == 0:
            bigger_decimals = max(decimals0, decimals1)
            liquidity = div_trunc(
                added_liquidity_unit * 10**LIQUIDITY_TOKEN_DECIMALS, 10**bigger_decimals
            )

        else:
            reserve_liquidity_unit = self.compute_liquidity_unit(
                self.reserve0.quotient, self.reserve1.quotient, decimals0, decimals1
            )
            if reserve_liquidity_unit == 0:
                raise InsufficientReservesError()

            liquidity = div_trunc(added_liquidity_unit * total_supply.quotient, reserve_liquidity_unit)

        if liquidity <= 0:
            raise InsufficientInputAmountError()

        return CurrencyAmount.from_raw_amount(self.liquidity_token, liquidity)

    def get_liquidity_value(
        self,
        token: Token,
        total_supply: CurrencyAmount,
        liquidity: CurrencyAmount,
        fee_on: bool = False,
        k_last: BigintIsh | None = None,
    ) -> CurrencyAmount:
        """
        The amount of ``token`` that ``liquidity`` can be redeemed for.

        When ``fee_on`` is set, the supply is first grown by the liquidity the
        protocol would mint for fee growth since ``k_last``.

        Raises:
            :class:`~uniquote.exceptions.MissingKLastError`: ``fee_on`` without ``k_last``.
        """
        self._require_token(token)
        if not total_supply.currency.equals(self.liquidity_token):
            raise TokenMismatchError("TOTAL_SUPPLY")
        elif not liquidity.currency.equals(self.liquidity_token):
            raise TokenMismatchError("LIQUIDITY")
        elif liquidity.quotient > total_supply.quotient:
            raise TokenMismatchError("LIQUIDITY", "Liquidity exceeds total supply.")

        total_supply_adjusted = total_supply
        if fee_on:
            if k_last is None:
                raise MissingKLastError()

            total_supply_adjusted = self._adjust_for_protocol_fee(
                total_supply, validate_hex_int(k_last)
            )

        if total_supply_adjusted.quotient == 0:
            raise TokenMismatchError("TOTAL_SUPPLY", "Total supply is zero.")

        return CurrencyAmount.from_raw_amount(
            token,
            div_trunc(
                liquidity.quotient * self.reserve_of(token).quotient,
                total_supply_adjusted.quotient,
            ),
        )

    def _adjust_for_protocol_fee(self, total_supply: CurrencyAmount, k_last: int) -> CurrencyAmount:
        if k_last == 0:
            return total_supply

        root_k = isqrt(self.reserve0.quotient * self.reserve1.quotient)
        root_k_last = isqrt(k_last)
        if root_k <= root_k_last:
            return total_supply

        numerator = total_supply.quotient * (root_k - root_k_last)
        denominator = root_k * PROTOCOL_FEE_MULTIPLIER + root_k_last
        fee_liquidity = div_trunc(numerator, denominator)
        logger.debug("Protocol fee liquidity %s (rootK=%s, rootKLast=%s)", fee_liquidity, root_k, root_k_last)
        return total_supply.add(CurrencyAmount.from_raw_amount(self.liquidity_token, fee_liquidity))

    def try_get_output_amount(self, input_amount: CurrencyAmount) -> Result:
        return attempt(self.get_output_amount, input_amount)

    def try_get_input_amount(self, output_amount: CurrencyAmount) -> Result:
        return attempt(self.get_input_amount, output_amount)

    def try_get_liquidity_minted(
        self,
        total_supply: CurrencyAmount,
        token_amount_a: CurrencyAmount,
        token_amount_b: CurrencyAmount,
    ) -> Result:
        """
        Like :meth:`get_liquidity_minted`, but pair math failures are returned as a
        :class:`~uniquote.result.Result`.

        Raises:
            :class:`~uniquote.exceptions.UnsupportedChainError`: The liquidity token
              cannot be derived because no factory is registered for the chain and
              the pair has no ``factory``. This is a configuration error, not a
              :class:`~uniquote.exceptions.PairError`.
        """
        return attempt(self.get_liquidity_minted, total_supply, token_amount_a, token_amount_b)

    def try_get_liquidity_value(
        self,
        token: Token,
        total_supply: CurrencyAmount,
        liquidity: CurrencyAmount,
        fee_on: bool = False,
        k_last: BigintIsh | None = None,
    ) -> Result:
        """
        Like :meth:`get_liquidity_value`, but pair math failures are returned as a
        :class:`~uniquote.result.Result`.

        Raises:
            :class:`~uniquote.exceptions.UnsupportedChainError`: Same as
              :meth:`try_get_liquidity_minted`.
        """
        return attempt(
            self.get_liquidity_value, token, total_supply, liquidity, fee_on=fee_on, k_last=k_last
        )
