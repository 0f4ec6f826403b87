import logging

from uniquote.logger import get_logger
from uniquote.model.amount import CurrencyAmount
from uniquote.model.token import Token
from uniquote.pair import Pair

logger = get_logger(logging.DEBUG)

USDC = Token.from_str("0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48@1", 6, symbol="USDC")
DAI = Token.from_str("0x6B175474E89094C44Da98b954EedeAC495271d0F@1", 18, symbol="DAI")


def main():
    pair = Pair(
        CurrencyAmount.from_raw_amount(USDC, 1_000_000 * 10**6),
        CurrencyAmount.from_raw_amount(DAI, 1_000_000 * 10**18),
    )
    logger.info(f"Pair {pair.liquidity_token.address}")
    logger.info(f"1 DAI = {pair.price_of(DAI).to_decimal()} USDC")

    output, pair = pair.get_output_amount(CurrencyAmount.from_raw_amount(USDC, 250 * 10**6))
    logger.info(f"250 USDC buys {output.to_exact()} DAI")

    result = pair.try_get_input_amount(CurrencyAmount.from_raw_amount(USDC, 2_000_000 * 10**6))
    if not result.ok:
        logger.warning(f"Cannot buy 2,000,000 USDC: {result.kind.value}")


if __name__ == "__main__":
    main()
