import pytest

from uniquote.model.amount import CurrencyAmount
from uniquote.model.token import Token
from uniquote.pair import Pair

DAI_ADDRESS = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
USDC_ADDRESS = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


@pytest.fixture(scope="session")
def dai():
    return Token(chain_id=1, address=DAI_ADDRESS, decimals=18, symbol="DAI", name="Dai Stablecoin")


@pytest.fixture(scope="session")
def usdc():
    return Token(chain_id=1, address=USDC_ADDRESS, decimals=6, symbol="USDC", name="USD//C")


@pytest.fixture(scope="session")
def token_a():
    return Token(
        chain_id=1, address="0x0000000000000000000000000000000000000001", decimals=18, symbol="A"
    )


@pytest.fixture(scope="session")
def token_b():
    return Token(
        chain_id=1, address="0x0000000000000000000000000000000000000002", decimals=18, symbol="B"
    )


@pytest.fixture(scope="session")
def token_6():
    """
    A 6-decimals token that sorts first.
    """
    return Token(
        chain_id=1, address="0x0000000000000000000000000000000000000001", decimals=6, symbol="SIX"
    )


@pytest.fixture(scope="session")
def token_18():
    return Token(
        chain_id=1, address="0x0000000000000000000000000000000000000002", decimals=18, symbol="EIGHTEEN"
    )


@pytest.fixture(scope="session")
def foreign_token():
    return Token(
        chain_id=1, address="0x0000000000000000000000000000000000000003", decimals=18, symbol="C"
    )


@pytest.fixture(scope="session")
def amount():
    return CurrencyAmount.from_raw_amount


@pytest.fixture
def mixed_pair(token_6, token_18, amount):
    """
    1,000,000 SIX against 1,000 EIGHTEEN.
    """
    return Pair(amount(token_6, 1_000_000 * 10**6), amount(token_18, 1_000 * 10**18))
