from enum import IntEnum


class ChainId(IntEnum):
    MAINNET = 1
    ROPSTEN = 3
    RINKEBY = 4
    GOERLI = 5
    KOVAN = 42


# The V2 factory was deployed at the same address on each of these networks.
_V2_FACTORY = "0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f"

FACTORY_ADDRESS: dict[int, str] = {
    ChainId.MAINNET: _V2_FACTORY,
    ChainId.ROPSTEN: _V2_FACTORY,
    ChainId.RINKEBY: _V2_FACTORY,
    ChainId.GOERLI: _V2_FACTORY,
    ChainId.KOVAN: _V2_FACTORY,
}

INIT_CODE_HASH = "0x96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f"

FEE_NUMERATOR = 997
FEE_DENOMINATOR = 1000

PROTOCOL_FEE_MULTIPLIER = 5
"""
The protocol takes 1/6th of fee growth: ``root_k * 5 + root_k_last`` in the denominator.
"""

LIQUIDITY_TOKEN_DECIMALS = 18
LIQUIDITY_TOKEN_SYMBOL = "UNI-V2"
LIQUIDITY_TOKEN_NAME = "Uniswap V2"

MAX_DECIMALS = 255
