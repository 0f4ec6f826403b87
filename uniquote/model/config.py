from eth_pydantic_types.address import Address
from eth_pydantic_types.hex.bytes import HexBytes32
from pydantic import BaseModel, Field

from uniquote.constants import FACTORY_ADDRESS, INIT_CODE_HASH
from uniquote.exceptions import UnsupportedChainError


class FactoryConfig(BaseModel):
    """
    Where pairs are deployed on a chain.
    """

    factory_address: Address
    """
    The pair factory that CREATE2-deploys every pair.
    """

    init_code_hash: HexBytes32 = Field(default=INIT_CODE_HASH, validate_default=True)
    """
    Keccak hash of the pair contract's creation code.
    """

    @classmethod
    def for_chain(cls, chain_id: int) -> "FactoryConfig":
        """
        The registered factory for the given chain.

        Raises:
            :class:`~uniquote.exceptions.UnsupportedChainError`: When no factory is
              registered for the chain.
        """
        if (factory_address := FACTORY_ADDRESS.get(chain_id)) is None:
            raise UnsupportedChainError(chain_id)

        return cls(factory_address=factory_address)
