from functools import cached_property
from typing import Any

from eth_pydantic_types.address import Address
from pydantic import BaseModel, ConfigDict, Field

from uniquote.constants import MAX_DECIMALS
from uniquote.exceptions import InvalidPairError
from uniquote.model.chain_address import ChainAddress
from uniquote.model.types import ChainID


class Token(BaseModel):
    """
    An ERC-20 currency on a chain. Identity is the :class:`ChainAddress` key;
    ``decimals``, ``symbol`` and ``name`` are metadata.
    """

    model_config = ConfigDict(frozen=True)

    chain_id: ChainID
    address: Address
    decimals: int = Field(ge=0, le=MAX_DECIMALS)
    symbol: str | None = None
    name: str | None = None

    @classmethod
    def from_str(
        cls, value: str, decimals: int, symbol: str | None = None, name: str | None = None
    ) -> "Token":
        """
        Create a token from a ``"0x...address@chain_id"`` str.
        """
        key = ChainAddress(value)
        return cls(
            chain_id=key.chain_id,
            address=key.evm_address,
            decimals=decimals,
            symbol=symbol,
            name=name,
        )

    @cached_property
    def key(self) -> ChainAddress:
        return ChainAddress.from_evm_address(self.address, self.chain_id)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Token):
            return NotImplemented

        return self.key.root == other.key.root

    def __hash__(self) -> int:
        return hash(self.key.root)

    def __repr__(self) -> str:
        return f"<Token {self.symbol or self.address} @ {self.chain_id}>"

    def equals(self, other: "Token") -> bool:
        return self == other

    def sorts_before(self, other: "Token") -> bool:
        """
        Returns true if the address of this token sorts before the address of the other token.

        Raises:
            :class:`~uniquote.exceptions.InvalidPairError`: When the tokens are on
              different chains or are the same token.
        """
        if self.chain_id != other.chain_id:
            raise InvalidPairError("CHAIN_IDS", f"Tokens on different chains: {self!r}, {other!r}")

        elif self.key.root == other.key.root:
            raise InvalidPairError("ADDRESSES", f"Cannot pair {self!r} with itself.")

        return self.key.address < other.key.address
