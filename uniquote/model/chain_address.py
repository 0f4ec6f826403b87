from functools import cached_property
from typing import Any

from eth_utils import is_hex_address, to_checksum_address
from pydantic import RootModel, model_serializer, model_validator

from uniquote.model.types import ChainID


def parse_chain_address(data: str) -> str:
    """
    Parse a chain-address str (e.g. ``"0x...address@1"``) into the canonical
    ``hex_address@hex_chain`` form: 20 lower-case address bytes and 8 chain bytes.
    """
    address, chain_part = data.split("@", 1)

    if address.startswith("0x"):
        address = address[2:]

    if not is_hex_address(f"0x{address}"):
        raise ValueError(f"Invalid address '{address}'.")

    try:
        chain_id = int(chain_part)
    except ValueError:
        # If not a decimal, assume it's already a hex string.
        chain_id = int(chain_part, 16)

    chain_hex = chain_id.to_bytes(8, "big").hex()

    return f"{address.lower()}@{chain_hex}"


def validate_chain_address(chain_address: Any) -> Any:
    # Case 1: Already validated.
    if isinstance(chain_address, ChainAddress):
        return chain_address.root

    # Case 2: A (address, chain_id) pair.
    elif isinstance(chain_address, tuple) and len(chain_address) == 2:
        address, chain_id = chain_address
        return parse_chain_address(f"{address}@{int(chain_id)}")

    # Case 3: User-friendly string like "0x...address@chain_id"
    elif isinstance(chain_address, str) and "@" in chain_address:
        return parse_chain_address(chain_address)

    raise ValueError("Invalid ChainAddress")


class ChainAddress(RootModel[str]):
    """
    Identifies an address on a chain in format hex_address@hex_chain.
    This is the canonical key of a currency: two currencies are the
    same iff their chain addresses are equal.
    """

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _validate_input(cls, data: Any) -> Any:
        return validate_chain_address(data)

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)

    @classmethod
    def from_evm_address(cls, address: str, chain_id: int) -> "ChainAddress":
        return cls.model_validate((address, chain_id))

    @model_serializer
    def serialize_model(self) -> str:
        return self.root

    @cached_property
    def address(self) -> str:
        return self.root.split("@", 1)[0]

    @cached_property
    def evm_address(self) -> str:
        return to_checksum_address(f"0x{self.address}")

    @cached_property
    def chain_id(self) -> ChainID:
        return ChainID(int(self.root.split("@")[-1], 16))
