from typing import TYPE_CHECKING

from eth_abi.packed import encode_packed
from eth_utils import keccak, to_bytes, to_checksum_address

if TYPE_CHECKING:
    from uniquote.model.token import Token


def get_create2_address(deployer: str, salt: bytes, init_code_hash: str | bytes) -> str:
    """
    The address a contract deployed by ``deployer`` via CREATE2 ends up at.
    """
    init_code_hash = (
        init_code_hash if isinstance(init_code_hash, bytes) else to_bytes(hexstr=init_code_hash)
    )
    hashed = keccak(b"\xff" + to_bytes(hexstr=deployer) + salt + init_code_hash)

    # The last 20 bytes are used in the address type.
    return to_checksum_address(hashed[-20:])


def compute_pair_address(
    factory_address: str, token_a: "Token", token_b: "Token", init_code_hash: str | bytes
) -> str:
    """
    Compute the deterministic address of the pair of two tokens.

    Args:
        factory_address (str): The factory that deploys the pair.
        token_a (:class:`~uniquote.model.token.Token`): One of the tokens.
        token_b (:class:`~uniquote.model.token.Token`): The other token.
        init_code_hash (str | bytes): Hash of the pair's creation code.

    Returns:
        str: The checksummed pair address. Independent of argument order.
    """
    # Does safety checks.
    token0, token1 = (token_a, token_b) if token_a.sorts_before(token_b) else (token_b, token_a)
    salt = keccak(encode_packed(["address", "address"], [token0.address, token1.address]))
    return get_create2_address(factory_address, salt, init_code_hash)
