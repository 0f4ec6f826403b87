from pydantic_core.core_schema import int_schema, no_info_before_validator_function


def validate_hex_int(value, **kwargs) -> int:
    """
    Parse an integer given as an int, a decimal str, a hex str, big-endian bytes,
    or a list of byte values.
    """
    if isinstance(value, bool):
        raise TypeError(type(value))

    elif isinstance(value, int):
        return value

    elif isinstance(value, str):
        if value.isnumeric():
            return int(value)

        # Hex-str or fail.
        return int(value, 16)

    elif isinstance(value, bytes):
        return int.from_bytes(value, byteorder="big")

    elif isinstance(value, list):
        return int.from_bytes(bytes(value), byteorder="big")

    raise TypeError(type(value))


class ChainID(int):
    """
    Validated integers, hex-str, and hex-bytes values.
    """

    @classmethod
    def __get_pydantic_core_schema__(cls, value, handler=None):
        return no_info_before_validator_function(validate_hex_int, int_schema(ge=0))


BigintIsh = int | str | bytes
"""
Anything :func:`validate_hex_int` accepts, e.g. a ``kLast`` read from a contract call.
"""
