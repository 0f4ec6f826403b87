import pytest
from pydantic import BaseModel

from uniquote.model.types import ChainID, validate_hex_int


class TestChainID:
    @pytest.mark.parametrize(
        "value",
        [
            42161,
            "42161",
            "0xa4b1",
            (42161).to_bytes(8, "big"),
            [0, 0, 0, 0, 0, 0, 164, 177],
        ],
    )
    def test_chain_id(self, value):
        class MyModel(BaseModel):
            chain_id: ChainID

        model = MyModel(chain_id=value)
        assert model.chain_id == 42161

        model_json = model.model_dump_json()
        assert model_json == '{"chain_id":42161}'

    def test_eq(self):
        chain_id = ChainID(42161)
        assert chain_id == 42161


@pytest.mark.parametrize("value", [250000, "250000", "0x3d090", b"\x03\xd0\x90"])
def test_validate_hex_int(value):
    assert validate_hex_int(value) == 250000


@pytest.mark.parametrize("value", [None, 1.5, True])
def test_validate_hex_int_invalid(value):
    with pytest.raises(TypeError):
        validate_hex_int(value)
