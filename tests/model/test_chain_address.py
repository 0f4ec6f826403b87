import pytest

from uniquote.model.chain_address import ChainAddress


class TestChainAddress:
    @pytest.fixture(scope="class")
    def chain_address(self):
        return ChainAddress("0x62622E77D1349Face943C6e7D5c01C61465FE1dc@42161")

    def test_from_evm_address(self):
        evm_address = "0x62622E77D1349Face943C6e7D5c01C61465FE1dc"
        chain_address = ChainAddress.from_evm_address(evm_address, 123)
        assert chain_address.evm_address == evm_address
        assert chain_address.chain_id == 123

    def test_address(self, chain_address):
        assert chain_address.address == "62622e77d1349face943c6e7d5c01c61465fe1dc"

    def test_evm_address(self, chain_address):
        """
        Evm address should be checksummed.
        """
        assert chain_address.evm_address == "0x62622E77D1349Face943C6e7D5c01C61465FE1dc"

    def test_chain_id(self, chain_address):
        assert chain_address.chain_id == 42161

    def test_hex_chain(self, chain_address):
        assert ChainAddress("62622E77D1349Face943C6e7D5c01C61465FE1dc@a4b1") == chain_address

    def test_model_dump(self, chain_address):
        expected = "62622e77d1349face943c6e7d5c01c61465fe1dc@000000000000a4b1"
        assert chain_address.model_dump() == expected
        assert str(chain_address) == expected

    def test_case_insensitive(self, chain_address):
        lower = ChainAddress("0x62622e77d1349face943c6e7d5c01c61465fe1dc@42161")
        assert lower == chain_address
        assert hash(lower) == hash(chain_address)

    def test_missing_chain_raises(self):
        with pytest.raises(ValueError):
            ChainAddress("0x62622E77D1349Face943C6e7D5c01C61465FE1dc")

    def test_invalid_address_raises(self):
        with pytest.raises(ValueError):
            ChainAddress("0x1234@1")
