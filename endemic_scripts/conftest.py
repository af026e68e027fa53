import pytest
from unittest.mock import MagicMock

from endemic_scripts.addresses import AddressBook

DEPLOYER = "0x1d1C46273cEcC00F7503AB3E97A40a199bcd6b31"


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Keep artifacts and deployment records of every test inside tmp_path"""
    monkeypatch.setenv("ARTIFACTS_DIR", str(tmp_path / "artifacts"))
    monkeypatch.setenv("DEPLOYMENTS_DIR", str(tmp_path / "deployments"))
    monkeypatch.delenv("RPC_URL", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)


@pytest.fixture
def make_chain():
    """Build a mocked Chain whose address table is `addresses`"""
    def _make(addresses=None, network="testnet"):
        chain = MagicMock()
        chain.address = DEPLOYER
        chain.network.name = network
        chain.addresses = AddressBook(network, addresses or {})
        return chain
    return _make
