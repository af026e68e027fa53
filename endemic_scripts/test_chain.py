#!/usr/bin/env python3
"""
Tests for transaction sending and contract deployment
"""

import pytest
from unittest.mock import MagicMock, patch
from hexbytes import HexBytes

from endemic_scripts.chain import Chain
from endemic_scripts.config import NetworkConfig
from endemic_scripts.exceptions import TransactionFailedError
from endemic_scripts.registry import DeploymentRegistry

DEPLOYER = "0x1d1C46273cEcC00F7503AB3E97A40a199bcd6b31"
TX_HASH = HexBytes("0x" + "ab" * 32)


@pytest.fixture
def w3():
    w3 = MagicMock()
    w3.eth.get_transaction_count.return_value = 7
    w3.eth.send_raw_transaction.return_value = TX_HASH
    w3.eth.wait_for_transaction_receipt.return_value = {"status": 1, "blockNumber": 42}
    return w3


@pytest.fixture
def chain(w3, tmp_path):
    account = MagicMock()
    account.address = DEPLOYER
    network = NetworkConfig("localhost", 31337, "http://127.0.0.1:8545")
    return Chain(w3, account, network, receipt_timeout=5, registry=DeploymentRegistry("localhost", str(tmp_path)))


class TestTransact:
    """Test class for Chain.transact"""

    def test_transaction_is_signed_sent_and_mined(self, chain, w3):
        """Test a transaction is built, signed, sent and awaited"""
        fn_call = MagicMock()
        fn_call.build_transaction.return_value = {"to": "0xabc", "data": "0x"}

        receipt = chain.transact(fn_call, "pause")

        fn_call.build_transaction.assert_called_once_with({
            "from": DEPLOYER,
            "nonce": 7,
            "chainId": 31337,
        })
        chain.account.sign_transaction.assert_called_once_with({"to": "0xabc", "data": "0x"})
        w3.eth.send_raw_transaction.assert_called_once_with(
            chain.account.sign_transaction.return_value.raw_transaction
        )
        w3.eth.wait_for_transaction_receipt.assert_called_once_with(TX_HASH, timeout=5)
        assert receipt["blockNumber"] == 42

    def test_reverted_transaction_raises(self, chain, w3):
        """Test a reverted receipt raises"""
        w3.eth.wait_for_transaction_receipt.return_value = {"status": 0, "blockNumber": 42}

        with pytest.raises(TransactionFailedError, match="pause") as excinfo:
            chain.transact(MagicMock(), "pause")
        assert excinfo.value.receipt["status"] == 0

    def test_nonce_includes_pending(self, chain, w3):
        """Test the nonce counts pending transactions"""
        chain.transact(MagicMock(), "pause")
        w3.eth.get_transaction_count.assert_called_once_with(DEPLOYER, "pending")


class TestDeploy:
    """Test class for Chain.deploy"""

    def test_deploy_attaches_at_receipt_address(self, chain, w3):
        """Test a deployment attaches at the receipt's contract address"""
        w3.eth.wait_for_transaction_receipt.return_value = {
            "status": 1, "blockNumber": 1, "contractAddress": "0x76D3755015cFE958e3351fFe59B9D353b783fa0a",
        }
        factory = MagicMock()
        factory.name = "Tipjar"

        contract = chain.deploy(factory, 1, 2)

        w3.eth.contract.assert_called_once_with(abi=factory.abi, bytecode=factory.bytecode)
        w3.eth.contract.return_value.constructor.assert_called_once_with(1, 2)
        factory.attach.assert_called_once_with("0x76D3755015cFE958e3351fFe59B9D353b783fa0a")
        assert contract is factory.attach.return_value


class TestConnect:
    """Test class for Chain.connect"""

    @patch("endemic_scripts.chain.Web3")
    def test_connect_failure(self, mock_web3, monkeypatch):
        """Test an unreachable node fails to connect"""
        monkeypatch.setenv("PRIVATE_KEY", "0x" + "11" * 32)
        mock_web3.return_value.is_connected.return_value = False

        with pytest.raises(ConnectionError, match="sepolia"):
            Chain.connect("sepolia")

    @patch("endemic_scripts.chain.Web3")
    def test_poa_middleware_injected(self, mock_web3, monkeypatch):
        """Test POA networks get the extra-data middleware"""
        monkeypatch.setenv("PRIVATE_KEY", "0x" + "11" * 32)
        w3 = mock_web3.return_value
        w3.is_connected.return_value = True

        chain = Chain.connect("mumbai")

        w3.middleware_onion.inject.assert_called_once()
        w3.eth.account.from_key.assert_called_once_with("0x" + "11" * 32)
        assert chain.network.chain_id == 80001

    @patch("endemic_scripts.chain.Web3")
    def test_no_poa_middleware_on_mainnet(self, mock_web3, monkeypatch):
        """Test mainnet gets no POA middleware"""
        monkeypatch.setenv("MAINNET_PRIVATE_KEY", "0x" + "11" * 32)
        mock_web3.return_value.is_connected.return_value = True

        Chain.connect("mainnet")

        mock_web3.return_value.middleware_onion.inject.assert_not_called()
