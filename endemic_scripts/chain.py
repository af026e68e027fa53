"""
Web3 connection and transaction handling shared by every script
"""

import logging
from typing import Any, Optional

from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

from . import config
from .addresses import AddressBook, get_for_network
from .exceptions import TransactionFailedError
from .registry import DeploymentRegistry

logger = logging.getLogger(__name__)


class Chain:
    """A connected network plus the account that signs for it.

    Every state-changing call goes through `transact`, which waits for the
    receipt and checks its status before returning.
    """

    def __init__(self, w3: Web3, account: Any, network: config.NetworkConfig,
                 receipt_timeout: Optional[int] = None, registry: Optional[DeploymentRegistry] = None):
        self.w3 = w3
        self.account = account
        self.network = network
        self.receipt_timeout = receipt_timeout or config.receipt_timeout()
        self._registry = registry

    @classmethod
    def connect(cls, network_name: Optional[str] = None) -> "Chain":
        network = config.get_network_config(network_name)

        w3 = Web3(Web3.HTTPProvider(network.rpc_url, request_kwargs={"timeout": network.request_timeout}))
        if network.poa:
            w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

        if not w3.is_connected():
            raise ConnectionError(f"Could not connect to RPC URL for {network.name}")
        logger.info(f"Connected to {network.name} (chain id {network.chain_id})")

        account = w3.eth.account.from_key(config.get_private_key(network))
        logger.info(f"Using account: {account.address}")
        return cls(w3, account, network)

    @property
    def registry(self) -> DeploymentRegistry:
        if self._registry is None:
            self._registry = DeploymentRegistry(self.network.name)
        return self._registry

    @property
    def addresses(self) -> AddressBook:
        return get_for_network(self.network.name)

    @property
    def address(self) -> str:
        return self.account.address

    def factory(self, name: str):
        from .artifacts import ContractFactory
        return ContractFactory(self, name)

    def call(self, fn_call):
        return fn_call.call({"from": self.address})

    def transact(self, fn_call, label: str):
        """Build, sign and send a contract call and wait until it is mined."""
        tx = fn_call.build_transaction({
            "from": self.address,
            "nonce": self.w3.eth.get_transaction_count(self.address, "pending"),
            "chainId": self.network.chain_id,
        })
        return self._send(tx, label)

    def deploy(self, factory, *args):
        """Deploy `factory` with constructor `args`, returning the attached contract."""
        constructor = self.w3.eth.contract(abi=factory.abi, bytecode=factory.bytecode).constructor(*args)
        receipt = self.transact(constructor, f"deploy {factory.name}")
        address = receipt["contractAddress"]
        logger.info(f"{factory.name} deployed to: {address}")
        return factory.attach(address)

    def _send(self, tx, label):
        signed_tx = self.account.sign_transaction(tx)
        tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        logger.info(f"{label}: sent {tx_hash.hex()}")

        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.receipt_timeout)
        if receipt["status"] != 1:
            raise TransactionFailedError(label, tx_hash.hex(), receipt)

        logger.info(f"{label}: confirmed in block {receipt['blockNumber']}")
        return receipt
