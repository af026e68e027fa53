"""
Per-network deployment record.

Layout of deployments/<network>.json:
    {
      "contracts": {"EndemicExchange": "0x..."},
      "proxyAdmin": "0x...",
      "implementations": {"<bytecode hash>": {"contract": "EndemicExchange", "address": "0x..."}}
    }
"""

import json
import logging
import os
from typing import Optional

from . import config

logger = logging.getLogger(__name__)


class DeploymentRegistry:
    def __init__(self, network: str, directory: Optional[str] = None):
        self.network = network
        self.path = os.path.join(directory or config.deployments_dir(), f"{network}.json")
        self.data = {"contracts": {}, "proxyAdmin": None, "implementations": {}}
        if os.path.exists(self.path):
            with open(self.path, "r") as f:
                self.data.update(json.load(f))

    @property
    def proxy_admin(self) -> Optional[str]:
        return self.data.get("proxyAdmin")

    def set_proxy_admin(self, address: str):
        self.data["proxyAdmin"] = address
        self.save()

    def find_implementation(self, bytecode_hash: str) -> Optional[str]:
        entry = self.data["implementations"].get(bytecode_hash)
        return entry["address"] if entry else None

    def record_implementation(self, contract: str, bytecode_hash: str, address: str):
        self.data["implementations"][bytecode_hash] = {"contract": contract, "address": address}
        self.save()

    def record_contract(self, name: str, address: str):
        previous = self.data["contracts"].get(name)
        if previous and previous != address:
            logger.info(f"Replacing recorded {name} {previous} with {address}")
        self.data["contracts"][name] = address
        self.save()

    def get_contract(self, name: str) -> Optional[str]:
        return self.data["contracts"].get(name)

    def save(self):
        os.makedirs(os.path.dirname(self.path), exist_ok=True)
        tmp_path = self.path + ".tmp"
        with open(tmp_path, "w") as f:
            json.dump(self.data, f, indent=2, sort_keys=True)
        os.replace(tmp_path, self.path)
