"""
Hardhat artifact loading and contract factories.

Artifacts follow the hardhat layout:
    artifacts/contracts/<path>/<Name>.sol/<Name>.json
"""

import glob
import json
import os
from typing import Optional

from web3 import Web3

from . import config
from .exceptions import ArtifactNotFoundError


def find_artifact(name: str, search_dir: Optional[str] = None) -> str:
    search_dir = search_dir or config.artifacts_dir()
    matches = [
        path for path in glob.glob(os.path.join(search_dir, "**", f"{name}.json"), recursive=True)
        if not path.endswith(".dbg.json")
    ]
    if not matches:
        raise ArtifactNotFoundError(f"No artifact for {name} under {search_dir}. Compile the contracts first.")
    if len(matches) > 1:
        raise ArtifactNotFoundError(f"Ambiguous artifact name {name}: {sorted(matches)}")
    return matches[0]


def load_artifact(name: str, search_dir: Optional[str] = None) -> dict:
    """Loads a contract's ABI and bytecode from its JSON artifact."""
    with open(find_artifact(name, search_dir), "r") as f:
        data = json.load(f)
    if "abi" not in data:
        raise ArtifactNotFoundError(f"Artifact for {name} has no ABI")
    return data


class ContractFactory:
    """Deploys and attaches one compiled contract, like ethers' getContractFactory."""

    def __init__(self, chain, name: str, artifact: Optional[dict] = None):
        self.chain = chain
        self.name = name
        artifact = artifact or load_artifact(name)
        self.abi = artifact["abi"]
        self.bytecode = artifact.get("bytecode", "0x")

    def _require_bytecode(self):
        if self.bytecode in ("", "0x"):
            raise ArtifactNotFoundError(f"{self.name} is abstract or an interface and has no bytecode")

    @property
    def bytecode_hash(self) -> str:
        self._require_bytecode()
        return Web3.keccak(hexstr=self.bytecode).hex()

    def deploy(self, *args):
        self._require_bytecode()
        return self.chain.deploy(self, *args)

    def attach(self, address: str):
        return self.chain.w3.eth.contract(address=Web3.to_checksum_address(address), abi=self.abi)

    def encode_initializer(self, initializer: Optional[str], args=()) -> bytes:
        if not initializer:
            return b""
        contract = self.chain.w3.eth.contract(abi=self.abi)
        return Web3.to_bytes(hexstr=contract.encode_abi(initializer, args=list(args)))
