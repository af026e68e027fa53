"""
Network and environment configuration.

Values come from the process environment, with a local .env file loaded
first. Hosted networks build their RPC URL from ALCHEMY_API_KEY unless
RPC_URL is set.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError, UnknownNetworkError

# Load environment variables from .env file
load_dotenv()

DEFAULT_NETWORK = "localhost"
DEFAULT_SUBGRAPH_URL = "https://api.thegraph.com/subgraphs/name/endemic-nft/endemic-aurora"
DEFAULT_API_URL = "https://api.endemic.app"


@dataclass(frozen=True)
class NetworkConfig:
    """Connection settings for one chain"""
    name: str
    chain_id: int
    rpc_url: str
    private_key_env: str = "PRIVATE_KEY"
    poa: bool = False
    request_timeout: int = 30


def _alchemy(subdomain: str) -> str:
    return f"https://{subdomain}.g.alchemy.com/v2/{os.getenv('ALCHEMY_API_KEY', '')}"


def _networks():
    return {
        "localhost": NetworkConfig("localhost", 31337, "http://127.0.0.1:8545"),
        "mainnet": NetworkConfig("mainnet", 1, _alchemy("eth-mainnet"), "MAINNET_PRIVATE_KEY"),
        "goerli": NetworkConfig("goerli", 5, _alchemy("eth-goerli")),
        "sepolia": NetworkConfig("sepolia", 11155111, _alchemy("eth-sepolia")),
        "polygon": NetworkConfig("polygon", 137, _alchemy("polygon-mainnet"), "MAINNET_PRIVATE_KEY", poa=True),
        "mumbai": NetworkConfig("mumbai", 80001, _alchemy("polygon-mumbai"), poa=True),
        "arbitrum_goerli": NetworkConfig("arbitrum_goerli", 421613, _alchemy("arb-goerli")),
        "arbitrum_sepolia": NetworkConfig("arbitrum_sepolia", 421614, _alchemy("arb-sepolia")),
        "aurora": NetworkConfig(
            "aurora", 1313161554, "https://mainnet.aurora.dev", "MAINNET_PRIVATE_KEY", request_timeout=80
        ),
    }


def get_network_config(name: Optional[str] = None) -> NetworkConfig:
    name = name or os.getenv("NETWORK", DEFAULT_NETWORK)
    networks = _networks()
    if name not in networks:
        raise UnknownNetworkError(name)

    network = networks[name]
    rpc_override = os.getenv("RPC_URL")
    if rpc_override:
        network = NetworkConfig(
            network.name, network.chain_id, rpc_override,
            network.private_key_env, network.poa, network.request_timeout,
        )
    return network


def get_private_key(network: NetworkConfig) -> str:
    private_key = os.getenv(network.private_key_env)
    if not private_key:
        raise ConfigurationError(f"{network.private_key_env} not found in environment")
    if not private_key.startswith("0x"):
        private_key = "0x" + private_key
    return private_key


def get_fee_recipient() -> str:
    fee_recipient = os.getenv("FEE_RECIPIENT")
    if not fee_recipient:
        raise ConfigurationError("FEE_RECIPIENT not found in environment")
    return fee_recipient


def artifacts_dir() -> str:
    return os.path.abspath(os.getenv("ARTIFACTS_DIR", "artifacts"))


def deployments_dir() -> str:
    return os.path.abspath(os.getenv("DEPLOYMENTS_DIR", "deployments"))


def subgraph_url() -> str:
    return os.getenv("SUBGRAPH_URL", DEFAULT_SUBGRAPH_URL)


def api_url() -> str:
    return os.getenv("ENDEMIC_API_URL", DEFAULT_API_URL).rstrip("/")


def receipt_timeout() -> int:
    return int(os.getenv("TX_RECEIPT_TIMEOUT", "120"))
