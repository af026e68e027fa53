"""
Transparent upgradeable proxies (OpenZeppelin 4.x layout).

deploy_proxy:  implementation -> shared ProxyAdmin -> TransparentUpgradeableProxy
upgrade_proxy: implementation -> ProxyAdmin.upgrade(proxy, implementation)

Implementations are reused when the registry already holds one deployed from
identical creation bytecode and code is still present at that address; the
shared ProxyAdmin likewise.
"""

import logging
from typing import Optional, Sequence

from web3 import Web3

from .artifacts import ContractFactory
from .registry import DeploymentRegistry

logger = logging.getLogger(__name__)

# EIP-1967 storage slots
IMPLEMENTATION_SLOT = 0x360894A13BA1A3210667C828492DB98DCA3E2076CC3735A920A3CA505D382BBC
ADMIN_SLOT = 0xB53127684A568B3173AE13B9F8A6016E243E63B6E8EE1178D6A717850B5D6103

PROXY_ADMIN = "ProxyAdmin"
TRANSPARENT_PROXY = "TransparentUpgradeableProxy"


def _read_address_slot(chain, address: str, slot: int) -> str:
    raw = chain.w3.eth.get_storage_at(Web3.to_checksum_address(address), slot)
    return Web3.to_checksum_address(bytes(raw)[-20:])


def get_implementation_address(chain, proxy_address: str) -> str:
    return _read_address_slot(chain, proxy_address, IMPLEMENTATION_SLOT)


def get_admin_address(chain, proxy_address: str) -> str:
    return _read_address_slot(chain, proxy_address, ADMIN_SLOT)


def _has_code(chain, address: str) -> bool:
    return bool(chain.w3.eth.get_code(Web3.to_checksum_address(address)))


def deploy_implementation(chain, factory: ContractFactory, registry: DeploymentRegistry) -> str:
    bytecode_hash = factory.bytecode_hash
    existing = registry.find_implementation(bytecode_hash)
    if existing:
        if _has_code(chain, existing):
            logger.info(f"Reusing {factory.name} implementation at {existing}")
            return existing
        logger.warning(f"Recorded {factory.name} implementation {existing} has no code, redeploying")

    implementation = factory.deploy()
    registry.record_implementation(factory.name, bytecode_hash, implementation.address)
    return implementation.address


def _proxy_admin(chain, registry: DeploymentRegistry) -> str:
    if registry.proxy_admin:
        if _has_code(chain, registry.proxy_admin):
            return registry.proxy_admin
        logger.warning(f"Recorded ProxyAdmin {registry.proxy_admin} has no code, deploying a new one")
    else:
        logger.info("No ProxyAdmin recorded for this network, deploying one")

    admin = chain.factory(PROXY_ADMIN).deploy()
    registry.set_proxy_admin(admin.address)
    return admin.address


def deploy_proxy(chain, factory: ContractFactory, args: Sequence = (), initializer: Optional[str] = "initialize",
                 registry: Optional[DeploymentRegistry] = None):
    """Deploy `factory` behind a transparent proxy and run its initializer.

    Returns the proxy attached with the implementation ABI.
    """
    registry = registry or chain.registry

    init_data = factory.encode_initializer(initializer, args)
    implementation = deploy_implementation(chain, factory, registry)
    admin = _proxy_admin(chain, registry)

    proxy = chain.factory(TRANSPARENT_PROXY).deploy(implementation, admin, init_data)
    registry.record_contract(factory.name, proxy.address)
    logger.info(f"{factory.name} proxy deployed to: {proxy.address} (implementation {implementation})")
    return factory.attach(proxy.address)


def upgrade_proxy(chain, proxy_address: str, factory: ContractFactory,
                  registry: Optional[DeploymentRegistry] = None):
    """Point `proxy_address` at a freshly built `factory` implementation."""
    registry = registry or chain.registry
    proxy_address = Web3.to_checksum_address(proxy_address)

    admin_address = get_admin_address(chain, proxy_address)
    current = get_implementation_address(chain, proxy_address)
    implementation = deploy_implementation(chain, factory, registry)

    if implementation == current:
        logger.warning(f"{factory.name} proxy {proxy_address} already uses implementation {current}")
        return factory.attach(proxy_address)

    proxy_admin = chain.factory(PROXY_ADMIN).attach(admin_address)
    chain.transact(
        proxy_admin.functions.upgrade(proxy_address, implementation),
        f"upgrade {factory.name}",
    )
    registry.record_contract(factory.name, proxy_address)
    logger.info(f"{factory.name} proxy {proxy_address} upgraded from {current} to {implementation}")
    return factory.attach(proxy_address)
