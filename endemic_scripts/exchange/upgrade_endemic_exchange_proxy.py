"""Upgrade the EndemicExchange proxy to the currently compiled implementation."""

import logging

from ..runner import run_script
from ..upgrades import upgrade_proxy

logger = logging.getLogger(__name__)


def main(chain):
    proxy_address = chain.addresses["endemic_exchange_proxy"]

    logger.info(f"Upgrading EndemicExchange with the account: {chain.address}")
    upgrade_proxy(chain, proxy_address, chain.factory("EndemicExchange"))


if __name__ == "__main__":
    run_script(main)
