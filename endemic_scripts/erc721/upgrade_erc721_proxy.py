"""Upgrade the EndemicNFT proxy."""

import logging

from ..runner import run_script
from ..upgrades import upgrade_proxy

logger = logging.getLogger(__name__)


def main(chain):
    nft_proxy = chain.addresses["endemic_nft_proxy"]

    logger.info(f"Upgrading EndemicNFT with the account: {chain.address}")
    upgrade_proxy(chain, nft_proxy, chain.factory("EndemicNFT"))


if __name__ == "__main__":
    run_script(main)
