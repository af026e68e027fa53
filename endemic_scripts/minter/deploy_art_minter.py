"""Deploy the ArtMinter proxy."""

import logging

from ..runner import run_script
from ..upgrades import deploy_proxy

logger = logging.getLogger(__name__)


def main(chain):
    """Deploy ArtMinter behind a transparent proxy"""
    logger.info(f"Deploying ArtMinter with the account: {chain.address}")

    art_minter = deploy_proxy(chain, chain.factory("ArtMinter"), [], initializer="__ArtMinter_init")

    logger.info(f"ArtMinter deployed to: {art_minter.address}")
    return art_minter.address


if __name__ == "__main__":
    run_script(main)
