"""Deploy the RoyaltiesProvider proxy."""

import logging

from ..records import ROYALTY_FEE_LIMIT
from ..runner import run_script
from ..upgrades import deploy_proxy

logger = logging.getLogger(__name__)


def main(chain):
    """Deploy RoyaltiesProvider behind a transparent proxy"""
    logger.info(f"Deploying RoyaltiesProvider with the account: {chain.address}")

    royalties_provider = deploy_proxy(
        chain,
        chain.factory("RoyaltiesProvider"),
        [ROYALTY_FEE_LIMIT],
        initializer="__RoyaltiesProvider_init",
    )

    logger.info(f"RoyaltiesProvider deployed to: {royalties_provider.address}")
    return royalties_provider.address


if __name__ == "__main__":
    run_script(main)
