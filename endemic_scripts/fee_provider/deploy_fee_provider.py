"""Deploy the FeeProvider proxy."""

import logging

from ..runner import run_script
from ..upgrades import deploy_proxy

logger = logging.getLogger(__name__)

# basis points
INITIAL_SALE_FEE = 1500
SECONDARY_SALE_MAKER_FEE = 250
TAKER_FEE = 250


def main(chain):
    """Deploy FeeProvider behind a transparent proxy"""
    logger.info(f"Deploying FeeProvider with the account: {chain.address}")

    fee_provider = deploy_proxy(
        chain,
        chain.factory("FeeProvider"),
        [INITIAL_SALE_FEE, SECONDARY_SALE_MAKER_FEE, TAKER_FEE],
        initializer="__FeeProvider_init",
    )

    logger.info(f"FeeProvider deployed to: {fee_provider.address}")
    return fee_provider.address


if __name__ == "__main__":
    run_script(main)
