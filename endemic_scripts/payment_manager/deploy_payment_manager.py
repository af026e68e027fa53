"""Deploy the EndemicPaymentManager proxy."""

import logging

from ..runner import run_script
from ..upgrades import deploy_proxy

logger = logging.getLogger(__name__)

MAKER_FEE = 250
TAKER_FEE = 250


def main(chain):
    """Deploy EndemicPaymentManager behind a transparent proxy"""
    logger.info(f"Deploying EndemicPaymentManager with the account: {chain.address}")

    payment_manager = deploy_proxy(
        chain,
        chain.factory("EndemicPaymentManager"),
        [MAKER_FEE, TAKER_FEE],
        initializer="__EndemicPaymentManager_init",
    )

    logger.info(f"EndemicPaymentManager deployed to: {payment_manager.address}")
    return payment_manager.address


if __name__ == "__main__":
    run_script(main)
