"""Deploy the ArtOrder escrow proxy; the fee recipient comes from FEE_RECIPIENT."""

import logging

from .. import config
from ..records import checksum
from ..runner import run_script
from ..upgrades import deploy_proxy

logger = logging.getLogger(__name__)

ART_ORDER_FEE = 250


def main(chain):
    """Deploy ArtOrder behind a transparent proxy"""
    art_order_factory = chain.addresses["art_order_factory"]
    fee_recipient = checksum(config.get_fee_recipient(), "FEE_RECIPIENT")

    logger.info(f"Deploying Art orders with the account: {chain.address}")

    art_order = deploy_proxy(
        chain,
        chain.factory("ArtOrder"),
        [ART_ORDER_FEE, fee_recipient, art_order_factory],
        initializer="initialize",
    )

    logger.info(f"Art order deployed to: {art_order.address}")
    return art_order.address


if __name__ == "__main__":
    run_script(main)
