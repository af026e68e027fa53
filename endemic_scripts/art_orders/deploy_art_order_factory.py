"""Deploy the OrderCollectionFactory proxy and set its configuration."""

import logging

from ..records import checksum
from ..runner import run_script
from ..upgrades import deploy_proxy

logger = logging.getLogger(__name__)

DEFAULT_ADMINISTRATOR = "0x3D77a01EF9265F8Af731367abF5b467641764191"


def add_arguments(parser):
    parser.add_argument("--collection-administrator", default=DEFAULT_ADMINISTRATOR)
    parser.add_argument("--mint-fee-recipient", default=DEFAULT_ADMINISTRATOR)


def main(chain, collection_administrator=DEFAULT_ADMINISTRATOR, mint_fee_recipient=DEFAULT_ADMINISTRATOR):
    """Deploy OrderCollectionFactory behind a transparent proxy"""
    collection_administrator = checksum(collection_administrator, "collection administrator")
    mint_fee_recipient = checksum(mint_fee_recipient, "mint fee recipient")

    logger.info(f"Deploying ArtOrderCollectionFactory with the account: {chain.address}")

    factory = deploy_proxy(chain, chain.factory("OrderCollectionFactory"), [], initializer="initialize")
    chain.transact(
        factory.functions.updateConfiguration(collection_administrator, mint_fee_recipient),
        "updateConfiguration",
    )

    logger.info(f"Deployed ArtOrderCollectionFactory proxy to: {factory.address}")
    return factory.address


if __name__ == "__main__":
    run_script(main, add_arguments)
