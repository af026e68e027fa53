"""Deploy the CollectionBid proxy."""

import logging

from ..exchange.deploy_endemic_exchange import DEFAULT_FEE_RECIPIENT
from ..records import checksum
from ..runner import run_script
from ..upgrades import deploy_proxy

logger = logging.getLogger(__name__)


def add_arguments(parser):
    parser.add_argument("--fee-recipient", default=DEFAULT_FEE_RECIPIENT,
                        help="address receiving bid fees")


def main(chain, fee_recipient=DEFAULT_FEE_RECIPIENT):
    """Deploy CollectionBid behind a transparent proxy"""
    addresses = chain.addresses
    init_args = [
        addresses["fee_provider_proxy"],
        addresses["endemic_master_key_proxy"],
        addresses["royalties_provider_proxy"],
        checksum(fee_recipient, "fee recipient"),
    ]

    logger.info(f"Deploying CollectionBid with the account: {chain.address}")

    collection_bid = deploy_proxy(
        chain, chain.factory("CollectionBid"), init_args, initializer="__CollectionBid_init"
    )

    logger.info(f"CollectionBid deployed to: {collection_bid.address}")
    return collection_bid.address


if __name__ == "__main__":
    run_script(main, add_arguments)
