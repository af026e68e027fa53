"""
Deploy a new OrderCollection implementation and point the
OrderCollectionFactory at it. Collections created afterwards use it.
"""

import logging

from ..runner import run_script

logger = logging.getLogger(__name__)


def main(chain):
    art_order_factory = chain.addresses["art_order_factory"]

    logger.info(f"Deploying OrderCollection with the account: {chain.address}")

    order_collection = chain.factory("OrderCollection").deploy(art_order_factory)
    chain.registry.record_contract("OrderCollection", order_collection.address)

    collection_factory = chain.factory("OrderCollectionFactory").attach(art_order_factory)
    chain.transact(
        collection_factory.functions.updateImplementation(order_collection.address),
        "updateImplementation",
    )
    logger.info("Implementation updated")

    return order_collection.address


if __name__ == "__main__":
    run_script(main)
