"""Cancel every open offer on the exchange in a single adminCancelOffers call."""

import logging

from ..runner import run_script
from ..subgraph import SubgraphClient

logger = logging.getLogger(__name__)


def main(chain, subgraph=None):
    exchange_address = chain.addresses["endemic_exchange_proxy"]
    offer_ids = (subgraph or SubgraphClient()).get_all_offer_ids()

    if not offer_ids:
        logger.info("No offers to cancel")
        return 0

    endemic_exchange = chain.factory("EndemicExchange").attach(exchange_address)

    logger.info(f"Canceling {len(offer_ids)} offers")
    chain.transact(endemic_exchange.functions.adminCancelOffers(offer_ids), "adminCancelOffers")
    logger.info("Offers canceled")

    return len(offer_ids)


if __name__ == "__main__":
    run_script(main)
