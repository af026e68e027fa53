"""
Pause the exchange and cancel auctions.

Claims the exchange's ETH balance, pauses it, then cancels each auction with
cancelAuctionWhenPaused. Auction ids come from --auction-id, or every
auction known to the subgraph.
"""

import logging

from ..records import checksum
from ..runner import run_script
from ..subgraph import SubgraphClient

logger = logging.getLogger(__name__)


def add_arguments(parser):
    parser.add_argument("--exchange", default=None,
                        help="EndemicExchange address (default: the network's exchange proxy)")
    parser.add_argument("--auction-id", dest="auction_ids", action="append", default=None,
                        help="auction to cancel; repeatable (default: all auctions in the subgraph)")


def main(chain, exchange=None, auction_ids=None, subgraph=None):
    exchange_address = checksum(exchange, "exchange") if exchange else chain.addresses["endemic_exchange_proxy"]
    if auction_ids is None:
        auction_ids = (subgraph or SubgraphClient()).get_all_auction_ids()

    endemic_exchange = chain.factory("EndemicExchange").attach(exchange_address)

    chain.transact(endemic_exchange.functions.claimETH(), "claimETH")
    chain.transact(endemic_exchange.functions.pause(), "pause")

    logger.info(f"Canceling {len(auction_ids)} auctions")
    for auction_id in auction_ids:
        chain.transact(
            endemic_exchange.functions.cancelAuctionWhenPaused(auction_id),
            f"cancelAuctionWhenPaused {auction_id}",
        )
    logger.info("Auctions canceled")

    return len(auction_ids)


if __name__ == "__main__":
    run_script(main, add_arguments)
