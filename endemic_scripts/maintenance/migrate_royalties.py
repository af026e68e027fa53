"""
Back-fill collection royalties from the subgraph into the RoyaltiesProvider.

Records are applied one at a time, each mined before the next, so the script
never exits with royalty transactions still in flight.
"""

import logging

from ..runner import run_script
from ..subgraph import SubgraphClient

logger = logging.getLogger(__name__)


def apply_royalties(chain, records):
    royalties_provider_address = chain.addresses["royalties_provider_proxy"]
    royalties_provider = chain.factory("RoyaltiesProvider").attach(royalties_provider_address)

    for index, record in enumerate(records, start=1):
        chain.transact(
            royalties_provider.functions.setRoyaltiesForCollection(
                record.nft_contract, record.fee_recipient, record.fee
            ),
            f"setRoyaltiesForCollection {record.nft_contract} ({index}/{len(records)})",
        )

    logger.info(f"Applied royalties for {len(records)} collections")
    return len(records)


def main(chain, subgraph=None):
    collections = (subgraph or SubgraphClient()).get_collections_with_royalties()
    return apply_royalties(chain, collections)


if __name__ == "__main__":
    run_script(main)
