"""Grant MINTER_ROLE on the collection factory to every verified user."""

import logging

from ..records import checksum
from ..runner import run_script
from ..subgraph import SubgraphClient

logger = logging.getLogger(__name__)


def main(chain, subgraph=None):
    factory_address = chain.addresses["endemic_erc721_factory"]
    verified_users = (subgraph or SubgraphClient()).get_verified_users()
    accounts = [checksum(user.get("id"), "verified user id") for user in verified_users]

    collection_factory = chain.factory("EndemicCollectionFactory").attach(factory_address)
    minter_role = chain.call(collection_factory.functions.MINTER_ROLE())

    granted = 0
    for account in accounts:
        if chain.call(collection_factory.functions.hasRole(minter_role, account)):
            logger.info(f"{account} already has MINTER_ROLE")
            continue
        chain.transact(collection_factory.functions.grantRole(minter_role, account), f"grantRole {account}")
        granted += 1

    logger.info(f"Granted MINTER_ROLE to {granted} of {len(accounts)} verified users")
    return granted


if __name__ == "__main__":
    run_script(main)
