"""Deploy EndemicCollectionFactory."""

import logging

from ..runner import run_script

logger = logging.getLogger(__name__)


def main(chain):
    logger.info(f"Deploying EndemicCollectionFactory with the account: {chain.address}")

    factory = chain.factory("EndemicCollectionFactory").deploy()
    chain.registry.record_contract("EndemicCollectionFactory", factory.address)

    logger.info(f"Deployed EndemicCollectionFactory to: {factory.address}")
    return factory.address


if __name__ == "__main__":
    run_script(main)
