"""Deploy OpenspaceCollectionFactory."""

import logging

from ..runner import run_script

logger = logging.getLogger(__name__)


def main(chain):
    logger.info(f"Deploying OpenspaceCollectionFactory with the account: {chain.address}")

    factory = chain.factory("OpenspaceCollectionFactory").deploy()
    chain.registry.record_contract("OpenspaceCollectionFactory", factory.address)

    logger.info(f"Deployed OpenspaceCollectionFactory to: {factory.address}")
    return factory.address


if __name__ == "__main__":
    run_script(main)
