"""Deploy an EndemicERC721 implementation bound to the network's collection factory."""

import logging

from ..runner import run_script

logger = logging.getLogger(__name__)


def main(chain):
    collection_factory = chain.addresses["endemic_erc721_factory"]

    logger.info(f"Deploying EndemicERC721 with the account: {chain.address}")

    erc721 = chain.factory("EndemicERC721").deploy(collection_factory)
    chain.registry.record_contract("EndemicERC721", erc721.address)

    return erc721.address


if __name__ == "__main__":
    run_script(main)
