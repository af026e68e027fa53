"""Deploy EndemicNFTFactory over the network's EndemicNFT beacon."""

import logging

from ..runner import run_script

logger = logging.getLogger(__name__)


def main(chain):
    beacon = chain.addresses["endemic_nft_beacon"]

    logger.info(f"Deploying EndemicNFTFactory with the account: {chain.address}")

    nft_factory = chain.factory("EndemicNFTFactory").deploy(beacon)
    chain.registry.record_contract("EndemicNFTFactory", nft_factory.address)

    logger.info(f"Deployed EndemicNFTFactory to: {nft_factory.address}")
    return nft_factory.address


if __name__ == "__main__":
    run_script(main)
