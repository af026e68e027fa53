"""Deploy the EndemicExchange proxy wired to the network's fee and royalties providers."""

import logging

from ..records import checksum
from ..runner import run_script
from ..upgrades import deploy_proxy

logger = logging.getLogger(__name__)

DEFAULT_FEE_RECIPIENT = "0x813201fe76De0622223492D2467fF5Fd38cF2320"


def add_arguments(parser):
    parser.add_argument("--fee-recipient", default=DEFAULT_FEE_RECIPIENT,
                        help="address receiving marketplace fees")


def main(chain, fee_recipient=DEFAULT_FEE_RECIPIENT):
    """Deploy EndemicExchange behind a transparent proxy"""
    addresses = chain.addresses
    fee_provider = addresses["fee_provider_proxy"]
    royalties_provider = addresses["royalties_provider_proxy"]
    fee_recipient = checksum(fee_recipient, "fee recipient")

    logger.info(f"Deploying EndemicExchange with the account: {chain.address}")

    exchange = deploy_proxy(
        chain,
        chain.factory("EndemicExchange"),
        [fee_provider, royalties_provider, fee_recipient],
        initializer="__EndemicExchange_init",
    )

    logger.info(f"EndemicExchange deployed to: {exchange.address}")
    return exchange.address


if __name__ == "__main__":
    run_script(main, add_arguments)
