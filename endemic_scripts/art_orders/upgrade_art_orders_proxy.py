"""Upgrade the ArtOrder proxy."""

import logging

from ..runner import run_script
from ..upgrades import upgrade_proxy

logger = logging.getLogger(__name__)


def main(chain):
    art_orders = chain.addresses["art_orders"]

    logger.info(f"Upgrading Art Order with the account: {chain.address}")
    upgrade_proxy(chain, art_orders, chain.factory("ArtOrder"))


if __name__ == "__main__":
    run_script(main)
