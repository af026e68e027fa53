"""Deploy Tipjar."""

import logging

from ..runner import run_script

logger = logging.getLogger(__name__)


def main(chain):
    logger.info(f"Deploying Tipjar with the account: {chain.address}")

    tipjar = chain.factory("Tipjar").deploy()
    chain.registry.record_contract("Tipjar", tipjar.address)

    return tipjar.address


if __name__ == "__main__":
    run_script(main)
