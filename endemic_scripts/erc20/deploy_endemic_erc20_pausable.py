"""
Deploy the pausable END token, distribute the initial allocations and pause
transfers.

Each transfer is mined before the next one is sent, so the token is only
paused once every allocation has landed.
"""

import logging

from ..records import checksum, load_token_allocations
from ..runner import run_script

logger = logging.getLogger(__name__)

DEFAULT_OWNER = "0x1d1C46273cEcC00F7503AB3E97A40a199bcd6b31"


def add_arguments(parser):
    parser.add_argument("--owner", default=DEFAULT_OWNER, help="address passed to the token constructor")
    parser.add_argument("--allocations", dest="allocations_path", default=None,
                        help="JSON list of {recipient, amount}; defaults to the bundled list")


def main(chain, owner=DEFAULT_OWNER, allocations_path=None):
    allocations = load_token_allocations(allocations_path)
    owner = checksum(owner, "owner")

    logger.info(f"Deploying Pausable Endemic ERC20 with the account: {chain.address}")

    token = chain.factory("EndemicTokenPausable").deploy(owner)
    chain.registry.record_contract("EndemicTokenPausable", token.address)
    logger.info(f"Pausable Endemic ERC20 deployed to: {token.address}")

    for index, allocation in enumerate(allocations, start=1):
        chain.transact(
            token.functions.transfer(allocation.recipient, allocation.amount_wei),
            f"transfer #{index} {allocation.amount} END to {allocation.recipient}",
        )

    chain.transact(token.functions.pause(), "pause")
    logger.info(f"Distributed {len(allocations)} allocations and paused the token")

    return token.address


if __name__ == "__main__":
    run_script(main, add_arguments)
