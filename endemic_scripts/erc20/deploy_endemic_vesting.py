"""Deploy EndemicVesting for the network's END token."""

import logging
import time

from ..exceptions import ConfigurationError
from ..records import load_vesting_allocation_types
from ..runner import run_script

logger = logging.getLogger(__name__)

FIVE_MINUTES = 5 * 60


def add_arguments(parser):
    parser.add_argument("--tge-timestamp", type=int, default=None,
                        help="token generation event, unix seconds (default: now)")
    parser.add_argument("--vesting-start-timestamp", type=int, default=None,
                        help="unix seconds (default: TGE + 5 minutes)")
    parser.add_argument("--allocation-types", dest="allocation_types_path", default=None,
                        help="JSON list of {allocType, endCliff, endVesting, maxAllocation} "
                             "passed to the constructor")


def main(chain, tge_timestamp=None, vesting_start_timestamp=None, allocation_types_path=None):
    end_token = chain.addresses["endemic_end_token"]

    tge_timestamp = tge_timestamp if tge_timestamp is not None else int(time.time())
    if vesting_start_timestamp is None:
        vesting_start_timestamp = tge_timestamp + FIVE_MINUTES
    if vesting_start_timestamp < tge_timestamp:
        raise ConfigurationError("Vesting cannot start before the TGE")

    constructor_args = [tge_timestamp, vesting_start_timestamp, end_token]
    if allocation_types_path:
        allocation_types = load_vesting_allocation_types(allocation_types_path)
        constructor_args.append([alloc_type.as_tuple() for alloc_type in allocation_types])

    logger.info(f"Deploying Endemic vesting with the account: {chain.address}")
    logger.info(f"TGE {tge_timestamp}, vesting start {vesting_start_timestamp}")

    vesting = chain.factory("EndemicVesting").deploy(*constructor_args)
    chain.registry.record_contract("EndemicVesting", vesting.address)

    logger.info(f"Endemic Vesting deployed to: {vesting.address}")
    return vesting.address


if __name__ == "__main__":
    run_script(main, add_arguments)
