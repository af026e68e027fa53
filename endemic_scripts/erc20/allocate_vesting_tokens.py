"""
Allocate vested END tokens to claimers.

Allocations are sent to EndemicVesting.allocateTokens in batches; each batch
is mined before the next. A failed batch stops the script and the log shows
how many claimers were already allocated.
"""

import logging

from ..exceptions import MissingAddressError
from ..records import load_vesting_allocations
from ..runner import run_script

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 50


def add_arguments(parser):
    parser.add_argument("--records", dest="records_path", required=True,
                        help="JSON list of {claimerAddress, allocType, initialAllocation, totalAllocated}")
    parser.add_argument("--vesting", default=None,
                        help="EndemicVesting address (default: the recorded deployment)")
    parser.add_argument("--batch-size", type=int, default=DEFAULT_BATCH_SIZE)


def batched(items, size):
    if size < 1:
        raise ValueError("batch size must be positive")
    for start in range(0, len(items), size):
        yield items[start:start + size]


def main(chain, records_path, vesting=None, batch_size=DEFAULT_BATCH_SIZE):
    allocations = load_vesting_allocations(records_path)

    vesting = vesting or chain.registry.get_contract("EndemicVesting")
    if not vesting:
        raise MissingAddressError(chain.network.name, "EndemicVesting")
    endemic_vesting = chain.factory("EndemicVesting").attach(vesting)

    allocated = 0
    for batch in batched(allocations, batch_size):
        chain.transact(
            endemic_vesting.functions.allocateTokens([allocation.as_tuple() for allocation in batch]),
            f"allocateTokens {allocated + 1}-{allocated + len(batch)}",
        )
        allocated += len(batch)
        logger.info(f"Allocated {allocated}/{len(allocations)} claimers")

    return allocated


if __name__ == "__main__":
    run_script(main, add_arguments)
